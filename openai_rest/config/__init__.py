"""Unified configuration layer for the client.

Goals
-----
* Centralize defaults (base URL, headers, upload MIME fallbacks).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       OPENAI_REST_CONFIG_FILE
    3. Environment variables (OPENAI_API_KEY, OPENAI_BASE_URL,
       OPENAI_ORG_ID, OPENAI_PROJECT_ID), after loading an optional ``.env``
       file named by DOTENV_FILE
    4. In-code overrides passed to the helper (``None`` values ignored)
* Provide a single call site: ``get_client_config()``.

External Config File (Optional)
-------------------------------
If OPENAI_REST_CONFIG_FILE is set to a path, JSON is tried first and YAML
second. Fields may sit at the top level or under an ``openai`` section:

```
openai:
  base_url: https://api.openai.com/v1
  organization: org-123
```

Public API
----------
* get_client_config(overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    CONFIG_FILE_ENV,
    DOTENV_DEFAULT_FILE,
    DOTENV_FILE_ENV,
    OPENAI_DEFAULT_BASE_URL,
)
from .env import ENV_MAP, env_values, is_placeholder, resolve_api_key


# -------------------- Defaults --------------------

DEFAULTS: Dict[str, Any] = {
    "base_url": OPENAI_DEFAULT_BASE_URL,
}

CONFIG_FIELDS = tuple(ENV_MAP) + ("raise_for_status",)


_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments and blank lines. Safe to call
    multiple times. Overrides existing environment variables only if their
    current values appear to be placeholders.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv(DOTENV_FILE_ENV, DOTENV_DEFAULT_FILE)
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if line.startswith("export "):
                    line = line[len("export "):]
                if "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _parse_config_text(text: str) -> Dict[str, Any]:
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            data = {}
    if not isinstance(data, dict):
        return {}
    section = data.get("openai")
    return section if isinstance(section, dict) else data


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    data = _parse_config_text(Path(path).read_text(encoding="utf-8"))
    _FILE_CACHE = {k: v for k, v in data.items() if k in CONFIG_FIELDS}
    return _FILE_CACHE


def reset_config_cache() -> None:
    """Forget the cached config file and allow the .env file to be re-read."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


def get_client_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged client configuration.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    The ``api_key`` entry is dropped when it holds a placeholder value.
    """
    _load_dotenv_once()
    cfg: Dict[str, Any] = dict(DEFAULTS)

    cfg |= _load_external_config()
    cfg |= env_values()

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    api_key = resolve_api_key(cfg.get("api_key"))
    if api_key is None:
        cfg.pop("api_key", None)
    else:
        cfg["api_key"] = api_key
    return cfg


__all__ = [
    "get_client_config",
    "reset_config_cache",
    "DEFAULTS",
    "CONFIG_FIELDS",
]
