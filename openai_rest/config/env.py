"""openai_rest.config.env
======================

Environment variable mapping and helpers for client settings.

Purpose
-------
- Single source of truth mapping config fields to environment variable names.
- Small helpers to read the credential in a consistent way.

Failure Modes
-------------
- Helpers return ``None`` when nothing usable is set; callers decide how to
  proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Optional

from .defaults import API_KEY_ENV, BASE_URL_ENV, ORGANIZATION_ENV, PROJECT_ENV

# Config field -> env var
ENV_MAP: Dict[str, str] = {
    "api_key": API_KEY_ENV,
    "base_url": BASE_URL_ENV,
    "organization": ORGANIZATION_ENV,
    "project": PROJECT_ENV,
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and ignores surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def env_values() -> Dict[str, str]:
    """Return the config fields currently set in the environment.

    Empty values are treated as unset.
    """
    out: Dict[str, str] = {}
    for field, name in ENV_MAP.items():
        if val := os.environ.get(name):
            out[field] = val
    return out


def resolve_api_key(candidate: Optional[str] = None) -> Optional[str]:
    """Return ``candidate`` or the environment credential when it is usable.

    Blank and placeholder values count as missing.
    """
    for val in (candidate, os.environ.get(API_KEY_ENV)):
        if val and val.strip() and not is_placeholder(val):
            return val.strip()
    return None


__all__ = [
    "ENV_MAP",
    "is_placeholder",
    "env_values",
    "resolve_api_key",
]
