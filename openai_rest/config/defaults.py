"""openai_rest.config.defaults
===========================

Central place for small, stable default values used across the client. These
defaults can be overridden via environment variables, an external config file
or explicit arguments, but provide sensible fallbacks.

Only plain constants live here; the module imports nothing from the package.
"""

from __future__ import annotations

# ---- Remote API ----
# Public API base address used when none is configured.
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"

# Header required by the assistants, threads and vector store endpoints.
ASSISTANTS_BETA_HEADER = ("OpenAI-Beta", "assistants=v2")

# Headers selecting the billing organization / project.
ORGANIZATION_HEADER = "OpenAI-Organization"
PROJECT_HEADER = "OpenAI-Project"

# ---- Upload MIME fallbacks ----
AUDIO_DEFAULT_CONTENT_TYPE = "audio/mpeg"
IMAGE_DEFAULT_CONTENT_TYPE = "image/png"

# ---- Environment variable names ----
API_KEY_ENV = "OPENAI_API_KEY"  # pragma: allowlist secret - env var name, not a secret
BASE_URL_ENV = "OPENAI_BASE_URL"
ORGANIZATION_ENV = "OPENAI_ORG_ID"
PROJECT_ENV = "OPENAI_PROJECT_ID"
CONFIG_FILE_ENV = "OPENAI_REST_CONFIG_FILE"
DOTENV_FILE_ENV = "DOTENV_FILE"
DOTENV_DEFAULT_FILE = ".env"


__all__ = [
    "OPENAI_DEFAULT_BASE_URL",
    "ASSISTANTS_BETA_HEADER",
    "ORGANIZATION_HEADER",
    "PROJECT_HEADER",
    "AUDIO_DEFAULT_CONTENT_TYPE",
    "IMAGE_DEFAULT_CONTENT_TYPE",
    "API_KEY_ENV",
    "BASE_URL_ENV",
    "ORGANIZATION_ENV",
    "PROJECT_ENV",
    "CONFIG_FILE_ENV",
    "DOTENV_FILE_ENV",
    "DOTENV_DEFAULT_FILE",
]
