"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `openai_rest.base.errors` for the stable surface.
"""

from .error_category import ErrorCategory
from .openai_error import (
    ApiStatusError,
    EncodingError,
    LocalIOError,
    OpenAIError,
    TransportError,
)
from .classification import classify_exception, translate_errors, wrap_exception

__all__ = [
    "ErrorCategory",
    "OpenAIError",
    "TransportError",
    "EncodingError",
    "LocalIOError",
    "ApiStatusError",
    "classify_exception",
    "wrap_exception",
    "translate_errors",
]
