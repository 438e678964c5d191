"""Unified client error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``openai_rest.base.errors_parts`` to maintain a stable import path while
enforcing the one-class-per-file governance rule.
"""

from .errors_parts.error_category import ErrorCategory
from .errors_parts.openai_error import (
    ApiStatusError,
    EncodingError,
    LocalIOError,
    OpenAIError,
    TransportError,
)
from .errors_parts.classification import classify_exception, translate_errors, wrap_exception

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
