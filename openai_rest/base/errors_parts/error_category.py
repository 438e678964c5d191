"""
Error categories (taxonomy) for the request/dispatch layer.

Defines the closed `ErrorCategory` enumeration. Values are lowercase
snake_case and are a stable public contract for logging; ``label`` is the
human-facing prefix used by the display contract.
"""
from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    """The three terminal failure categories of the client."""

    TRANSPORT = "transport"
    ENCODING = "encoding"
    LOCAL_IO = "local_io"

    @property
    def label(self) -> str:
        """Return the display label (``Transport``, ``Encoding``, ``LocalIO``)."""
        return _LABELS[self]


_LABELS = {
    ErrorCategory.TRANSPORT: "Transport",
    ErrorCategory.ENCODING: "Encoding",
    ErrorCategory.LOCAL_IO: "LocalIO",
}


__all__ = ["ErrorCategory"]
