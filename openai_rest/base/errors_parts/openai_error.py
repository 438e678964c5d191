"""
Structured client error exception types.

Wraps failures from httpx, the JSON/pydantic serialization stack and the local
filesystem in one of three concrete subclasses so callers can catch either the
whole family (`OpenAIError`) or a single category.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from .error_category import ErrorCategory


@dataclass(eq=False)
class OpenAIError(Exception):
    """Base class for every error raised by the client.

    Attributes:
        message: Human-readable message of the underlying failure.
        cause: Original exception, when the error wraps one.
        path: Request path or local file path involved, when known.
    """

    category: ClassVar[ErrorCategory]

    message: str
    cause: Optional[BaseException] = None
    path: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        """Render as ``"<Category> Error: <message>"``."""
        return f"{self.category.label} Error: {self.message}"


@dataclass(eq=False)
class TransportError(OpenAIError):
    """Network or protocol failure reported by the HTTP layer."""

    category: ClassVar[ErrorCategory] = ErrorCategory.TRANSPORT


@dataclass(eq=False)
class EncodingError(OpenAIError):
    """Failure serializing a request body or decoding a response body."""

    category: ClassVar[ErrorCategory] = ErrorCategory.ENCODING


@dataclass(eq=False)
class LocalIOError(OpenAIError):
    """Failure reading a local file destined for a multipart upload."""

    category: ClassVar[ErrorCategory] = ErrorCategory.LOCAL_IO


@dataclass(eq=False)
class ApiStatusError(TransportError):
    """Non-2xx response, raised only when status checking is enabled.

    Attributes:
        status_code: HTTP status of the response.
        body: Decoded JSON body (or raw text when the body is not JSON).
    """

    status_code: int = 0
    body: Any = None


__all__ = [
    "OpenAIError",
    "TransportError",
    "EncodingError",
    "LocalIOError",
    "ApiStatusError",
]
