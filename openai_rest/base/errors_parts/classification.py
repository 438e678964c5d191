"""
Exception classification mapping underlying failures to `ErrorCategory`.

Implements the automatic conversion contract: httpx failures become
Transport errors, serialization failures become Encoding errors and
filesystem failures become LocalIO errors. Anything else is not ours to
classify and propagates unchanged.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Dict, Iterator, Optional, Type

import httpx
from pydantic import ValidationError

from .error_category import ErrorCategory
from .openai_error import EncodingError, LocalIOError, OpenAIError, TransportError


_CATEGORY_TYPES: Dict[ErrorCategory, Type[OpenAIError]] = {
    ErrorCategory.TRANSPORT: TransportError,
    ErrorCategory.ENCODING: EncodingError,
    ErrorCategory.LOCAL_IO: LocalIOError,
}


def classify_exception(exc: BaseException) -> Optional[ErrorCategory]:
    """Classify an exception into an :class:`ErrorCategory`.

    Precedence:
        1. `OpenAIError` passthrough.
        2. httpx errors (``HTTPError`` family and ``InvalidURL``).
        3. Serialization errors (pydantic ``ValidationError``, ``ValueError``
           which covers ``JSONDecodeError``/``UnicodeError``, ``TypeError``).
        4. ``OSError`` for local file access.
        5. ``None`` when the exception is outside the taxonomy.
    """
    if isinstance(exc, OpenAIError):
        return exc.category
    if isinstance(exc, (httpx.HTTPError, httpx.InvalidURL)):
        return ErrorCategory.TRANSPORT
    if isinstance(exc, (ValidationError, ValueError, TypeError)):
        return ErrorCategory.ENCODING
    if isinstance(exc, OSError):
        return ErrorCategory.LOCAL_IO
    return None


def _message_of(exc: BaseException) -> str:
    text = str(exc).strip()
    return text or type(exc).__name__


def wrap_exception(exc: BaseException, *, path: Optional[str] = None) -> Optional[OpenAIError]:
    """Return the typed error for ``exc`` or ``None`` when it is unclassified.

    Existing `OpenAIError` instances are returned as-is (``path`` is filled in
    when missing).
    """
    if isinstance(exc, OpenAIError):
        if exc.path is None and path is not None:
            exc.path = path
        return exc
    category = classify_exception(exc)
    if category is None:
        return None
    return _CATEGORY_TYPES[category](message=_message_of(exc), cause=exc, path=path)


@contextmanager
def translate_errors(path: Optional[str] = None) -> Iterator[None]:
    """Re-raise classified failures inside the block as typed errors.

    The typed error is chained to the original (``raise ... from exc``).
    Unclassified exceptions propagate untouched.
    """
    try:
        yield
    except OpenAIError:
        raise
    except Exception as exc:
        wrapped = wrap_exception(exc, path=path)
        if wrapped is None:
            raise
        raise wrapped from exc


__all__ = [
    "classify_exception",
    "wrap_exception",
    "translate_errors",
]
