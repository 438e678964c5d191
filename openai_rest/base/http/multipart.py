"""
Multipart form builder for upload endpoints.

Purpose:
    Collect the text and file parts of a ``multipart/form-data`` request in
    declaration order. File contents are read eagerly so that a missing or
    unreadable file fails while the form is being built, before any request
    exists.

Failure modes:
    - ``file()`` raises :class:`LocalIOError` (chained to the ``OSError``)
      when the path cannot be read.
"""
from __future__ import annotations

import mimetypes
import os
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from ..errors import translate_errors

DEFAULT_BINARY_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class FormPart:
    """One part of a multipart form.

    Text parts have ``filename`` and ``content_type`` set to ``None``.
    """

    name: str
    content: Any
    filename: Optional[str] = None
    content_type: Optional[str] = None

    @property
    def is_file(self) -> bool:
        return self.filename is not None


def _render_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class MultipartForm:
    """Ordered collection of multipart parts with a fluent API.

    Example::

        form = (
            MultipartForm()
            .text("model", "whisper-1")
            .file("file", "audio.mp3", default_type="audio/mpeg")
            .texts(language="en", prompt=None)
        )
    """

    def __init__(self) -> None:
        self._parts: List[FormPart] = []

    def __len__(self) -> int:
        return len(self._parts)

    @property
    def parts(self) -> Tuple[FormPart, ...]:
        return tuple(self._parts)

    def field_names(self) -> List[str]:
        """Names of the parts in insertion order."""
        return [part.name for part in self._parts]

    def text(self, name: str, value: Any) -> "MultipartForm":
        """Append a text part; booleans render as ``true``/``false``."""
        self._parts.append(FormPart(name=name, content=_render_text(value)))
        return self

    def texts(self, **values: Any) -> "MultipartForm":
        """Append one text part per keyword whose value is not ``None``."""
        for name, value in values.items():
            if value is not None:
                self.text(name, value)
        return self

    def file(
        self,
        name: str,
        path: str,
        content_type: Optional[str] = None,
        default_type: str = DEFAULT_BINARY_TYPE,
    ) -> "MultipartForm":
        """Read ``path`` and append it as a file part.

        The part filename is the basename of ``path``. Without an explicit
        ``content_type`` the MIME type is guessed from the extension, falling
        back to ``default_type``.
        """
        with translate_errors(path):
            with open(path, "rb") as fh:
                content = fh.read()
        filename = os.path.basename(path)
        if content_type is None:
            content_type = mimetypes.guess_type(filename)[0] or default_type
        return self.bytes(name, content, filename, content_type)

    def bytes(
        self,
        name: str,
        content: bytes,
        filename: str,
        content_type: str = DEFAULT_BINARY_TYPE,
    ) -> "MultipartForm":
        """Append in-memory ``content`` as a file part."""
        self._parts.append(FormPart(name=name, content=content, filename=filename, content_type=content_type))
        return self

    def to_httpx_files(self) -> List[Tuple[str, Tuple[Any, ...]]]:
        """Render the parts as the ``files`` argument accepted by httpx.

        Text parts use a ``None`` filename so httpx emits them as plain form
        fields; keeping every part in one list preserves their order.
        """
        rendered: List[Any] = []
        for part in self._parts:
            if part.is_file:
                rendered.append((part.name, (part.filename, part.content, part.content_type)))
            else:
                rendered.append((part.name, (None, part.content)))
        return rendered


__all__ = ["FormPart", "MultipartForm", "DEFAULT_BINARY_TYPE"]
