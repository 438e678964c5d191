"""
ImageEditRequest payload: text parts of the ``images/edits`` upload.

The image and mask travel as file parts; this payload holds the text fields.
Each present field becomes one text part named after the field.
"""
from __future__ import annotations

from typing import Optional

from ..payload import Payload


class ImageEditRequest(Payload):
    model: str
    prompt: str
    size: Optional[str] = None
    response_format: Optional[str] = None
    n: Optional[int] = None
    user: Optional[str] = None


__all__ = ["ImageEditRequest"]
