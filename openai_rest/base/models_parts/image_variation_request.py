"""ImageVariationRequest payload: text parts of the ``images/variations`` upload."""
from __future__ import annotations

from typing import Optional

from ..payload import Payload


class ImageVariationRequest(Payload):
    model: str
    size: Optional[str] = None
    response_format: Optional[str] = None
    n: Optional[int] = None
    user: Optional[str] = None


__all__ = ["ImageVariationRequest"]
