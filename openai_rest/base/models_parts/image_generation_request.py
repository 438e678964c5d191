"""ImageGenerationRequest payload for ``POST images/generations``."""
from __future__ import annotations

from typing import Optional

from ..payload import Payload


class ImageGenerationRequest(Payload):
    """Request body for generating images from a text prompt.

    Attributes:
        prompt: Text description of the desired image.
        model: Image model identifier.
        size: Image size such as ``"1024x1024"``.
        response_format: ``"url"`` or ``"b64_json"``.
        n: Number of images.
        user: End-user identifier.
        quality: Quality hint supported by some models.
        style: Style hint supported by some models.
    """

    prompt: str
    model: str
    size: Optional[str] = None
    response_format: Optional[str] = None
    n: Optional[int] = None
    user: Optional[str] = None
    quality: Optional[str] = None
    style: Optional[str] = None


__all__ = ["ImageGenerationRequest"]
