"""TranslationRequest payload: text parts of the ``audio/translations`` upload."""
from __future__ import annotations

from typing import Optional

from ..payload import Payload


class TranslationRequest(Payload):
    model: str
    prompt: Optional[str] = None
    response_format: Optional[str] = None
    temperature: Optional[float] = None


__all__ = ["TranslationRequest"]
