"""
TranscriptionRequest payload: text parts of the ``audio/transcriptions`` upload.

The audio clip itself is the ``file`` part; ``model`` is the only mandatory
text part.
"""
from __future__ import annotations

from typing import Optional

from ..payload import Payload


class TranscriptionRequest(Payload):
    """Text fields for an audio transcription.

    Attributes:
        model: Transcription model identifier.
        prompt: Optional text to guide the model's style.
        response_format: ``"json"``, ``"text"``, ``"srt"``, ``"verbose_json"`` or ``"vtt"``.
        temperature: Sampling temperature.
        language: ISO-639-1 language hint.
    """

    model: str
    prompt: Optional[str] = None
    response_format: Optional[str] = None
    temperature: Optional[float] = None
    language: Optional[str] = None


__all__ = ["TranscriptionRequest"]
