"""
Audio endpoint facade.

Both operations upload the clip as the ``file`` part after the ``model``
text part; every other argument becomes a text part only when given.
"""
from __future__ import annotations

from typing import Any, Optional

from ..base.http import MultipartForm
from ..base.payload import Payload
from ..base.models import TranscriptionRequest, TranslationRequest
from ..config.defaults import AUDIO_DEFAULT_CONTENT_TYPE
from .resource import ApiResource


def _audio_form(request: Payload, file_path: str) -> MultipartForm:
    return (
        MultipartForm()
        .text("model", request.model)
        .file("file", file_path, default_type=AUDIO_DEFAULT_CONTENT_TYPE)
        .texts(**request.to_dict(exclude=["model"]))
    )


class AudioApi(ApiResource):
    async def transcribe(
        self,
        model: str,
        file_path: str,
        prompt: Optional[str] = None,
        response_format: Optional[str] = None,
        temperature: Optional[float] = None,
        language: Optional[str] = None,
    ) -> Any:
        """Transcribe the audio file at ``file_path`` in its own language.

        With ``response_format="text"`` (or ``srt``/``vtt``) the service
        answers with a non-JSON body, which surfaces as an
        :class:`EncodingError`.
        """
        request = TranscriptionRequest(
            model=model,
            prompt=prompt,
            response_format=response_format,
            temperature=temperature,
            language=language,
        )
        return await self._client.submit_multipart("audio/transcriptions", _audio_form(request, file_path))

    async def translate(
        self,
        model: str,
        file_path: str,
        prompt: Optional[str] = None,
        response_format: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> Any:
        """Translate the audio file at ``file_path`` into English text."""
        request = TranslationRequest(
            model=model,
            prompt=prompt,
            response_format=response_format,
            temperature=temperature,
        )
        return await self._client.submit_multipart("audio/translations", _audio_form(request, file_path))


__all__ = ["AudioApi"]
