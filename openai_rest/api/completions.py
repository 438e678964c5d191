"""Chat completion endpoint facade."""
from __future__ import annotations

from typing import Any

from ..base.models import ChatCompletionRequest
from .resource import ApiResource


class CompletionsApi(ApiResource):
    async def create(self, request: ChatCompletionRequest) -> Any:
        """POST ``chat/completions`` with the present fields of ``request``.

        ``stream=True`` is forwarded as-is; event-stream bodies are not
        decoded and surface as an :class:`EncodingError`.
        """
        return await self._client.submit_json("chat/completions", request)


__all__ = ["CompletionsApi"]
