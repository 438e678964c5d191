"""Embeddings endpoint facade."""
from __future__ import annotations

from typing import Any, List, Optional, Union

from ..base.models import EmbeddingRequest
from .resource import ApiResource


class EmbeddingsApi(ApiResource):
    async def create(
        self,
        input: Union[str, List[Any]],
        model: str,
        encoding_format: Optional[str] = None,
        dimensions: Optional[int] = None,
        user: Optional[str] = None,
    ) -> Any:
        """Embed ``input`` with ``model``; optional arguments are sent only when given."""
        request = EmbeddingRequest(
            input=input,
            model=model,
            encoding_format=encoding_format,
            dimensions=dimensions,
            user=user,
        )
        return await self._client.submit_json("embeddings", request)


__all__ = ["EmbeddingsApi"]
