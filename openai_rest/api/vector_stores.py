"""Vector stores endpoint facade.

All calls carry the ``OpenAI-Beta: assistants=v2`` header.
"""
from __future__ import annotations

from typing import Any, Optional

from ..base.models import VectorStoreRequest
from .resource import ApiResource

MODIFIABLE_FIELDS = ("name", "expires_after", "metadata")


class VectorStoresApi(ApiResource):
    beta = True

    async def create(self, request: Optional[VectorStoreRequest] = None) -> Any:
        return await self._client.submit_json("vector_stores", request or VectorStoreRequest(), headers=self._headers())

    async def list(
        self,
        limit: Optional[int] = None,
        order: Optional[str] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> Any:
        params = {"limit": limit, "order": order, "after": after, "before": before}
        return await self._client.fetch("vector_stores", params=params, headers=self._headers())

    async def retrieve(self, vector_store_id: str) -> Any:
        return await self._client.fetch(f"vector_stores/{vector_store_id}", headers=self._headers())

    async def modify(self, vector_store_id: str, request: VectorStoreRequest) -> Any:
        """Update a vector store; only name, expiry policy and metadata are sent."""
        excluded = [name for name in VectorStoreRequest.model_fields if name not in MODIFIABLE_FIELDS]
        return await self._client.submit_json(
            f"vector_stores/{vector_store_id}",
            request.to_dict(exclude=excluded),
            headers=self._headers(),
        )

    async def delete(self, vector_store_id: str) -> Any:
        return await self._client.remove(f"vector_stores/{vector_store_id}", headers=self._headers())


__all__ = ["VectorStoresApi"]
