"""Assistants endpoint facade.

All calls carry the ``OpenAI-Beta: assistants=v2`` header.
"""
from __future__ import annotations

from typing import Any, Optional

from ..base.models import AssistantRequest
from .resource import ApiResource


class AssistantsApi(ApiResource):
    beta = True

    async def create(self, request: AssistantRequest) -> Any:
        return await self._client.submit_json("assistants", request, headers=self._headers())

    async def list(
        self,
        limit: Optional[int] = None,
        order: Optional[str] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> Any:
        """List assistants, newest first unless ``order="asc"``."""
        params = {"limit": limit, "order": order, "after": after, "before": before}
        return await self._client.fetch("assistants", params=params, headers=self._headers())

    async def retrieve(self, assistant_id: str) -> Any:
        return await self._client.fetch(f"assistants/{assistant_id}", headers=self._headers())

    async def modify(self, assistant_id: str, request: AssistantRequest) -> Any:
        """Update an assistant; ``model`` is never part of the modify body."""
        return await self._client.submit_json(
            f"assistants/{assistant_id}",
            request.to_dict(exclude=["model"]),
            headers=self._headers(),
        )

    async def delete(self, assistant_id: str) -> Any:
        return await self._client.remove(f"assistants/{assistant_id}", headers=self._headers())


__all__ = ["AssistantsApi"]
