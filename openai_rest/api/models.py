"""Models endpoint facade."""
from __future__ import annotations

from typing import Any

from .resource import ApiResource


class ModelsApi(ApiResource):
    async def list(self) -> Any:
        """List the models available to the credential."""
        return await self._client.fetch("models")

    async def retrieve(self, model: str) -> Any:
        return await self._client.fetch(f"models/{model}")


__all__ = ["ModelsApi"]
