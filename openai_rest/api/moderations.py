"""Moderation endpoint facade."""
from __future__ import annotations

from typing import Any, List, Optional, Union

from ..base.models import ModerationRequest
from .resource import ApiResource


class ModerationsApi(ApiResource):
    async def moderate(self, input: Union[str, List[Any]], model: Optional[str] = None) -> Any:
        return await self._client.submit_json("moderations", ModerationRequest(input=input, model=model))


__all__ = ["ModerationsApi"]
