"""ModerationRequest payload for ``POST moderations``.

The model is optional here; the service picks its default moderation model
when it is absent.
"""
from __future__ import annotations

from typing import List, Optional, Union

from ..payload import Payload


class ModerationRequest(Payload):
    input: Union[str, List[str]]
    model: Optional[str] = None


__all__ = ["ModerationRequest"]
