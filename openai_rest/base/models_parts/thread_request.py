"""ThreadRequest payload for creating and modifying threads.

All fields are optional; an empty request creates an empty thread. The modify
call only sends ``tool_resources`` and ``metadata``.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..payload import Payload


class ThreadRequest(Payload):
    messages: Optional[List[Dict[str, Any]]] = None
    tool_resources: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None


__all__ = ["ThreadRequest"]
