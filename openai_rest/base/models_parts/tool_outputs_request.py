"""ToolOutputsRequest payload for ``POST threads/{id}/runs/{id}/submit_tool_outputs``."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..payload import Payload


class ToolOutputsRequest(Payload):
    tool_outputs: List[Dict[str, Any]]
    stream: Optional[bool] = None


__all__ = ["ToolOutputsRequest"]
