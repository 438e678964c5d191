"""
AssistantRequest payload for creating and modifying assistants.

The same payload serves both ``POST assistants`` and
``POST assistants/{id}``; the modify call leaves ``model`` out of the body.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from ..payload import Payload


class AssistantRequest(Payload):
    """Request body describing an assistant.

    Attributes:
        model: Model the assistant runs on.
        name: Display name.
        description: Free-text description.
        instructions: System instructions.
        tools: Tool specifications (code interpreter, file search, functions).
        tool_resources: Resources made available to the tools.
        metadata: Up to 16 string key/value pairs.
        temperature: Sampling temperature.
        top_p: Nucleus sampling mass.
        response_format: ``"auto"`` or a format object.
    """

    model: str
    name: Optional[str] = None
    description: Optional[str] = None
    instructions: Optional[str] = None
    tools: Optional[List[Dict[str, Any]]] = None
    tool_resources: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    response_format: Optional[Union[str, Dict[str, Any]]] = None


__all__ = ["AssistantRequest"]
