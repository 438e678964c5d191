"""
RunRequest payload for ``POST threads/{thread_id}/runs``.

Only ``assistant_id`` is mandatory; everything else overrides the assistant's
own configuration for this run.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from ..payload import Payload


class RunRequest(Payload):
    """Request body for starting a run on a thread.

    Attributes:
        assistant_id: Assistant executing the run.
        model: Model override.
        instructions: Replaces the assistant instructions.
        additional_instructions: Appended to the assistant instructions.
        additional_messages: Messages added to the thread before the run.
        tools: Tool override.
        metadata: Key/value metadata.
        temperature: Sampling temperature.
        top_p: Nucleus sampling mass.
        stream: Ask for server-sent events (not decoded incrementally).
        max_prompt_tokens: Prompt token budget over the run.
        max_completion_tokens: Completion token budget over the run.
        truncation_strategy: Thread truncation policy object.
        tool_choice: Tool selection policy.
        parallel_tool_calls: Allow parallel function calls.
        response_format: ``"auto"`` or a format object.
    """

    assistant_id: str
    model: Optional[str] = None
    instructions: Optional[str] = None
    additional_instructions: Optional[str] = None
    additional_messages: Optional[List[Dict[str, Any]]] = None
    tools: Optional[List[Dict[str, Any]]] = None
    metadata: Optional[Dict[str, Any]] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    stream: Optional[bool] = None
    max_prompt_tokens: Optional[int] = None
    max_completion_tokens: Optional[int] = None
    truncation_strategy: Optional[Dict[str, Any]] = None
    tool_choice: Optional[Union[str, Dict[str, Any]]] = None
    parallel_tool_calls: Optional[bool] = None
    response_format: Optional[Union[str, Dict[str, Any]]] = None


__all__ = ["RunRequest"]
