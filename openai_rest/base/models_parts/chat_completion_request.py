"""
ChatCompletionRequest payload for ``POST chat/completions``.

``model`` and ``messages`` are mandatory; every sampling and output control is
optional and only emitted when set. Messages are plain JSON objects
(``{"role": ..., "content": ...}``) passed through untouched.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from ..payload import Payload


class ChatCompletionRequest(Payload):
    """Request body for a chat completion.

    Attributes:
        model: Model identifier.
        messages: Conversation history as JSON message objects.
        max_tokens: Maximum number of tokens to generate.
        temperature: Sampling temperature.
        top_p: Nucleus sampling mass.
        n: Number of choices to generate.
        stream: Ask the service for server-sent events. The body is not
            decoded incrementally by this client.
        stop: Stop sequence or sequences.
        presence_penalty: Presence penalty.
        frequency_penalty: Frequency penalty.
        logit_bias: Token id to bias mapping.
        user: End-user identifier.
        response_format: Output format object (e.g. ``{"type": "json_object"}``).
        tools: Tool specifications.
        tool_choice: Tool selection policy (string or object).
    """

    model: str
    messages: List[Dict[str, Any]]
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    stream: Optional[bool] = None
    stop: Optional[Union[str, List[str]]] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    logit_bias: Optional[Dict[str, Any]] = None
    user: Optional[str] = None
    response_format: Optional[Dict[str, Any]] = None
    tools: Optional[List[Dict[str, Any]]] = None
    tool_choice: Optional[Union[str, Dict[str, Any]]] = None


__all__ = ["ChatCompletionRequest"]
