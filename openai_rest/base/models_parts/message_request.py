"""MessageRequest payload for ``POST threads/{thread_id}/messages``."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from ..payload import Payload


class MessageRequest(Payload):
    """A message appended to a thread.

    ``content`` is either plain text or a list of content-part objects.
    """

    role: str
    content: Union[str, List[Dict[str, Any]]]
    attachments: Optional[List[Dict[str, Any]]] = None
    metadata: Optional[Dict[str, Any]] = None


__all__ = ["MessageRequest"]
