"""VectorStoreRequest payload for creating and modifying vector stores.

Every field is optional. ``file_ids`` and ``chunking_strategy`` only apply on
creation; the modify call sends ``name``, ``expires_after`` and ``metadata``.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..payload import Payload


class VectorStoreRequest(Payload):
    file_ids: Optional[List[str]] = None
    name: Optional[str] = None
    expires_after: Optional[Dict[str, Any]] = None
    chunking_strategy: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None


__all__ = ["VectorStoreRequest"]
