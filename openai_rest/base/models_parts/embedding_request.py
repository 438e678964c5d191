"""EmbeddingRequest payload for ``POST embeddings``."""
from __future__ import annotations

from typing import List, Optional, Union

from ..payload import Payload


class EmbeddingRequest(Payload):
    """Request body for creating embeddings of one or more inputs."""

    input: Union[str, List[str], List[int], List[List[int]]]
    model: str
    encoding_format: Optional[str] = None
    dimensions: Optional[int] = None
    user: Optional[str] = None


__all__ = ["EmbeddingRequest"]
