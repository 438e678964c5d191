"""Query-string helper for list endpoints."""
from __future__ import annotations

from typing import Any, Dict


def query_params(**values: Any) -> Dict[str, Any]:
    """Return ``values`` without the entries whose value is ``None``.

    httpx renders booleans as ``true``/``false`` and numbers via ``str``, so
    the remaining values are passed through untouched.
    """
    return {key: value for key, value in values.items() if value is not None}


__all__ = ["query_params"]
