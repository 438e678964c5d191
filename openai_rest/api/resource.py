"""Common base for endpoint facades."""
from __future__ import annotations

from typing import Dict, Optional

from ..base.http import RequestClient
from ..config.defaults import ASSISTANTS_BETA_HEADER


class ApiResource:
    """Stateless facade over the shared :class:`RequestClient`.

    Subclasses only add path construction; every call is one round trip on
    the shared transport.
    """

    beta: bool = False

    def __init__(self, client: RequestClient) -> None:
        self._client = client

    @property
    def client(self) -> RequestClient:
        return self._client

    def _headers(self) -> Optional[Dict[str, str]]:
        if not self.beta:
            return None
        name, value = ASSISTANTS_BETA_HEADER
        return {name: value}


__all__ = ["ApiResource"]
