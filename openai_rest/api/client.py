"""Root facade binding every endpoint group to one shared transport.

``OpenAI`` owns a single :class:`RequestClient`; the endpoint groups are
lightweight views over it, so changing ``base_url`` on the facade retargets
every group for calls started afterwards.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from ..base.http import RequestClient
from ..base.logging import get_logger
from ..config import get_client_config
from ..config.defaults import OPENAI_DEFAULT_BASE_URL, ORGANIZATION_HEADER, PROJECT_HEADER
from .assistants import AssistantsApi
from .audio import AudioApi
from .completions import CompletionsApi
from .embeddings import EmbeddingsApi
from .fine_tuning import FineTuningApi
from .images import ImagesApi
from .models import ModelsApi
from .moderations import ModerationsApi
from .projects import ProjectsApi
from .threads import ThreadsApi
from .vector_stores import VectorStoresApi

_logger = get_logger("openai_rest.api")


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


class OpenAI:
    """Entry point of the client.

    Parameters:
        api_key: Bearer credential.
        base_url: API base address; an empty string selects
            ``https://api.openai.com/v1``.
        organization: Optional organization id sent as ``OpenAI-Organization``.
        project: Optional project id sent as ``OpenAI-Project``.
        http_client: Optional preconfigured ``httpx.AsyncClient`` (timeouts,
            proxies, test transports). It is not closed by :meth:`aclose`.
        raise_for_status: Raise ``ApiStatusError`` on non-2xx responses
            instead of returning the error body.

    Example::

        async with OpenAI(api_key) as api:
            req = ChatCompletionRequest(model="gpt-4o-mini", messages=[...]).with_temperature(0.2)
            reply = await api.completions.create(req)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "",
        *,
        organization: Optional[str] = None,
        project: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        raise_for_status: bool = False,
    ) -> None:
        headers: Dict[str, str] = {}
        if organization:
            headers[ORGANIZATION_HEADER] = organization
        if project:
            headers[PROJECT_HEADER] = project
        self._client = RequestClient(
            api_key,
            base_url or OPENAI_DEFAULT_BASE_URL,
            http_client=http_client,
            extra_headers=headers,
            raise_for_status=raise_for_status,
        )

    @classmethod
    def from_config(cls, http_client: Optional[httpx.AsyncClient] = None, **overrides: Any) -> "OpenAI":
        """Build a client from defaults, config file, environment and ``overrides``.

        Raises:
            ValueError: when no usable API key is configured.
        """
        cfg = get_client_config(overrides)
        api_key = cfg.get("api_key")
        if not api_key:
            _logger.warning("no usable API key found in config or environment")
            raise ValueError("OpenAI API key is not configured; set OPENAI_API_KEY or pass api_key")
        return cls(
            api_key,
            cfg.get("base_url") or "",
            organization=cfg.get("organization"),
            project=cfg.get("project"),
            http_client=http_client,
            raise_for_status=_as_bool(cfg.get("raise_for_status")),
        )

    # ------------------------------------------------------------ transport

    @property
    def client(self) -> RequestClient:
        return self._client

    @property
    def base_url(self) -> str:
        return self._client.base_url

    @base_url.setter
    def base_url(self, value: str) -> None:
        self._client.base_url = value

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "OpenAI":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ------------------------------------------------------- endpoint groups

    @property
    def models(self) -> ModelsApi:
        return ModelsApi(self._client)

    @property
    def completions(self) -> CompletionsApi:
        return CompletionsApi(self._client)

    @property
    def embeddings(self) -> EmbeddingsApi:
        return EmbeddingsApi(self._client)

    @property
    def moderations(self) -> ModerationsApi:
        return ModerationsApi(self._client)

    @property
    def images(self) -> ImagesApi:
        return ImagesApi(self._client)

    @property
    def audio(self) -> AudioApi:
        return AudioApi(self._client)

    @property
    def fine_tuning(self) -> FineTuningApi:
        return FineTuningApi(self._client)

    @property
    def assistants(self) -> AssistantsApi:
        return AssistantsApi(self._client)

    @property
    def threads(self) -> ThreadsApi:
        return ThreadsApi(self._client)

    @property
    def vector_stores(self) -> VectorStoresApi:
        return VectorStoresApi(self._client)

    @property
    def projects(self) -> ProjectsApi:
        return ProjectsApi(self._client)


__all__ = ["OpenAI"]
