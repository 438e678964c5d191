"""Authenticated HTTP transport shared by every endpoint facade.

Purpose:
    Perform single credentialed round trips against the remote API and hand
    back the decoded JSON body. Each primitive (``fetch``, ``submit_json``,
    ``submit_multipart``, ``remove``) takes a path relative to ``base_url``.

External dependencies:
    - ``httpx`` for the asynchronous HTTP client.

Behavior:
    - Every request carries ``Authorization: Bearer <api_key>``; JSON requests
      add ``Content-Type: application/json``.
    - The URL is resolved from the current ``base_url`` before the request is
      awaited, so rewriting ``base_url`` only affects calls started later.
      The property is not locked; changing it while other tasks issue calls
      is the caller's responsibility.
    - Any syntactically valid JSON body is returned regardless of HTTP status
      unless the transport was built with ``raise_for_status=True``.
    - No retries and no timeouts of its own: httpx defaults apply unless a
      configured ``httpx.AsyncClient`` is injected.

Failure modes:
    - :class:`TransportError` for connection, timeout and protocol failures.
    - :class:`EncodingError` for unserializable request bodies and malformed
      or non-UTF8 response bodies.
    - :class:`ApiStatusError` for non-2xx responses when status checking is
      enabled.

Lifecycle:
    - A client created lazily by the transport is closed by ``aclose()`` or
      on exit of ``async with``. An injected client belongs to the caller and
      is never closed here.
"""

from __future__ import annotations

import json
import time
from typing import Any, Dict, Mapping, Optional

import httpx
from pydantic import BaseModel

from ..errors import ApiStatusError, translate_errors
from ..logging import LogContext, get_logger, log_event
from ..payload import Payload
from .multipart import MultipartForm
from .query import query_params

_logger = get_logger("openai_rest.http")


def encode_json_body(payload: Any) -> bytes:
    """Serialize a request body to UTF-8 JSON bytes.

    ``Payload`` instances emit only their present fields, other pydantic
    models are dumped in JSON mode and ``None`` becomes ``{}``. NaN and
    infinities are rejected.
    """
    if payload is None:
        body: Any = {}
    elif isinstance(payload, Payload):
        body = payload.to_dict()
    elif isinstance(payload, BaseModel):
        body = payload.model_dump(mode="json", exclude_none=True)
    else:
        body = payload
    return json.dumps(body, ensure_ascii=False, allow_nan=False).encode("utf-8")


class RequestClient:
    """Credentialed HTTP exchanges against one base address.

    Parameters:
        api_key: Bearer credential attached to every request.
        base_url: Absolute base address; paths are appended to it.
        http_client: Optional ``httpx.AsyncClient`` to use instead of a
            lazily created one.
        extra_headers: Static headers sent with every request (e.g.
            organization or project selection).
        raise_for_status: Raise :class:`ApiStatusError` on non-2xx responses.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        extra_headers: Optional[Mapping[str, str]] = None,
        raise_for_status: bool = False,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._http = http_client
        self._owns_http = http_client is None
        self._extra_headers: Dict[str, str] = dict(extra_headers or {})
        self.raise_for_status = raise_for_status

    # ------------------------------------------------------------ properties

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @base_url.setter
    def base_url(self, value: str) -> None:
        self._base_url = value

    @property
    def extra_headers(self) -> Dict[str, str]:
        return dict(self._extra_headers)

    # ------------------------------------------------------------- lifecycle

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient()
            self._owns_http = True
        return self._http

    async def aclose(self) -> None:
        """Close the underlying client when this transport created it."""
        if self._http is not None and self._owns_http:
            await self._http.aclose()
            self._http = None

    async def __aenter__(self) -> "RequestClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ------------------------------------------------------------ primitives

    async def fetch(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """GET ``path`` and return the decoded JSON body.

        ``params`` entries whose value is ``None`` are not sent.
        """
        query = query_params(**params) if params else None
        return await self._send("GET", path, headers=headers, params=query or None)

    async def submit_json(
        self,
        path: str,
        payload: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """POST ``payload`` as JSON to ``path`` and return the decoded body."""
        with translate_errors(path):
            content = encode_json_body(payload)
        return await self._send(
            "POST",
            path,
            headers=headers,
            content=content,
            content_type="application/json",
        )

    async def submit_multipart(
        self,
        path: str,
        form: MultipartForm,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """POST ``form`` as ``multipart/form-data`` to ``path``."""
        return await self._send("POST", path, headers=headers, files=form.to_httpx_files())

    async def remove(self, path: str, headers: Optional[Mapping[str, str]] = None) -> Any:
        """DELETE ``path`` and return the decoded body."""
        return await self._send("DELETE", path, headers=headers)

    # -------------------------------------------------------------- internals

    def url_for(self, path: str) -> str:
        """Join ``path`` onto the current base address."""
        return f"{self._base_url.rstrip('/')}/{path.lstrip('/')}"

    def _headers(self, headers: Optional[Mapping[str, str]], content_type: Optional[str]) -> httpx.Headers:
        # case-insensitive merge; the client credential and content type always win
        merged = httpx.Headers(self._extra_headers)
        if headers:
            merged.update(headers)
        if content_type:
            merged["Content-Type"] = content_type
        merged["Authorization"] = f"Bearer {self._api_key}"
        return merged

    async def _send(
        self,
        method: str,
        path: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        content_type: Optional[str] = None,
        **kwargs: Any,
    ) -> Any:
        url = self.url_for(path)
        ctx = LogContext(method=method, path=path, base_url=self._base_url)
        start = time.perf_counter()
        try:
            with translate_errors(path):
                client = self._client()
                request = client.build_request(method, url, headers=self._headers(headers, content_type), **kwargs)
                response = await client.send(request)
                log_event(
                    _logger,
                    "http.request",
                    ctx,
                    status=response.status_code,
                    elapsed_ms=round((time.perf_counter() - start) * 1000, 2),
                )
                if self.raise_for_status and not response.is_success:
                    raise ApiStatusError(
                        message=f"HTTP {response.status_code} for {method} {path}",
                        path=path,
                        status_code=response.status_code,
                        body=_body_or_text(response),
                    )
                return response.json()
        except Exception as exc:
            log_event(_logger, "http.error", ctx, category=getattr(getattr(exc, "category", None), "label", None))
            raise


def _body_or_text(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


__all__ = ["RequestClient", "encode_json_body"]
