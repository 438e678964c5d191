"""Shared helpers for the client test suite.

Exports:
    - Recorder: ``httpx.MockTransport`` handler recording every request.
    - CollectingHandler: logging handler keeping records in memory.
    - run: drive a coroutine to completion with ``asyncio.run``.
"""
from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Callable, List, Optional

import httpx

TEST_BASE_URL = "https://api.test/v1"
TEST_API_KEY = "sk-unit"  # pragma: allowlist secret - fake credential


class Recorder:
    """MockTransport handler that records requests and replies via ``responder``."""

    def __init__(self, responder: Optional[Callable[[httpx.Request], httpx.Response]] = None) -> None:
        self.requests: List[httpx.Request] = []
        self._responder = responder or (lambda request: httpx.Response(200, json={"ok": True}))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


class CollectingHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def events(self) -> List[dict]:
        return [json.loads(r.getMessage()) for r in self.records]


def run(coro):
    return asyncio.run(coro)
