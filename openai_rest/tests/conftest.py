"""Pytest configuration for the client test suite.

HTTP traffic never leaves the process: tests inject an ``httpx.AsyncClient``
backed by ``httpx.MockTransport`` and inspect the recorded requests.
Coroutines are driven with ``asyncio.run``.
"""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from openai_rest.api import OpenAI
from openai_rest.base.http import RequestClient
from openai_rest.config import reset_config_cache
from openai_rest.tests.helpers import TEST_API_KEY, TEST_BASE_URL, CollectingHandler, Recorder


@pytest.fixture()
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture()
def transport(recorder: Recorder) -> RequestClient:
    """RequestClient wired to the recording mock transport."""
    return RequestClient(TEST_API_KEY, TEST_BASE_URL, http_client=recorder.http_client())


@pytest.fixture()
def api(recorder: Recorder) -> OpenAI:
    """OpenAI facade wired to the recording mock transport."""
    return OpenAI(TEST_API_KEY, TEST_BASE_URL, http_client=recorder.http_client())


@pytest.fixture()
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Clear client env vars and config caches for the duration of a test."""
    for name in (
        "OPENAI_API_KEY",
        "OPENAI_BASE_URL",
        "OPENAI_ORG_ID",
        "OPENAI_PROJECT_ID",
        "OPENAI_REST_CONFIG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "absent.env"))
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def debug_events() -> Iterator[CollectingHandler]:
    """Capture structured events from the ``openai_rest`` logger at DEBUG."""
    base = logging.getLogger("openai_rest")
    handler = CollectingHandler()
    previous = base.level
    base.addHandler(handler)
    base.setLevel(logging.DEBUG)
    try:
        yield handler
    finally:
        base.removeHandler(handler)
        base.setLevel(previous)
