from __future__ import annotations

import json
import pickle

import httpx
import pytest
from pydantic import ValidationError

from openai_rest.base.errors import (
    ApiStatusError,
    EncodingError,
    ErrorCategory,
    LocalIOError,
    OpenAIError,
    TransportError,
    classify_exception,
    translate_errors,
    wrap_exception,
)
from openai_rest.base.models import ChatCompletionRequest


def _validation_error() -> ValidationError:
    try:
        ChatCompletionRequest(model="m", messages="not a list")
    except ValidationError as exc:
        return exc
    raise AssertionError("expected a ValidationError")


def test_display_contract():
    assert str(TransportError("refused")) == "Transport Error: refused"  # nosec B101 - assert is appropriate in unit tests
    assert str(EncodingError("bad json")) == "Encoding Error: bad json"  # nosec B101
    assert str(LocalIOError("no file")) == "LocalIO Error: no file"  # nosec B101


def test_categories_and_hierarchy():
    assert TransportError.category is ErrorCategory.TRANSPORT  # nosec B101
    assert EncodingError.category is ErrorCategory.ENCODING  # nosec B101
    assert LocalIOError.category is ErrorCategory.LOCAL_IO  # nosec B101
    for cls in (TransportError, EncodingError, LocalIOError):
        assert issubclass(cls, OpenAIError)  # nosec B101


def test_classify_transport_failures():
    assert classify_exception(httpx.ConnectError("x")) is ErrorCategory.TRANSPORT  # nosec B101
    assert classify_exception(httpx.ReadTimeout("x")) is ErrorCategory.TRANSPORT  # nosec B101
    assert classify_exception(httpx.InvalidURL("x")) is ErrorCategory.TRANSPORT  # nosec B101


def test_classify_encoding_failures():
    try:
        json.loads("{")
    except json.JSONDecodeError as exc:
        assert classify_exception(exc) is ErrorCategory.ENCODING  # nosec B101
    assert classify_exception(_validation_error()) is ErrorCategory.ENCODING  # nosec B101
    assert classify_exception(UnicodeDecodeError("utf-8", b"\xff", 0, 1, "bad")) is ErrorCategory.ENCODING  # nosec B101
    assert classify_exception(TypeError("not serializable")) is ErrorCategory.ENCODING  # nosec B101


def test_classify_local_io_and_unknown():
    assert classify_exception(FileNotFoundError(2, "missing")) is ErrorCategory.LOCAL_IO  # nosec B101
    assert classify_exception(PermissionError(13, "denied")) is ErrorCategory.LOCAL_IO  # nosec B101
    assert classify_exception(KeyError("k")) is None  # nosec B101


def test_classify_openai_error_passthrough():
    assert classify_exception(LocalIOError("x")) is ErrorCategory.LOCAL_IO  # nosec B101


def test_wrap_exception_keeps_cause_and_path():
    cause = httpx.ConnectError("refused")
    wrapped = wrap_exception(cause, path="models")
    assert isinstance(wrapped, TransportError)  # nosec B101
    assert wrapped.cause is cause  # nosec B101
    assert wrapped.path == "models"  # nosec B101
    assert wrap_exception(RuntimeError("x")) is None  # nosec B101
    existing = EncodingError("e")
    assert wrap_exception(existing, path="p") is existing  # nosec B101
    assert existing.path == "p"  # nosec B101


def test_wrap_exception_uses_type_name_for_blank_messages():
    assert wrap_exception(httpx.ReadTimeout("")).message == "ReadTimeout"  # nosec B101


def test_translate_errors_chains_the_original():
    with pytest.raises(LocalIOError) as info:
        with translate_errors("/tmp/x"):
            raise FileNotFoundError(2, "No such file")
    assert isinstance(info.value.__cause__, FileNotFoundError)  # nosec B101


def test_translate_errors_lets_unknown_exceptions_through():
    with pytest.raises(RuntimeError):
        with translate_errors():
            raise RuntimeError("not ours")


def test_errors_are_hashable_and_catchable_as_family():
    err = TransportError("x")
    assert {err}  # nosec B101
    with pytest.raises(OpenAIError):
        raise err


def test_errors_survive_pickling():
    err = pickle.loads(pickle.dumps(TransportError(message="boom", path="models")))
    assert isinstance(err, TransportError)  # nosec B101
    assert str(err) == "Transport Error: boom"  # nosec B101
    assert err.path == "models"  # nosec B101
    status = pickle.loads(pickle.dumps(ApiStatusError(message="x", status_code=429, body={"e": 1})))
    assert status.status_code == 429  # nosec B101
    assert status.body == {"e": 1}  # nosec B101
    assert status.args == ("x",)  # nosec B101
