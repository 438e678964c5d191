"""Endpoint facades: paths, methods, bodies and headers.

Each facade call is one round trip on the shared transport; these tests pin
the wire shape of every endpoint group.
"""
from __future__ import annotations

import pytest

from openai_rest.api import OpenAI
from openai_rest.base.models import (
    AssistantRequest,
    ChatCompletionRequest,
    FineTuningJobRequest,
    RunRequest,
    ThreadRequest,
    VectorStoreRequest,
)
from openai_rest.tests.helpers import run

BETA = "assistants=v2"


def test_default_base_url_when_empty():
    assert OpenAI("k").base_url == "https://api.openai.com/v1"  # nosec B101 - asserts are appropriate in unit tests
    assert OpenAI("k", "").client.base_url == "https://api.openai.com/v1"  # nosec B101
    assert OpenAI("k", "http://localhost:8080/v1").base_url == "http://localhost:8080/v1"  # nosec B101


def test_groups_share_the_transport_and_base_url(api, recorder):
    assert api.models.client is api.threads.client is api.client  # nosec B101
    api.base_url = "https://other.test/api"
    run(api.models.list())
    assert str(recorder.last.url) == "https://other.test/api/models"  # nosec B101


def test_organization_and_project_headers(recorder):
    api = OpenAI("k", "https://api.test/v1", organization="org-1", project="proj-1", http_client=recorder.http_client())
    run(api.models.retrieve("gpt-x"))
    assert recorder.last.headers["openai-organization"] == "org-1"  # nosec B101
    assert recorder.last.headers["openai-project"] == "proj-1"  # nosec B101
    assert recorder.last.url.path == "/v1/models/gpt-x"  # nosec B101


def test_chat_completion_posts_present_fields(api, recorder):
    req = ChatCompletionRequest(model="gpt-x", messages=[{"role": "user", "content": "hi"}]).with_temperature(0.5).with_stream(True)
    run(api.completions.create(req))
    assert recorder.last.url.path == "/v1/chat/completions"  # nosec B101
    assert recorder.last_json() == {  # nosec B101
        "model": "gpt-x",
        "messages": [{"role": "user", "content": "hi"}],
        "temperature": 0.5,
        "stream": True,
    }


def test_embeddings_and_moderations(api, recorder):
    run(api.embeddings.create("hello", "text-embedding-3-small", dimensions=256))
    assert recorder.last_json() == {"input": "hello", "model": "text-embedding-3-small", "dimensions": 256}  # nosec B101
    run(api.moderations.moderate(["a", "b"]))
    assert recorder.last.url.path == "/v1/moderations"  # nosec B101
    assert recorder.last_json() == {"input": ["a", "b"]}  # nosec B101


def test_image_generation_is_json(api, recorder):
    run(api.images.generate("a red fox", "dall-e-3", size="1024x1024", n=1))
    assert recorder.last.url.path == "/v1/images/generations"  # nosec B101
    assert recorder.last_json() == {"prompt": "a red fox", "model": "dall-e-3", "size": "1024x1024", "n": 1}  # nosec B101


def test_fine_tuning_paths(api, recorder):
    job = FineTuningJobRequest(model="gpt-4o-mini", training_file="file-1").with_suffix("mine")
    run(api.fine_tuning.create_job(job))
    assert recorder.last.url.path == "/v1/fine_tuning/jobs"  # nosec B101
    assert recorder.last_json() == {"model": "gpt-4o-mini", "training_file": "file-1", "suffix": "mine"}  # nosec B101

    run(api.fine_tuning.list_jobs(limit=3))
    assert recorder.last.method == "GET"  # nosec B101
    assert dict(recorder.last.url.params) == {"limit": "3"}  # nosec B101

    run(api.fine_tuning.retrieve_job("ft-1"))
    assert recorder.last.url.path == "/v1/fine_tuning/jobs/ft-1"  # nosec B101

    run(api.fine_tuning.cancel_job("ft-1"))
    assert recorder.last.method == "POST"  # nosec B101
    assert recorder.last.url.path == "/v1/fine_tuning/jobs/ft-1/cancel"  # nosec B101
    assert recorder.last_json() == {}  # nosec B101

    run(api.fine_tuning.list_events("ft-1", after="ev-9"))
    assert recorder.last.url.path == "/v1/fine_tuning/jobs/ft-1/events"  # nosec B101
    assert dict(recorder.last.url.params) == {"after": "ev-9"}  # nosec B101


def test_assistants_send_beta_header_and_modify_excludes_model(api, recorder):
    req = AssistantRequest(model="gpt-4o").with_name("helper").with_metadata({"team": "a"})
    run(api.assistants.create(req))
    assert recorder.last.headers["openai-beta"] == BETA  # nosec B101
    assert recorder.last_json() == {"model": "gpt-4o", "name": "helper", "metadata": {"team": "a"}}  # nosec B101

    run(api.assistants.modify("asst_1", req))
    assert recorder.last.url.path == "/v1/assistants/asst_1"  # nosec B101
    assert recorder.last_json() == {"name": "helper", "metadata": {"team": "a"}}  # nosec B101

    run(api.assistants.list(limit=2, order="asc"))
    assert dict(recorder.last.url.params) == {"limit": "2", "order": "asc"}  # nosec B101

    run(api.assistants.delete("asst_1"))
    assert recorder.last.method == "DELETE"  # nosec B101
    assert recorder.last.headers["openai-beta"] == BETA  # nosec B101


def test_thread_lifecycle_paths(api, recorder):
    run(api.threads.create())
    assert recorder.last_json() == {}  # nosec B101
    assert recorder.last.headers["openai-beta"] == BETA  # nosec B101

    req = ThreadRequest(messages=[{"role": "user", "content": "x"}], metadata={"k": "v"})
    run(api.threads.modify("th_1", req))
    assert recorder.last.url.path == "/v1/threads/th_1"  # nosec B101
    assert recorder.last_json() == {"metadata": {"k": "v"}}  # nosec B101

    run(api.threads.delete("th_1"))
    assert recorder.last.method == "DELETE"  # nosec B101


def test_thread_messages(api, recorder):
    run(api.threads.create_message("th_1", "user", "hello"))
    assert recorder.last.url.path == "/v1/threads/th_1/messages"  # nosec B101
    assert recorder.last_json() == {"role": "user", "content": "hello"}  # nosec B101

    run(api.threads.list_messages("th_1", order="desc", before="msg_9"))
    assert dict(recorder.last.url.params) == {"order": "desc", "before": "msg_9"}  # nosec B101

    run(api.threads.modify_message("th_1", "msg_1", {"seen": "yes"}))
    assert recorder.last.url.path == "/v1/threads/th_1/messages/msg_1"  # nosec B101
    assert recorder.last_json() == {"metadata": {"seen": "yes"}}  # nosec B101

    run(api.threads.delete_message("th_1", "msg_1"))
    assert recorder.last.method == "DELETE"  # nosec B101


def test_thread_runs_and_steps(api, recorder):
    run(api.threads.create_run("th_1", RunRequest(assistant_id="asst_1").with_parallel_tool_calls(False)))
    assert recorder.last.url.path == "/v1/threads/th_1/runs"  # nosec B101
    assert recorder.last_json() == {"assistant_id": "asst_1", "parallel_tool_calls": False}  # nosec B101

    run(api.threads.modify_run("th_1", "run_1", {"k": "v"}))
    assert recorder.last_json() == {"metadata": {"k": "v"}}  # nosec B101

    run(api.threads.cancel_run("th_1", "run_1"))
    assert recorder.last.url.path == "/v1/threads/th_1/runs/run_1/cancel"  # nosec B101
    assert recorder.last_json() == {}  # nosec B101

    run(api.threads.submit_tool_outputs("th_1", "run_1", [{"tool_call_id": "c1", "output": "42"}]))
    assert recorder.last.url.path == "/v1/threads/th_1/runs/run_1/submit_tool_outputs"  # nosec B101
    assert recorder.last_json() == {"tool_outputs": [{"tool_call_id": "c1", "output": "42"}]}  # nosec B101

    run(api.threads.list_run_steps("th_1", "run_1", limit=1))
    assert recorder.last.url.path == "/v1/threads/th_1/runs/run_1/steps"  # nosec B101

    run(api.threads.retrieve_run_step("th_1", "run_1", "step_1"))
    assert recorder.last.url.path == "/v1/threads/th_1/runs/run_1/steps/step_1"  # nosec B101
    assert recorder.last.headers["openai-beta"] == BETA  # nosec B101


def test_vector_store_modify_sends_only_modifiable_fields(api, recorder):
    req = VectorStoreRequest(file_ids=["file-1"], name="docs", chunking_strategy={"type": "auto"}, metadata={})
    run(api.vector_stores.create(req))
    assert recorder.last_json() == {  # nosec B101
        "file_ids": ["file-1"],
        "name": "docs",
        "chunking_strategy": {"type": "auto"},
        "metadata": {},
    }
    run(api.vector_stores.modify("vs_1", req))
    assert recorder.last.url.path == "/v1/vector_stores/vs_1"  # nosec B101
    assert recorder.last_json() == {"name": "docs", "metadata": {}}  # nosec B101


def test_projects_paths_and_bodies(api, recorder):
    run(api.projects.list(include_archived=True))
    assert recorder.last.url.path == "/v1/organization/projects"  # nosec B101
    assert dict(recorder.last.url.params) == {"include_archived": "true"}  # nosec B101

    run(api.projects.create("Apollo", business_website="https://example.org"))
    assert recorder.last_json() == {"name": "Apollo", "business_website": "https://example.org"}  # nosec B101

    run(api.projects.archive("proj_1"))
    assert recorder.last.url.path == "/v1/organization/projects/proj_1/archive"  # nosec B101
    assert recorder.last_json() == {}  # nosec B101

    run(api.projects.create_user("proj_1", "user_1", "member"))
    assert recorder.last_json() == {"user_id": "user_1", "role": "member"}  # nosec B101

    run(api.projects.modify_user("proj_1", "user_1", "owner"))
    assert recorder.last.url.path == "/v1/organization/projects/proj_1/users/user_1"  # nosec B101
    assert recorder.last_json() == {"role": "owner"}  # nosec B101

    run(api.projects.delete_user("proj_1", "user_1"))
    assert recorder.last.method == "DELETE"  # nosec B101
    assert "openai-beta" not in recorder.last.headers  # nosec B101


def test_from_config_requires_api_key(isolated_config):
    with pytest.raises(ValueError, match="API key"):
        OpenAI.from_config()


def test_from_config_uses_environment(isolated_config, monkeypatch, recorder):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-live")
    monkeypatch.setenv("OPENAI_ORG_ID", "org-7")
    api = OpenAI.from_config(http_client=recorder.http_client(), base_url="https://proxy.test/v1")
    run(api.models.list())
    assert str(recorder.last.url) == "https://proxy.test/v1/models"  # nosec B101
    assert recorder.last.headers["authorization"] == "Bearer sk-live"  # nosec B101
    assert recorder.last.headers["openai-organization"] == "org-7"  # nosec B101
