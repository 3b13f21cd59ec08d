"""OpenAI batch lifecycle: JSONL upload, job creation, status mapping, results."""
from __future__ import annotations

import json

import pytest

from ai_access.base.constants import (
    DIAG_BATCH_CANCEL_FAILED,
    DIAG_BATCH_REQUEST_FAILED,
    DIAG_BATCH_RESULT_UNPARSEABLE,
)
from ai_access.base.errors import LogicError
from ai_access.base.models import BatchStatus, Message, Role
from ai_access.openai import OpenAIClient
from ai_access.openai.batch_helpers import BATCH_STATUS_MAP


def _job(status: str, **extra) -> dict:
    return {"id": "batch_1", "object": "batch", "status": status, **extra}


def _result_line(custom_id: str, text: str) -> str:
    body = {"status": "completed", "output": [{"type": "message", "content": [{"type": "output_text", "text": text}]}]}
    return json.dumps({"id": "r", "custom_id": custom_id, "response": {"status_code": 200, "body": body}, "error": None})


@pytest.fixture()
def client(transport, diagnostics):
    return OpenAIClient("sk-test", transport, diagnostics=diagnostics)


def test_duplicate_custom_id_rejected(client):
    batch = client.create_batch()
    batch.create_chat("gpt-4o-mini", "req-1")
    with pytest.raises(LogicError):
        batch.create_chat("gpt-4o-mini", "req-1")


def test_empty_batch_submit_rejected(client, transport):
    with pytest.raises(LogicError):
        client.create_batch().submit()
    assert transport.requests == []  # nosec B101


def test_payload_errors_surface_before_any_network_call(client, transport):
    batch = client.create_batch()
    batch.create_chat("gpt-4o-mini", "ok").add_message("Hi")
    batch.create_chat("gpt-4o-mini", "empty")
    with pytest.raises(LogicError):
        batch.submit()
    assert transport.requests == []  # nosec B101


def test_submit_uploads_jsonl_then_creates_job(client, transport):
    batch = client.create_batch()
    first = batch.create_chat("gpt-4o-mini", "req-1")
    first.add_message("Hello")
    second = batch.create_chat("gpt-4o-mini", "req-2")
    second.set_system_instruction("Sys").add_message("Bye")
    batch.set_metadata({"project": "demo"})

    transport.add_json({"id": "file-abc", "object": "file", "purpose": "batch"})
    transport.add_json(_job("validating"))
    response = batch.submit()

    assert response.get_id() == "batch_1"  # nosec B101
    assert response.get_status() is BatchStatus.IN_PROGRESS  # nosec B101
    assert response.get_error() is None  # nosec B101

    upload, create = transport.requests
    assert upload.url == "https://api.openai.com/v1/files"  # nosec B101
    assert upload.header("Content-Type").startswith("multipart/form-data; boundary=")  # nosec B101
    text = upload.text()
    assert 'name="purpose"' in text and "batch" in text  # nosec B101
    assert 'filename="batch_requests.jsonl"' in text  # nosec B101
    lines = [json.loads(l) for l in text.splitlines() if l.startswith('{"custom_id"')]
    assert [l["custom_id"] for l in lines] == ["req-1", "req-2"]  # nosec B101
    assert lines[0]["method"] == "POST" and lines[0]["url"] == "/v1/responses"  # nosec B101
    assert lines[1]["body"]["instructions"] == "Sys"  # nosec B101

    assert create.url == "https://api.openai.com/v1/batches"  # nosec B101
    assert create.json() == {  # nosec B101
        "input_file_id": "file-abc",
        "endpoint": "/v1/responses",
        "completion_window": "24h",
        "metadata": {"project": "demo"},
    }
    # chats were not mutated by submission
    assert first.get_messages() == [Message("Hello", Role.USER)]  # nosec B101


@pytest.mark.parametrize(
    ("vendor", "expected"),
    [
        ("validating", BatchStatus.IN_PROGRESS),
        ("in_progress", BatchStatus.IN_PROGRESS),
        ("finalizing", BatchStatus.IN_PROGRESS),
        ("cancelling", BatchStatus.IN_PROGRESS),
        ("completed", BatchStatus.COMPLETED),
        ("failed", BatchStatus.FAILED),
        ("expired", BatchStatus.FAILED),
        ("cancelled", BatchStatus.FAILED),
    ],
)
def test_status_vocabulary(vendor, expected):
    assert BATCH_STATUS_MAP[vendor] is expected  # nosec B101


def test_unknown_status_maps_to_other(client, transport):
    transport.add_json(_job("paused"))
    response = client.retrieve_batch("batch_1")
    assert response.status is BatchStatus.OTHER  # nosec B101
    assert transport.last.method == "GET"  # nosec B101
    assert transport.last.url.endswith("/batches/batch_1")  # nosec B101


def test_failed_job_exposes_error(client, transport):
    transport.add_json(_job("failed", errors={"data": [{"code": "invalid", "message": "Bad line 3"}]}))
    response = client.retrieve_batch("batch_1")
    assert response.status is BatchStatus.FAILED  # nosec B101
    assert response.error == "Bad line 3"  # nosec B101


def test_results_of_completed_job(client, transport, diagnostics):
    transport.add_json(_job("completed", output_file_id="file-out"))
    response = client.retrieve_batch("batch_1")
    document = "\n".join([
        _result_line("req-1", "One"),
        json.dumps({"custom_id": "req-2", "response": {"status_code": 400, "body": {"error": {"message": "bad"}}}, "error": None}),
        "not json",
        _result_line("req-3", "Three"),
    ])
    transport.add_text(document, content_type="application/octet-stream")
    messages = response.get_output_messages()
    assert messages == {"req-1": Message("One", Role.MODEL), "req-3": Message("Three", Role.MODEL)}  # nosec B101
    assert transport.last.url.endswith("/files/file-out/content")  # nosec B101
    assert diagnostics.codes() == [DIAG_BATCH_REQUEST_FAILED, DIAG_BATCH_RESULT_UNPARSEABLE]  # nosec B101


def test_single_line_results_are_not_decoded_as_json_document(client, transport):
    transport.add_json(_job("completed", output_file_id="file-out"))
    response = client.retrieve_batch("batch_1")
    transport.add_text(_result_line("only", "Solo"), content_type="application/json")
    assert response.get_output_messages() == {"only": Message("Solo", Role.MODEL)}  # nosec B101


def test_results_none_when_not_completed_or_no_file(client, transport):
    transport.add_json(_job("in_progress")).add_json(_job("completed"))
    assert client.retrieve_batch("batch_1").get_output_messages() is None  # nosec B101
    assert client.retrieve_batch("batch_1").get_output_messages() is None  # nosec B101
    assert len(transport.requests) == 2  # nosec B101


def test_cancel_batch(client, transport, diagnostics):
    transport.add_json(_job("cancelling"))
    assert client.cancel_batch("batch_1") is True  # nosec B101
    assert transport.last.url.endswith("/batches/batch_1/cancel")  # nosec B101
    assert transport.last.method == "POST"  # nosec B101

    transport.add_json({"error": {"message": "Batch already completed"}}, status=400)
    assert client.cancel_batch("batch_1") is False  # nosec B101
    assert diagnostics.codes() == [DIAG_BATCH_CANCEL_FAILED]  # nosec B101


def test_list_batches_with_cursor(client, transport):
    transport.add_json({"data": [_job("completed"), {"id": "batch_2", "status": "failed"}], "has_more": False})
    batches = client.list_batches(limit=2, after="batch_0")
    assert [b.id for b in batches] == ["batch_1", "batch_2"]  # nosec B101
    assert [b.status for b in batches] == [BatchStatus.COMPLETED, BatchStatus.FAILED]  # nosec B101
    assert transport.last.url == "https://api.openai.com/v1/batches?limit=2&after=batch_0"  # nosec B101
