"""Embedding requests against OpenAI and Gemini."""
from __future__ import annotations

import pytest

from ai_access.base.constants import (
    DIAG_EMBEDDING_COUNT_MISMATCH,
    DIAG_EMBEDDING_DIMENSIONS_UNSUPPORTED,
    DIAG_EMBEDDING_ITEM_FAILED,
)
from ai_access.base.errors import LogicError
from ai_access.base.models import Embedding
from ai_access.gemini import GeminiClient
from ai_access.openai import OpenAIClient


@pytest.fixture()
def openai_client(transport, diagnostics):
    return OpenAIClient("sk-test", transport, diagnostics=diagnostics)


@pytest.fixture()
def gemini_client(transport, diagnostics):
    return GeminiClient("g-key", transport, diagnostics=diagnostics)


def test_openai_embeddings_sorted_by_index(openai_client, transport, diagnostics):
    transport.add_json({
        "object": "list",
        "data": [
            {"object": "embedding", "index": 1, "embedding": [0.0, 1.0]},
            {"object": "embedding", "index": 0, "embedding": [1.0, 0.0]},
        ],
    })
    result = openai_client.calculate_embeddings("text-embedding-3-small", ["first", "second"], dimensions=2)
    assert result == [Embedding([1.0, 0.0]), Embedding([0.0, 1.0])]  # nosec B101
    assert transport.last.url == "https://api.openai.com/v1/embeddings"  # nosec B101
    assert transport.last.json() == {  # nosec B101
        "model": "text-embedding-3-small",
        "input": ["first", "second"],
        "dimensions": 2,
    }
    assert diagnostics.codes() == []  # nosec B101


def test_openai_dimensions_on_older_model_reported_but_sent(openai_client, transport, diagnostics):
    transport.add_json({"data": [{"index": 0, "embedding": [0.5]}]})
    openai_client.calculate_embeddings("text-embedding-ada-002", ["x"], dimensions=1)
    assert transport.last.json()["dimensions"] == 1  # nosec B101
    assert diagnostics.codes() == [DIAG_EMBEDDING_DIMENSIONS_UNSUPPORTED]  # nosec B101


def test_openai_item_error_skipped_with_diagnostics(openai_client, transport, diagnostics):
    transport.add_json({
        "data": [
            {"index": 0, "embedding": [1.0]},
            {"index": 1, "error": {"message": "input too long"}},
        ]
    })
    result = openai_client.calculate_embeddings("text-embedding-3-small", ["a", "b"])
    assert result == [Embedding([1.0])]  # nosec B101
    assert diagnostics.codes() == [DIAG_EMBEDDING_ITEM_FAILED, DIAG_EMBEDDING_COUNT_MISMATCH]  # nosec B101
    assert "input too long" in diagnostics.records[0].message  # nosec B101
    assert diagnostics.records[1].context == {"expected": 2, "received": 1}  # nosec B101


@pytest.mark.parametrize("inputs", [[], "single string", ["ok", ""], ["ok", 3]])
def test_invalid_inputs_rejected_before_request(openai_client, gemini_client, transport, inputs):
    with pytest.raises(LogicError):
        openai_client.calculate_embeddings("text-embedding-3-small", inputs)
    with pytest.raises(LogicError):
        gemini_client.calculate_embeddings("text-embedding-004", inputs)
    assert transport.requests == []  # nosec B101


def test_gemini_batch_embed_request_shape(gemini_client, transport, diagnostics):
    transport.add_json({"embeddings": [{"values": [0.1, 0.2]}, {"values": [0.3, 0.4]}]})
    result = gemini_client.calculate_embeddings(
        "text-embedding-004", ["a", "b"], output_dimensionality=2, task_type="RETRIEVAL_QUERY"
    )
    assert [e.vector for e in result] == [[0.1, 0.2], [0.3, 0.4]]  # nosec B101
    assert transport.last.url == (  # nosec B101
        "https://generativelanguage.googleapis.com/v1beta/models/text-embedding-004:batchEmbedContents?key=g-key"
    )
    first = transport.last.json()["requests"][0]
    assert first == {  # nosec B101
        "model": "models/text-embedding-004",
        "content": {"parts": [{"text": "a"}]},
        "outputDimensionality": 2,
        "taskType": "RETRIEVAL_QUERY",
    }
    assert diagnostics.codes() == []  # nosec B101


def test_gemini_count_mismatch_reported(gemini_client, transport, diagnostics):
    transport.add_json({"embeddings": [{"values": [1.0]}]})
    result = gemini_client.calculate_embeddings("text-embedding-004", ["a", "b"])
    assert len(result) == 1  # nosec B101
    assert diagnostics.codes() == [DIAG_EMBEDDING_COUNT_MISMATCH]  # nosec B101
