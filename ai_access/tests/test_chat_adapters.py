"""Payload construction and response parsing of every chat adapter."""
from __future__ import annotations

import pytest

from ai_access.anthropic import AnthropicClient
from ai_access.base.constants import DIAG_CHAT_CONSECUTIVE_ROLES
from ai_access.base.errors import ApiError, LogicError
from ai_access.base.models import ChatSession, Message, Role
from ai_access.deepseek import DeepSeekClient
from ai_access.gemini import GeminiClient
from ai_access.openai import OpenAIClient
from ai_access.xai import XAIClient


def _conversation(chat):
    chat.add_message("Hi", Role.USER)
    chat.add_message("Hello!", Role.MODEL)
    chat.add_message("How are you?", Role.USER)
    return chat


# ---------------------------------------------------------------- openai
def test_openai_payload(transport):
    chat = _conversation(OpenAIClient("k", transport).create_chat("gpt-4o"))
    chat.set_options(max_output_tokens=50, truncation="auto", metadata={"a": "b"})
    payload = chat.build_payload()
    assert payload == {  # nosec B101
        "model": "gpt-4o",
        "input": [
            {"role": "user", "content": "Hi"},
            {"role": "assistant", "content": "Hello!"},
            {"role": "user", "content": "How are you?"},
        ],
        "max_output_tokens": 50,
        "truncation": "auto",
        "metadata": {"a": "b"},
    }
    assert "instructions" not in payload  # nosec B101
    assert chat._adapter.endpoint(chat.session) == "responses"  # nosec B101


def test_openai_parse_joins_output_text_and_incomplete_reason():
    adapter = OpenAIClient("k", object()).chat_adapter()
    raw = {
        "status": "incomplete",
        "incomplete_details": {"reason": "max_output_tokens"},
        "output": [
            {"type": "reasoning", "summary": []},
            {"type": "message", "content": [
                {"type": "output_text", "text": "Hel"},
                {"type": "refusal", "refusal": "no"},
                {"type": "output_text", "text": "lo"},
            ]},
        ],
    }
    response = adapter.parse_response(raw)
    assert response.text == "Hello"  # nosec B101
    assert response.finish_reason == "max_output_tokens"  # nosec B101
    assert response.usage is None  # nosec B101
    assert response.raw is raw  # nosec B101


def test_parse_rejects_non_object():
    with pytest.raises(ApiError):
        OpenAIClient("k", object()).chat_adapter().parse_response("oops")


# ------------------------------------------------------------- anthropic
def test_anthropic_payload_defaults(transport):
    chat = AnthropicClient("k", transport).create_chat("claude-sonnet-4")
    chat.add_message("Hi")
    assert chat.build_payload() == {  # nosec B101
        "model": "claude-sonnet-4",
        "messages": [{"role": "user", "content": "Hi"}],
        "system": "",
        "max_tokens": 1024,
    }


def test_anthropic_payload_with_options(transport):
    chat = _conversation(AnthropicClient("k", transport).create_chat("claude"))
    chat.set_system_instruction("Be terse.").set_options(max_tokens=200, stop_sequences=["END"], top_k=5)
    payload = chat.build_payload()
    assert payload["system"] == "Be terse."  # nosec B101
    assert payload["max_tokens"] == 200  # nosec B101
    assert payload["stop_sequences"] == ["END"]  # nosec B101
    assert payload["top_k"] == 5  # nosec B101
    assert payload["messages"][1] == {"role": "assistant", "content": "Hello!"}  # nosec B101


def test_anthropic_parse(transport):
    adapter = AnthropicClient("k", transport).chat_adapter()
    response = adapter.parse_response({
        "content": [{"type": "text", "text": "A"}, {"type": "tool_use", "id": "t"}, {"type": "text", "text": "B"}],
        "stop_reason": "end_turn",
        "usage": {"input_tokens": 10, "output_tokens": 4},
    })
    assert response.text == "AB"  # nosec B101
    assert response.finish_reason == "end_turn"  # nosec B101
    assert response.usage == {"input_tokens": 10, "output_tokens": 4}  # nosec B101


# ---------------------------------------------------------------- gemini
def test_gemini_payload(transport):
    chat = _conversation(GeminiClient("k", transport).create_chat("gemini-2.0-flash"))
    chat.set_system_instruction("Sys").set_options(
        temperature=0.5, max_output_tokens=64, top_k=3, safety_settings=[{"category": "X", "threshold": "Y"}]
    )
    payload = chat.build_payload()
    assert payload["contents"] == [  # nosec B101
        {"role": "user", "parts": [{"text": "Hi"}]},
        {"role": "model", "parts": [{"text": "Hello!"}]},
        {"role": "user", "parts": [{"text": "How are you?"}]},
    ]
    assert payload["systemInstruction"] == {"parts": [{"text": "Sys"}]}  # nosec B101
    assert payload["generationConfig"] == {"temperature": 0.5, "maxOutputTokens": 64, "topK": 3}  # nosec B101
    assert payload["safetySettings"] == [{"category": "X", "threshold": "Y"}]  # nosec B101
    assert "model" not in payload  # nosec B101
    assert chat._adapter.endpoint(chat.session) == "models/gemini-2.0-flash:generateContent"  # nosec B101


def test_gemini_payload_without_options_has_no_generation_config(transport):
    chat = GeminiClient("k", transport).create_chat("g")
    chat.add_message("Hi")
    assert chat.build_payload() == {"contents": [{"role": "user", "parts": [{"text": "Hi"}]}]}  # nosec B101


def test_gemini_first_message_must_be_user(transport):
    chat = GeminiClient("k", transport).create_chat("g")
    chat.add_message("I start", Role.MODEL)
    with pytest.raises(LogicError):
        chat.build_payload()


def test_gemini_consecutive_roles_reported_not_blocked(transport, diagnostics):
    chat = GeminiClient("k", transport, diagnostics=diagnostics).create_chat("g")
    chat.add_message("one")
    chat.add_message("two")
    payload = chat.build_payload()
    assert len(payload["contents"]) == 2  # nosec B101
    assert diagnostics.codes() == [DIAG_CHAT_CONSECUTIVE_ROLES]  # nosec B101


def test_gemini_parse_skips_thought_parts(transport):
    adapter = GeminiClient("k", transport).chat_adapter()
    response = adapter.parse_response({
        "candidates": [{
            "content": {"role": "model", "parts": [{"text": "thinking...", "thought": True}, {"text": "Answer"}]},
            "finishReason": "STOP",
        }],
        "usageMetadata": {"promptTokenCount": 7, "candidatesTokenCount": 1, "thoughtsTokenCount": 20, "totalTokenCount": 28},
    })
    assert response.text == "Answer"  # nosec B101
    assert response.finish_reason == "STOP"  # nosec B101
    assert response.usage == {  # nosec B101
        "input_tokens": 7, "output_tokens": 1, "reasoning_tokens": 20, "total_tokens": 28,
    }


def test_gemini_parse_without_candidates(transport):
    response = GeminiClient("k", transport).chat_adapter().parse_response({"promptFeedback": {"blockReason": "SAFETY"}})
    assert response.text == ""  # nosec B101
    assert response.finish_reason is None  # nosec B101


# ------------------------------------------------------ chat completions
def test_deepseek_payload_system_first_and_max_tokens(transport):
    chat = DeepSeekClient("k", transport).create_chat("deepseek-chat")
    chat.add_message("Hi")
    chat.set_system_instruction("Sys").set_options(max_output_tokens=10, temperature=0.3, tools=[{"type": "function"}])
    payload = chat.build_payload()
    assert payload["messages"][0] == {"role": "system", "content": "Sys"}  # nosec B101
    assert payload["messages"][1] == {"role": "user", "content": "Hi"}  # nosec B101
    assert payload["max_tokens"] == 10  # nosec B101
    assert "max_output_tokens" not in payload  # nosec B101
    assert payload["temperature"] == 0.3  # nosec B101
    assert payload["tools"] == [{"type": "function"}]  # nosec B101


def test_deepseek_reasoner_strips_unsupported_params(transport):
    chat = DeepSeekClient("k", transport).create_chat("deepseek-reasoner")
    chat.add_message("Hi")
    chat.set_options(
        max_output_tokens=10,
        temperature=0.3,
        top_p=0.5,
        frequency_penalty=0.1,
        presence_penalty=0.1,
        tools=[{"type": "function"}],
        tool_choice="auto",
        logprobs=True,
        top_logprobs=2,
        stop=["x"],
    )
    payload = chat.build_payload()
    assert payload == {  # nosec B101
        "model": "deepseek-reasoner",
        "messages": [{"role": "user", "content": "Hi"}],
        "max_tokens": 10,
        "stop": ["x"],
    }


def test_xai_payload_uses_max_completion_tokens(transport):
    chat = XAIClient("k", transport).create_chat("grok-3")
    chat.add_message("Hi")
    chat.set_options(max_output_tokens=99, seed=7, reasoning_effort="low")
    payload = chat.build_payload()
    assert payload["max_completion_tokens"] == 99  # nosec B101
    assert payload["seed"] == 7  # nosec B101
    assert payload["reasoning_effort"] == "low"  # nosec B101
    assert "max_tokens" not in payload  # nosec B101


def test_xai_rejects_deepseek_only_option(transport):
    chat = XAIClient("k", transport).create_chat("grok-3")
    with pytest.raises(LogicError):
        chat.set_options(logprobs=True)


def test_chat_completions_parse(transport):
    adapter = XAIClient("k", transport).chat_adapter()
    response = adapter.parse_response({
        "choices": [{"index": 0, "message": {"role": "assistant", "content": "Yo"}, "finish_reason": "stop"}],
        "usage": {"prompt_tokens": 3, "completion_tokens": 1, "completion_tokens_details": {"reasoning_tokens": 4}},
    })
    assert response.text == "Yo"  # nosec B101
    assert response.finish_reason == "stop"  # nosec B101
    assert response.usage == {"input_tokens": 3, "output_tokens": 1, "reasoning_tokens": 4}  # nosec B101


def test_chat_completions_null_content_is_empty_text(transport):
    adapter = DeepSeekClient("k", transport).chat_adapter()
    response = adapter.parse_response({"choices": [{"message": {"content": None, "tool_calls": []}, "finish_reason": "tool_calls"}]})
    assert response.text == ""  # nosec B101
    assert response.finish_reason == "tool_calls"  # nosec B101


@pytest.mark.parametrize("client_cls", [OpenAIClient, AnthropicClient, GeminiClient, DeepSeekClient, XAIClient])
def test_every_adapter_rejects_empty_history(client_cls, transport):
    adapter = client_cls("k", transport).chat_adapter()
    with pytest.raises(LogicError):
        adapter.build_payload(ChatSession(model="m", messages=(), options=adapter.options_type()))


def test_adapter_works_on_synthetic_session(transport):
    adapter = AnthropicClient("k", transport).chat_adapter()
    session = ChatSession(model="m", messages=(Message("x", Role.USER),))
    assert adapter.build_payload(session)["messages"] == [{"role": "user", "content": "x"}]  # nosec B101
