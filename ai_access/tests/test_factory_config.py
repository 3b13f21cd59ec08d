"""Client factory and configuration precedence."""
from __future__ import annotations

import pytest

from ai_access import ClientFactory, create_client
from ai_access.anthropic import AnthropicClient
from ai_access.base.errors import LogicError
from ai_access.base.factory import UnknownProviderError
from ai_access.config import SUPPORTED_PROVIDERS, get_api_key, get_provider_config
from ai_access.config.env import is_placeholder
from ai_access.deepseek import DeepSeekClient
from ai_access.gemini import GeminiClient
from ai_access.openai import OpenAIClient
from ai_access.xai import XAIClient


def test_supported_providers_in_order():
    assert ClientFactory.supported() == ("openai", "anthropic", "gemini", "deepseek", "xai")  # nosec B101
    assert set(SUPPORTED_PROVIDERS) == set(ClientFactory.supported())  # nosec B101


@pytest.mark.parametrize(
    ("name", "klass"),
    [
        ("openai", OpenAIClient),
        ("Anthropic", AnthropicClient),
        (" gemini ", GeminiClient),
        ("deepseek", DeepSeekClient),
        ("xai", XAIClient),
    ],
)
def test_client_class_lookup(name, klass):
    assert ClientFactory.client_class(name) is klass  # nosec B101


def test_unknown_provider():
    with pytest.raises(UnknownProviderError):
        ClientFactory.client_class("mistral")
    with pytest.raises(LogicError):
        ClientFactory.create("mistral", object(), api_key="k")


def test_key_resolved_from_environment(monkeypatch, transport):
    monkeypatch.setenv("DEEPSEEK_API_KEY", "ds-secret")
    client = create_client("deepseek", transport)
    assert isinstance(client, DeepSeekClient)  # nosec B101
    transport.add_json({"choices": [{"message": {"content": "ok"}, "finish_reason": "stop"}]})
    client.create_chat("deepseek-chat").send_message("hi")
    assert transport.last.header("Authorization") == "Bearer ds-secret"  # nosec B101
    assert transport.last.url == "https://api.deepseek.com/chat/completions"  # nosec B101


def test_gemini_alias_variable(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "g-alias")
    assert get_api_key("gemini") == "g-alias"  # nosec B101
    monkeypatch.setenv("GEMINI_API_KEY", "g-canonical")
    assert get_api_key("gemini") == "g-canonical"  # nosec B101


def test_missing_key_raises(transport):
    with pytest.raises(LogicError, match="OPENAI_API_KEY"):
        ClientFactory.create("openai", transport)


def test_placeholder_key_ignored(monkeypatch, transport):
    monkeypatch.setenv("XAI_API_KEY", "your-key-placeholder")
    assert is_placeholder("CHANGEME") and not is_placeholder("sk-real")  # nosec B101
    with pytest.raises(LogicError):
        ClientFactory.create("xai", transport)


def test_precedence_defaults_env_overrides(monkeypatch):
    assert get_provider_config("xai") == {"api_key": None, "base_url": "https://api.x.ai/v1/"}  # nosec B101
    monkeypatch.setenv("XAI_API_KEY", "env-key")
    monkeypatch.setenv("XAI_BASE_URL", " https://proxy.local/xai/ ")
    assert get_provider_config("xai") == {"api_key": "env-key", "base_url": "https://proxy.local/xai/"}  # nosec B101
    cfg = get_provider_config("xai", {"api_key": "explicit", "base_url": None})
    assert cfg == {"api_key": "explicit", "base_url": "https://proxy.local/xai/"}  # nosec B101


def test_base_url_from_environment_used_by_client(monkeypatch, transport):
    monkeypatch.setenv("ANTHROPIC_BASE_URL", "https://gateway.local/anthropic")
    client = ClientFactory.create("anthropic", transport, api_key="sk-ant")
    assert client.base_url == "https://gateway.local/anthropic/"  # nosec B101


def test_options_forwarded_to_set_options(transport, diagnostics):
    client = ClientFactory.create(
        "openai",
        transport,
        api_key="sk-test",
        diagnostics=diagnostics,
        request_timeout=5.0,
        organization_id="org-1",
    )
    assert client.transport_options.request_timeout == 5.0  # nosec B101
    assert client.diagnostics is diagnostics  # nosec B101
    with pytest.raises(LogicError):
        ClientFactory.create("openai", transport, api_key="sk-test", api_version="2023-06-01")


@pytest.mark.parametrize(
    ("provider", "batches", "embeddings"),
    [
        ("openai", True, True),
        ("anthropic", True, False),
        ("gemini", False, True),
        ("deepseek", False, False),
        ("xai", False, False),
    ],
)
def test_capabilities_per_provider(provider, batches, embeddings, transport):
    from ai_access.base.interfaces import SupportsBatches, SupportsEmbeddings

    client = ClientFactory.create(provider, transport, api_key="key")
    assert isinstance(client, SupportsBatches) is batches  # nosec B101
    assert isinstance(client, SupportsEmbeddings) is embeddings  # nosec B101
