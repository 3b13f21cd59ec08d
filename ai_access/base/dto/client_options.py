"""Pydantic DTOs validating ``Client.set_options`` arguments.

Each client declares the option model it accepts. Unknown names and
out-of-range values are rejected by pydantic and surfaced to the caller as
:class:`~ai_access.base.errors.LogicError` by the client. ``None`` means
"leave unchanged".
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ClientOptions(BaseModel):
    """Options common to every provider client.

    Attributes:
        connect_timeout: Connection timeout in seconds.
        request_timeout: Total request timeout in seconds.
        proxy: Proxy URL passed to the transport.
        base_url: Replacement API base URL (e.g. a gateway or mock server).
    """

    model_config = ConfigDict(extra="forbid")

    connect_timeout: Optional[float] = Field(default=None, gt=0)
    request_timeout: Optional[float] = Field(default=None, gt=0)
    proxy: Optional[str] = None
    base_url: Optional[str] = None


class OpenAIClientOptions(ClientOptions):
    """OpenAI adds the optional organization header."""

    organization_id: Optional[str] = None


class AnthropicClientOptions(ClientOptions):
    """Anthropic adds the ``anthropic-version`` header value."""

    api_version: Optional[str] = None


__all__ = ["ClientOptions", "OpenAIClientOptions", "AnthropicClientOptions"]
