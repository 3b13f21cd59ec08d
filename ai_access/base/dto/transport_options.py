"""Typed transport options shared by every client.

Purpose
-------
Carry the client-wide settings that are passed through to the transport on
every request (connect timeout, total request timeout, proxy). Merging follows
the library convention: only explicitly provided non-``None`` values replace
the current ones, so ``None`` never clears a setting.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ...config.defaults import DEFAULT_CONNECT_TIMEOUT, DEFAULT_REQUEST_TIMEOUT


class TransportOptions(BaseModel):
    """Options forwarded to ``Transport.request``.

    Attributes
    ----------
    connect_timeout:
        Connection timeout in seconds.
    request_timeout:
        Deadline in seconds for the whole exchange (connect, send, body
        download). The larger of the two timeouts is used as the deadline.
    proxy:
        Optional proxy URL (e.g. ``http://proxy.local:3128``).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    connect_timeout: float = Field(default=DEFAULT_CONNECT_TIMEOUT, gt=0)
    request_timeout: float = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0)
    proxy: Optional[str] = None

    def merged(self, **updates: Any) -> "TransportOptions":
        """Return a validated copy with the non-``None`` ``updates`` applied."""
        data = self.model_dump()
        data.update({k: v for k, v in updates.items() if v is not None})
        return TransportOptions.model_validate(data)


__all__ = ["TransportOptions"]
