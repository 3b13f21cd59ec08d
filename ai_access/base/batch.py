"""Client-side batch builder.

A :class:`Batch` collects chats keyed by a caller supplied ``custom_id`` and
submits them as one asynchronous job. The wire protocol (file upload then job
creation, or one inline request) belongs to the owning client's
``submit_batch``; this class only enforces the building rules:

* ``custom_id`` values are unique within a batch;
* a batch needs at least one chat to be submitted;
* every payload is built before the first network call, without touching the
  chats' histories.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from .chat import Chat
from .errors import LogicError
from .models import BatchResponse


class Batch:
    """Ordered collection of chats awaiting submission."""

    def __init__(self, client: Any) -> None:
        self._client = client
        self._chats: Dict[str, Chat] = {}
        self._metadata: Optional[Dict[str, str]] = None

    def create_chat(self, model: str, custom_id: str) -> Chat:
        """Create and register a chat under ``custom_id``.

        Raises:
            LogicError: When ``custom_id`` is empty or already used in this batch.
        """
        if not custom_id:
            raise LogicError("Batch custom ID must be a non-empty string.")
        if custom_id in self._chats:
            raise LogicError(f"Chat with custom ID '{custom_id}' already exists in this batch.")
        chat = self._client.create_chat(model)
        self._chats[custom_id] = chat
        return chat

    def set_metadata(self, metadata: Dict[str, str]) -> "Batch":
        """Attach job metadata (forwarded where the provider supports it)."""
        self._metadata = dict(metadata)
        return self

    @property
    def metadata(self) -> Optional[Dict[str, str]]:
        return dict(self._metadata) if self._metadata is not None else None

    def items(self) -> List[Tuple[str, Chat]]:
        return list(self._chats.items())

    def __len__(self) -> int:
        return len(self._chats)

    def submit(self) -> BatchResponse:
        """Submit all chats as one job and return its initial status.

        Raises:
            LogicError: When no chat was added or a payload cannot be built.
            ApiError: On a provider error response.
            NetworkError: On a transport failure.
        """
        if not self._chats:
            raise LogicError("Cannot submit batch job: No chat requests added.")
        requests = {custom_id: chat.build_payload() for custom_id, chat in self._chats.items()}
        return self._client.submit_batch(requests, self.metadata)


__all__ = ["Batch"]
