"""
Message DTO used by every chat session.

Defines the immutable `Message` value and the `Role` enumeration of message
senders. Provider adapters translate `Role` into vendor role names
(``assistant``, ``model``) when building payloads.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Role of a message sender."""

    USER = "user"
    MODEL = "model"


@dataclass(frozen=True)
class Message:
    """A single chat message.

    Attributes:
        text: Message text.
        role: Sender role (:attr:`Role.USER` or :attr:`Role.MODEL`).
    """

    text: str
    role: Role


__all__ = [
    "Message",
    "Role",
]
