"""Message types, stored records and operation results."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TypedDict

SESSION_KEY = "flash_messages"


class MessageType(str, enum.Enum):
    """
    Message types keyed by their one-character session key.

    Declaration order is the default display order.
    """

    ERROR = "e"
    WARNING = "w"
    SUCCESS = "s"
    INFO = "i"

    @property
    def label(self) -> str:
        return self.name.lower()


DEFAULT_TYPE = MessageType.INFO


class StoredMessage(TypedDict):
    sticky: bool
    message: str


def type_key(value: str | MessageType) -> str:
    """First character lower-cased; enum members map to their own key."""
    if isinstance(value, MessageType):
        return value.value
    return value[0].lower() if value else ""


def coerce_type(value: str | MessageType | None) -> MessageType:
    """
    Resolve a loosely given type for queueing.

    Anything longer than one character is reduced to its first letter,
    lower-cased. Unknown keys fall back to ``DEFAULT_TYPE``.
    """
    if value is None:
        return DEFAULT_TYPE
    if isinstance(value, MessageType):
        return value
    if len(value.strip()) > 1:
        value = value[0].lower()
    try:
        return MessageType(value)
    except ValueError:
        return DEFAULT_TYPE


def lookup_type(value: str | MessageType) -> MessageType | None:
    """Strict variant of ``coerce_type`` used by readers: no fallback."""
    try:
        return MessageType(type_key(value))
    except ValueError:
        return None


def resolve_types(types: str | MessageType | Iterable[str | MessageType] | None) -> list[str]:
    """
    Keys to visit when rendering or clearing, in visiting order.

    Nothing given means every type in declaration order. A sequence keeps
    the caller's order, which is how display order gets overridden.
    """
    if not types:
        return [t.value for t in MessageType]
    if isinstance(types, str):
        return [type_key(types)]
    return [type_key(t) for t in types if t]


# -------- Results --------


@dataclass(frozen=True)
class Queued:
    type: MessageType
    message: StoredMessage

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    reason: str

    def __bool__(self) -> bool:
        return False


AddResult = Queued | Rejected


@dataclass(frozen=True)
class Messages:
    type: MessageType
    items: list[StoredMessage] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


@dataclass(frozen=True)
class Empty:
    def __bool__(self) -> bool:
        return False


PendingResult = Messages | Empty
