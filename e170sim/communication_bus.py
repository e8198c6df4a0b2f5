"""A process-wide message store shared between aircraft systems."""

from __future__ import annotations

import copy
import enum
import threading
from typing import Any, ClassVar, TypeVar

T = TypeVar("T")


class MessageID(enum.Enum):
    """Channels messages are filed under."""

    ELECTRICAL = "electrical"
    HYDRAULIC = "hydraulic"


class CommunicationBus:
    """Stores messages per channel; readers receive copies of those of a given type."""

    _instance: ClassVar[CommunicationBus | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._messages: dict[MessageID, list[Any]] = {}

    @classmethod
    def instance(cls) -> CommunicationBus:
        """Return the shared bus, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def send(self, message_id: MessageID, message: Any) -> None:
        """File ``message`` under ``message_id``."""
        with self._lock:
            self._messages.setdefault(message_id, []).append(message)

    def receive(self, message_id: MessageID, message_type: type[T]) -> list[T]:
        """Return copies of the messages under ``message_id`` whose type is exactly ``message_type``."""
        with self._lock:
            stored = list(self._messages.get(message_id, ()))
        return [copy.deepcopy(msg) for msg in stored if type(msg) is message_type]