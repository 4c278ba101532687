from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional

from .events import GameEvent

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 6
DEFAULT_LIFETIME = 2.5


@dataclass(frozen=True)
class Message:
    text: str
    expire_at: float


class MessageLog:
    """Short-lived feedback messages shown under the board.

    - Keeps at most ``capacity`` entries; adding beyond that drops the oldest.
    - Each entry lives ``lifetime`` seconds; :meth:`prune` removes entries whose
      expiry is at or before ``now``. Pruning is lazy: the game calls it once per
      render, nothing runs in the background.

    ``clock`` defaults to ``time.monotonic``; tests inject a fake clock or pass
    ``now`` explicitly.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        lifetime: float = DEFAULT_LIFETIME,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        if lifetime <= 0:
            raise ValueError("lifetime must be positive")
        self._capacity = capacity
        self._lifetime = lifetime
        self._clock = clock
        self._messages: List[Message] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def lifetime(self) -> float:
        return self._lifetime

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(list(self._messages))

    def add(self, text: str, now: Optional[float] = None) -> Message:
        now = self._clock() if now is None else now
        msg = Message(text=text, expire_at=now + self._lifetime)
        self._messages.append(msg)
        if len(self._messages) > self._capacity:
            dropped = self._messages.pop(0)
            logger.debug("MessageLog full, dropped %r", dropped.text)
        logger.debug("Message: %s", text)
        return msg

    def extend(self, events: Iterable[GameEvent], now: Optional[float] = None) -> None:
        for event in events:
            self.add(event.message, now=now)

    def prune(self, now: Optional[float] = None) -> int:
        """Remove expired messages; returns how many were removed."""
        now = self._clock() if now is None else now
        before = len(self._messages)
        self._messages = [m for m in self._messages if m.expire_at > now]
        return before - len(self._messages)

    def texts(self) -> List[str]:
        return [m.text for m in self._messages]
