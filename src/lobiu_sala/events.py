from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


class EventKind:
    """Event type names returned by player and tile mutators."""

    ITEM_COLLECTED = "item_collected"
    TREASURE_FOUND = "treasure_found"
    ENCOUNTER = "encounter"
    DAMAGE = "damage"
    SHIELD_BROKE = "shield_broke"
    HEALED = "healed"
    SHIELD_GAINED = "shield_gained"
    USE_REJECTED = "use_rejected"


@dataclass(frozen=True)
class GameEvent:
    """A short human-readable description of something that just happened.

    ``kind`` is one of the :class:`EventKind` names so callers can react to the
    event without parsing ``message``; ``data`` carries the numbers behind it.
    """

    kind: str
    message: str
    data: Optional[Dict[str, Any]] = None
