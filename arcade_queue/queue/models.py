"""Value types describing a queue from the outside.

:class:`QueueKey` is the explicit identity of a queue that carries a numeric
id. Callers that keep several queues around compare or index them by key
instead of relying on ``==`` between :class:`PlayerQueue` instances.
:class:`QueueSnapshot` is a frozen copy of the queue contents, safe to hand to
logging or presentation code.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from arcade_queue.core.types import QueueId


@dataclass(frozen=True, slots=True)
class QueueKey:
    """Identity of a queue tracked by numeric id."""

    queue_id: QueueId

    def __str__(self) -> str:
        return f"queue#{self.queue_id}"


@dataclass(frozen=True, slots=True)
class QueueSnapshot:
    """Read-only view of a queue at one point in time."""

    game: str
    players: int
    members: Tuple[str, ...]
    queue_id: QueueId | None = None

    @property
    def size(self) -> int:
        return len(self.members)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "game": self.game,
            "players": self.players,
            "members": list(self.members),
            "queue_id": self.queue_id,
        }


__all__ = ["QueueKey", "QueueSnapshot"]
