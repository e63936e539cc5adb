"""Structured telemetry models for queue state changes."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Tuple

from arcade_queue.core.enums import QueueEventType


@dataclass(slots=True)
class QueueEvent:
    """One queue mutation, logged as the ``extra`` payload of a JSON log line.

    ``players`` lists the players the operation touched, in the order the
    operation handled them. ``queue_size`` is measured after the operation.
    """

    event_type: QueueEventType
    game: str
    players: Tuple[str, ...] = ()
    queue_size: int = 0
    queue_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_type": self.event_type.value,
            "game": self.game,
            "players": list(self.players),
            "queue_size": self.queue_size,
            "queue_id": self.queue_id,
            "event_time": self.timestamp.isoformat(),
        }


__all__ = ["QueueEvent"]
