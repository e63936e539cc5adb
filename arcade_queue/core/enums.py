"""Enumerations shared across queue subsystems."""
from __future__ import annotations

from enum import Enum


class QueueEventType(str, Enum):
    """Kinds of state changes a :class:`PlayerQueue` reports to telemetry."""

    JOINED = "joined"
    JOIN_REJECTED = "join_rejected"
    LEFT = "left"
    ADVANCED = "advanced"
    ROTATED = "rotated"
    GROUP_RELEASED = "group_released"
    GROUP_ROTATED = "group_rotated"
