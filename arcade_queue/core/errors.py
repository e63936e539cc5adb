"""Error hierarchy shared by the queue subsystems.

Callers catch :class:`QueueError` to handle every queue contract violation in
one place, or the specific subclasses when the reaction differs (a duplicate
join is recoverable, a bad group size is not).
"""
from __future__ import annotations


class CoreError(Exception):
    """Base class for all custom exceptions in the application."""


class ConfigurationError(CoreError):
    """Raised when configuration files are missing or invalid."""


class QueueError(CoreError):
    """Base class for violations of the player queue contract."""


class InvalidGroupSizeError(QueueError, ValueError):
    """Raised when a queue is constructed with fewer than one player per round."""

    def __init__(self, players: object) -> None:
        super().__init__(f"`players` should be an integer of at least 1, got {players!r}")
        self.players = players


class InvalidQueueIdError(QueueError, ValueError):
    """Raised when a queue id is not a non-negative integer."""

    def __init__(self, queue_id: object) -> None:
        super().__init__(f"`queue_id` should be a non-negative integer, got {queue_id!r}")
        self.queue_id = queue_id


class DuplicatePlayerError(QueueError):
    """Raised when a player joins a queue they are already waiting in."""

    def __init__(self, player: str) -> None:
        super().__init__(f"{player} is already in the queue")
        self.player = player
