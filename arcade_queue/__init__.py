"""Top-level package for the arcade player queue.

The package exposes the subsystems (core, queue, config, telemetry,
interfaces) used to run a single-game rotation queue. Each subpackage stays
import-safe so callers can pull :class:`PlayerQueue` without touching the
CLI or logging setup.
"""

from .core.errors import CoreError, DuplicatePlayerError, InvalidGroupSizeError, QueueError
from .queue import PlayerQueue, QueueKey, QueueSnapshot

__all__ = [
    "CoreError",
    "DuplicatePlayerError",
    "InvalidGroupSizeError",
    "PlayerQueue",
    "QueueError",
    "QueueKey",
    "QueueSnapshot",
]
