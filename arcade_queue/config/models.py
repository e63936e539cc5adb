"""Typed configuration models for the queue runtime.

The config subsystem relies on pydantic to validate YAML files and to provide
strongly-typed objects to the rest of the runtime.
"""
from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator

from arcade_queue.core.types import QueueId
from arcade_queue.queue.player_queue import PlayerQueue


class QueueConfig(BaseModel):
    """Settings for the single queue served by the runtime.

    ``players`` mirrors the queue's own constructor check so a bad value is
    reported while loading YAML rather than at first use.
    """

    game: str = ""
    players: PositiveInt = 1
    queue_id: Optional[QueueId] = Field(None, ge=0)

    model_config = ConfigDict(frozen=True)

    def build_queue(self) -> PlayerQueue:
        return PlayerQueue(self.game, self.players, queue_id=self.queue_id)


class LoggingConfig(BaseModel):
    """Log level and optional directory for the JSON log file."""

    level: str = Field("INFO")
    log_dir: Optional[str] = None

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        normalized = value.upper()
        if normalized not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return normalized


class AppConfig(BaseModel):
    """Runtime config composed of the queue and logging sections."""

    queue: QueueConfig = Field(default_factory=QueueConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
