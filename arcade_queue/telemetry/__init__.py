"""Telemetry and logging subsystem package."""
from .events import QueueEvent
from .logging_setup import JsonFormatter, configure_logging

__all__ = [
    "JsonFormatter",
    "QueueEvent",
    "configure_logging",
]
