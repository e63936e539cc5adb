"""Configuration loading and validation package."""

from .loader import load_app_config, load_queue_config
from .models import AppConfig, LoggingConfig, QueueConfig

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "QueueConfig",
    "load_app_config",
    "load_queue_config",
]
