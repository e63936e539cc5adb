"""YAML loaders for the config subsystem.

Each helper here consumes one YAML file, validates it via models.py and
returns typed objects to the caller.
"""
from __future__ import annotations

from pathlib import Path
from typing import Mapping

import yaml

from arcade_queue.core.errors import ConfigurationError

from .models import AppConfig, QueueConfig

_DEFAULT_CONFIG_PATH = Path("config") / "queue.yml"


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        try:
            data = yaml.safe_load(fp) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ValueError(f"YAML root must be a mapping in {path}")
    return data


def load_app_config(path: Path | str = _DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load the whole runtime config (``queue`` and ``logging`` sections).

    Both sections are optional; missing ones fall back to model defaults.
    """

    data = _read_yaml(Path(path))
    return AppConfig.model_validate(data)


def load_queue_config(path: Path | str = _DEFAULT_CONFIG_PATH) -> QueueConfig:
    """Load only the ``queue`` section of the config file."""

    data = _read_yaml(Path(path))
    raw_queue = data.get("queue", {})
    if not isinstance(raw_queue, Mapping):
        raise TypeError("`queue` must be a mapping")
    return QueueConfig.model_validate(raw_queue)
