from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from arcade_queue.config.loader import load_app_config
from arcade_queue.config.models import AppConfig, LoggingConfig, QueueConfig
from arcade_queue.core.errors import ConfigurationError, QueueError
from arcade_queue.interfaces import ConsoleInterface
from arcade_queue.telemetry import configure_logging

EXIT_CONFIG_ERROR = 2


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        config = _resolve_config(args)
        queue = config.queue.build_queue()
    except (ConfigurationError, QueueError, ValidationError, FileNotFoundError, ValueError) as exc:
        print(f"arcade-queue: configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    log_dir = Path(config.logging.log_dir) if config.logging.log_dir else None
    try:
        logger = configure_logging(level=config.logging.level, log_dir=log_dir)
    except OSError as exc:
        print(f"arcade-queue: configuration error: cannot use log directory {log_dir}: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    logger.info(
        "Queue ready",
        extra={"game": queue.game, "players": queue.players, "queue_id": queue.queue_id},
    )

    console = ConsoleInterface(queue, logger=logger.getChild("console"))
    try:
        console.run()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    finally:
        logger.info("Shutdown complete", extra={"remaining": queue.get_queue()})
    return 0


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="arcade-queue",
        description="Run a player rotation queue for one game from the console.",
    )
    parser.add_argument("--config", type=Path, help="YAML file with `queue` and `logging` sections")
    parser.add_argument("--game", help="display name of the game")
    parser.add_argument("--players", type=int, help="players released per round")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ...")
    parser.add_argument("--log-dir", help="directory for the JSON log file")
    return parser.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> AppConfig:
    """Load YAML when given, then apply command-line overrides on top."""

    config = load_app_config(args.config) if args.config else AppConfig()

    queue_changes = {
        key: value
        for key, value in (("game", args.game), ("players", args.players))
        if value is not None
    }
    logging_changes = {
        key: value
        for key, value in (("level", args.log_level), ("log_dir", args.log_dir))
        if value is not None
    }
    if not queue_changes and not logging_changes:
        return config
    return AppConfig(
        queue=QueueConfig.model_validate({**config.queue.model_dump(), **queue_changes}),
        logging=LoggingConfig.model_validate({**config.logging.model_dump(), **logging_changes}),
    )


if __name__ == "__main__":
    sys.exit(main())
