from __future__ import annotations

import logging
from typing import Callable, Iterator, Sequence

import pytest

from arcade_queue.config.models import QueueConfig
from arcade_queue.queue.player_queue import PlayerQueue


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo ``configure_logging`` between tests so caplog keeps working."""

    yield
    logger = logging.getLogger("arcade_queue")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture(scope="session")
def default_queue_config() -> QueueConfig:
    return QueueConfig(game="trivia", players=2)


@pytest.fixture
def queue_factory() -> Callable[..., PlayerQueue]:
    def _factory(
        members: Sequence[str] = (),
        *,
        game: str = "test",
        players: int = 2,
        queue_id: int | None = None,
    ) -> PlayerQueue:
        queue = PlayerQueue(game, players, queue_id=queue_id)
        for member in members:
            queue.join(member)
        return queue

    return _factory


@pytest.fixture
def trivia_queue(queue_factory) -> PlayerQueue:
    return queue_factory(["alice", "bob", "carol"], game="trivia", players=2)
