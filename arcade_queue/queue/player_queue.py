"""Single-game player rotation queue.

``PlayerQueue`` keeps players in join order and hands them out one at a time
or in groups of ``players`` per round. The ``*_to_back`` variants put the
released players straight back at the tail so the same line keeps cycling,
which is how round-robin game sessions are run.

Example::

    queue = PlayerQueue("trivia", 2)
    for player in ("alice", "bob", "carol"):
        queue.join(player)
    queue.next_group_to_back()   # ["alice", "bob"]
    str(queue)                   # "trivia (2 player(s) each round): carol, alice, bob"
"""
from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Iterator, List, Optional

from arcade_queue.core.enums import QueueEventType
from arcade_queue.core.errors import DuplicatePlayerError, InvalidGroupSizeError, InvalidQueueIdError
from arcade_queue.core.types import QueueId
from arcade_queue.queue.models import QueueKey, QueueSnapshot
from arcade_queue.telemetry.events import QueueEvent

LOGGER = logging.getLogger(__name__)

SEPARATOR = ", "


class PlayerQueue:
    """FIFO line of players for one game.

    ``game`` is a display label and ``players`` the number of players released
    per round. Both are fixed at construction. An optional ``queue_id`` gives
    the queue an explicit :class:`QueueKey`; ``==`` keeps its default identity
    semantics, use :meth:`same_queue` to compare keyed queues.
    """

    def __init__(self, game: str, players: int, *, queue_id: QueueId | None = None) -> None:
        if not _is_int(players) or players < 1:
            raise InvalidGroupSizeError(players)
        if queue_id is not None and (not _is_int(queue_id) or queue_id < 0):
            raise InvalidQueueIdError(queue_id)
        self._game = game
        self._players = players
        self._queue_id = queue_id
        self._queue: Deque[str] = deque()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def game(self) -> str:
        return self._game

    @property
    def players(self) -> int:
        return self._players

    @property
    def queue_id(self) -> QueueId | None:
        return self._queue_id

    @property
    def key(self) -> QueueKey | None:
        if self._queue_id is None:
            return None
        return QueueKey(self._queue_id)

    @property
    def is_empty(self) -> bool:
        return not self._queue

    def same_queue(self, other: "PlayerQueue") -> bool:
        """Return ``True`` if ``other`` is the same logical queue.

        Keyed queues match on key alone, regardless of contents. Queues
        without an id only match themselves.
        """

        if self.key is not None and other.key is not None:
            return self.key == other.key
        return self is other

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------
    def join(self, player: str) -> None:
        """Add ``player`` to the end of the queue.

        Raises :class:`DuplicatePlayerError` if the player is already waiting;
        the queue is left unchanged in that case.
        """

        if player in self._queue:
            self._emit(QueueEventType.JOIN_REJECTED, (player,))
            raise DuplicatePlayerError(player)
        self._queue.append(player)
        self._emit(QueueEventType.JOINED, (player,))

    def leave(self, player: str) -> None:
        """Remove every occurrence of ``player``. Absent players are ignored."""

        before = len(self._queue)
        self._queue = deque(p for p in self._queue if p != player)
        if len(self._queue) != before:
            self._emit(QueueEventType.LEFT, (player,))

    quit = leave

    # ------------------------------------------------------------------
    # Single-player rounds
    # ------------------------------------------------------------------
    def advance(self) -> Optional[str]:
        """Remove and return the longest-waiting player, ``None`` if empty."""

        player = self._pop_front()
        if player is not None:
            self._emit(QueueEventType.ADVANCED, (player,))
        return player

    nextone = advance

    def advance_to_back(self) -> Optional[str]:
        """Move the head player to the tail and return them, ``None`` if empty."""

        player = self._rotate_one()
        if player is not None:
            self._emit(QueueEventType.ROTATED, (player,))
        return player

    nextone_to_back = advance_to_back

    # ------------------------------------------------------------------
    # Group rounds
    # ------------------------------------------------------------------
    def next_group(self) -> List[str]:
        """Release up to ``players`` players from the head of the queue.

        Returns fewer players, possibly none, when the queue runs out.
        """

        group: List[str] = []
        for _ in range(self._players):
            player = self._pop_front()
            if player is None:
                break
            group.append(player)
        if group:
            self._emit(QueueEventType.GROUP_RELEASED, tuple(group))
        return group

    def next_group_to_back(self) -> List[str]:
        """Release the next group and send it, in order, to the tail.

        Each member is rotated at most once per call, so a queue shorter than
        ``players`` ends up in its original order.
        """

        group: List[str] = []
        for _ in range(min(self._players, len(self._queue))):
            player = self._rotate_one()
            if player is None:
                break
            group.append(player)
        if group:
            self._emit(QueueEventType.GROUP_ROTATED, tuple(group))
        return group

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    def get_queue(self) -> List[str]:
        """Return a copy of the waiting players, head first."""

        return list(self._queue)

    def peek(self, count: int | None = None) -> List[str]:
        """Return up to ``count`` players from the head without removing them."""

        if count is None:
            count = self._players
        return [self._queue[i] for i in range(min(max(count, 0), len(self._queue)))]

    def snapshot(self) -> QueueSnapshot:
        return QueueSnapshot(
            game=self._game,
            players=self._players,
            members=tuple(self._queue),
            queue_id=self._queue_id,
        )

    def format_queue(self) -> str:
        """Return the waiting players separated by ``", "``."""

        return SEPARATOR.join(self._queue)

    def __str__(self) -> str:
        return f"{self._game} ({self._players} player(s) each round): {self.format_queue()}"

    def __repr__(self) -> str:
        return (
            f"PlayerQueue(game={self._game!r}, players={self._players}, "
            f"queue_id={self._queue_id!r}, members={list(self._queue)!r})"
        )

    def __len__(self) -> int:
        return len(self._queue)

    def __contains__(self, player: object) -> bool:
        return player in self._queue

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._queue))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _pop_front(self) -> Optional[str]:
        if not self._queue:
            return None
        return self._queue.popleft()

    def _push_back(self, player: str) -> None:
        # Unchecked append: rotation re-adds a player that was just popped.
        self._queue.append(player)

    def _rotate_one(self) -> Optional[str]:
        player = self._pop_front()
        if player is not None:
            self._push_back(player)
        return player

    def _emit(self, event_type: QueueEventType, players: tuple[str, ...]) -> None:
        if not LOGGER.isEnabledFor(logging.DEBUG):
            return
        event = QueueEvent(
            event_type=event_type,
            game=self._game,
            players=players,
            queue_size=len(self._queue),
            queue_id=self._queue_id,
        )
        LOGGER.debug("Queue %s", event_type.value, extra=event.to_dict())


def _is_int(value: object) -> bool:
    # bool is an int subclass but never a valid count or id
    return isinstance(value, int) and not isinstance(value, bool)


__all__ = ["PlayerQueue", "SEPARATOR"]
