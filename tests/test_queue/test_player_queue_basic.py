from __future__ import annotations

import pytest

from arcade_queue.core.errors import DuplicatePlayerError, InvalidGroupSizeError, InvalidQueueIdError
from arcade_queue.queue.player_queue import PlayerQueue


def test_new_queue_should_be_empty() -> None:
    queue = PlayerQueue("", 1)
    assert queue.get_queue() == []
    assert queue.is_empty
    assert len(queue) == 0


@pytest.mark.parametrize("players", [0, -1])
def test_new_queue_should_reject_group_size_below_one(players: int) -> None:
    with pytest.raises(InvalidGroupSizeError):
        PlayerQueue("", players)


@pytest.mark.parametrize("players", [2.5, True, "2", None])
def test_new_queue_should_reject_non_integer_group_size(players: object) -> None:
    with pytest.raises(InvalidGroupSizeError) as excinfo:
        PlayerQueue("", players)  # type: ignore[arg-type]
    assert excinfo.value.players == players


@pytest.mark.parametrize("queue_id", [-1, 1.5, True, "7"])
def test_new_queue_should_reject_invalid_queue_id(queue_id: object) -> None:
    with pytest.raises(InvalidQueueIdError):
        PlayerQueue("", 1, queue_id=queue_id)  # type: ignore[arg-type]


def test_new_queue_should_accept_zero_queue_id() -> None:
    queue = PlayerQueue("", 1, queue_id=0)
    assert queue.queue_id == 0
    assert queue.key is not None


@pytest.mark.parametrize("players", [1, 2, 5, 255])
def test_new_queue_should_accept_positive_group_size(players: int) -> None:
    queue = PlayerQueue("game", players)
    assert queue.players == players
    assert queue.game == "game"
    assert queue.get_queue() == []


def test_join_should_append_in_fifo_order(queue_factory) -> None:
    queue = queue_factory(["p1", "p2", "p3", "p4"])
    assert queue.get_queue() == ["p1", "p2", "p3", "p4"]


def test_join_should_reject_duplicate_and_keep_queue(queue_factory) -> None:
    queue = queue_factory(["a", "b"])
    with pytest.raises(DuplicatePlayerError) as excinfo:
        queue.join("a")
    assert excinfo.value.player == "a"
    assert queue.get_queue() == ["a", "b"]


def test_join_should_accept_player_again_after_leave(queue_factory) -> None:
    queue = queue_factory(["a", "b"])
    queue.leave("a")
    queue.join("a")
    assert queue.get_queue() == ["b", "a"]


def test_leave_should_remove_player_and_keep_order(queue_factory) -> None:
    queue = queue_factory(["player1", "player2", "player3"])
    queue.leave("player2")
    assert queue.get_queue() == ["player1", "player3"]


def test_leave_should_ignore_absent_player(queue_factory) -> None:
    queue = queue_factory(["player1"])
    queue.leave("ghost")
    assert queue.get_queue() == ["player1"]
    PlayerQueue("", 1).leave("ghost")


def test_quit_is_alias_of_leave(queue_factory) -> None:
    queue = queue_factory(["player1", "player2"])
    queue.quit("player2")
    assert queue.get_queue() == ["player1"]


def test_advance_should_drain_head_first(queue_factory) -> None:
    queue = queue_factory(["p1", "p2", "p3"])
    assert [queue.advance(), queue.advance(), queue.advance()] == ["p1", "p2", "p3"]
    assert queue.advance() is None
    assert queue.advance() is None
    assert queue.get_queue() == []


def test_nextone_is_alias_of_advance(queue_factory) -> None:
    queue = queue_factory(["player"])
    assert queue.nextone() == "player"
    assert queue.nextone() is None


def test_get_queue_should_return_independent_copy(queue_factory) -> None:
    queue = queue_factory(["a", "b"])
    snapshot = queue.get_queue()
    snapshot.append("intruder")
    queue.join("c")
    assert snapshot == ["a", "b", "intruder"]
    assert queue.get_queue() == ["a", "b", "c"]


def test_format_queue_should_join_with_comma_space(queue_factory) -> None:
    assert queue_factory(["x", "y"]).format_queue() == "x, y"
    assert queue_factory(["solo"]).format_queue() == "solo"
    assert queue_factory([]).format_queue() == ""


def test_str_should_render_display_line(queue_factory) -> None:
    queue = queue_factory(["player1", "player2"], game="test", players=2)
    assert str(queue) == "test (2 player(s) each round): player1, player2"


def test_str_should_render_empty_queue() -> None:
    assert str(PlayerQueue("", 1)) == " (1 player(s) each round): "


def test_container_helpers(queue_factory) -> None:
    queue = queue_factory(["a", "b", "c"])
    assert "b" in queue
    assert "z" not in queue
    assert list(queue) == ["a", "b", "c"]
    assert len(queue) == 3


def test_peek_should_not_remove_players(queue_factory) -> None:
    queue = queue_factory(["a", "b", "c"], players=2)
    assert queue.peek() == ["a", "b"]
    assert queue.peek(5) == ["a", "b", "c"]
    assert queue.peek(0) == []
    assert queue.get_queue() == ["a", "b", "c"]
