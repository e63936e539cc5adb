"""Line-oriented command interface for one queue.

``ConsoleInterface`` is intentionally thin: it parses one command per line,
calls the matching :class:`PlayerQueue` operation and answers with a single
line of text. Queue errors become replies so a typo or a duplicate join never
ends the session.
"""
from __future__ import annotations

import logging
import sys
from typing import Callable, Dict, Sequence, TextIO

from arcade_queue.core.errors import QueueError
from arcade_queue.queue.player_queue import SEPARATOR, PlayerQueue

LOGGER = logging.getLogger(__name__)

EMPTY_REPLY = "queue is empty"

Handler = Callable[[Sequence[str]], str]


class ConsoleInterface:
    """Dispatch text commands to a :class:`PlayerQueue`."""

    def __init__(
        self,
        queue: PlayerQueue,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._queue = queue
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._logger = logger or LOGGER
        self._running = False
        self._handlers: Dict[str, Handler] = {}
        self._usage: Dict[str, str] = {}
        self._register_handlers()

    @property
    def running(self) -> bool:
        return self._running

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def run(self) -> None:
        """Read commands until ``quit`` or end of input."""

        self._running = True
        self._logger.info("Console session started", extra={"game": self._queue.game})
        for line in self._stdin:
            reply = self.handle(line)
            if reply:
                self._reply(reply)
            if not self._running:
                break
        self._running = False
        self._logger.info("Console session finished", extra={"queue_size": len(self._queue)})

    def handle(self, line: str) -> str:
        """Execute one command line and return the reply text."""

        parts = line.split()
        if not parts:
            return ""
        command, args = parts[0].lower(), parts[1:]
        handler = self._handlers.get(command)
        if handler is None:
            return f"Unknown command: {command} (try `help`)"
        try:
            return handler(args)
        except QueueError as exc:
            self._logger.info("Command rejected", extra={"command": command, "reason": str(exc)})
            return str(exc)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------
    def _register_handlers(self) -> None:
        self._add("join", self._cmd_join, "join <player>")
        self._add("leave", self._cmd_leave, "leave <player>")
        self._add("next", self._cmd_next, "next")
        self._add("next_to_back", self._cmd_next_to_back, "next_to_back")
        self._add("group", self._cmd_group, "group")
        self._add("group_to_back", self._cmd_group_to_back, "group_to_back")
        self._add("show", self._cmd_show, "show")
        self._add("status", self._cmd_show, "status")
        self._add("help", self._cmd_help, "help")
        self._add("quit", self._cmd_quit, "quit")
        self._add("exit", self._cmd_quit, "exit")

    def _add(self, command: str, handler: Handler, usage: str) -> None:
        self._handlers[command] = handler
        self._usage[command] = usage

    def _cmd_join(self, args: Sequence[str]) -> str:
        if len(args) != 1:
            return f"Usage: {self._usage['join']}"
        self._queue.join(args[0])
        return f"{args[0]} joined"

    def _cmd_leave(self, args: Sequence[str]) -> str:
        if len(args) != 1:
            return f"Usage: {self._usage['leave']}"
        self._queue.leave(args[0])
        return f"{args[0]} left"

    def _cmd_next(self, _: Sequence[str]) -> str:
        return self._queue.advance() or EMPTY_REPLY

    def _cmd_next_to_back(self, _: Sequence[str]) -> str:
        return self._queue.advance_to_back() or EMPTY_REPLY

    def _cmd_group(self, _: Sequence[str]) -> str:
        return SEPARATOR.join(self._queue.next_group()) or EMPTY_REPLY

    def _cmd_group_to_back(self, _: Sequence[str]) -> str:
        return SEPARATOR.join(self._queue.next_group_to_back()) or EMPTY_REPLY

    def _cmd_show(self, _: Sequence[str]) -> str:
        return str(self._queue)

    def _cmd_help(self, _: Sequence[str]) -> str:
        return "Commands: " + " | ".join(self._usage.values())

    def _cmd_quit(self, _: Sequence[str]) -> str:
        self._running = False
        return "bye"

    def _reply(self, text: str) -> None:
        self._stdout.write(text + "\n")
        self._stdout.flush()


__all__ = ["ConsoleInterface", "EMPTY_REPLY"]
