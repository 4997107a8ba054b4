"""Line-oriented command loop over a :class:`TaskStore`.

One line is read, parsed and fully answered before the next is read.
Bad input is answered with a message and never ends the session; only
``exit`` or end of input does. Saving is left to the caller.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from enum import Enum
from typing import IO

from rich.console import Console
from rich.markup import escape

from ticklist import log
from ticklist.config import DEFAULT_PROMPT
from ticklist.errors import CommandError, InvalidNumber, MissingArgument, OutOfRange
from ticklist.tasks.store import TaskStore

EMPTY_LIST_MESSAGE = "No tasks. Add one with: add Buy groceries"
ADD_USAGE = "Usage: add <task description>"
UNKNOWN_COMMAND_MESSAGE = "Unknown command. Type 'help' to see commands."

HELP_ENTRIES: tuple[tuple[str, str], ...] = (
    ("list", "show all tasks"),
    ("add <desc>", "add new task"),
    ("done <num>", "mark task as done"),
    ("remove <num>", "remove task"),
    ("help", "show this help"),
    ("exit", "save and exit"),
)

MUTATING_COMMANDS = frozenset({"add", "done", "remove"})

# Optional sign then decimal digits (any script); no spaces or underscores.
_INTEGER_RE = re.compile(r"[+-]?\d+")

# Task numbers are 32-bit signed; anything wider is not a number.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

Handler = Callable[[str, str], None]


class LoopState(str, Enum):
    AWAITING_COMMAND = "awaiting_command"
    EXITING = "exiting"


def parse_command(line: str) -> tuple[str, str] | None:
    """Split *line* into a lower-cased command and its trimmed argument.

    Returns ``None`` for a blank line.
    """
    parts = line.strip().split(None, 1)
    if not parts:
        return None
    command = parts[0].lower()
    argument = parts[1].strip() if len(parts) > 1 else ""
    return command, argument


def parse_index(command: str, argument: str, count: int) -> int:
    """Turn a user-supplied task number into a 0-based index.

    Raises :class:`MissingArgument`, :class:`InvalidNumber` or
    :class:`OutOfRange` (for a store holding *count* tasks).
    """
    if not argument:
        raise MissingArgument(command)
    if not _INTEGER_RE.fullmatch(argument):
        raise InvalidNumber(argument)
    n = int(argument)
    if n < INT_MIN or n > INT_MAX:
        raise InvalidNumber(argument)
    if n < 1 or n > count:
        raise OutOfRange(n, count)
    return n - 1


def format_help() -> list[str]:
    width = max(len(usage) for usage, _ in HELP_ENTRIES) + 8
    lines = ["Commands:"]
    for usage, description in HELP_ENTRIES:
        lines.append(f"  {usage:<{width}} - {description}")
    return lines


class CommandLoop:
    """Read-dispatch-answer loop.

    Usage::

        loop = CommandLoop(store, stdin=sys.stdin, console=Console())
        loop.run()                  # until "exit" or end of input
        loop.execute("add Buy milk")  # or drive it one line at a time
    """

    def __init__(
        self,
        store: TaskStore,
        *,
        stdin: IO[str],
        console: Console,
        prompt: str = DEFAULT_PROMPT,
    ) -> None:
        self._store = store
        self._stdin = stdin
        self._console = console
        self._prompt = prompt
        self._state = LoopState.AWAITING_COMMAND
        self._handlers: dict[str, Handler] = {
            "list": self._cmd_list,
            "add": self._cmd_add,
            "done": self._cmd_done,
            "remove": self._cmd_remove,
            "help": self._cmd_help,
            "exit": self._cmd_exit,
        }

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def store(self) -> TaskStore:
        return self._store

    # ── driving ──────────────────────────────────────────────────

    def run(self) -> None:
        while self._state is LoopState.AWAITING_COMMAND:
            self._say(self._prompt, end="")
            try:
                line = self._stdin.readline()
            except UnicodeDecodeError as exc:
                # Unreadable input ends the session like end of input.
                log.error(f"Could not read input: {escape(str(exc))}")
                line = ""
            if not line:
                # End of input counts as "exit"; finish the prompt line.
                log.debug("End of input")
                self._say("")
                self._state = LoopState.EXITING
                break
            self.execute(line)

    def execute(self, line: str) -> None:
        """Handle one input line."""
        parsed = parse_command(line)
        if parsed is None:
            return
        command, argument = parsed
        handler = self._handlers.get(command)
        if handler is None:
            log.debug(f"Unknown command {escape(repr(command))}")
            self._say(UNKNOWN_COMMAND_MESSAGE)
            return
        try:
            handler(command, argument)
        except CommandError as exc:
            log.debug(f"{type(exc).__name__} for {escape(repr(line.strip()))}")
            self._say(str(exc))

    # ── commands ─────────────────────────────────────────────────

    def _cmd_list(self, command: str, argument: str) -> None:
        entries = self._store.list()
        if not entries:
            self._say(EMPTY_LIST_MESSAGE)
            return
        for n, task in entries:
            self._say(f"{n}. {task}")

    def _cmd_add(self, command: str, argument: str) -> None:
        if not argument:
            self._say(ADD_USAGE)
            return
        task = self._store.add(argument)
        self._say(f"Added: {task.text}")

    def _cmd_done(self, command: str, argument: str) -> None:
        idx = parse_index(command, argument, self._store.count)
        task = self._store.mark_done(idx + 1)
        self._say(f"Marked done: {task.text}")

    def _cmd_remove(self, command: str, argument: str) -> None:
        idx = parse_index(command, argument, self._store.count)
        task = self._store.remove(idx + 1)
        self._say(f"Removed: {task.text}")

    def _cmd_help(self, command: str, argument: str) -> None:
        for line in format_help():
            self._say(line)

    def _cmd_exit(self, command: str, argument: str) -> None:
        self._state = LoopState.EXITING

    # ── output ───────────────────────────────────────────────────

    def _say(self, text: str, end: str = "\n") -> None:
        # Task text is user data: no markup, emoji codes or highlighting.
        self._console.print(
            text,
            end=end,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
