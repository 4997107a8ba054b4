"""Error types shared by the store, the command loop and the file layer.

Command errors carry the exact line shown to the user, so the loop can
print ``str(exc)`` and carry on.
"""

from __future__ import annotations

INVALID_NUMBER_MESSAGE = "Invalid number format."
OUT_OF_RANGE_MESSAGE = "Invalid task number."


class TicklistError(Exception):
    """Base class for every error raised by ticklist."""


class CommandError(TicklistError):
    """A bad command line. Recovered locally; never ends the session."""


class MissingArgument(CommandError):
    def __init__(self, command: str) -> None:
        super().__init__(f"Usage: {command} <task number>")
        self.command = command


class InvalidNumber(CommandError):
    def __init__(self, raw: str) -> None:
        super().__init__(INVALID_NUMBER_MESSAGE)
        self.raw = raw


class OutOfRange(CommandError):
    def __init__(self, index: int, count: int) -> None:
        super().__init__(OUT_OF_RANGE_MESSAGE)
        self.index = index
        self.count = count


class PersistenceError(TicklistError):
    """Reading or writing the data file failed."""

    def __init__(self, action: str, path: str, reason: str) -> None:
        super().__init__(f"Failed to {action} tasks: {reason}")
        self.action = action
        self.path = path
        self.reason = reason
