"""Tests for ticklist.errors — taxonomy and user-facing messages."""

from __future__ import annotations

import pytest

from ticklist.errors import (
    CommandError,
    InvalidNumber,
    MissingArgument,
    OutOfRange,
    PersistenceError,
    TicklistError,
)


class TestCommandErrors:
    """Command errors carry the exact line the loop prints."""

    @pytest.mark.parametrize(
        "exc, message",
        [
            (MissingArgument("done"), "Usage: done <task number>"),
            (InvalidNumber("abc"), "Invalid number format."),
            (OutOfRange(5, 1), "Invalid task number."),
        ],
    )
    def test_messages(self, exc, message):
        assert isinstance(exc, CommandError)
        assert str(exc) == message

    def test_details_are_kept(self):
        exc = OutOfRange(5, 1)
        assert (exc.index, exc.count) == (5, 1)
        assert InvalidNumber("abc").raw == "abc"
        assert MissingArgument("remove").command == "remove"


class TestPersistenceError:
    def test_message_and_fields(self):
        exc = PersistenceError("save", "tasks.txt", "disk full")
        assert str(exc) == "Failed to save tasks: disk full"
        assert exc.path == "tasks.txt"

    def test_is_not_a_command_error(self):
        exc = PersistenceError("load", "tasks.txt", "nope")
        assert isinstance(exc, TicklistError)
        assert not isinstance(exc, CommandError)
