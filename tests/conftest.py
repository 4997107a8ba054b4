"""Shared fixtures for ticklist tests.

File handling in tests:
- Use tmp_path for every data file so tests are isolated and cleaned up.
- Loop output goes to an in-memory Rich console; read it with ``.getvalue()``.
"""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from ticklist import log
from ticklist.commands import CommandLoop
from ticklist.tasks.model import Task
from ticklist.tasks.store import TaskStore


@pytest.fixture(autouse=True)
def _quiet_log():
    """Verbosity is module state; reset it around every test."""
    log.set_verbose(False)
    yield
    log.set_verbose(False)


@pytest.fixture(autouse=True)
def _no_data_file_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TICKLIST_FILE", raising=False)


def _make_task(text: str = "Task", done: bool = False) -> Task:
    return Task(text=text, done=done)


def _make_store(*texts: str, done: tuple[int, ...] = ()) -> TaskStore:
    """Build a store from texts; *done* holds 1-based positions to finish."""
    store = TaskStore()
    for text in texts:
        store.add(text)
    for n in done:
        store.mark_done(n)
    return store


@pytest.fixture
def make_task():
    """Factory fixture that creates Task instances."""
    return _make_task


@pytest.fixture
def make_store():
    """Factory fixture that creates populated TaskStore instances."""
    return _make_store


def _plain_console(buf: io.StringIO) -> Console:
    return Console(file=buf, width=200, highlight=False, color_system=None)


@pytest.fixture
def make_loop():
    """Factory: ``make_loop(store, input_text)`` -> ``(loop, output_buffer)``."""

    def _make(store: TaskStore | None = None, input_text: str = "") -> tuple[CommandLoop, io.StringIO]:
        buf = io.StringIO()
        loop = CommandLoop(
            store if store is not None else TaskStore(),
            stdin=io.StringIO(input_text),
            console=_plain_console(buf),
        )
        return loop, buf

    return _make
