"""In-memory ordered task collection."""

from __future__ import annotations

from collections.abc import Iterable

from rich.markup import escape

from ticklist import log
from ticklist.errors import OutOfRange
from ticklist.tasks.model import MalformedRecord, Task, parse_record, serialize


class TaskStore:
    """Ordered list of tasks addressed by 1-based position.

    Position is the only identity a task has: removing a task shifts
    everything after it down by one.

    Usage::

        store = TaskStore()
        store.add("Buy milk")
        store.mark_done(1)
        store.remove(1)
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(tasks)

    @property
    def count(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> list[Task]:
        """Shallow copy of the tasks in order."""
        return list(self._tasks)

    # ── mutation ─────────────────────────────────────────────────

    def add(self, text: str) -> Task:
        task = Task(text=text)
        self._tasks.append(task)
        return task

    def mark_done(self, index: int) -> Task:
        task = self._tasks[self._position(index)]
        task.done = True
        return task

    def remove(self, index: int) -> Task:
        return self._tasks.pop(self._position(index))

    def _position(self, index: int) -> int:
        if index < 1 or index > len(self._tasks):
            raise OutOfRange(index, len(self._tasks))
        return index - 1

    # ── views ────────────────────────────────────────────────────

    def list(self) -> list[tuple[int, Task]]:
        return list(enumerate(self._tasks, start=1))

    # ── records ──────────────────────────────────────────────────

    def serialize_all(self) -> list[str]:
        return [serialize(t) for t in self._tasks]

    def load_from(self, lines: Iterable[str]) -> int:
        """Append one task per non-blank line; return how many were added.

        Existing tasks are kept. Tasks are appended as each line is read,
        so a failing iterator leaves everything parsed so far in place.
        """
        added = 0
        for line in lines:
            line = line.rstrip("\r\n")
            if not line.strip():
                continue
            result = parse_record(line)
            if isinstance(result, MalformedRecord):
                log.debug(f"Record without separator kept as open task: {escape(repr(result.raw))}")
            self._tasks.append(result.task)
            added += 1
        return added
