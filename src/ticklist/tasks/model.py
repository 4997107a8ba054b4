"""Task data model and the one-line record format used in the data file.

A record is ``<flag>|<text>`` where ``<flag>`` is ``1`` for a finished
task and ``0`` otherwise. Only the first ``|`` separates the flag, so
task text may itself contain ``|``.
"""

from __future__ import annotations

from dataclasses import dataclass

DONE_FLAG = "1"
OPEN_FLAG = "0"
SEPARATOR = "|"


@dataclass
class Task:
    text: str
    done: bool = False

    @property
    def marker(self) -> str:
        return "[x]" if self.done else "[ ]"

    def __str__(self) -> str:
        return f"{self.marker} {self.text}"


@dataclass(frozen=True)
class ParsedRecord:
    """A record with a flag and a separator."""

    task: Task


@dataclass(frozen=True)
class MalformedRecord:
    """A line with no separator; kept as an unfinished task."""

    raw: str

    @property
    def task(self) -> Task:
        return Task(text=self.raw)


RecordParse = ParsedRecord | MalformedRecord


def _flatten(text: str) -> str:
    return text.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")


def serialize(task: Task) -> str:
    """Render *task* as a single record line (without a line terminator)."""
    flag = DONE_FLAG if task.done else OPEN_FLAG
    return f"{flag}{SEPARATOR}{_flatten(task.text)}"


def parse_record(line: str) -> RecordParse:
    """Parse one record line. Never raises.

    Any flag other than exactly ``"1"`` reads as not done. A line without
    a separator becomes a :class:`MalformedRecord` holding the whole line.
    """
    flag, sep, text = line.partition(SEPARATOR)
    if not sep:
        return MalformedRecord(raw=line)
    return ParsedRecord(task=Task(text=text, done=flag == DONE_FLAG))
