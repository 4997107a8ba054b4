"""Task model, record format and in-memory store."""

from ticklist.tasks.model import MalformedRecord, ParsedRecord, Task, parse_record, serialize
from ticklist.tasks.store import TaskStore

__all__ = [
    "MalformedRecord",
    "ParsedRecord",
    "Task",
    "TaskStore",
    "parse_record",
    "serialize",
]
