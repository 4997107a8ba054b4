"""Load and save the task store to its data file.

The whole file is read on load and rewritten on save; there is no
atomic rename or backup. Failures surface as :class:`PersistenceError`
so the caller decides how to report them.
"""

from __future__ import annotations

from rich.markup import escape

from ticklist import log
from ticklist.errors import PersistenceError
from ticklist.io_utils import PathLike, as_path, open_text, write_lines
from ticklist.tasks.store import TaskStore


def load_tasks(store: TaskStore, path: PathLike) -> int:
    """Append the records in *path* to *store*; return the number loaded.

    A missing file is not an error. On a read failure the tasks parsed
    before the failure stay in *store*.
    """
    p = as_path(path)
    try:
        with open_text(p) as fh:
            loaded = store.load_from(fh)
    except FileNotFoundError:
        log.debug(f"No data file at {escape(str(p))}; starting empty")
        return 0
    except (OSError, UnicodeDecodeError) as exc:
        raise PersistenceError("load", str(p), str(exc)) from exc
    log.debug(f"Loaded {loaded} task(s) from {escape(str(p))}")
    return loaded


def save_tasks(store: TaskStore, path: PathLike) -> int:
    """Overwrite *path* with every task in *store*; return the number saved."""
    p = as_path(path)
    records = store.serialize_all()
    try:
        write_lines(p, records)
    except (OSError, UnicodeError) as exc:
        raise PersistenceError("save", str(p), str(exc)) from exc
    log.debug(f"Saved {len(records)} task(s) to {escape(str(p))}")
    return len(records)
