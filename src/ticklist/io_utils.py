"""UTF-8 text-file helpers for the data file."""

from __future__ import annotations

from collections.abc import Iterable
from io import TextIOWrapper
from pathlib import Path
from typing import Any

PathLike = Path | str

ENCODING = "utf-8"


def as_path(path: PathLike) -> Path:
    return path if isinstance(path, Path) else Path(path)


def open_text(
    path: PathLike,
    mode: str = "r",
    *,
    encoding: str = ENCODING,
    errors: str = "strict",
    **kwargs: Any,
) -> TextIOWrapper:
    """Open *path* for text I/O with UTF-8 by default.

    ``newline=""`` is not passed, so universal newlines apply when reading.
    """
    return open(as_path(path), mode, encoding=encoding, errors=errors, **kwargs)


def write_lines(path: PathLike, lines: Iterable[str]) -> None:
    """Overwrite *path* with one UTF-8 line per item, each ending in ``\\n``.

    Everything is encoded before the file is opened, so a line that cannot
    be encoded raises ``UnicodeEncodeError`` and leaves the old file intact.
    """
    data = "".join(f"{line}\n" for line in lines).encode(ENCODING)
    as_path(path).write_bytes(data)
