"""Configuration defaults, env vars, and runtime options for ticklist."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_DATA_FILE = "tasks.txt"
DEFAULT_PROMPT = "> "

DATA_FILE_ENV = "TICKLIST_FILE"


@dataclass
class Config:
    """Runtime configuration — mirrors the CLI options."""

    # Persistence; empty means "TICKLIST_FILE, else tasks.txt"
    data_file: str = ""

    # Interactive session
    prompt: str = DEFAULT_PROMPT

    # Misc
    verbose: bool = False

    def __post_init__(self) -> None:
        if not self.data_file:
            self.data_file = os.environ.get(DATA_FILE_ENV) or DEFAULT_DATA_FILE

    @property
    def data_path(self) -> Path:
        """Data file path; relative paths resolve against the working directory."""
        return Path(self.data_file).expanduser()
