"""ticklist — a small interactive task list backed by a flat text file."""

__version__ = "1.0.0"
