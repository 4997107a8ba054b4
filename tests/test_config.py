"""Tests for ticklist.config.Config defaults and data file resolution."""

from __future__ import annotations

from pathlib import Path

from ticklist.config import DATA_FILE_ENV, DEFAULT_DATA_FILE, DEFAULT_PROMPT, Config


def test_default_data_file():
    """Without option or env var the data file is tasks.txt."""
    cfg = Config()
    assert cfg.data_file == DEFAULT_DATA_FILE == "tasks.txt"
    assert cfg.data_path == Path("tasks.txt")


def test_env_var_overrides_default(monkeypatch, tmp_path):
    target = tmp_path / "mine.txt"
    monkeypatch.setenv(DATA_FILE_ENV, str(target))
    assert Config().data_path == target


def test_explicit_file_beats_env_var(monkeypatch, tmp_path):
    monkeypatch.setenv(DATA_FILE_ENV, str(tmp_path / "env.txt"))
    cfg = Config(data_file=str(tmp_path / "cli.txt"))
    assert cfg.data_path == tmp_path / "cli.txt"


def test_empty_env_var_falls_back_to_default(monkeypatch):
    monkeypatch.setenv(DATA_FILE_ENV, "")
    assert Config().data_file == DEFAULT_DATA_FILE


def test_defaults_for_session():
    cfg = Config()
    assert cfg.prompt == DEFAULT_PROMPT == "> "
    assert cfg.verbose is False
