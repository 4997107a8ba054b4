"""Tests for ticklist.log — prefixes, streams, and the verbose switch."""

from __future__ import annotations

from ticklist import log


def test_debug_hidden_by_default(capsys):
    log.debug("quiet")
    captured = capsys.readouterr()
    assert "quiet" not in captured.out + captured.err


def test_debug_shown_when_verbose(capsys):
    log.set_verbose(True)
    log.debug("loud")
    assert "[DEBUG] loud" in capsys.readouterr().err


def test_error_goes_to_stderr(capsys):
    log.error("Failed to save tasks: disk full")
    captured = capsys.readouterr()
    assert "[ERROR] Failed to save tasks: disk full" in captured.err
    assert captured.out == ""


def test_warn_goes_to_stderr(capsys):
    log.warn("Interrupted!")
    assert "[WARN] Interrupted!" in capsys.readouterr().err


def test_success_goes_to_stdout(capsys):
    log.success("Saved 2 task(s)")
    captured = capsys.readouterr()
    assert "[OK] Saved 2 task(s)" in captured.out
    assert captured.err == ""
