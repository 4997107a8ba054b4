"""ticklist CLI.

Installed as ``ticklist`` console_script. Without a subcommand it opens
the interactive session; ``list``/``add``/``done``/``remove`` run a
single command against the data file and exit.
"""

from __future__ import annotations

import io
import sys
from typing import TextIO

import click
from rich.console import Console
from rich.markup import escape

from ticklist import __version__
from ticklist import log as tlog
from ticklist.commands import MUTATING_COMMANDS, CommandLoop
from ticklist.config import DATA_FILE_ENV, Config
from ticklist.errors import PersistenceError
from ticklist.storage import load_tasks, save_tasks
from ticklist.tasks.store import TaskStore

WELCOME_MESSAGE = "Welcome to ticklist. Type 'help' for commands."
GOODBYE_MESSAGE = "Goodbye!"

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


# ── Persistence boundary ─────────────────────────────────────────────


def _load(store: TaskStore, cfg: Config) -> None:
    try:
        load_tasks(store, cfg.data_path)
    except PersistenceError as exc:
        tlog.error(escape(str(exc)))


def _save(store: TaskStore, cfg: Config) -> int | None:
    """Save and return the task count, or None after reporting a failure."""
    try:
        return save_tasks(store, cfg.data_path)
    except PersistenceError as exc:
        tlog.error(escape(str(exc)))
        return None


def _tolerant_stdin() -> TextIO:
    """stdin with undecodable bytes replaced instead of raising."""
    stream = sys.stdin
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(errors="replace")
    return stream


def _new_loop(store: TaskStore, cfg: Config) -> CommandLoop:
    return CommandLoop(
        store,
        stdin=_tolerant_stdin(),
        console=Console(highlight=False),
        prompt=cfg.prompt,
    )


# ── Main group ───────────────────────────────────────────────────────


@click.group(
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.option(
    "-f",
    "--file",
    "data_file",
    default="",
    metavar="PATH",
    help=f"Task file (default: ${DATA_FILE_ENV} or tasks.txt)",
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug output")
@click.version_option(__version__, prog_name="ticklist")
@click.pass_context
def main(ctx: click.Context, data_file: str, verbose: bool) -> None:
    """ticklist — a to-do list in your terminal.

    Tasks live in a plain text file, one per line. Run with no command
    for an interactive session; changes are saved when you type exit.

    \b
    EXAMPLES:
      ticklist                        # Interactive session on ./tasks.txt
      ticklist -f ~/todo.txt          # Use another file
      ticklist add Buy milk           # Add one task and exit
      ticklist done 1                 # Mark task 1 done
      ticklist list                   # Print the list

    \b
    INTERACTIVE COMMANDS:
      list, add <desc>, done <num>, remove <num>, help, exit
    """
    tlog.set_verbose(verbose)

    cfg = Config(data_file=data_file, verbose=verbose)
    ctx.obj = cfg

    # ── If a subcommand was invoked, it runs on its own ──────────
    if ctx.invoked_subcommand is not None:
        return

    _run_session(cfg)


def _run_session(cfg: Config) -> None:
    """Load, loop until exit or end of input, then save exactly once."""
    tlog.debug(f"Data file: {escape(str(cfg.data_path))}")

    store = TaskStore()
    _load(store, cfg)

    loop = _new_loop(store, cfg)
    click.echo(WELCOME_MESSAGE)
    try:
        loop.run()
    except KeyboardInterrupt:
        click.echo()
        tlog.warn("Interrupted! Saving before exit.")

    _save(store, cfg)
    click.echo(GOODBYE_MESSAGE)


def _run_once(cfg: Config, line: str) -> None:
    """Run a single command line against the data file."""
    store = TaskStore()
    _load(store, cfg)

    _new_loop(store, cfg).execute(line)

    command = line.split(None, 1)[0]
    if command in MUTATING_COMMANDS:
        saved = _save(store, cfg)
        if saved is not None:
            tlog.success(f"Saved {saved} task(s) to {escape(str(cfg.data_path))}")


# ── One-shot subcommands ─────────────────────────────────────────────


@main.command("list")
@click.pass_obj
def list_cmd(cfg: Config) -> None:
    """Print every task with its number."""
    _run_once(cfg, "list")


@main.command("add")
@click.argument("words", nargs=-1)
@click.pass_obj
def add_cmd(cfg: Config, words: tuple[str, ...]) -> None:
    """Add a task (words are joined with spaces)."""
    _run_once(cfg, " ".join(["add", *words]))


@main.command("done")
@click.argument("number", default="")
@click.pass_obj
def done_cmd(cfg: Config, number: str) -> None:
    """Mark task NUMBER as done."""
    _run_once(cfg, f"done {number}")


@main.command("remove")
@click.argument("number", default="")
@click.pass_obj
def remove_cmd(cfg: Config, number: str) -> None:
    """Remove task NUMBER; later tasks move up by one."""
    _run_once(cfg, f"remove {number}")


if __name__ == "__main__":
    main()
