"""Command line interface for harpsearch."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from harpsearch.config import AppConfig
from harpsearch.encoding.codec import SENTINEL, decode_record, encode_record, join_offset, split_offset
from harpsearch.harps import Harps
from harpsearch.models import SearchTarget
from harpsearch.prompt import console_line_reader
from harpsearch.search.compiler import compile_search
from harpsearch.store.client import HarpStore, HarpStoreError


console = Console()
app = typer.Typer(help="harpsearch - named search harps backed by the harp store")

DASH_HELP = "Put -- before patterns that start with '-'."


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _visible(value: str) -> str:
    """Escape rich markup and show the DEL separator as ``^?``."""
    return escape(value.replace(SENTINEL, "^?"))


def _open_harps(config: AppConfig) -> Harps:
    store = HarpStore(config.harp_executable)
    if not store.is_available():
        console.print(f"[red]harp was not found in your path ({escape(store.executable)}).[/red]")
        raise typer.Exit(code=1)
    return Harps(store)


def _print_target(target: SearchTarget) -> None:
    if target.path:
        typer.echo(target.path)
    typer.echo(target.directive.compile())


@app.command()
def encode(
    path: str = typer.Argument(..., help="File the search belongs to"),
    pattern: str = typer.Argument(..., help=f"Search pattern. {DASH_HELP}"),
    offset: Optional[str] = typer.Option(
        None, "--offset", "-o", help="Search offset, e.g. 'e' or 's+1'; empty means none"
    ),
) -> None:
    """Print the stored value for a global search harp."""
    # same as an empty answer at the offset prompt
    if offset == "":
        offset = None
    try:
        value = encode_record(path, join_offset(pattern, offset))
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(value)


@app.command()
def decode(value: str = typer.Argument(..., help="Stored value")) -> None:
    """Show the fields packed in a stored value."""
    record = decode_record(value)
    stored = split_offset(record.pattern)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("path", _visible(record.path) or "[dim]-[/dim]")
    table.add_row("pattern", _visible(stored.pattern))
    table.add_row("offset", _visible(stored.offset) if stored.offset is not None else "[dim]-[/dim]")
    console.print(table)


@app.command("compile")
def compile_command(
    pattern: str = typer.Argument(..., help=f"Search pattern. {DASH_HELP}"),
    offset: Optional[str] = typer.Option(None, "--offset", "-o", help="Search offset"),
    backwards: bool = typer.Option(False, "--backwards", "-b", help="Search backwards"),
) -> None:
    """Print the editor search command for a pattern."""
    typer.echo(compile_search(pattern, offset, backwards))


@app.command("set-search")
def set_search(
    register: str = typer.Argument(..., help="Single-character register"),
    path: str = typer.Argument(..., help="Buffer path (or target file with --global)"),
    pattern: str = typer.Argument(..., help=f"Last search pattern. {DASH_HELP}"),
    ask_offset: Optional[bool] = typer.Option(
        None, "--ask-offset/--no-ask-offset", "-a", help="Prompt for a search offset"
    ),
    global_: bool = typer.Option(False, "--global", "-g", help="Store as a global search harp"),
    harp: Optional[str] = typer.Option(None, "--harp", help="harp executable"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Save a search pattern in a search harp."""
    _setup_logging(verbose)
    if len(register) != 1:
        raise typer.BadParameter("Register must be a single character")
    config = AppConfig(harp_executable=harp, ask_offset=ask_offset)
    harps = _open_harps(config)
    kind = "global search harp" if global_ else "local search harp"
    read_line = console_line_reader(console)

    try:
        if global_:
            success = harps.set_global_search(
                register, path, pattern, ask_offset=config.ask_offset, read_line=read_line
            )
        else:
            success = harps.set_local_search(
                register, path, pattern, ask_offset=config.ask_offset, read_line=read_line
            )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except HarpStoreError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    if success is None:
        console.print("[yellow]cancelled[/yellow]")
        return
    if not success:
        console.print(f"[red]failed to set {kind} {escape(register)}[/red]")
        raise typer.Exit(code=1)
    console.print(f"set {kind} {escape(register)}")


@app.command("get-search")
def get_search(
    register: str = typer.Argument(..., help="Single-character register"),
    path: Optional[str] = typer.Argument(None, help="Buffer path (not used with --global)"),
    backwards: bool = typer.Option(False, "--backwards", "-b", help="Search backwards"),
    assume: Optional[bool] = typer.Option(
        None, "--assume/--no-assume", help="Read a trailing /e or ?e as an offset"
    ),
    at_end: bool = typer.Option(False, "--at-end", "-e", help="Put the cursor at the end of the match"),
    global_: bool = typer.Option(False, "--global", "-g", help="Read a global search harp"),
    harp: Optional[str] = typer.Option(None, "--harp", help="harp executable"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print the search command stored in a search harp."""
    _setup_logging(verbose)
    if not global_ and path is None:
        raise typer.BadParameter("A buffer path is required for local search harps")
    config = AppConfig(harp_executable=harp, assume_offset=assume)
    harps = _open_harps(config)
    kind = "global search harp" if global_ else "local search harp"

    try:
        if global_:
            target = harps.get_global_search(
                register, backwards=backwards, assume_offset=config.assume_offset, at_end=at_end
            )
        else:
            target = harps.get_local_search(
                register, path, backwards=backwards, assume_offset=config.assume_offset, at_end=at_end
            )
    except HarpStoreError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    if target is None:
        console.print(f"[yellow]{kind} {escape(register)} is empty[/yellow]")
        return
    _print_target(target)
