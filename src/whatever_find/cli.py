"""Command-line interface for whatever-find."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from . import __version__
from .config.parser import load_config
from .errors import FileSearchError
from .models.search_mode import SearchMode
from .searcher import FileSearcher
from .tools.classifier import classify


app = typer.Typer(
    name="whatever-find",
    help="A fast local file search tool with fuzzy matching support - find whatever you need!",
    add_completion=False,
)

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

EPILOG = """Examples:

  whatever-find config.txt          Substring search for 'config.txt'

  whatever-find '*.rs'              Auto-detected glob search for .rs files

  whatever-find '\\.rs$'             Auto-detected regex search for .rs files

  whatever-find --fuzzy confg       Force fuzzy search (tolerates typos)

  whatever-find --glob 'test_*'     Force glob mode

  whatever-find test -p /home/user  Search in a specific directory
"""


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"whatever-find version {__version__}")
        raise typer.Exit()


def _forced_mode(regex: bool, fuzzy: bool, glob: bool, substring: bool) -> Optional[SearchMode]:
    """Translate the mode flags into a SearchMode; None means auto-detect."""
    flags = [
        (regex, SearchMode.REGEX),
        (fuzzy, SearchMode.FUZZY),
        (glob, SearchMode.GLOB),
        (substring, SearchMode.SUBSTRING),
    ]
    chosen = [mode for flag, mode in flags if flag]
    if len(chosen) > 1:
        raise typer.BadParameter("Cannot use multiple search modes simultaneously")
    return chosen[0] if chosen else None


@app.command(epilog=EPILOG)
def main(
    query: str = typer.Argument(..., help="Search query."),
    path: str = typer.Option(".", "--path", "-p", help="Search path (default: current directory)."),
    regex: bool = typer.Option(False, "--regex", "-r", help="Force regex matching."),
    fuzzy: bool = typer.Option(False, "--fuzzy", "-f", help="Force fuzzy matching (tolerates typos)."),
    glob: bool = typer.Option(False, "--glob", "-g", help="Force glob pattern matching."),
    substring: bool = typer.Option(False, "--substring", "-s", help="Force substring matching."),
    case_sensitive: bool = typer.Option(False, "--case-sensitive", "-c", help="Match filename case exactly."),
    config_file: Optional[Path] = typer.Option(None, "--config", help="Configuration file to use."),
    limit: int = typer.Option(20, "--limit", "-n", min=1, help="Maximum fuzzy results to show."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Find files by name using auto-detected substring, glob or regex matching."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        mode = _forced_mode(regex, fuzzy, glob, substring)
    except typer.BadParameter as e:
        err_console.print(f"Error: {e}", markup=False)
        raise typer.Exit(1)

    try:
        result = load_config(config_file)
        for warning in result.warnings:
            logging.getLogger(__name__).debug(f"Config warning: {warning}")

        config = result.config
        if case_sensitive:
            config = config.model_copy(update={'case_sensitive': True})

        detection = "forced" if mode is not None else "auto-detected"
        shown_mode = mode if mode is not None else classify(query)
        console.print(
            f"Searching for '{query}' in '{path}' using {detection} {shown_mode.value} matching...",
            markup=False,
        )

        results = FileSearcher(config).find(path, query, mode)
    except FileSearchError as e:
        err_console.print(f"Error: {e}", markup=False)
        raise typer.Exit(e.exit_code)

    if not results.matches:
        console.print(f"No files found matching '{query}'", markup=False)
        return

    if results.mode is SearchMode.FUZZY:
        console.print(f"Found {results.get_match_count()} file(s) (sorted by relevance):")
        for match in results.get_top_matches(limit):
            console.print(f"  {match.path} (score: {match.score:.2f})", markup=False, highlight=False)
    else:
        console.print(f"Found {results.get_match_count()} file(s):")
        for match in results.matches:
            console.print(f"  {match.path}", markup=False, highlight=False)


if __name__ == "__main__":
    app()
