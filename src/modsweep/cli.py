"""CLI interface for modsweep."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from modsweep import __version__
from modsweep.cleaner import run_cache_clean
from modsweep.config import load_settings
from modsweep.display import (
    ConsoleReporter,
    confirm_action,
    console,
    setup_logging,
    show_banner,
    show_cache_clean_result,
)
from modsweep.errors import RootResolutionError
from modsweep.pipeline import run_sweep
from modsweep.selection import DefaultSelector

# Create Typer app
app = typer.Typer(
    name="modsweep",
    help="Find node_modules directories, rank them, and remove the ones you pick",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"modsweep version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    path: Optional[Path] = typer.Argument(
        None, help="Directory to search (defaults to the current directory)"
    ),
    invert: bool = typer.Option(
        False,
        "--invert",
        help="Invert selection (by default, all found directories are selected for deletion)",
    ),
    yes: bool = typer.Option(
        False, "-y", "--yes", help="Skip the selection screen and prompts, accept the defaults"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Simulate without deleting"),
    yarn_cache: bool = typer.Option(
        False, "--yarn-cache", help="Offer to run 'yarn cache clean --all' afterwards"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug output"),
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Search PATH for node_modules directories and remove the ones you select."""
    setup_logging(verbose)
    settings = load_settings()

    if yes:
        selector = DefaultSelector()
    else:
        from modsweep.tui import TextualSelector

        selector = TextualSelector()

    show_banner(__version__, settings.marker_name)

    try:
        run_sweep(
            path,
            selector=selector,
            settings=settings,
            invert=invert,
            dry_run=dry_run,
            reporter=ConsoleReporter(settings.marker_name),
        )
    except RootResolutionError as e:
        console.print(f"[red]Error getting starting directory: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if yarn_cache:
        if yes or dry_run or confirm_action(
            "\nDo you want to run 'yarn cache clean --all' to free up additional space?"
        ):
            show_cache_clean_result(run_cache_clean(dry_run=dry_run))
        else:
            console.print("[yellow]Skipping 'yarn cache clean --all'.[/yellow]")


if __name__ == "__main__":
    app()
