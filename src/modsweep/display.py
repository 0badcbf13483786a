"""Rich terminal display for modsweep."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from modsweep.errors import TraversalError
from modsweep.models import (
    CacheCleanResult,
    Candidate,
    DeletionReport,
    DeletionResult,
    ScanReport,
)

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Send modsweep log records to the console."""
    logger = logging.getLogger("modsweep")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(console=console, show_time=False, show_path=False, markup=False)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False


def show_banner(version: str, marker_name: str = "node_modules") -> None:
    """Print version and what is being searched for."""
    console.print(f"[magenta]Version: {version}[/magenta]\n")
    console.print(f"[cyan]Searching for {marker_name} directories...[/cyan]")
    console.print("[cyan]This may take a while depending on the size of the recursion.[/cyan]\n")


def show_candidates(candidates: list[Candidate], marker_name: str = "node_modules") -> None:
    """Display ranked candidates and their total size."""
    if not candidates:
        console.print(f"[green]No {marker_name} directories found.[/green]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Path")
    table.add_column("Size", justify="right")
    table.add_column("Dependencies", justify="right")

    for i, candidate in enumerate(candidates, 1):
        size = f"{candidate.size_mb}MB"
        if candidate.size_error:
            size = f"[yellow]≥{size}[/yellow]"
        table.add_row(str(i), escape(candidate.path), size, str(candidate.total_dependencies))

    console.print(table)

    total = sum(c.size_mb for c in candidates)
    console.print(
        f"\n[cyan]Found {len(candidates)} {marker_name} directories "
        f"consuming a total of {total}MB[/cyan]\n"
    )


def show_scan_errors(errors: list[TraversalError]) -> None:
    """Display branches that could not be searched, once, after the scan."""
    if not errors:
        return

    console.print(f"[red]Error finding files: {len(errors)} path(s) could not be searched[/red]")
    for error in errors:
        console.print(f"  [red]✗[/red] {escape(error.path)}: {escape(error.reason)}")
    console.print()


def show_deletion_result(result: DeletionResult) -> None:
    """Display result of a single removal."""
    path = escape(result.path)
    if result.dry_run:
        console.print(f"  [yellow]~[/yellow] Would remove {path}, freeing {result.size_mb}MB")
    elif result.success:
        console.print(f"  [green]✓[/green] Successfully removed {path}, freed {result.size_mb}MB")
    else:
        console.print(f"  [red]✗[/red] Error removing {path}: {escape(result.error or '')}")


def show_deletion_summary(report: DeletionReport) -> None:
    """Display the totals of a sweep."""
    console.print()
    if report.dry_run:
        console.print("[yellow]DRY RUN - No files were deleted[/yellow]")
        console.print(f"[bold]Total space that would be freed: {report.attempted_mb}MB[/bold]")
        return

    table = Table(show_header=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Directories removed", str(report.success_count))
    if report.failure_count > 0:
        table.add_row("[red]Failed[/red]", str(report.failure_count))
        table.add_row("Not freed", f"{report.attempted_mb - report.freed_mb}MB")

    console.print(table)
    console.print(f"[bold green]Total space freed: {report.freed_mb}MB[/bold green]")


def show_cache_clean_result(result: CacheCleanResult) -> None:
    """Display result of a cache purge."""
    if result.dry_run:
        console.print(f"[yellow]Would run '{result.command}'[/yellow]")
    elif result.success:
        console.print(f"[green]'{result.command}' completed successfully.[/green]")
    else:
        console.print(f"[red]Error running '{result.command}': {escape(result.error or '')}[/red]")


def confirm_action(message: str) -> bool:
    """Ask for confirmation."""
    from rich.prompt import Confirm

    return Confirm.ask(message, default=False)


class ConsoleReporter:
    """Renders sweep events on the console."""

    def __init__(self, marker_name: str = "node_modules"):
        self.marker_name = marker_name
        self._status = None
        self._found = 0

    def on_scan_start(self, root: Path) -> None:
        self._status = console.status(f"Scanning {escape(str(root))}...")
        self._status.start()

    def on_found(self, candidate: Candidate) -> None:
        self._found += 1
        if self._status:
            self._status.update(f"Found {self._found} {self.marker_name} directories...")

    def on_measured(self, candidate: Candidate) -> None:
        if self._status:
            self._status.update(f"Measuring {escape(candidate.path)}...")

    def on_discovered(self, scan: ScanReport) -> None:
        if self._status:
            self._status.stop()
            self._status = None
        show_scan_errors(scan.errors)
        show_candidates(scan.candidates, self.marker_name)

    def on_selected(self, chosen: list[Candidate]) -> None:
        if not chosen:
            console.print("[yellow]No directories selected for removal. Exiting.[/yellow]")
            return
        console.print(f"[bold]Removing {len(chosen)} directories...[/bold]")

    def on_deleted(self, result: DeletionResult) -> None:
        # Failures already reach the console through the deleter's log
        if result.success:
            show_deletion_result(result)

    def on_complete(self, report: DeletionReport) -> None:
        show_deletion_summary(report)
