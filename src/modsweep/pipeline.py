"""The sweep: discover, measure, rank, select, delete."""

from pathlib import Path
from typing import Optional, Protocol

from pydantic import BaseModel, Field

from modsweep.config import Settings
from modsweep.deleter import delete_candidates
from modsweep.models import Candidate, DeletionReport, DeletionResult, ScanReport
from modsweep.ranker import rank_candidates
from modsweep.scanner import resolve_root, scan_directory
from modsweep.selection import Selector, resolve_selection
from modsweep.sizer import measure_candidates


class Reporter(Protocol):
    """Receives progress events from a sweep."""

    def on_scan_start(self, root: Path) -> None: ...

    def on_found(self, candidate: Candidate) -> None: ...

    def on_measured(self, candidate: Candidate) -> None: ...

    def on_discovered(self, scan: ScanReport) -> None: ...

    def on_selected(self, chosen: list[Candidate]) -> None: ...

    def on_deleted(self, result: DeletionResult) -> None: ...

    def on_complete(self, report: DeletionReport) -> None: ...


class NullReporter:
    """Reporter that ignores every event."""

    def on_scan_start(self, root: Path) -> None:
        pass

    def on_found(self, candidate: Candidate) -> None:
        pass

    def on_measured(self, candidate: Candidate) -> None:
        pass

    def on_discovered(self, scan: ScanReport) -> None:
        pass

    def on_selected(self, chosen: list[Candidate]) -> None:
        pass

    def on_deleted(self, result: DeletionResult) -> None:
        pass

    def on_complete(self, report: DeletionReport) -> None:
        pass


class SweepOutcome(BaseModel):
    """Everything a sweep produced."""

    scan: ScanReport
    chosen: list[Candidate] = Field(default_factory=list)
    deletion: Optional[DeletionReport] = None

    @property
    def ranked(self) -> list[Candidate]:
        """Candidates in ranked order."""
        return self.scan.candidates


def discover(
    root: Path,
    settings: Settings | None = None,
    reporter: Reporter | None = None,
) -> ScanReport:
    """
    Scan root, measure every candidate and rank them.

    Args:
        root: Resolved directory to search
        settings: Names and pool sizes (defaults if None)
        reporter: Optional event receiver

    Returns:
        ScanReport whose candidates are measured and in ranked order
    """
    settings = settings or Settings()
    reporter = reporter or NullReporter()

    reporter.on_scan_start(root)
    scan = scan_directory(
        root,
        marker_name=settings.marker_name,
        manifest_name=settings.manifest_name,
        workers=settings.scan_workers,
        queue_size=settings.queue_size,
        on_found=reporter.on_found,
    )
    measure_candidates(
        scan.candidates,
        max_workers=settings.size_workers,
        progress_callback=reporter.on_measured,
    )
    scan.candidates = rank_candidates(scan.candidates)

    reporter.on_discovered(scan)
    return scan


def run_sweep(
    path: str | Path | None,
    selector: Selector,
    settings: Settings | None = None,
    invert: bool = False,
    dry_run: bool = False,
    reporter: Reporter | None = None,
) -> SweepOutcome:
    """
    Run a full sweep from path.

    Args:
        path: Directory to search, or None for the current directory
        selector: Lets the operator choose among ranked candidates
        settings: Names and pool sizes (defaults if None)
        invert: If True, candidates start unselected
        dry_run: If True, nothing is removed
        reporter: Optional event receiver

    Returns:
        SweepOutcome; deletion is None when nothing was found or chosen

    Raises:
        RootResolutionError: If path cannot be resolved
    """
    settings = settings or Settings()
    reporter = reporter or NullReporter()

    root = resolve_root(path)
    scan = discover(root, settings=settings, reporter=reporter)
    outcome = SweepOutcome(scan=scan)

    if not scan.candidates:
        return outcome

    chosen_paths = selector.select(scan.candidates, not invert)
    outcome.chosen = resolve_selection(scan.candidates, chosen_paths)
    reporter.on_selected(outcome.chosen)

    if not outcome.chosen:
        return outcome

    outcome.deletion = delete_candidates(
        outcome.chosen,
        max_concurrent=settings.delete_concurrency,
        dry_run=dry_run,
        progress_callback=reporter.on_deleted,
    )
    reporter.on_complete(outcome.deletion)
    return outcome
