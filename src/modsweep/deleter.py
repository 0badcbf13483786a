"""Concurrent removal of chosen candidates."""

import logging
import shutil
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable

from modsweep.errors import DeletionError
from modsweep.models import Candidate, DeletionReport, DeletionResult

logger = logging.getLogger(__name__)

# Removals allowed in flight at once
DEFAULT_MAX_CONCURRENT = 5


def remove_tree(path: Path) -> DeletionError | None:
    """
    Remove path and everything under it.

    A path that does not exist is not an error.

    Args:
        path: Directory (or file) to remove

    Returns:
        DeletionError if removal failed, otherwise None
    """
    try:
        if path.is_symlink() or path.is_file():
            path.unlink()
        else:
            shutil.rmtree(path)
    except FileNotFoundError as e:
        if path.exists() or path.is_symlink():
            return DeletionError(path, e.strerror or str(e))
    except OSError as e:
        return DeletionError(path, e.strerror or str(e))
    return None


def delete_candidates(
    candidates: list[Candidate],
    max_concurrent: int = DEFAULT_MAX_CONCURRENT,
    dry_run: bool = False,
    progress_callback: Callable[[DeletionResult], None] | None = None,
    remove: Callable[[Path], DeletionError | None] = remove_tree,
) -> DeletionReport:
    """
    Remove candidates with at most max_concurrent removals running.

    The dispatcher takes a permit before handing each candidate to the pool
    and blocks while all permits are out; a removal gives its permit back
    when it returns, failed or not. One failure never stops the others.
    The report is built after every removal has finished.

    Args:
        candidates: Candidates chosen for removal
        max_concurrent: Permit count
        dry_run: If True, report what would be freed without removing
        progress_callback: Optional callback(result), serialized
        remove: Removal function, remove_tree by default

    Returns:
        DeletionReport; freed_mb counts confirmed removals only
    """
    report = DeletionReport(dry_run=dry_run)
    lock = threading.Lock()
    permits = threading.BoundedSemaphore(max_concurrent)

    def _attempt(candidate: Candidate) -> DeletionError | None:
        if dry_run:
            return None
        try:
            return remove(Path(candidate.path))
        except Exception as e:
            logger.exception("Unexpected failure removing %s", candidate.path)
            return DeletionError(candidate.path, str(e) or type(e).__name__)

    def _remove(candidate: Candidate) -> None:
        try:
            error = _attempt(candidate)
            if error:
                logger.error("Error removing %s: %s", candidate.path, error.reason)

            result = DeletionResult(
                path=candidate.path,
                size_mb=candidate.size_mb,
                success=error is None,
                error=error.reason if error else None,
                dry_run=dry_run,
            )
            with lock:
                report.results.append(result)
                if progress_callback:
                    try:
                        progress_callback(result)
                    except Exception:
                        logger.exception("Error reporting removal of %s", candidate.path)
        finally:
            permits.release()

    futures = []
    with ThreadPoolExecutor(
        max_workers=max_concurrent, thread_name_prefix="modsweep-delete"
    ) as executor:
        for candidate in candidates:
            permits.acquire()
            futures.append(executor.submit(_remove, candidate))

    for future in futures:
        future.result()

    return report
