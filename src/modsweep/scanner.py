"""Parallel discovery of marker directories.

One walker thread traverses the tree depth-first and stops descending as soon
as it meets a directory named like the marker (node_modules inside
node_modules is never visited). Each match is handed through a bounded queue
to a fixed pool of workers that read the sibling manifest and turn the match
into a Candidate.
"""

import logging
import os
import queue
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable

from modsweep.errors import RootResolutionError, TraversalError
from modsweep.manifest import read_manifest
from modsweep.models import Candidate, ScanReport

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 10
DEFAULT_QUEUE_SIZE = 100

# Tells a worker the walker has finished
_DONE = object()


def resolve_root(path: str | Path | None = None) -> Path:
    """
    Resolve the directory a sweep starts from.

    Args:
        path: Directory to start from, or None for the current directory

    Returns:
        Absolute, resolved path of an existing directory

    Raises:
        RootResolutionError: If the directory cannot be determined
    """
    try:
        root = Path(path).expanduser() if path is not None else Path.cwd()
        root = root.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise RootResolutionError(path if path is not None else ".", str(e)) from e

    if not root.is_dir():
        raise RootResolutionError(root, "not a directory")
    return root


def walk_markers(
    root: Path,
    marker_name: str,
    on_match: Callable[[Path], None],
    on_error: Callable[[TraversalError], None] | None = None,
) -> None:
    """
    Walk a tree depth-first and report every marker directory.

    Entries are visited in name order. Symlinks are not followed. A branch
    that cannot be read is reported to on_error and the walk moves on.

    Args:
        root: Directory to start from (matched too if it carries the marker name)
        marker_name: Directory name to look for, e.g. 'node_modules'
        on_match: Called with each matching directory; may block
        on_error: Optional callback for unreadable entries
    """
    stack = [root]

    while stack:
        current = stack.pop()

        if current.name == marker_name:
            on_match(current)
            continue

        try:
            with os.scandir(current) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            _report(on_error, TraversalError(current, e.strerror or str(e)))
            continue

        subdirs = []
        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append(Path(entry.path))
            except OSError as e:
                _report(on_error, TraversalError(entry.path, e.strerror or str(e)))

        # Reversed so the first name is popped first
        stack.extend(reversed(subdirs))


def _report(on_error: Callable[[TraversalError], None] | None, error: TraversalError) -> None:
    logger.debug("Cannot walk %s: %s", error.path, error.reason)
    if on_error:
        on_error(error)


def scan_directory(
    root: Path,
    marker_name: str = "node_modules",
    manifest_name: str = "package.json",
    workers: int = DEFAULT_WORKERS,
    queue_size: int = DEFAULT_QUEUE_SIZE,
    on_found: Callable[[Candidate], None] | None = None,
) -> ScanReport:
    """
    Find every manifest-backed marker directory under root.

    The walker blocks when queue_size matches are waiting, so memory stays
    bounded on very large trees. The report is returned only after every
    worker has drained the queue.

    Args:
        root: Resolved directory to search
        marker_name: Directory name to look for
        manifest_name: Manifest expected in the marker's parent directory
        workers: Number of manifest inspection workers
        queue_size: Capacity of the job queue
        on_found: Optional callback(candidate), serialized across workers

    Returns:
        ScanReport with candidates in merge order, skipped markers and walk errors
    """
    report = ScanReport(root=str(root))
    jobs: queue.Queue = queue.Queue(maxsize=queue_size)
    lock = threading.Lock()

    def inspect_one(marker: Path) -> None:
        manifest, error = read_manifest(marker, manifest_name)
        if error:
            logger.warning("Skipping %s: %s", marker, error.reason)
            with lock:
                report.skipped.append(error)
            return

        candidate = Candidate(
            path=str(marker),
            dependency_count=len(manifest.dependencies),
            dev_dependency_count=len(manifest.dev_dependencies),
        )
        with lock:
            report.candidates.append(candidate)
            if on_found:
                on_found(candidate)

    def inspect() -> None:
        # A worker keeps draining until _DONE so the walker never blocks on a dead pool
        while True:
            marker = jobs.get()
            if marker is _DONE:
                return
            try:
                inspect_one(marker)
            except Exception:
                logger.exception("Error inspecting %s", marker)

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="modsweep-scan") as executor:
        futures = [executor.submit(inspect) for _ in range(workers)]
        try:
            walk_markers(root, marker_name, jobs.put, on_error=report.errors.append)
        finally:
            for _ in range(workers):
                jobs.put(_DONE)

    for future in futures:
        future.result()

    return report
