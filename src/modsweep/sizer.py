"""Directory size calculation for modsweep."""

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable

from modsweep.errors import SizeComputationError
from modsweep.models import Candidate

logger = logging.getLogger(__name__)

BYTES_PER_MB = 1024 * 1024


def bytes_to_mb(size_bytes: int) -> int:
    """Whole megabytes in size_bytes, always rounded down."""
    return size_bytes // BYTES_PER_MB


def get_directory_bytes(path: Path) -> tuple[int, SizeComputationError | None]:
    """
    Sum the sizes of all regular files under path.

    Symlinks are neither followed nor counted. The walk stops at the first
    entry whose metadata cannot be read, and the sum so far is returned with
    the error, so a non-None error means the size may be an undercount.

    Args:
        path: Directory to measure

    Returns:
        Tuple of (total_bytes, error)
    """
    total = 0
    stack = [path]

    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as entries:
                for entry in entries:
                    if entry.is_dir(follow_symlinks=False):
                        stack.append(entry.path)
                    elif entry.is_file(follow_symlinks=False):
                        total += entry.stat(follow_symlinks=False).st_size
        except OSError as e:
            failed = e.filename or current
            return total, SizeComputationError(failed, e.strerror or str(e))

    return total, None


def get_dir_size_mb(path: Path) -> tuple[int, SizeComputationError | None]:
    """Size of path in whole megabytes, with the error from the byte count."""
    size, error = get_directory_bytes(path)
    return bytes_to_mb(size), error


def measure_candidates(
    candidates: list[Candidate],
    max_workers: int = 6,
    progress_callback: Callable[[Candidate], None] | None = None,
) -> list[Candidate]:
    """
    Fill in size_mb for each candidate in parallel.

    A candidate whose measurement failed keeps its partial size and gets
    size_error set.

    Args:
        candidates: Candidates from the scan
        max_workers: Number of parallel measurements
        progress_callback: Optional callback(candidate) after each measurement

    Returns:
        The same candidates, measured
    """
    if not candidates:
        return candidates

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(get_dir_size_mb, Path(candidate.path)): candidate
            for candidate in candidates
        }

        for future in as_completed(futures):
            candidate = futures[future]
            size_mb, error = future.result()
            candidate.size_mb = size_mb
            if error:
                candidate.size_error = str(error)
                logger.warning("Error getting size for %s: %s", candidate.path, error)

            if progress_callback:
                progress_callback(candidate)

    return candidates
