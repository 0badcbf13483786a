"""Package manager cache purge, run after a sweep on request."""

import shlex
import subprocess

from modsweep.models import CacheCleanResult

YARN_CACHE_CLEAN = ("yarn", "cache", "clean", "--all")


def run_cache_clean(
    command: tuple[str, ...] = YARN_CACHE_CLEAN,
    dry_run: bool = False,
    timeout: int = 300,
) -> CacheCleanResult:
    """
    Run a cache purge command.

    Output goes straight to the terminal.

    Args:
        command: Command and arguments
        dry_run: If True, don't run the command
        timeout: Seconds before giving up

    Returns:
        CacheCleanResult
    """
    display = shlex.join(command)

    if dry_run:
        return CacheCleanResult(command=display, success=True, dry_run=True)

    try:
        result = subprocess.run(command, timeout=timeout)
    except FileNotFoundError:
        return CacheCleanResult(
            command=display, success=False, error=f"{command[0]} not found"
        )
    except subprocess.TimeoutExpired:
        return CacheCleanResult(command=display, success=False, error="Command timed out")
    except OSError as e:
        return CacheCleanResult(command=display, success=False, error=str(e))

    if result.returncode != 0:
        return CacheCleanResult(
            command=display,
            success=False,
            error=f"exited with status {result.returncode}",
        )
    return CacheCleanResult(command=display, success=True)
