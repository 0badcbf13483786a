"""Error types for modsweep.

Only RootResolutionError is ever raised to the caller. Every other error is
returned as a value next to whatever partial result was produced, so one bad
directory never stops work on the others.
"""

from pathlib import Path


class SweepError(Exception):
    """Base class for all modsweep errors."""

    def __init__(self, path: Path | str, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class RootResolutionError(SweepError):
    """The starting directory could not be determined."""


class TraversalError(SweepError):
    """A walk step failed on one branch of the tree."""


class ManifestError(SweepError):
    """A marker directory has no usable manifest next to it."""


class ManifestMissingError(ManifestError):
    """No manifest file in the marker directory's parent."""


class ManifestParseError(ManifestError):
    """The manifest exists but could not be decoded."""


class SizeComputationError(SweepError):
    """An entry's metadata could not be read while summing sizes."""


class DeletionError(SweepError):
    """Removing a chosen directory failed."""
