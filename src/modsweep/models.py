"""Data models for modsweep."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modsweep.errors import ManifestError, TraversalError


class ManifestDescriptor(BaseModel):
    """The parts of a manifest file that matter for ranking."""

    model_config = ConfigDict(populate_by_name=True)

    dependencies: dict[str, Optional[str]] = Field(
        default_factory=dict, description="Dependency name to version"
    )
    dev_dependencies: dict[str, Optional[str]] = Field(
        default_factory=dict,
        alias="devDependencies",
        description="Dev dependency name to version",
    )

    @field_validator("dependencies", "dev_dependencies", mode="before")
    @classmethod
    def _null_means_empty(cls, value):
        # "dependencies": null decodes to an empty mapping
        return {} if value is None else value


class Candidate(BaseModel):
    """A marker directory backed by a parseable manifest."""

    path: str = Field(..., description="Absolute path of the marker directory")
    size_mb: int = Field(0, description="Size in whole megabytes, rounded down")
    dependency_count: int = Field(0, ge=0, description="Entries in dependencies")
    dev_dependency_count: int = Field(0, ge=0, description="Entries in devDependencies")
    size_error: Optional[str] = Field(
        None, description="Set when size_mb may be an undercount"
    )

    @property
    def total_dependencies(self) -> int:
        """Combined dependency count, the ranking key."""
        return self.dependency_count + self.dev_dependency_count

    @property
    def label(self) -> str:
        """Display label used by selectors."""
        return f"{self.path} ({self.size_mb}MB, {self.total_dependencies} dependencies)"


class ScanReport(BaseModel):
    """Outcome of walking a root directory."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    root: str = Field(..., description="Directory that was walked")
    candidates: list[Candidate] = Field(default_factory=list)
    skipped: list[ManifestError] = Field(
        default_factory=list, description="Marker directories without a usable manifest"
    )
    errors: list[TraversalError] = Field(
        default_factory=list, description="Branches that could not be walked"
    )

    @property
    def total_size_mb(self) -> int:
        """Sum of the measured candidate sizes."""
        return sum(c.size_mb for c in self.candidates)


class DeletionResult(BaseModel):
    """Result of removing one candidate."""

    path: str = Field(..., description="Directory that was removed")
    size_mb: int = Field(0, description="Precomputed size of the directory")
    success: bool = Field(True, description="Whether removal succeeded")
    error: Optional[str] = Field(None, description="Reason the removal failed")
    dry_run: bool = Field(False, description="Whether this was a dry run")


class DeletionReport(BaseModel):
    """All removals of one sweep."""

    results: list[DeletionResult] = Field(default_factory=list)
    dry_run: bool = False

    @property
    def freed_mb(self) -> int:
        """Space freed by removals that actually succeeded."""
        return sum(r.size_mb for r in self.results if r.success)

    @property
    def attempted_mb(self) -> int:
        """Space of every dispatched removal, successful or not."""
        return sum(r.size_mb for r in self.results)

    @property
    def success_count(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failure_count(self) -> int:
        return sum(1 for r in self.results if not r.success)


class CacheCleanResult(BaseModel):
    """Result of running a package manager's cache purge."""

    command: str = Field(..., description="Command that was run")
    success: bool = Field(True, description="Whether the command succeeded")
    error: Optional[str] = Field(None, description="Error message if failed")
    dry_run: bool = Field(False, description="Whether this was a dry run")
