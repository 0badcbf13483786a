"""Reading the manifest file that sits next to a marker directory."""

from pathlib import Path

from pydantic import ValidationError

from modsweep.errors import ManifestError, ManifestMissingError, ManifestParseError
from modsweep.models import ManifestDescriptor


def manifest_path_for(marker_dir: Path, manifest_name: str = "package.json") -> Path:
    """Path of the manifest in the marker directory's parent."""
    return marker_dir.parent / manifest_name


def read_manifest(
    marker_dir: Path,
    manifest_name: str = "package.json",
) -> tuple[ManifestDescriptor | None, ManifestError | None]:
    """
    Parse the manifest belonging to a marker directory.

    Args:
        marker_dir: The marker directory (e.g. project/node_modules)
        manifest_name: File name of the manifest in the parent directory

    Returns:
        Tuple of (descriptor, error); exactly one of them is None
    """
    manifest = manifest_path_for(marker_dir, manifest_name)

    try:
        content = manifest.read_bytes()
    except FileNotFoundError:
        return None, ManifestMissingError(manifest, f"{manifest_name} not found")
    except OSError as e:
        return None, ManifestParseError(manifest, f"cannot read: {e.strerror or e}")

    try:
        return ManifestDescriptor.model_validate_json(content), None
    except ValidationError as e:
        return None, ManifestParseError(manifest, _first_problem(e))


def _first_problem(error: ValidationError) -> str:
    problems = error.errors()
    if not problems:
        return "invalid manifest"
    first = problems[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    if location:
        return f"{location}: {first['msg']}"
    return first["msg"]
