"""Settings for modsweep, read from ~/.modsweep/config.json."""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(os.path.expanduser("~/.modsweep"))
CONFIG_FILE = CONFIG_DIR / "config.json"


class Settings(BaseModel):
    """Tunable names and pool sizes."""

    marker_name: str = Field("node_modules", description="Directory name to look for")
    manifest_name: str = Field("package.json", description="Manifest expected next to it")
    scan_workers: int = Field(10, ge=1, description="Manifest inspection workers")
    queue_size: int = Field(100, ge=1, description="Pending marker directories before the walker blocks")
    size_workers: int = Field(6, ge=1, description="Parallel size measurements")
    delete_concurrency: int = Field(5, ge=1, description="Removals in flight at once")


def config_path() -> Path:
    """Location of the config file, honouring MODSWEEP_CONFIG."""
    override = os.environ.get("MODSWEEP_CONFIG")
    if override:
        return Path(os.path.expanduser(override))
    return CONFIG_FILE


def load_settings(path: Path | None = None) -> Settings:
    """
    Load settings from disk.

    A missing or unreadable file gives the defaults. Values that fail
    validation are reported and the defaults are used instead.

    Args:
        path: Config file to read (defaults to config_path())

    Returns:
        Settings instance
    """
    path = path or config_path()
    if not path.exists():
        return Settings()

    try:
        with open(path) as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return Settings()

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        logger.warning("Ignoring invalid config %s: %s", path, e)
        return Settings()
