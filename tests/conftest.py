"""Shared fixtures for modsweep tests."""

import json
import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Never read the real ~/.modsweep/config.json."""
    monkeypatch.setenv("MODSWEEP_CONFIG", str(tmp_path / "no-such-config.json"))


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo setup_logging so caplog keeps working across tests."""
    yield
    logger = logging.getLogger("modsweep")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def make_project():
    """Create project/package.json and project/node_modules."""

    def _make(
        root: Path,
        name: str,
        deps: int = 0,
        dev_deps: int = 0,
        size_bytes: int = 0,
        manifest: bool = True,
    ) -> Path:
        project = root / name
        node_modules = project / "node_modules"
        node_modules.mkdir(parents=True)

        if manifest:
            (project / "package.json").write_text(
                json.dumps(
                    {
                        "name": name,
                        "dependencies": {f"dep{i}": "^1.0.0" for i in range(deps)},
                        "devDependencies": {f"dev{i}": "^1.0.0" for i in range(dev_deps)},
                    }
                )
            )

        if size_bytes:
            (node_modules / "blob.bin").write_bytes(b"\0" * size_bytes)

        return node_modules

    return _make
