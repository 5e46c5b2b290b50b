"""Shared fixtures for realtimepr tests."""

from __future__ import annotations

import json
import pathlib

import pytest


@pytest.fixture
def project_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create a temporary directory simulating a JavaScript project."""
    project = tmp_path / "sample-project"
    (project / "src").mkdir(parents=True)
    return project


@pytest.fixture
def package_json(project_dir: pathlib.Path) -> pathlib.Path:
    """Write a package.json declaring one stable and one pre-1.0 dependency."""
    manifest = project_dir / "package.json"
    manifest.write_text(json.dumps({
        "name": "sample-project",
        "version": "1.0.0",
        "dependencies": {"react": "^18.2.0", "left-pad": "^0.0.3"},
        "devDependencies": {"jest": "^29.0.0"},
    }))
    return manifest
