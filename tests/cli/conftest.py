"""Shared fixtures for CLI tests.

Provides temporary source files with and without findings, optionally
inside a project that carries a package.json.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Drop the handler the CLI attaches, so it never outlives the runner streams."""
    yield
    package_logger = logging.getLogger("realtimepr")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def clean_source(tmp_path: Path) -> Path:
    """A file without imports or rule violations.

    Every imported module is re-entered by cycle detection, so a clean
    dependency review needs a file without imports.
    """
    source = tmp_path / "clean.js"
    source.write_text("// adds two numbers\nconst sum = a + b;\n")
    return source


@pytest.fixture
def noisy_source(tmp_path: Path) -> Path:
    """A file with unused, duplicate and relative imports plus eval."""
    source = tmp_path / "noisy.ts"
    source.write_text(
        "import { unusedThing } from './mod';\n"
        "import { other } from './mod';\n"
        "eval(input);\n"
    )
    return source


@pytest.fixture
def project_source(project_dir: Path, package_json: Path) -> Path:
    """A source file below a package.json, with a require of an undeclared package."""
    source = project_dir / "src" / "index.js"
    source.write_text(
        "import React from 'react';\n"
        "import pad from 'left-pad';\n"
        "const axios = require('axios');\n"
        "React.render(pad('x'));\n"
    )
    return source
