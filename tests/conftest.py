"""Shared pytest fixtures for integration and unit tests."""

from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path
from typing import Callable, NamedTuple

import pytest

from resolver.pipeline.module_path import DEFAULT_PATH_CACHE
from tests.utils.tree import SampleTree, build_sample_tree

PROJECT_ROOT = Path(__file__).resolve().parent.parent
CLI_ENTRYPOINT = PROJECT_ROOT / "main.py"


class CliResult(NamedTuple):
    """Exit code and decoded stdout of a CLI run."""

    returncode: int
    payload: dict
    stderr: str


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Expose the repository root path to tests."""

    return PROJECT_ROOT


@pytest.fixture()
def tree() -> SampleTree:
    """Provide a fresh copy of the sample tree."""

    return build_sample_tree()


@pytest.fixture(autouse=True)
def reset_path_cache():
    """Isolate the process-wide module path cache between tests."""

    DEFAULT_PATH_CACHE.clear()
    yield
    DEFAULT_PATH_CACHE.clear()


@pytest.fixture()
def snapshot_file(tmp_path: Path, tree: SampleTree) -> Path:
    """Write the sample tree to a temporary snapshot file."""

    return tree.write(tmp_path / "snapshot.json")


@pytest.fixture()
def run_cli() -> Callable[..., CliResult]:
    """Run main.py in a subprocess and decode its JSON output."""

    def _run(*args: str) -> CliResult:
        completed = subprocess.run(
            [sys.executable, str(CLI_ENTRYPOINT), *args],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
            timeout=30,
            check=False,
        )
        payload = json.loads(completed.stdout) if completed.stdout.strip() else {}
        return CliResult(completed.returncode, payload, completed.stderr)

    return _run
