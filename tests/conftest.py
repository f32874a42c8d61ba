# ABOUTME: Shared pytest fixtures for pagewise tests.
# ABOUTME: Provides Google Books JSON fixture files on disk.

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from tests.fixtures.google_books_responses import VOLUMES_RESPONSE


@pytest.fixture
def fixture_file(tmp_path: Path) -> Path:
    """Write the canned volumes response to a JSON file."""
    path = tmp_path / "volumes.json"
    path.write_text(json.dumps(VOLUMES_RESPONSE), encoding="utf-8")
    return path


@pytest.fixture
def write_fixture(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing an arbitrary payload to a JSON fixture file."""

    def _write(payload: Any, name: str = "custom.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
