"""Shared fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def library(tmp_path_factory) -> Path:
    """Empty media library root.

    Created through tmp_path_factory so the path never contains the test name,
    which could otherwise include "season".
    """
    return tmp_path_factory.mktemp("library")


@pytest.fixture
def make_entries() -> Callable[..., list[Path]]:
    """Create empty files (or directories, for names ending in '/') below a directory."""

    def _make(directory: Path, *names: str) -> list[Path]:
        created = []
        for name in names:
            path = directory / name.rstrip("/")
            path.parent.mkdir(parents=True, exist_ok=True)
            if name.endswith("/"):
                path.mkdir()
            else:
                path.touch()
            created.append(path)
        return created

    return _make
