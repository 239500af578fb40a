"""Shared fixtures: small CSV sources in the dataset's layout."""

from pathlib import Path

import pytest

from helpers import HEADER


@pytest.fixture
def write_csv(tmp_path: Path):
    """Write rows (already comma-joined) under a header and return the path."""

    def _write(name: str, *rows: str) -> Path:
        path = tmp_path / name
        path.write_text("\n".join([HEADER, *rows]) + "\n", encoding="utf-8")
        return path

    return _write
