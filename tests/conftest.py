from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pytest


@pytest.fixture
def firmware_dir(tmp_path: Path):
    """Return a helper that populates tmp_path with empty firmware images."""

    def populate(names: Iterable[str]) -> str:
        for name in names:
            (tmp_path / name).write_bytes(b"")
        return str(tmp_path)

    return populate
