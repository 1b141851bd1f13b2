from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def source_file(tmp_path: Path) -> Callable[..., Path]:
    """Write a dedented Python module under tmp_path and return its path."""

    def _write(source: str, name: str = "module.py") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path

    return _write
