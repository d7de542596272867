import os
from pathlib import Path

import pytest

from pdfcollector.config import CollectorConfig

BASE_MTIME = 1_700_000_000


def make_file(path: Path, content: bytes = b"%PDF-1.4 dummy", mtime: float = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def source_root(tmp_path: Path) -> Path:
    root = tmp_path / "cases"
    root.mkdir()
    return root


@pytest.fixture
def config(tmp_path: Path, source_root: Path) -> CollectorConfig:
    return CollectorConfig(
        source_root=source_root,
        output_dir=tmp_path / "output",
        log_dir=tmp_path / "logs",
    )
