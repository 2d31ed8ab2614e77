from __future__ import annotations

from pathlib import Path
from typing import Optional

import pytest

from tests.helpers import make_payload, write_json


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    public = tmp_path / "public"
    (public / "archive").mkdir(parents=True)
    return public


@pytest.fixture
def archive_dir(public_dir: Path) -> Path:
    return public_dir / "archive"


@pytest.fixture
def add_image(public_dir: Path):
    def _add(src: str) -> Path:
        path = public_dir / src.lstrip("/")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"\xff\xd8\xff")
        return path

    return _add


@pytest.fixture
def add_snapshot(archive_dir: Path):
    def _add(stem: str, data: Optional[dict] = None) -> Path:
        return write_json(archive_dir / f"{stem}.json", data if data is not None else make_payload())

    return _add
