from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
import yaml

from boxdefaults.boxes.loader import PACKAGED_DEFAULTS_PATH, default_box_defaults


@pytest.fixture
def packaged_document() -> dict[str, str]:
    return yaml.safe_load(PACKAGED_DEFAULTS_PATH.read_text(encoding="utf-8"))


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[..., Path]:
    def _write(data, name: str = "boxes.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def isolated_environment(monkeypatch):
    monkeypatch.delenv("BOXDEFAULTS_PATH", raising=False)
    monkeypatch.delenv("BOXDEFAULTS_LOG_LEVEL", raising=False)
    default_box_defaults.cache_clear()
    yield
    default_box_defaults.cache_clear()
