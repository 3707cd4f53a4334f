from __future__ import annotations

from pathlib import Path

import pytest

from boxdefaults.common.settings import BoxDefaultsSettings

pytestmark = pytest.mark.usefixtures("isolated_environment")


def test_settings_defaults() -> None:
    settings = BoxDefaultsSettings()
    assert settings.defaults_path is None
    assert settings.log_level == "WARNING"


def test_settings_from_environment(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("BOXDEFAULTS_PATH", str(tmp_path / "boxes.yaml"))
    monkeypatch.setenv("BOXDEFAULTS_LOG_LEVEL", "debug")
    settings = BoxDefaultsSettings()
    assert settings.defaults_path == tmp_path / "boxes.yaml"
    assert settings.log_level == "debug"
