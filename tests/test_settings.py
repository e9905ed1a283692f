from __future__ import annotations

import logging
from pathlib import Path

import pytest

from timelane_core.exceptions import ConfigError
from timelane_core.loggers import Loggers, SignpostLogger
from timelane_core.models import LaneTypeOptions, SignpostChannel
from timelane_core.settings import Settings
from timelane_core.testing import RecordingLogger


def test_defaults() -> None:
    settings = Settings.load()

    assert settings.enabled is True
    assert settings.channel == SignpostChannel()
    assert settings.channel.logger_name == "tools.timelane.subscriptions.DynamicStackTracing"
    assert settings.lanes == LaneTypeOptions.ALL
    assert settings.log_format == "text"
    assert settings.log_level == logging.INFO
    assert isinstance(settings.build_logger(), SignpostLogger)


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TIMELANE_SUBSYSTEM", "app.streams")
    monkeypatch.setenv("TIMELANE_LANES", "event")
    monkeypatch.setenv("TIMELANE_LOG_LEVEL", "debug")
    monkeypatch.setenv("TIMELANE_LOG_FORMAT", "json")

    settings = Settings.load()

    assert settings.subsystem == "app.streams"
    assert settings.lanes == LaneTypeOptions.EVENT
    assert settings.log_level == logging.DEBUG
    assert settings.log_format == "ndjson"


def test_toml_file_is_read(tmp_path: Path) -> None:
    (tmp_path / "timelane.toml").write_text('category = "FromToml"\nlanes = "subscription"\n', encoding="utf-8")

    settings = Settings.load(cwd=tmp_path)

    assert settings.category == "FromToml"
    assert settings.lanes == LaneTypeOptions.SUBSCRIPTION


def test_env_beats_toml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "timelane.toml").write_text('category = "FromToml"\n', encoding="utf-8")
    monkeypatch.setenv("TIMELANE_CATEGORY", "FromEnv")

    assert Settings.load(cwd=tmp_path).category == "FromEnv"


def test_explicit_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TIMELANE_ENABLED", "true")

    settings = Settings.load(enabled=False)

    assert settings.build_logger() is Loggers.disabled


def test_logger_spec_builds_custom_logger() -> None:
    settings = Settings.load(logger="timelane_core.testing:RecordingLogger")

    assert isinstance(settings.build_logger(), RecordingLogger)


@pytest.mark.parametrize(
    "overrides",
    [
        {"lanes": "sideways"},
        {"log_level": "loud"},
        {"log_format": "xml"},
    ],
)
def test_invalid_settings_raise_config_error(overrides: dict[str, str]) -> None:
    with pytest.raises(ConfigError):
        Settings.load(**overrides)
