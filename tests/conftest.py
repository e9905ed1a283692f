from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from timelane_core.registry import SubscriptionRegistry, set_default_registry
from timelane_core.testing import RecordingLogger


@pytest.fixture(autouse=True)
def isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Keep env overrides, config files and the process-wide registry out of each test."""

    for var in list(os.environ):
        if var.startswith("TIMELANE_"):
            monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    previous = set_default_registry(None)
    yield
    set_default_registry(previous)


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def registry(recorder: RecordingLogger) -> SubscriptionRegistry:
    """A fresh registry that has not sent its version record yet."""

    return SubscriptionRegistry(default_logger=recorder)


@pytest.fixture
def quiet_registry(recorder: RecordingLogger) -> SubscriptionRegistry:
    """A fresh registry that behaves as if the version record was already sent."""

    registry = SubscriptionRegistry(default_logger=recorder)
    registry.reset(did_emit_version=True)
    return registry
