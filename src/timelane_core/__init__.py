"""Public API for :mod:`timelane_core`."""

from __future__ import annotations

from importlib import metadata as _metadata

from .exceptions import ConfigError, InvalidLaneTypeError, LoggerSpecError, TimelaneError
from .loggers import Logger, Loggers, ProxyLogger, SIGNPOST_ID_EXCLUSIVE, SignpostLogger, load_logger
from .models import (
    EventKind,
    EventType,
    LaneType,
    LaneTypeOptions,
    SignpostChannel,
    SignpostType,
    SubscriptionEndState,
    SubscriptionStateCode,
)
from .protocol import PROTOCOL_VERSION
from .registry import (
    SubscriptionRegistry,
    get_default_logger,
    get_default_registry,
    set_default_logger,
    set_default_registry,
)
from .settings import Settings
from .subscription import Subscription

try:  # pragma: no cover - executed when package metadata is available
    __version__ = _metadata.version("timelane-core")
except _metadata.PackageNotFoundError:  # pragma: no cover - local source tree fallback
    __version__ = "0.0.0"

__all__ = [
    "ConfigError",
    "EventKind",
    "EventType",
    "InvalidLaneTypeError",
    "LaneType",
    "LaneTypeOptions",
    "Logger",
    "LoggerSpecError",
    "Loggers",
    "PROTOCOL_VERSION",
    "ProxyLogger",
    "SIGNPOST_ID_EXCLUSIVE",
    "Settings",
    "SignpostChannel",
    "SignpostLogger",
    "SignpostType",
    "Subscription",
    "SubscriptionEndState",
    "SubscriptionRegistry",
    "SubscriptionStateCode",
    "TimelaneError",
    "__version__",
    "get_default_logger",
    "get_default_registry",
    "load_logger",
    "set_default_logger",
    "set_default_registry",
]
