"""Timelane error hierarchy."""

from __future__ import annotations


class TimelaneError(Exception):
    """Base class for timelane-specific exceptions."""


class ConfigError(TimelaneError):
    """Raised when settings or configured loggers are invalid."""


class InvalidLaneTypeError(ConfigError, ValueError):
    """Raised when a lane selector names an unknown lane."""

    def __init__(self, message: str, *, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


class LoggerSpecError(ConfigError):
    """Raised when a ``module:attr`` logger reference cannot be resolved."""

    def __init__(self, message: str, *, spec: str | None = None) -> None:
        super().__init__(message)
        self.spec = spec


__all__ = [
    "ConfigError",
    "InvalidLaneTypeError",
    "LoggerSpecError",
    "TimelaneError",
]
