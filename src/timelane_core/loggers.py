"""Logger capabilities that receive rendered signpost records."""

from __future__ import annotations

import logging
from importlib import import_module
from typing import Iterable, Protocol, runtime_checkable

from timelane_core.exceptions import LoggerSpecError
from timelane_core.models import SignpostChannel, SignpostType

# Signpost id used for records that are not tied to one subscription.
SIGNPOST_ID_EXCLUSIVE = 0xEEEEB0B5B2B2EEEE

RECORD_NAME = "subscriptions"


@runtime_checkable
class Logger(Protocol):
    """Callable that delivers one rendered record to a channel."""

    def __call__(
        self,
        kind: SignpostType,
        channel: SignpostChannel,
        name: str,
        signpost_id: int,
        record: str,
    ) -> None: ...


@runtime_checkable
class ProxyLogger(Protocol):
    """An object that wants to receive records, see :meth:`Loggers.proxy`."""

    def log(
        self,
        kind: SignpostType,
        channel: SignpostChannel,
        name: str,
        signpost_id: int,
        record: str,
    ) -> None: ...


class SignpostLogger:
    """Forward records to the stdlib logger named after the channel.

    The rendered record is the log message; the signpost metadata rides along
    as ``extra`` attributes for :mod:`timelane_core.observability.formatters`.
    """

    def __init__(self, *, level: int = logging.INFO) -> None:
        self.level = level

    def __call__(
        self,
        kind: SignpostType,
        channel: SignpostChannel,
        name: str,
        signpost_id: int,
        record: str,
    ) -> None:
        target = logging.getLogger(channel.logger_name)
        if not target.isEnabledFor(self.level):
            return
        target.log(
            self.level,
            record,
            extra={
                "signpost_type": SignpostType(kind).value,
                "signpost_name": name,
                "signpost_id": signpost_id,
                "record": record,
            },
        )

    def __repr__(self) -> str:
        return f"SignpostLogger(level={logging.getLevelName(self.level)})"


class FanoutLogger:
    """Broadcast records to multiple loggers."""

    def __init__(self, loggers: Iterable[Logger]) -> None:
        self._loggers = tuple(loggers)

    def __call__(
        self,
        kind: SignpostType,
        channel: SignpostChannel,
        name: str,
        signpost_id: int,
        record: str,
    ) -> None:
        for logger in self._loggers:
            logger(kind, channel, name, signpost_id, record)


def _devnull(
    kind: SignpostType,
    channel: SignpostChannel,
    name: str,
    signpost_id: int,
    record: str,
) -> None:
    return None


class Loggers:
    """Commonly used loggers."""

    disabled: Logger = staticmethod(_devnull)  # type: ignore[assignment]

    @staticmethod
    def signpost(*, level: int = logging.INFO) -> Logger:
        return SignpostLogger(level=level)

    @staticmethod
    def proxy(to: ProxyLogger) -> Logger:
        return to.log

    @staticmethod
    def fanout(*loggers: Logger) -> Logger:
        return FanoutLogger(loggers)


def _split_spec(spec: str) -> tuple[str, str]:
    module_path, separator, attr = spec.partition(":")
    if not separator:
        module_path, dot, attr = spec.rpartition(".")
        if not dot:
            raise LoggerSpecError(f"Invalid logger specification: '{spec}'", spec=spec)
    if not module_path or not attr:
        raise LoggerSpecError(f"Invalid logger specification: '{spec}'", spec=spec)
    return module_path, attr


def load_logger(spec: str) -> Logger:
    """Return the logger referenced by ``spec`` (``module:attr`` or ``module.attr``).

    A class target is instantiated with no arguments.
    """

    spec = spec.strip()
    module_path, attr = _split_spec(spec)
    try:
        module = import_module(module_path)
    except ImportError as exc:
        raise LoggerSpecError(f"Cannot import logger module '{module_path}': {exc}", spec=spec) from exc

    candidate = module
    for part in attr.split("."):
        try:
            candidate = getattr(candidate, part)
        except AttributeError as exc:
            raise LoggerSpecError(f"Logger '{spec}' not found", spec=spec) from exc

    if isinstance(candidate, type):
        candidate = candidate()
    if not callable(candidate):
        raise LoggerSpecError(f"Logger '{spec}' is not callable", spec=spec)
    return candidate  # type: ignore[return-value]


__all__ = [
    "FanoutLogger",
    "Logger",
    "Loggers",
    "ProxyLogger",
    "RECORD_NAME",
    "SIGNPOST_ID_EXCLUSIVE",
    "SignpostLogger",
    "load_logger",
]
