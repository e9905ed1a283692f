from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from timelane_core.models import SignpostChannel
from timelane_core.observability.formatters import NdjsonFormatter, TextFormatter
from timelane_core.settings import Settings


@dataclass
class SignpostLogContext:
    channel: SignpostChannel
    _base_logger: logging.Logger
    _handlers: list[logging.Handler]
    _previous_level: int = logging.NOTSET

    @property
    def logger(self) -> logging.Logger:
        return self._base_logger

    def close(self) -> None:
        for h in list(self._handlers):
            self._base_logger.removeHandler(h)
            h.close()
        self._handlers.clear()
        self._base_logger.setLevel(self._previous_level)

    def __enter__(self) -> "SignpostLogContext":
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:
        self.close()


def configure_signpost_logging(
    *,
    channel: SignpostChannel | None = None,
    log_format: str = "text",
    log_level: int = logging.INFO,
    enable_console_logging: bool = True,
    log_file: Path | None = None,
) -> SignpostLogContext:
    """Attach console and/or file handlers to the stdlib logger behind ``channel``."""

    fmt = (log_format or "text").strip().lower()
    if fmt == "json":
        fmt = "ndjson"
    if fmt not in {"text", "ndjson"}:
        raise ValueError("log_format must be 'text' or 'ndjson' (or 'json')")

    formatter: logging.Formatter = NdjsonFormatter() if fmt == "ndjson" else TextFormatter()

    handlers: list[logging.Handler] = []

    if enable_console_logging:
        h = logging.StreamHandler(sys.stderr)
        h.setLevel(log_level)
        h.setFormatter(formatter)
        handlers.append(h)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        fh.setLevel(log_level)
        fh.setFormatter(formatter)
        handlers.append(fh)

    channel = channel or SignpostChannel()
    base_logger = logging.getLogger(channel.logger_name)
    previous_level = base_logger.level
    base_logger.setLevel(log_level)
    for h in handlers:
        base_logger.addHandler(h)

    return SignpostLogContext(
        channel=channel,
        _base_logger=base_logger,
        _handlers=handlers,
        _previous_level=previous_level,
    )


def configure_from_settings(
    settings: Settings,
    *,
    log_file: Path | None = None,
    enable_console_logging: bool = True,
) -> SignpostLogContext:
    return configure_signpost_logging(
        channel=settings.channel,
        log_format=settings.log_format,
        log_level=settings.log_level,
        enable_console_logging=enable_console_logging,
        log_file=log_file,
    )


__all__ = [
    "SignpostLogContext",
    "configure_from_settings",
    "configure_signpost_logging",
]
