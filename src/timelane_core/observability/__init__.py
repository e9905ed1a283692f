"""Stdlib logging output for the signpost channel."""

from .context import SignpostLogContext, configure_from_settings, configure_signpost_logging
from .formatters import NdjsonFormatter, TextFormatter

__all__ = [
    "NdjsonFormatter",
    "SignpostLogContext",
    "TextFormatter",
    "configure_from_settings",
    "configure_signpost_logging",
]
