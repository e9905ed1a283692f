"""Shared state behind every subscription: identities and the version handshake.

A :class:`SubscriptionRegistry` owns the identity counter, the "version already
sent" flag and the default logger, all behind one reentrant lock. Subscriptions
use the process-wide registry from :func:`get_default_registry` unless one is
injected.
"""

from __future__ import annotations

import logging
import threading

from timelane_core.exceptions import ConfigError
from timelane_core.loggers import RECORD_NAME, SIGNPOST_ID_EXCLUSIVE, Logger, Loggers
from timelane_core.models import SignpostChannel, SignpostType
from timelane_core.protocol.encoder import PROTOCOL_VERSION, encode_version
from timelane_core.settings import Settings

log = logging.getLogger(__name__)


class SubscriptionRegistry:
    """Allocates subscription identities and emits the protocol version once."""

    def __init__(
        self,
        *,
        default_logger: Logger,
        channel: SignpostChannel | None = None,
        protocol_version: int = PROTOCOL_VERSION,
    ) -> None:
        self._lock = threading.RLock()
        self._counter = 0
        self._did_emit_version = False
        self._default_logger = default_logger
        self.channel = channel or SignpostChannel()
        self.protocol_version = protocol_version

    @classmethod
    def from_settings(cls, settings: Settings) -> "SubscriptionRegistry":
        return cls(default_logger=settings.build_logger(), channel=settings.channel)

    # ------------------------------------------------------------------ #
    # Identities
    # ------------------------------------------------------------------ #

    def next_identity(self) -> int:
        with self._lock:
            self._counter += 1
            return self._counter

    @property
    def last_identity(self) -> int:
        with self._lock:
            return self._counter

    # ------------------------------------------------------------------ #
    # Version handshake
    # ------------------------------------------------------------------ #

    @property
    def did_emit_version(self) -> bool:
        with self._lock:
            return self._did_emit_version

    def emit_version_if_needed(self, emitter: Logger) -> bool:
        """Send the version record through ``emitter`` unless already sent.

        The record is written while the lock is held, so any caller that
        returns from here has its version record already delivered.
        """

        with self._lock:
            if self._did_emit_version:
                return False
            emitter(
                SignpostType.EVENT,
                self.channel,
                RECORD_NAME,
                SIGNPOST_ID_EXCLUSIVE,
                encode_version(self.protocol_version),
            )
            self._did_emit_version = True
        log.debug("Emitted timelane protocol version %s", self.protocol_version)
        return True

    def reset(self, *, did_emit_version: bool = False) -> None:
        """Set the handshake flag; identities keep counting up."""

        with self._lock:
            self._did_emit_version = did_emit_version

    # ------------------------------------------------------------------ #
    # Default logger
    # ------------------------------------------------------------------ #

    @property
    def default_logger(self) -> Logger:
        with self._lock:
            return self._default_logger

    @default_logger.setter
    def default_logger(self, value: Logger) -> None:
        with self._lock:
            self._default_logger = value
        log.debug("Default timelane logger set to %r", value)


_default_registry: SubscriptionRegistry | None = None
_default_registry_lock = threading.Lock()
_building = threading.local()


def _fallback_registry() -> SubscriptionRegistry:
    return SubscriptionRegistry(default_logger=Loggers.signpost())


def _build_default_registry() -> SubscriptionRegistry:
    try:
        return SubscriptionRegistry.from_settings(Settings.load())
    except ConfigError:
        log.warning("Invalid timelane settings; using the built-in signpost logger", exc_info=True)
        return _fallback_registry()


def get_default_registry() -> SubscriptionRegistry:
    """Return the process-wide registry, building it from :class:`Settings` on first use.

    Invalid settings fall back to the signpost logger on the default channel.
    The registry is built outside the lock; a configured logger that asks for
    the default logger while it is being constructed gets the fallback
    registry's logger.
    """

    global _default_registry
    with _default_registry_lock:
        if _default_registry is not None:
            return _default_registry

    if getattr(_building, "active", False):
        return _fallback_registry()

    _building.active = True
    try:
        registry = _build_default_registry()
    finally:
        _building.active = False

    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = registry
        return _default_registry


def set_default_registry(registry: SubscriptionRegistry | None) -> SubscriptionRegistry | None:
    """Swap the process-wide registry; returns the previous one.

    Passing ``None`` makes the next :func:`get_default_registry` call rebuild
    it from settings.
    """

    global _default_registry
    with _default_registry_lock:
        previous = _default_registry
        _default_registry = registry
        return previous


def get_default_logger() -> Logger:
    return get_default_registry().default_logger


def set_default_logger(value: Logger) -> None:
    get_default_registry().default_logger = value


__all__ = [
    "SubscriptionRegistry",
    "get_default_logger",
    "get_default_registry",
    "set_default_logger",
    "set_default_registry",
]
