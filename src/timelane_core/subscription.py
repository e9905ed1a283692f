"""Subscriptions report their lifecycle as signpost records."""

from __future__ import annotations

import logging

from timelane_core.loggers import RECORD_NAME, Logger
from timelane_core.models import EventType, SignpostType, SubscriptionEndState
from timelane_core.protocol.encoder import encode_begin, render_end, render_event
from timelane_core.registry import SubscriptionRegistry, get_default_registry

log = logging.getLogger(__name__)


class Subscription:
    """A completable or indefinite publisher that could emit values.

    A subscription has a ``begin`` record (plotted on subscription lanes) and
    optionally any of:

    - value events, one per emitted value (plotted on event lanes)
    - a terminal event: completion, failure or cancellation
    - an ``end`` record carrying the final state

    The first :meth:`begin` or :meth:`event` call made by any subscription of
    a registry is preceded by the protocol version record.
    """

    __slots__ = ("_identity", "_name", "_logger", "_registry")

    def __init__(
        self,
        name: str | None = None,
        logger: Logger | None = None,
        *,
        registry: SubscriptionRegistry | None = None,
    ) -> None:
        self._registry = registry or get_default_registry()
        self._identity = self._registry.next_identity()
        self._name = name if name is not None else f"subscription-{self._identity}"
        self._logger = logger if logger is not None else self._registry.default_logger
        log.debug("Created subscription %s (%s)", self.identity, self.name)

    @property
    def identity(self) -> int:
        return self._identity

    @property
    def name(self) -> str:
        return self._name

    @property
    def logger(self) -> Logger:
        return self._logger

    @property
    def registry(self) -> SubscriptionRegistry:
        return self._registry

    def __repr__(self) -> str:
        return f"Subscription(name={self.name!r}, identity={self.identity})"

    def begin(self, source: str = "") -> None:
        """Start the subscription, optionally naming the source that started it."""

        self.registry.emit_version_if_needed(self.logger)
        self._emit(SignpostType.BEGIN, encode_begin(self.name, source, self.identity))

    def event(self, event: EventType, source: str = "") -> None:
        """Log a value or terminal event emitted by this subscription."""

        self.registry.emit_version_if_needed(self.logger)
        self._emit(SignpostType.EVENT, render_event(self.name, event, source, self.identity))

    def end(self, state: SubscriptionEndState) -> None:
        """End the subscription as completed, failed or cancelled."""

        # No handshake check here: end records never carry it.
        self._emit(SignpostType.END, render_end(state))

    def _emit(self, kind: SignpostType, record: str) -> None:
        self.logger(kind, self.registry.channel, RECORD_NAME, self.identity, record)


__all__ = ["Subscription"]
