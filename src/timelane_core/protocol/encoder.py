"""Render lifecycle transitions into the signpost wire format.

Records are flat ``key:value`` pairs joined with ``###``. Field order is fixed
per record kind::

    subscribe:<name>###source:<source>###id:<id>
    subscription:<name>###type:<type>###value:<text>###source:<source>###id:<id>
    completion:<code>###error:<message>
    version:<n>

Separators inside user text are written as-is; a name or value containing
``###`` or ``:`` will not decode cleanly.
"""

from __future__ import annotations

from timelane_core.models import EventType, SubscriptionEndState, SubscriptionStateCode

PROTOCOL_VERSION = 2

FIELD_SEPARATOR = "###"
KEY_VALUE_SEPARATOR = ":"

MAX_TEXT_LENGTH = 50
ELLIPSIS = "..."


def truncate(text: str, *, max_len: int = MAX_TEXT_LENGTH) -> str:
    """Cap ``text`` at ``max_len`` characters, marking the cut with ``...``."""

    return text if len(text) <= max_len else text[:max_len] + ELLIPSIS


def _render(*fields: tuple[str, object]) -> str:
    return FIELD_SEPARATOR.join(f"{key}{KEY_VALUE_SEPARATOR}{value}" for key, value in fields)


def encode_begin(name: str, source: str, identity: int) -> str:
    return _render(("subscribe", name), ("source", source), ("id", identity))


def encode_event(name: str, event_type: str, text: str, source: str, identity: int) -> str:
    return _render(
        ("subscription", name),
        ("type", event_type),
        ("value", truncate(text)),
        ("source", source),
        ("id", identity),
    )


def encode_end(code: SubscriptionStateCode | int, message: str) -> str:
    return _render(("completion", int(code)), ("error", truncate(message)))


def encode_version(version: int = PROTOCOL_VERSION) -> str:
    return _render(("version", version))


def render_event(name: str, event: EventType, source: str, identity: int) -> str:
    """Encode an :class:`EventType` for subscription ``name``."""

    return encode_event(name, event.type, event.text, source, identity)


def render_end(state: SubscriptionEndState) -> str:
    """Encode a :class:`SubscriptionEndState`."""

    return encode_end(state.code, state.error_message)


__all__ = [
    "ELLIPSIS",
    "FIELD_SEPARATOR",
    "KEY_VALUE_SEPARATOR",
    "MAX_TEXT_LENGTH",
    "PROTOCOL_VERSION",
    "encode_begin",
    "encode_end",
    "encode_event",
    "encode_version",
    "render_end",
    "render_event",
    "truncate",
]
