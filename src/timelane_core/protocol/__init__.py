"""Signpost record wire format."""

from .decoder import DecodedRecord, decode, decode_fields
from .encoder import (
    ELLIPSIS,
    FIELD_SEPARATOR,
    KEY_VALUE_SEPARATOR,
    MAX_TEXT_LENGTH,
    PROTOCOL_VERSION,
    encode_begin,
    encode_end,
    encode_event,
    encode_version,
    render_end,
    render_event,
    truncate,
)

__all__ = [
    "DecodedRecord",
    "ELLIPSIS",
    "FIELD_SEPARATOR",
    "KEY_VALUE_SEPARATOR",
    "MAX_TEXT_LENGTH",
    "PROTOCOL_VERSION",
    "decode",
    "decode_fields",
    "encode_begin",
    "encode_end",
    "encode_event",
    "encode_version",
    "render_end",
    "render_event",
    "truncate",
]
