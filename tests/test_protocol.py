from __future__ import annotations

import pytest

from timelane_core.models import EventType, SubscriptionEndState, SubscriptionStateCode
from timelane_core.protocol import (
    DecodedRecord,
    decode,
    decode_fields,
    encode_begin,
    encode_end,
    encode_event,
    encode_version,
    render_end,
    render_event,
    truncate,
)


def test_begin_record_layout() -> None:
    assert encode_begin("S", "src", 7) == "subscribe:S###source:src###id:7"


def test_event_record_layout() -> None:
    record = encode_event("S", "Output", "42", "", 7)

    assert record == "subscription:S###type:Output###value:42###source:###id:7"


def test_end_record_layout() -> None:
    assert encode_end(SubscriptionStateCode.ERROR, "boom") == "completion:2###error:boom"
    assert encode_end(SubscriptionStateCode.COMPLETED, "") == "completion:3###error:"


def test_version_record_layout() -> None:
    assert encode_version() == "version:2"
    assert encode_version(5) == "version:5"


@pytest.mark.parametrize(
    ("state", "completion", "error"),
    [
        (SubscriptionEndState.completed(), "3", ""),
        (SubscriptionEndState.error("msg"), "2", "msg"),
        (SubscriptionEndState.cancelled(), "1", ""),
    ],
)
def test_end_state_mapping(state: SubscriptionEndState, completion: str, error: str) -> None:
    decoded = decode(render_end(state))

    assert decoded.completion == completion
    assert decoded.error == error


@pytest.mark.parametrize(
    ("event", "label", "value"),
    [
        (EventType.value("v"), "Output", "v"),
        (EventType.completion(), "Completed", ""),
        (EventType.error("bad"), "Error", "bad"),
        (EventType.cancelled(), "Cancelled", ""),
    ],
)
def test_event_type_mapping(event: EventType, label: str, value: str) -> None:
    decoded = decode(render_event("S", event, "", 1))

    assert decoded.type == label
    assert decoded.value == value


def test_truncation_boundary() -> None:
    assert truncate("a" * 50) == "a" * 50
    assert truncate("a" * 51) == "a" * 50 + "..."
    assert truncate("") == ""


def test_source_and_name_are_not_truncated() -> None:
    long_name = "n" * 80
    decoded = decode(encode_begin(long_name, "s" * 80, 1))

    assert decoded.subscribe == long_name
    assert decoded.source == "s" * 80


def test_round_trip_each_record_kind() -> None:
    assert decode_fields(encode_begin("Search", "VM.load", 12)) == {
        "subscribe": "Search",
        "source": "VM.load",
        "id": "12",
    }
    assert decode_fields(encode_event("Search", "Error", "timeout", "VM.map", 12)) == {
        "subscription": "Search",
        "type": "Error",
        "value": "timeout",
        "source": "VM.map",
        "id": "12",
    }
    assert decode_fields(encode_end(1, "")) == {"completion": "1", "error": ""}
    assert decode_fields(encode_version(2)) == {"version": "2"}


def test_round_trip_truncates_long_payload() -> None:
    text = "0123456789" * 6
    decoded = decode(encode_event("S", "Output", text, "", 1))

    assert decoded.value == text[:50] + "..."


def test_decoder_drops_malformed_segments() -> None:
    fields = decode_fields("subscribe:S###garbage###value:a:b###id:3###")

    assert fields == {"subscribe": "S", "id": "3"}


def test_decoder_tolerates_empty_input() -> None:
    assert decode_fields("") == {}
    assert decode("") == DecodedRecord()


def test_decoded_record_missing_fields_are_none() -> None:
    decoded = decode(encode_begin("S", "", 1))

    assert decoded.subscribe == "S"
    assert decoded.subscription is None
    assert decoded.value is None
    assert decoded.version is None
    assert decoded.completion is None


def test_separator_in_name_corrupts_decoding() -> None:
    decoded = decode(encode_begin("a###b", "", 1))

    # Known limitation: "b" becomes a segment without a key and is dropped.
    assert decoded.subscribe == "a"
    assert decoded.id == "1"


def test_output_summary() -> None:
    decoded = decode(encode_event("S", "Output", "42", "", 1))

    assert decoded.output_summary == "Output, S, 42"
    assert decode("").output_summary == ", , "
