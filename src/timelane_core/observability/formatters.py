from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from timelane_core.protocol.decoder import decode_fields


def _rfc3339_utc(created: float) -> str:
    return (
        datetime.fromtimestamp(created, tz=timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def _shorten(value: Any, *, max_len: int = 120) -> str:
    text = str(value)
    return text if len(text) <= max_len else (text[: max_len - 1] + "…")


class _SignpostFormatter(logging.Formatter):
    def _to_signpost_record(self, record: logging.LogRecord) -> dict[str, Any]:
        # Injected by SignpostLogger; fallbacks keep formatters usable for plain records.
        raw = getattr(record, "record", None)
        if raw is None:
            raw = record.getMessage()

        out: dict[str, Any] = {
            "timestamp": _rfc3339_utc(record.created),
            "channel": record.name,
            "signpost_type": getattr(record, "signpost_type", None) or "event",
            "name": getattr(record, "signpost_name", None) or "",
            "signpost_id": getattr(record, "signpost_id", None),
            "record": str(raw),
        }

        fields = decode_fields(str(raw))
        if fields:
            out["fields"] = fields

        return out


class NdjsonFormatter(_SignpostFormatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        payload = self._to_signpost_record(record)
        return json.dumps(payload, ensure_ascii=False, default=str, separators=(",", ":"))


class TextFormatter(_SignpostFormatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        payload = self._to_signpost_record(record)
        head = f"[{payload['timestamp']}] {payload['signpost_type'].upper()} {payload['name']}".rstrip()

        signpost_id = payload.get("signpost_id")
        if signpost_id is not None:
            head += f" #{signpost_id}"

        fields = payload.get("fields")
        if fields:
            items = [f"{key}={_shorten(value)}" for key, value in fields.items()]
            head += " (" + ", ".join(items) + ")"
        else:
            head += f": {_shorten(payload['record'])}"

        return head


__all__ = [
    "NdjsonFormatter",
    "TextFormatter",
]
