"""Parse signpost records back into named fields."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .encoder import FIELD_SEPARATOR, KEY_VALUE_SEPARATOR


def decode_fields(record: str) -> dict[str, str]:
    """Split ``record`` into a field mapping.

    A segment that does not split into exactly one key and one value is
    skipped, so a value containing ``:`` drops its whole field.
    """

    fields: dict[str, str] = {}
    for part in record.split(FIELD_SEPARATOR):
        pair = part.split(KEY_VALUE_SEPARATOR)
        if len(pair) != 2:
            continue
        fields[pair[0]] = pair[1]
    return fields


class DecodedRecord(BaseModel):
    """Typed view over a decoded record; fields a record never carries are ``None``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    subscribe: str | None = None

    completion: str | None = None
    error: str | None = None

    subscription: str | None = None
    type: str | None = None
    value: str | None = None
    source: str | None = None
    id: str | None = None

    version: str | None = None

    @property
    def output_summary(self) -> str:
        return f"{self.type or ''}, {self.subscription or ''}, {self.value or ''}"


def decode(record: str) -> DecodedRecord:
    return DecodedRecord.model_validate(decode_fields(record))


__all__ = ["DecodedRecord", "decode", "decode_fields"]
