"""Value types shared across timelane_core modules.

Everything here is immutable; subscriptions hand these around freely between
threads without copying.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, IntEnum

from timelane_core.exceptions import InvalidLaneTypeError


class SignpostType(str, Enum):
    """Kind of record handed to a logger."""

    BEGIN = "begin"
    EVENT = "event"
    END = "end"


class SubscriptionStateCode(IntEnum):
    """Numeric completion codes written to ``end`` records."""

    ACTIVE = 0
    CANCELLED = 1
    ERROR = 2
    COMPLETED = 3


class EventKind(str, Enum):
    """Event variants; the value is the label written to the ``type`` field."""

    VALUE = "Output"
    COMPLETION = "Completed"
    ERROR = "Error"
    CANCELLED = "Cancelled"


@dataclass(frozen=True, slots=True)
class EventType:
    """A value or terminal event emitted by a subscription.

    Build instances with the named constructors::

        EventType.value("42")
        EventType.completion()
        EventType.error("boom")
        EventType.cancelled()
    """

    kind: EventKind
    text: str = ""

    @classmethod
    def value(cls, text: str) -> "EventType":
        return cls(EventKind.VALUE, text)

    @classmethod
    def completion(cls) -> "EventType":
        return cls(EventKind.COMPLETION)

    @classmethod
    def error(cls, message: str) -> "EventType":
        return cls(EventKind.ERROR, message)

    @classmethod
    def cancelled(cls) -> "EventType":
        return cls(EventKind.CANCELLED)

    @property
    def type(self) -> str:
        """Canonical label for the ``type`` field."""

        return self.kind.value


@dataclass(frozen=True, slots=True)
class SubscriptionEndState:
    """How a subscription finished."""

    code: SubscriptionStateCode
    message: str = ""

    @classmethod
    def completed(cls) -> "SubscriptionEndState":
        return cls(SubscriptionStateCode.COMPLETED)

    @classmethod
    def error(cls, message: str) -> "SubscriptionEndState":
        return cls(SubscriptionStateCode.ERROR, message)

    @classmethod
    def cancelled(cls) -> "SubscriptionEndState":
        return cls(SubscriptionStateCode.CANCELLED)

    @property
    def error_message(self) -> str:
        # Only the error state carries text onto the wire.
        return self.message if self.code is SubscriptionStateCode.ERROR else ""


class LaneType(IntEnum):
    """A lane to plot data on."""

    SUBSCRIPTION = 0
    EVENT = 1


class LaneTypeOptions(Flag):
    """One or more lanes a caller intends to target.

    Advisory only: the registry never reads these, callers such as operator
    wrappers use them to decide which lifecycle calls to make.
    """

    NONE = 0
    SUBSCRIPTION = 1 << 0
    EVENT = 1 << 1
    ALL = SUBSCRIPTION | EVENT

    @classmethod
    def parse(cls, value: "str | LaneTypeOptions | None") -> "LaneTypeOptions":
        """Parse ``"subscription,event"`` style selectors (case-insensitive)."""

        if isinstance(value, LaneTypeOptions):
            return value
        if value is None:
            return cls.ALL

        result = cls.NONE
        for part in str(value).split(","):
            name = part.strip()
            if not name:
                continue
            try:
                result |= cls[name.upper()]
            except KeyError:
                raise InvalidLaneTypeError(
                    f"Unknown lane type '{name}' (expected subscription, event or all)",
                    name=name,
                ) from None
        return result

    def lane_types(self) -> tuple[LaneType, ...]:
        """Return the individual lanes selected by these options."""

        lanes: list[LaneType] = []
        if self & LaneTypeOptions.SUBSCRIPTION:
            lanes.append(LaneType.SUBSCRIPTION)
        if self & LaneTypeOptions.EVENT:
            lanes.append(LaneType.EVENT)
        return tuple(lanes)


DEFAULT_SUBSYSTEM = "tools.timelane.subscriptions"
DEFAULT_CATEGORY = "DynamicStackTracing"


@dataclass(frozen=True, slots=True)
class SignpostChannel:
    """Identifies the logging channel records are written to."""

    subsystem: str = DEFAULT_SUBSYSTEM
    category: str = DEFAULT_CATEGORY

    @property
    def logger_name(self) -> str:
        return ".".join(part for part in (self.subsystem, self.category) if part)


__all__ = [
    "DEFAULT_CATEGORY",
    "DEFAULT_SUBSYSTEM",
    "EventKind",
    "EventType",
    "LaneType",
    "LaneTypeOptions",
    "SignpostChannel",
    "SignpostType",
    "SubscriptionEndState",
    "SubscriptionStateCode",
]
