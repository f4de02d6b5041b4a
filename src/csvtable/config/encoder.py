"""Encoder configuration – date and boolean rendering strategies.

A configuration is a frozen bundle of exactly one date strategy and one
boolean strategy. Every strategy is itself immutable, so a configuration can
be shared between threads and concurrent exports without locking.

Usage::

    from csvtable.config import BoolEncodingStrategy, EncoderConfiguration, Formatted

    config = EncoderConfiguration(
        date_strategy=Formatted.pattern("%d/%m/%Y"),
        bool_strategy=BoolEncodingStrategy.YES_NO,
    )
"""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime, tzinfo
from enum import Enum
from typing import Any, Callable, Protocol, runtime_checkable

REFERENCE_EPOCH = datetime(2001, 1, 1, tzinfo=UTC)


def as_utc(value: datetime) -> datetime:
    """Normalise *value* to UTC; naive datetimes are taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


# ---------------------------------------------------------------------------
# Date strategies
# ---------------------------------------------------------------------------


@runtime_checkable
class DateFormatter(Protocol):
    """Port: anything able to turn a datetime into display text."""

    def format(self, value: datetime) -> str: ...


@dataclasses.dataclass(frozen=True)
class StrftimeFormatter:
    """``strftime``-pattern formatter rendering in a fixed timezone."""

    pattern: str
    tz: tzinfo = UTC

    def format(self, value: datetime) -> str:
        return as_utc(value).astimezone(self.tz).strftime(self.pattern)


@dataclasses.dataclass(frozen=True)
class DeferredToDate:
    """Seconds since 2001-01-01T00:00:00Z as a float literal."""

    def encode(self, value: datetime) -> str:
        return str((as_utc(value) - REFERENCE_EPOCH).total_seconds())


@dataclasses.dataclass(frozen=True)
class ISO8601:
    """``YYYY-MM-DDThh:mm:ssZ`` in UTC, whole seconds."""

    def encode(self, value: datetime) -> str:
        v = as_utc(value)
        return (
            f"{v.year:04d}-{v.month:02d}-{v.day:02d}"
            f"T{v.hour:02d}:{v.minute:02d}:{v.second:02d}Z"
        )


@dataclasses.dataclass(frozen=True)
class Formatted:
    """Delegate to a caller-supplied :class:`DateFormatter`."""

    formatter: DateFormatter

    @classmethod
    def pattern(cls, pattern: str, tz: tzinfo = UTC) -> Formatted:
        return cls(StrftimeFormatter(pattern, tz))

    def encode(self, value: datetime) -> str:
        return self.formatter.format(value)


@dataclasses.dataclass(frozen=True)
class CustomDate:
    """Delegate to a caller-supplied pure function."""

    func: Callable[[datetime], str]

    def encode(self, value: datetime) -> str:
        return self.func(value)


type DateEncodingStrategy = DeferredToDate | ISO8601 | Formatted | CustomDate


# ---------------------------------------------------------------------------
# Boolean strategies
# ---------------------------------------------------------------------------


class BoolEncodingStrategy(Enum):
    """Fixed ``(true, false)`` token pairs."""

    TRUE_FALSE = ("true", "false")
    TRUE_FALSE_UPPERCASE = ("TRUE", "FALSE")
    YES_NO = ("yes", "no")
    YES_NO_UPPERCASE = ("YES", "NO")
    INTEGER = ("1", "0")

    @property
    def tokens(self) -> tuple[str, str]:
        return self.value


@dataclasses.dataclass(frozen=True)
class CustomBool:
    """Caller-chosen ``(true, false)`` tokens."""

    true: str
    false: str

    @property
    def tokens(self) -> tuple[str, str]:
        return (self.true, self.false)


type BoolStrategy = BoolEncodingStrategy | CustomBool


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class EncoderConfiguration:
    """Immutable strategy bundle consulted by every value encoder.

    ``quote_line_breaks`` extends the quoting rule to real CR/LF characters;
    it is off by default so output stays compatible with the literal
    backslash-n check.
    """

    date_strategy: DateEncodingStrategy = ISO8601()
    bool_strategy: BoolStrategy = BoolEncodingStrategy.TRUE_FALSE
    quote_line_breaks: bool = False

    @property
    def bool_tokens(self) -> tuple[str, str]:
        return self.bool_strategy.tokens

    def with_changes(self, **changes: Any) -> EncoderConfiguration:
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)


DEFAULT_CONFIGURATION = EncoderConfiguration()

__all__ = [
    "DEFAULT_CONFIGURATION",
    "REFERENCE_EPOCH",
    "BoolEncodingStrategy",
    "BoolStrategy",
    "CustomBool",
    "CustomDate",
    "DateEncodingStrategy",
    "DateFormatter",
    "DeferredToDate",
    "EncoderConfiguration",
    "Formatted",
    "ISO8601",
    "StrftimeFormatter",
    "as_utc",
]
