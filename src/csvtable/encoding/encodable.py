"""Encoding – per-value-kind rendering of a single cell.

Supported kinds, checked in this order:

* ``None`` / :class:`Nothing` → ``""``
* :class:`Some` → the wrapped value, encoded with the same configuration
* :class:`CsvEncodable` → ``value.encode_csv(configuration)``
* ``str`` → unchanged
* ``bool`` → the configuration's token pair (before ``int``, its base class)
* ``int`` → base-10 digits
* ``float`` → ``str(value)``; non-finite values render as ``nan``, ``inf``, ``-inf``
* ``uuid.UUID`` → lowercase hyphenated hex
* ``datetime`` → the configuration's date strategy
* ``date`` → as a ``datetime`` at midnight UTC
"""
from __future__ import annotations

import uuid
from datetime import UTC, date, datetime, time
from typing import Protocol, runtime_checkable

from csvtable.config.encoder import DEFAULT_CONFIGURATION, EncoderConfiguration
from csvtable.kernel.errors import UnencodableValueError
from csvtable.kernel.types import Nothing, Some

__all__ = ["CsvEncodable", "EncodableValue", "encode_value"]


@runtime_checkable
class CsvEncodable(Protocol):
    """Port: a value that knows how to render itself as a raw cell string."""

    def encode_csv(self, configuration: EncoderConfiguration) -> str: ...


type EncodableValue = (
    str | bool | int | float | uuid.UUID | datetime | date
    | CsvEncodable | Some[EncodableValue] | Nothing[EncodableValue] | None
)


def encode_value(
    value: EncodableValue,
    configuration: EncoderConfiguration = DEFAULT_CONFIGURATION,
) -> str:
    """Return the raw (unescaped) cell text for *value*.

    Raises:
        UnencodableValueError: *value* is none of the supported kinds.
    """
    while isinstance(value, Some):
        value = value.value
    if value is None or isinstance(value, Nothing):
        return ""
    if isinstance(value, CsvEncodable):
        return value.encode_csv(configuration)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        true_token, false_token = configuration.bool_tokens
        return true_token if value else false_token
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return str(float(value))
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, datetime):
        return configuration.date_strategy.encode(value)
    if isinstance(value, date):
        return configuration.date_strategy.encode(datetime.combine(value, time(), tzinfo=UTC))
    raise UnencodableValueError(value)
