"""Option[T] – explicit present/absent wrapper for optional cell values.

Projections may return ``None`` for an absent value; ``Some`` / ``Nothing``
make the intent explicit when ``None`` itself is meaningful to the caller.
A ``Nothing`` cell encodes as the empty string, a ``Some`` cell as its value.
"""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Some(Generic[T]):
    """Option with a value."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Some) and other._value == self._value

    def __hash__(self) -> int:
        return hash(("Some", self._value))

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


class Nothing(Generic[T]):
    """Empty option."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Nothing)

    def __hash__(self) -> int:
        return hash("Nothing")

    def __repr__(self) -> str:
        return "Nothing"


type Option[T] = Some[T] | Nothing[T]


def option_of(value: T | None) -> Option[T]:
    """Lift a nullable value: ``None`` becomes ``Nothing``, anything else ``Some``."""
    if value is None:
        return Nothing()
    return Some(value)


__all__ = ["Nothing", "Option", "Some", "option_of"]
