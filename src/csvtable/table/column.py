"""Table – Column definition."""
from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from csvtable.encoding import EncodableValue

__all__ = ["Column"]

R = TypeVar("R")


@dataclass(frozen=True)
class Column(Generic[R]):
    """A header label plus the projection that extracts its cell from a record."""

    header: str
    projection: Callable[[R], EncodableValue]

    @classmethod
    def attribute(cls, header: str, path: str) -> Column[R]:
        """Column reading ``record.<path>``; dotted paths walk nested attributes."""
        return cls(header, operator.attrgetter(path))

    @classmethod
    def key(cls, header: str, key: str) -> Column[R]:
        """Column reading ``record[key]``, for mapping-shaped records."""
        return cls(header, operator.itemgetter(key))

    def value_for(self, record: R) -> EncodableValue:
        return self.projection(record)
