"""Domain errors – table definition and value encoding violations."""

from __future__ import annotations

from typing import Any

from csvtable.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule / invariant is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """A model invariant was violated."""

    default_code = "invariant_violation"


class EmptyTableError(InvariantViolationError):
    """A table was declared without any column."""

    default_code = "empty_table"

    def __init__(self, message: str = "A table needs at least one column", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class UnencodableValueError(DomainError):
    """A projection returned a value kind that has no cell encoding.

    ``value_type`` is the qualified name of the offending type.
    """

    default_code = "unencodable_value"

    def __init__(self, value: object, **kwargs: Any) -> None:
        value_type = type(value).__qualname__
        super().__init__(f"Cannot encode value of type '{value_type}' as a cell", **kwargs)
        self.value_type = value_type
        self._add_detail(value_type=value_type)


__all__ = [
    "DomainError",
    "EmptyTableError",
    "InvariantViolationError",
    "UnencodableValueError",
]
