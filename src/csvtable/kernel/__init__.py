"""Kernel – framework-agnostic building blocks."""

from csvtable.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    EmptyTableError,
    ExportWriteError,
    InfrastructureError,
    InvariantViolationError,
    UnencodableValueError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "EmptyTableError",
    "ExportWriteError",
    "InfrastructureError",
    "InvariantViolationError",
    "UnencodableValueError",
]
