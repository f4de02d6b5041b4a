"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── InvariantViolationError
    │   │   └── EmptyTableError
    │   └── UnencodableValueError
    ├── ApplicationError         (application.py)
    └── InfrastructureError      (infrastructure.py)
        └── ExportWriteError
"""

from csvtable.kernel.errors.application import ApplicationError
from csvtable.kernel.errors.base import BaseError
from csvtable.kernel.errors.domain import (
    DomainError,
    EmptyTableError,
    InvariantViolationError,
    UnencodableValueError,
)
from csvtable.kernel.errors.infrastructure import ExportWriteError, InfrastructureError

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
