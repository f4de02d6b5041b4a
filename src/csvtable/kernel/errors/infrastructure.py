"""Infrastructure errors – storage failures at the export boundary."""

from __future__ import annotations

from typing import Any

from csvtable.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class ExportWriteError(InfrastructureError):
    """The exported document could not be persisted by its sink."""

    default_code = "export_write_error"

    def __init__(
        self,
        location: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not write export to '{location}'", **kwargs)
        self.location = location
        self._add_detail(location=location)


__all__ = ["ExportWriteError", "InfrastructureError"]
