"""Application export – ExportService hands a rendered table to a sink."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Iterable, TypeVar

from csvtable.application.export.sink import ExportSink, FileSystemSink
from csvtable.config.settings import ExportSettings
from csvtable.kernel.errors import BaseError, ExportWriteError
from csvtable.observability.logging import get_logger
from csvtable.table import Table

__all__ = ["CSV_EXTENSION", "ExportResult", "ExportService", "report_filename"]

R = TypeVar("R")

CSV_EXTENSION = ".csv"


def report_filename(subject: str, suffix: str = "Report") -> str:
    """``"<subject>-<suffix>.csv"``; a blank subject yields ``"<suffix>.csv"``.

    Path separators in *subject* are replaced with ``_``.
    """
    subject = subject.strip().replace("/", "_").replace("\\", "_")
    stem = f"{subject}-{suffix}" if subject else suffix
    return f"{stem}{CSV_EXTENSION}"


@dataclass(frozen=True)
class ExportResult:
    """Outcome of a successful export."""

    location: str
    name: str
    row_count: int
    size_bytes: int


class ExportService:
    """Renders a :class:`Table` and persists the document through an :class:`ExportSink`.

    Storage failures are logged and re-raised as :class:`ExportWriteError`
    so the caller can report them.
    """

    def __init__(self, sink: ExportSink, *, bom: bool = False, logger: Any = None) -> None:
        self._sink = sink
        self._bom = bom
        self._log = logger if logger is not None else get_logger(__name__)

    @classmethod
    def from_settings(cls, settings: ExportSettings) -> ExportService:
        return cls(FileSystemSink(settings.output_dir), bom=settings.bom)

    async def export(self, table: Table[R], records: Iterable[R], name: str) -> ExportResult:
        """Render *records* through *table* and write them as *name*.

        Every failure, whether raised while rendering or while writing, is
        logged as ``export.failed`` before it propagates. ``OSError`` from the
        sink is wrapped in :class:`ExportWriteError`.
        """
        if not name.endswith(CSV_EXTENSION):
            name = f"{name}{CSV_EXTENSION}"
        start = time.monotonic()

        try:
            rows = list(records)
            data = table.export_bytes(rows, bom=self._bom)
            location = await self._sink.write(name, data)
        except OSError as exc:
            failure = ExportWriteError(name, cause=exc)
            self._log_failure(name, failure)
            raise failure from exc
        except Exception as exc:
            self._log_failure(name, exc)
            raise

        duration_ms = (time.monotonic() - start) * 1000
        self._log.info(
            "export.completed",
            location=location,
            rows=len(rows),
            size_bytes=len(data),
            duration_ms=round(duration_ms, 3),
        )
        return ExportResult(location=location, name=name, row_count=len(rows), size_bytes=len(data))

    def _log_failure(self, name: str, exc: Exception) -> None:
        if isinstance(exc, BaseError):
            error = exc.to_dict()
        else:
            error = {"error": type(exc).__name__, "message": str(exc)}
        self._log.error("export.failed", name=name, error=error)
