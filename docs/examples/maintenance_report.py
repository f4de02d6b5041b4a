"""Write a vehicle maintenance report as CSV.

Run with::

    CSVTABLE_OUTPUT_DIR=/tmp/reports python docs/examples/maintenance_report.py
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from csvtable.application.export import ExportService, report_filename
from csvtable.config import EnvSettingsLoader, ExportSettings
from csvtable.kernel.errors import ExportWriteError
from csvtable.observability.logging import JsonLoggerFactory, get_logger
from csvtable.table import Column, Table

log = get_logger(__name__)


@dataclass(frozen=True)
class MaintenanceEvent:
    vehicle_id: str
    title: str
    date: datetime
    notes: str


async def main() -> None:
    JsonLoggerFactory.configure(logging.INFO)
    settings = EnvSettingsLoader().load(ExportSettings)

    table: Table[MaintenanceEvent] = Table(
        [
            Column.attribute("Date", "date"),
            Column.attribute("Vehicle Name", "title"),
            Column.attribute("Notes", "notes"),
        ],
        settings.to_configuration(),
    )
    events = [
        MaintenanceEvent("1", "1st service", datetime(2024, 1, 1, tzinfo=UTC), "Maintenance and service"),
        MaintenanceEvent("1", "Brakes", datetime(2024, 3, 5, tzinfo=UTC), "Front pads, rotors"),
    ]

    service = ExportService.from_settings(settings)
    try:
        result = await service.export(table, events, report_filename("Civic", "MaintenanceReport"))
    except ExportWriteError as exc:
        log.error("report.not_saved", error=exc.to_dict())
        raise SystemExit(1) from exc
    log.info("report.saved", location=result.location)


if __name__ == "__main__":
    asyncio.run(main())
