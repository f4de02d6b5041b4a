"""Application export – persisting rendered tables."""
from csvtable.application.export.service import ExportResult, ExportService, report_filename
from csvtable.application.export.sink import ExportSink, FileSystemSink, InMemorySink

__all__ = [
    "ExportResult",
    "ExportService",
    "ExportSink",
    "FileSystemSink",
    "InMemorySink",
    "report_filename",
]
