"""
csvtable – declarative record-to-CSV encoder.

Import path convention::

    from csvtable.table import Column, Table
    from csvtable.config import EncoderConfiguration, BoolEncodingStrategy
    from csvtable.application.export import ExportService, FileSystemSink
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
