"""Observability – structlog configuration and logger helper."""
from csvtable.observability.logging.factory import JsonLoggerFactory
from csvtable.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
