from flowconvert.services.discovery import (
    classify,
    discover_sessions,
    group_sessions,
    list_directory,
)
from flowconvert.services.exporter import ExportDriver, convert_all
from flowconvert.services.reporter import BatchReporter, BatchResult

__all__ = [
    "classify",
    "discover_sessions",
    "group_sessions",
    "list_directory",
    "ExportDriver",
    "convert_all",
    "BatchReporter",
    "BatchResult",
]
