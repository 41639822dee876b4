from flowconvert.core.config import AppConfig, default_data_location
from flowconvert.core.events import (
    CollectingSink,
    EventSink,
    LoggingSink,
    describe,
    null_sink,
)
from flowconvert.core.models import Event, OutcomeRecord
from flowconvert.core.types import EXPORT_ORDER, EventKind, ExportFormat, ExportOutcome

__all__ = [
    "AppConfig",
    "default_data_location",
    "CollectingSink",
    "EventSink",
    "LoggingSink",
    "describe",
    "null_sink",
    "Event",
    "OutcomeRecord",
    "EXPORT_ORDER",
    "EventKind",
    "ExportFormat",
    "ExportOutcome",
]
