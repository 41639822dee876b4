from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from flowconvert.core.models import Event
from flowconvert.core.types import EventKind, ExportFormat

EventSink = Callable[[Event], None]

logger = logging.getLogger("flowconvert.events")


def ignored(name: str) -> Event:
    return Event(kind=EventKind.IGNORED, name=name)


def directory_missing(path: str) -> Event:
    return Event(kind=EventKind.DIRECTORY_MISSING, path=path)


def nothing_found() -> Event:
    return Event(kind=EventKind.NOTHING_FOUND)


def converting(session_key: str) -> Event:
    return Event(kind=EventKind.CONVERTING, session_key=session_key)


def parse_failed(session_key: str) -> Event:
    return Event(kind=EventKind.PARSE_FAILED, session_key=session_key)


def write_skipped_exists(path: str) -> Event:
    return Event(kind=EventKind.WRITE_SKIPPED_EXISTS, path=path)


def write_succeeded(path: str) -> Event:
    return Event(kind=EventKind.WRITE_SUCCEEDED, path=path)


def write_failed(fmt: ExportFormat) -> Event:
    return Event(kind=EventKind.WRITE_FAILED, format=fmt)


def batch_complete(succeeded: int, failed: int) -> Event:
    return Event(kind=EventKind.BATCH_COMPLETE, succeeded=succeeded, failed=failed)


_LEVELS: dict[EventKind, int] = {
    EventKind.IGNORED: logging.DEBUG,
    EventKind.DIRECTORY_MISSING: logging.WARNING,
    EventKind.NOTHING_FOUND: logging.DEBUG,
    EventKind.CONVERTING: logging.DEBUG,
    EventKind.PARSE_FAILED: logging.WARNING,
    EventKind.WRITE_SKIPPED_EXISTS: logging.DEBUG,
    EventKind.WRITE_SUCCEEDED: logging.DEBUG,
    EventKind.WRITE_FAILED: logging.WARNING,
    EventKind.BATCH_COMPLETE: logging.INFO,
}


def describe(event: Event) -> str:
    match event.kind:
        case EventKind.IGNORED:
            return f"ignoring {event.name}"
        case EventKind.DIRECTORY_MISSING:
            return f"data dir not found {event.path}"
        case EventKind.NOTHING_FOUND:
            return "found nothing to convert"
        case EventKind.CONVERTING:
            return f"converting {event.session_key}"
        case EventKind.PARSE_FAILED:
            return f"failed to parse {event.session_key}"
        case EventKind.WRITE_SKIPPED_EXISTS:
            return f"{event.path} already exists"
        case EventKind.WRITE_SUCCEEDED:
            return f"wrote {event.path}"
        case EventKind.WRITE_FAILED:
            label = event.format.value.upper() if event.format else "output"
            return f"failed to write {label}"
        case EventKind.BATCH_COMPLETE:
            return f"{event.succeeded} succeeded, {event.failed} failed."
    return event.kind.value


@dataclass
class LoggingSink:
    """Forwards events to the standard logging tree at a per-kind level."""

    log: logging.Logger = field(default=logger)

    def __call__(self, event: Event) -> None:
        self.log.log(_LEVELS.get(event.kind, logging.INFO), describe(event))


@dataclass
class CollectingSink:
    events: list[Event] = field(default_factory=list)

    def __call__(self, event: Event) -> None:
        self.events.append(event)

    def kinds(self) -> list[EventKind]:
        return [event.kind for event in self.events]


def null_sink(event: Event) -> None:
    return None
