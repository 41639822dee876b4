from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from flowconvert.core import events
from flowconvert.core.events import EventSink, null_sink
from flowconvert.core.types import ExportFormat

logger = logging.getLogger("flowconvert.discovery")

EXPORT_PREFIX = "v2-users-"
OUTPUT_EXTENSIONS = tuple(f".{fmt.value}" for fmt in ExportFormat)
KEY_PARTS = 6


def classify(name: str, parent: str | os.PathLike[str]) -> str | None:
    """Return the session key for a directory entry, or None if it is not session data.

    Entries must look like ``v2-users-<user>-training-sessions-<id>[-...]``; the
    key is the parent directory joined with those first six components, so every
    file of one session maps to the same key.
    """
    if not name.startswith(EXPORT_PREFIX):
        return None
    if name.endswith(OUTPUT_EXTENSIONS):
        return None

    parts = name.split("-")
    if len(parts) < KEY_PARTS or parts[3] != "training" or parts[4] != "sessions":
        return None

    base = (str(parent) or ".").rstrip("/")
    return f"{base}/{'-'.join(parts[:KEY_PARTS])}"


def list_directory(path: str | os.PathLike[str], sink: EventSink = null_sink) -> list[str]:
    directory = Path(path)
    try:
        with os.scandir(directory) as entries:
            names = sorted(entry.name for entry in entries if entry.is_file())
    except OSError as err:
        logger.debug("cannot list %s: %s", directory, err)
        sink(events.directory_missing(str(directory)))
        return []
    return names


def group_sessions(
    entries: Iterable[str],
    parent: str | os.PathLike[str],
    sink: EventSink = null_sink,
) -> list[str]:
    sessions: list[str] = []
    seen: set[str] = set()
    for name in entries:
        key = classify(name, parent)
        if key is None:
            sink(events.ignored(name))
            continue
        if key not in seen:
            seen.add(key)
            sessions.append(key)

    if not sessions:
        sink(events.nothing_found())
    return sessions


def discover_sessions(
    directory: str | os.PathLike[str], sink: EventSink = null_sink
) -> list[str]:
    return group_sessions(list_directory(directory, sink), directory, sink)
