from __future__ import annotations

from enum import StrEnum


class ExportFormat(StrEnum):
    GPX = "gpx"
    HRM = "hrm"
    TCX = "tcx"

    def output_path(self, session_key: str) -> str:
        return f"{session_key}.{self.value}"


EXPORT_ORDER: tuple[ExportFormat, ...] = (ExportFormat.GPX, ExportFormat.HRM, ExportFormat.TCX)


class ExportOutcome(StrEnum):
    SKIPPED_EXISTS = "skipped_exists"
    WRITTEN = "written"
    FAILED = "failed"


class EventKind(StrEnum):
    IGNORED = "ignored"
    DIRECTORY_MISSING = "directory_missing"
    NOTHING_FOUND = "nothing_found"
    CONVERTING = "converting"
    PARSE_FAILED = "parse_failed"
    WRITE_SKIPPED_EXISTS = "write_skipped_exists"
    WRITE_SUCCEEDED = "write_succeeded"
    WRITE_FAILED = "write_failed"
    BATCH_COMPLETE = "batch_complete"
