from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from flowconvert.core.types import EventKind, ExportFormat, ExportOutcome


class Event(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: EventKind
    name: str | None = None
    path: str | None = None
    session_key: str | None = None
    format: ExportFormat | None = None
    succeeded: int | None = None
    failed: int | None = None


class OutcomeRecord(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    session_key: str
    format: ExportFormat | None = None
    outcome: ExportOutcome
    path: str | None = None
