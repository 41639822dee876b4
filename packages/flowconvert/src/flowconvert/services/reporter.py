from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from flowconvert.core.models import OutcomeRecord
from flowconvert.core.types import ExportOutcome


@dataclass(frozen=True)
class BatchResult:
    succeeded: int
    failed: int
    skipped: int = 0
    sessions: int = 0


@dataclass
class BatchReporter:
    _records: list[OutcomeRecord] = field(default_factory=list)

    @property
    def records(self) -> Sequence[OutcomeRecord]:
        return tuple(self._records)

    def record(self, record: OutcomeRecord) -> None:
        self._records.append(record)

    def summarize(self) -> BatchResult:
        succeeded = failed = skipped = 0
        sessions: set[str] = set()
        for record in self._records:
            sessions.add(record.session_key)
            match record.outcome:
                case ExportOutcome.WRITTEN:
                    succeeded += 1
                case ExportOutcome.FAILED:
                    failed += 1
                case ExportOutcome.SKIPPED_EXISTS:
                    skipped += 1
        return BatchResult(
            succeeded=succeeded, failed=failed, skipped=skipped, sessions=len(sessions)
        )
