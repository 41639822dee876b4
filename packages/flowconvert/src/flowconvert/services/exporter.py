from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from flowconvert.core import events
from flowconvert.core.config import AppConfig
from flowconvert.core.events import EventSink, LoggingSink
from flowconvert.core.models import OutcomeRecord
from flowconvert.core.types import EXPORT_ORDER, ExportFormat, ExportOutcome
from flowconvert.parsers import (
    ParserResolutionError,
    SessionParser,
    SessionParserFactory,
    load_parser_factory,
)
from flowconvert.services.discovery import discover_sessions
from flowconvert.services.reporter import BatchReporter, BatchResult

logger = logging.getLogger("flowconvert.exporter")


def _no_yield() -> None:
    return None


@dataclass
class ExportDriver:
    """Runs one parser per session and writes every format that is not already on disk."""

    parser_factory: SessionParserFactory
    sink: EventSink = field(default_factory=LoggingSink)
    overwrite: bool = False
    yield_control: Callable[[], None] | None = None
    exists: Callable[[str], bool] = os.path.exists

    def export_all(self, session_keys: Iterable[str]) -> BatchResult:
        reporter = BatchReporter()
        pause = self.yield_control or _no_yield
        for session_key in session_keys:
            pause()
            self._export_session(session_key, reporter)

        result = reporter.summarize()
        self.sink(events.batch_complete(result.succeeded, result.failed))
        return result

    def _export_session(self, session_key: str, reporter: BatchReporter) -> None:
        self.sink(events.converting(session_key))
        parser: SessionParser | None = None
        try:
            parser = self.parser_factory(session_key)
            parsed = parser.parse()
        except Exception as err:
            logger.debug("parser raised for %s: %s", session_key, err)
            parsed = False

        if parser is None or not parsed:
            self.sink(events.parse_failed(session_key))
            reporter.record(OutcomeRecord(session_key=session_key, outcome=ExportOutcome.FAILED))
            return

        for fmt in EXPORT_ORDER:
            outcome, path = self._export_format(parser, session_key, fmt)
            reporter.record(
                OutcomeRecord(session_key=session_key, format=fmt, outcome=outcome, path=path)
            )

    def _export_format(
        self, parser: SessionParser, session_key: str, fmt: ExportFormat
    ) -> tuple[ExportOutcome, str]:
        path = fmt.output_path(session_key)
        if self.exists(path) and not self.overwrite:
            self.sink(events.write_skipped_exists(path))
            return ExportOutcome.SKIPPED_EXISTS, path

        try:
            written = _writer_for(parser, fmt)(path)
        except Exception as err:
            logger.debug("%s writer raised for %s: %s", fmt.value.upper(), session_key, err)
            written = False

        if not written:
            self.sink(events.write_failed(fmt))
            return ExportOutcome.FAILED, path
        self.sink(events.write_succeeded(path))
        return ExportOutcome.WRITTEN, path


def _writer_for(parser: SessionParser, fmt: ExportFormat) -> Callable[[str], bool]:
    match fmt:
        case ExportFormat.GPX:
            return parser.write_gpx
        case ExportFormat.HRM:
            return parser.write_hrm
        case ExportFormat.TCX:
            return parser.write_tcx
    raise ValueError(f"unsupported export format: {fmt}")


def convert_all(
    *,
    directory: Path | None,
    parser: str | None,
    verbose: bool,
    debug: bool = False,
) -> BatchResult:
    config = AppConfig.load()
    if debug:
        logging.basicConfig(level=logging.DEBUG)
    elif verbose:
        logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.WARNING)

    parser_ref = parser or config.parser
    if not parser_ref:
        raise ParserResolutionError(
            "no session parser configured; pass --parser or set FLOWCONVERT_PARSER"
        )
    factory = load_parser_factory(parser_ref)

    export_dir = directory or config.export_dir
    sink = LoggingSink()
    session_keys = discover_sessions(export_dir, sink)
    logger.info("found %d sessions in %s", len(session_keys), export_dir)
    return ExportDriver(parser_factory=factory, sink=sink).export_all(session_keys)
