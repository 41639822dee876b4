from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "packages" / "flowconvert" / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

os.environ.setdefault("PYTHONUTF8", "1")


@dataclass
class FakeParser:
    session_key: str
    parse_ok: bool = True
    failing: frozenset[str] = frozenset()
    calls: list[str] = field(default_factory=list)

    def parse(self) -> bool:
        self.calls.append("parse")
        return self.parse_ok

    def _write(self, fmt: str, path: str) -> bool:
        self.calls.append(f"write_{fmt}:{path}")
        if fmt in self.failing:
            return False
        Path(path).write_text(f"{fmt} for {self.session_key}\n", encoding="utf-8")
        return True

    def write_gpx(self, path: str) -> bool:
        return self._write("gpx", path)

    def write_hrm(self, path: str) -> bool:
        return self._write("hrm", path)

    def write_tcx(self, path: str) -> bool:
        return self._write("tcx", path)


@dataclass
class FakeParserFactory:
    bad_sessions: set[str] = field(default_factory=set)
    failing: frozenset[str] = frozenset()
    created: list[FakeParser] = field(default_factory=list)

    def __call__(self, session_key: str) -> FakeParser:
        parser = FakeParser(
            session_key,
            parse_ok=session_key not in self.bad_sessions,
            failing=self.failing,
        )
        self.created.append(parser)
        return parser


@pytest.fixture
def parser_factory() -> FakeParserFactory:
    return FakeParserFactory()


@pytest.fixture
def export_dir(tmp_path) -> Path:
    target = tmp_path / "export"
    target.mkdir()
    for name in (
        "v2-users-1-training-sessions-42-samples.dat",
        "v2-users-1-training-sessions-42-summary.dat",
        "v2-users-1-training-sessions-43-samples.dat",
        "v2-users-1-physical-information.dat",
        "readme.txt",
    ):
        (target / name).write_bytes(b"\x00")
    return target
