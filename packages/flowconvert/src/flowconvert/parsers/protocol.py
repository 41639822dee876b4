from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class SessionParser(Protocol):
    def parse(self) -> bool:
        ...

    def write_gpx(self, path: str) -> bool:
        ...

    def write_hrm(self, path: str) -> bool:
        ...

    def write_tcx(self, path: str) -> bool:
        ...


SessionParserFactory = Callable[[str], SessionParser]
