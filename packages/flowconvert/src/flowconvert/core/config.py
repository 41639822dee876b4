from __future__ import annotations

import os
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

VENDOR_EXPORT_SUBDIR = Path("Polar") / "PolarFlowSync" / "export"


def default_data_location() -> Path:
    home = Path.home()
    if sys.platform.startswith("win"):
        local = os.environ.get("LOCALAPPDATA")
        return Path(local) if local else home / "AppData" / "Local"
    if sys.platform == "darwin":
        return home / "Library" / "Application Support"
    xdg = os.environ.get("XDG_DATA_HOME")
    return Path(xdg) if xdg else home / ".local/share"


@dataclass(frozen=True)
class AppConfig:
    export_dir: Path
    config_path: Path
    parser: str | None = None

    @classmethod
    def load(cls) -> AppConfig:
        home = Path.home()
        config_path = Path(
            os.environ.get("FLOWCONVERT_CONFIG_PATH", home / ".config/flowconvert/config.toml")
        )

        export_section = _read_export_section(config_path)

        file_dir = export_section.get("dir")
        if file_dir is not None and not isinstance(file_dir, str):
            raise ValueError(f"invalid export dir in {config_path}: {file_dir!r}")
        file_parser = export_section.get("parser")
        if file_parser is not None and not isinstance(file_parser, str):
            raise ValueError(f"invalid parser in {config_path}: {file_parser!r}")

        env_dir = os.environ.get("FLOWCONVERT_EXPORT_DIR")
        if env_dir:
            export_dir = Path(env_dir)
        elif file_dir:
            export_dir = Path(file_dir).expanduser()
        else:
            export_dir = default_data_location() / VENDOR_EXPORT_SUBDIR

        parser = os.environ.get("FLOWCONVERT_PARSER") or file_parser or None
        return cls(export_dir=export_dir, config_path=config_path, parser=parser)


def _read_export_section(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        return {}
    raw = config_path.read_text(encoding="utf-8")
    data = tomllib.loads(raw) if raw.strip() else {}
    section = data.get("export", {}) if isinstance(data, dict) else {}
    return section if isinstance(section, dict) else {}
