from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from flowconvert.cli.app import app

PARSER_MODULE = '''
from pathlib import Path


class TrainingSession:
    def __init__(self, session_key):
        self.session_key = session_key

    def parse(self):
        return not self.session_key.endswith("-43")

    def _write(self, path, label):
        Path(path).write_text(label, encoding="utf-8")
        return True

    def write_gpx(self, path):
        return self._write(path, "gpx")

    def write_hrm(self, path):
        return self._write(path, "hrm")

    def write_tcx(self, path):
        return self._write(path, "tcx")
'''


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("FLOWCONVERT_CONFIG_PATH", str(tmp_path / "none.toml"))
    monkeypatch.delenv("FLOWCONVERT_EXPORT_DIR", raising=False)
    monkeypatch.delenv("FLOWCONVERT_PARSER", raising=False)
    (tmp_path / "fc_cli_parser.py").write_text(PARSER_MODULE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return tmp_path


def test_cli_convert_and_list(cli_env, export_dir) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["list", "--dir", str(export_dir), "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == [
        f"{export_dir}/v2-users-1-training-sessions-42",
        f"{export_dir}/v2-users-1-training-sessions-43",
    ]

    args = ["convert", "--dir", str(export_dir), "--parser", "fc_cli_parser:TrainingSession"]
    result = runner.invoke(app, args)
    assert result.exit_code == 0
    assert "Converted 2 sessions: 3 succeeded, 1 failed, 0 skipped." in result.stdout
    assert (export_dir / "v2-users-1-training-sessions-42.hrm").read_text(encoding="utf-8") == "hrm"

    result = runner.invoke(app, [*args, "--json"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload == {"succeeded": 0, "failed": 1, "skipped": 3, "sessions": 2}


def test_cli_convert_uses_environment(cli_env, export_dir, monkeypatch) -> None:
    monkeypatch.setenv("FLOWCONVERT_EXPORT_DIR", str(export_dir))
    monkeypatch.setenv("FLOWCONVERT_PARSER", "fc_cli_parser:TrainingSession")

    result = CliRunner().invoke(app, ["convert", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["succeeded"] == 3


def test_cli_convert_without_parser(cli_env, export_dir) -> None:
    result = CliRunner().invoke(app, ["convert", "--dir", str(export_dir)])
    assert result.exit_code == 1
    assert "error: no session parser configured" in result.stdout


def test_cli_list_missing_directory(cli_env) -> None:
    result = CliRunner().invoke(app, ["list", "--dir", str(cli_env / "missing")])
    assert result.exit_code == 0
    assert "No sessions found." in result.stdout
