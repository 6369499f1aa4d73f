"""Session driver tests."""

from __future__ import annotations

import json
from pathlib import Path

from core.command_processor import CommandProcessor
from core.config import build_processor_config, load_effective_config
from core.session import INTERACTIVE_BANNER, USAGE_EXIT_CODE, Session


def _session(root: Path) -> tuple[Session, list[str]]:
    lines: list[str] = []
    config = build_processor_config(load_effective_config(root), root)
    return Session(CommandProcessor(config), echo=lines.append), lines


def test_interactive_session_stops_at_exit(tmp_path: Path) -> None:
    session, out = _session(tmp_path)

    code = session.run_interactive(iter(["help\n", "system\n", "exit\n", "user\n"]))

    assert code == 0
    assert len(out) == 3
    assert out[0] == INTERACTIVE_BANNER
    assert "title" in json.loads(out[1])
    assert "hostname" in json.loads(out[2])


def test_interactive_session_ends_with_input(tmp_path: Path) -> None:
    session, out = _session(tmp_path)

    code = session.run_interactive(["  bla  \n", "\n"])

    assert code == 0
    assert len(out) == 3
    assert all(json.loads(line)["message"] == "unrecognized command" for line in out[1:])


def test_script_mode_runs_one_command(tmp_path: Path) -> None:
    session, out = _session(tmp_path)
    assert session.run_script(["system", "-s"]) == 0
    assert out == ["file created: info/system.json"]
    assert (tmp_path / "info" / "system.json").exists()


def test_script_mode_without_tokens_is_usage_error(tmp_path: Path) -> None:
    session, out = _session(tmp_path)
    assert session.run_script([]) == USAGE_EXIT_CODE
    assert out == []
