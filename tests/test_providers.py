"""Info provider tests."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

from core.results import ErrorKind, ErrorRecord, FileStats
from providers.directory_listing import list_directory
from providers.file_stats import stat_file
from providers.system_info import format_memory, inspect_system
from providers.user_info import inspect_user


def test_inspect_system_fields() -> None:
    fake_psutil = MagicMock()
    fake_psutil.virtual_memory.return_value.total = 16 * 1024**3
    fake_psutil.boot_time.return_value = 1_000.0
    with patch("providers.system_info.psutil", fake_psutil), patch(
        "providers.system_info.time.time", return_value=4_600.5
    ):
        info = inspect_system()

    assert info.memory == "16.00 GB"
    assert info.uptime == 3600
    assert info.cpus >= 1
    assert info.hostname
    assert set(info.to_json_value()) == {
        "type",
        "architecture",
        "hostname",
        "platform",
        "cpus",
        "memory",
        "uptime",
    }


def test_format_memory_uses_gb_suffix() -> None:
    assert format_memory(512 * 1024**2) == "0.50 GB"


def test_inspect_user_reports_identity() -> None:
    info = inspect_user()
    value = info.to_json_value()

    assert value["username"]
    assert value["homedir"]
    assert isinstance(value["uid"], int)
    assert isinstance(value["gid"], int)


def test_list_directory_hides_ignored_names_and_program(tmp_path: Path) -> None:
    for name in ["a.txt", "b.txt", "sysinfo", "node_modules", ".git"]:
        (tmp_path / name).mkdir() if name in {"node_modules", ".git"} else (tmp_path / name).write_text("x")

    listing = list_directory(tmp_path, {".git", "node_modules"}, program_name="sysinfo")

    assert listing.to_json_value() == ["a.txt", "b.txt"]


def test_stat_file_reports_timestamps(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    target.write_text("hello", encoding="utf-8")

    result = stat_file("notes.txt", tmp_path)

    assert isinstance(result, FileStats)
    assert result.size == 5
    assert result.type == "file"
    value = result.to_json_value()
    for key in ("atime", "mtime", "ctime"):
        assert key in value


def test_stat_file_directory_type(tmp_path: Path) -> None:
    (tmp_path / "sub").mkdir()
    result = stat_file(str(tmp_path / "sub"), Path("/nonexistent-base"))
    assert isinstance(result, FileStats)
    assert result.type == "directory"


def test_stat_file_missing_or_empty_name(tmp_path: Path) -> None:
    missing = stat_file("badname", tmp_path)
    empty = stat_file(None, tmp_path)

    for result in (missing, empty):
        assert isinstance(result, ErrorRecord)
        assert result.type is ErrorKind.FILE_ERROR
        assert "directory" in result.hint
