"""Configuration loading tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import build_processor_config, load_effective_config, load_yaml, merge_dicts


def test_defaults_apply_without_config_file(tmp_path: Path) -> None:
    config = load_effective_config(tmp_path)
    resolved = build_processor_config(config, tmp_path, program_name="sysinfo")

    assert resolved.store_dir == (tmp_path / "info").resolve()
    assert resolved.store_display == "info"
    assert resolved.save_flag == "-s"
    assert resolved.listing_root == tmp_path.resolve()
    assert ".git" in resolved.ignore_names
    assert "node_modules" in resolved.ignore_names
    assert resolved.program_name == "sysinfo"


def test_yaml_overrides_are_merged(tmp_path: Path) -> None:
    (tmp_path / "sysinfo.yaml").write_text(
        "store:\n  dir: saved\ndirectory:\n  ignore: [build]\n",
        encoding="utf-8",
    )
    resolved = build_processor_config(load_effective_config(tmp_path), tmp_path)

    assert resolved.store_dir == (tmp_path / "saved").resolve()
    assert resolved.save_flag == "-s"
    assert resolved.ignore_names == frozenset({"build"})


def test_non_mapping_yaml_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "sysinfo.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_yaml(path)


def test_merge_dicts_is_recursive() -> None:
    merged = merge_dicts({"a": {"b": 1, "c": 2}, "d": 3}, {"a": {"c": 5}})
    assert merged == {"a": {"b": 1, "c": 5}, "d": 3}
