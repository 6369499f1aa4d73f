"""Configuration loading for the command processor."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILE_NAME = "sysinfo.yaml"

DEFAULT_CONFIG: dict[str, Any] = {
    "store": {
        "dir": "info",
        "save_flag": "-s",
    },
    "directory": {
        "root": ".",
        "ignore": [
            ".git",
            "node_modules",
            "__pycache__",
            ".venv",
            ".pytest_cache",
            ".DS_Store",
            ".gitignore",
        ],
    },
}


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_effective_config(root: Path) -> dict[str, Any]:
    """Merge built-in defaults with ``sysinfo.yaml`` from ``root`` if present."""
    return merge_dicts(DEFAULT_CONFIG, load_yaml(root / CONFIG_FILE_NAME))


@dataclass(frozen=True)
class ProcessorConfig:
    """Resolved settings handed to the command processor."""

    store_dir: Path
    store_display: str
    save_flag: str
    listing_root: Path
    ignore_names: frozenset[str]
    program_name: str


def build_processor_config(
    config: dict[str, Any],
    root: Path,
    program_name: str = "",
) -> ProcessorConfig:
    """Resolve relative paths in ``config`` against ``root``."""
    store_cfg = config.get("store", {})
    dir_cfg = config.get("directory", {})

    store_raw = str(store_cfg.get("dir", "info"))
    store_dir = Path(store_raw)
    if not store_dir.is_absolute():
        store_dir = root / store_dir
    listing_root = Path(str(dir_cfg.get("root", ".")))
    if not listing_root.is_absolute():
        listing_root = root / listing_root

    ignore = dir_cfg.get("ignore") or []
    if not isinstance(ignore, list):
        raise ValueError("directory.ignore must be a list of names")

    return ProcessorConfig(
        store_dir=store_dir.resolve(),
        store_display=store_raw.rstrip("/\\") or ".",
        save_flag=str(store_cfg.get("save_flag", "-s")),
        listing_root=listing_root.resolve(),
        ignore_names=frozenset(str(name) for name in ignore),
        program_name=program_name,
    )
