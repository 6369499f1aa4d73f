"""Working directory listing."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from core.results import DirectoryListing


def list_directory(root: Path, ignore: Iterable[str], program_name: str = "") -> DirectoryListing:
    """List ``root`` without housekeeping names or the running program's file."""
    hidden = set(ignore)
    if program_name:
        hidden.add(program_name)
    names = sorted(entry.name for entry in root.iterdir() if entry.name not in hidden)
    return DirectoryListing(entries=names)
