"""Flat directory of per-command JSON documents."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from core.results import ErrorKind

logger = logging.getLogger("sysinfo.store")

SUFFIX = ".json"
DOCUMENT_MODE = 0o666


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


class StoreReadError(Exception):
    """Raised when a persisted document cannot be produced."""

    def __init__(self, kind: ErrorKind, hint: str) -> None:
        super().__init__(hint)
        self.kind = kind
        self.hint = hint


class InfoStore:
    """One JSON document per command name, created lazily."""

    def __init__(self, path: Path, display_root: str = "info") -> None:
        self.path = path
        self.display_root = display_root

    def exists(self) -> bool:
        return self.path.is_dir()

    def ensure_exists(self) -> None:
        self.path.mkdir(parents=True, exist_ok=True)

    def path_for(self, name: str) -> Path:
        if not name or name in {".", ".."} or Path(name).name != name or "/" in name or "\\" in name:
            raise ValueError(f"Invalid document name: {name!r}")
        return self.path / f"{name}{SUFFIX}"

    def display_path(self, name: str) -> str:
        """Path of a document as shown to the user."""
        return f"{self.display_root}/{name}{SUFFIX}"

    def write(self, name: str, value: Any) -> Path:
        """Atomically replace the document for ``name`` with ``value``."""
        target = self.path_for(name)
        self.ensure_exists()
        payload = json.dumps(value, ensure_ascii=False)
        fd, tmp_name = tempfile.mkstemp(dir=self.path, prefix=f".{name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.chmod(tmp_name, DOCUMENT_MODE & ~_current_umask())
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.info("Wrote %s (%d bytes)", target, len(payload))
        return target

    def read(self, name: str) -> Any:
        """Parse the stored document for ``name``."""
        if not self.exists():
            raise StoreReadError(
                ErrorKind.INFO_DIR_NOT_FOUND,
                f"{self.display_root} directory not found, save a command with -s first",
            )
        target = self.path_for(name)
        try:
            data = target.read_bytes()
        except FileNotFoundError as exc:
            raise StoreReadError(
                ErrorKind.FILE_ERROR,
                f"{self.display_path(name)} not found, run `{name} -s` first",
            ) from exc
        except OSError as exc:
            raise StoreReadError(ErrorKind.FILE_ERROR, str(exc)) from exc
        try:
            return json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Unparseable document %s: %s", target, exc)
            raise StoreReadError(ErrorKind.JSON_PARSING_ERROR, str(exc)) from exc

    def list(self) -> list[str] | None:
        """Sorted document file names, or None when the directory is absent."""
        if not self.exists():
            return None
        return sorted(
            entry.name
            for entry in self.path.iterdir()
            if entry.is_file() and entry.suffix == SUFFIX
        )

    def read_all_raw(self) -> str:
        """Concatenate every stored document verbatim."""
        names = self.list()
        if names is None:
            raise StoreReadError(
                ErrorKind.INFO_DIR_NOT_FOUND,
                f"{self.display_root} directory not found, save a command with -s first",
            )
        if not names:
            raise StoreReadError(
                ErrorKind.EMPTY_INFO_DIR,
                f"{self.display_root} directory is empty, save a command with -s first",
            )
        chunks = []
        for name in names:
            try:
                chunks.append((self.path / name).read_bytes().decode("utf-8", errors="replace"))
            except OSError as exc:
                raise StoreReadError(ErrorKind.FILE_ERROR, str(exc)) from exc
        return "".join(chunks)
