"""Stat lookup for a single path."""

from __future__ import annotations

import stat
from datetime import UTC, datetime
from pathlib import Path

from core.results import ErrorKind, ErrorRecord, FileStats, error

HINT_SUFFIX = "Run `directory` to see available files"


def _iso(timestamp: float) -> str:
    return datetime.fromtimestamp(timestamp, UTC).isoformat()


def _kind(mode: int) -> str:
    if stat.S_ISLNK(mode):
        return "symlink"
    if stat.S_ISDIR(mode):
        return "directory"
    if stat.S_ISREG(mode):
        return "file"
    return "other"


def stat_file(name: str | None, base: Path) -> FileStats | ErrorRecord:
    """Return stat fields for ``name`` (relative names resolve against ``base``)."""
    if not name:
        return error(ErrorKind.FILE_ERROR, f"no file name given. {HINT_SUFFIX}")
    target = Path(name)
    if not target.is_absolute():
        target = base / target
    try:
        st = target.lstat()
    except (OSError, ValueError) as exc:
        return error(ErrorKind.FILE_ERROR, f"{exc}. {HINT_SUFFIX}")

    birth = getattr(st, "st_birthtime", None)
    return FileStats(
        name=name,
        size=st.st_size,
        type=_kind(st.st_mode),
        mode=stat.filemode(st.st_mode),
        uid=st.st_uid,
        gid=st.st_gid,
        nlink=st.st_nlink,
        atime=_iso(st.st_atime),
        mtime=_iso(st.st_mtime),
        ctime=_iso(st.st_ctime),
        birthtime=_iso(birth) if birth is not None else None,
    )
