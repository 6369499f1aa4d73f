"""Result models produced by sysinfo commands."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, Field


class ErrorKind(str, Enum):
    """Fixed set of error tags reported as data."""

    FILE_ERROR = "FILE_ERROR"
    WRONG_OPTION = "WRONG_OPTION"
    EMPTY_INFO_DIR = "EMPTY_INFO_DIR"
    INFO_DIR_NOT_FOUND = "INFO_DIR_NOT_FOUND"
    JSON_PARSING_ERROR = "JSON_PARSING_ERROR"
    ERROR_MESSAGE = "ERROR_MESSAGE"


class ResultModel(BaseModel):
    """Base for every printable/persistable command result."""

    def to_json_value(self) -> Any:
        """Return the plain JSON value printed and persisted for this result."""
        return self.model_dump(mode="json", exclude_none=True)

    def render(self) -> str:
        return json.dumps(self.to_json_value(), ensure_ascii=False)


class SystemInfo(ResultModel):
    """Host operating system snapshot."""

    type: str
    architecture: str
    hostname: str
    platform: str
    cpus: int
    memory: str
    uptime: int


class UserInfo(ResultModel):
    """Identity of the user running the process."""

    uid: int = -1
    gid: int = -1
    username: str
    homedir: str
    shell: str | None = None


class DirectoryListing(ResultModel):
    """Names found in the listing directory."""

    entries: list[str] = Field(default_factory=list)

    def to_json_value(self) -> Any:
        return list(self.entries)


class FileStats(ResultModel):
    """Stat fields for a single path."""

    name: str
    size: int
    type: str
    mode: str
    uid: int
    gid: int
    nlink: int
    atime: str
    mtime: str
    ctime: str
    birthtime: str | None = None


class HelpText(ResultModel):
    """Recognized commands and flags."""

    title: str
    commands: dict[str, str]
    flags: dict[str, str] = Field(default_factory=dict)


class DisplayedInfo(ResultModel):
    """Previously persisted content read back from the store.

    ``document`` holds one parsed document; ``raw`` holds the verbatim
    concatenation of every stored file and is printed unchanged.
    """

    document: Any = None
    raw: str | None = None

    def to_json_value(self) -> Any:
        if self.raw is not None:
            return self.raw
        return self.document

    def render(self) -> str:
        if self.raw is not None:
            return self.raw
        return json.dumps(self.document, ensure_ascii=False)


class ErrorRecord(ResultModel):
    """Tagged, non-fatal failure."""

    type: ErrorKind
    hint: str = ""
    message: str | None = None


InfoResult = Union[
    SystemInfo,
    UserInfo,
    DirectoryListing,
    FileStats,
    HelpText,
    DisplayedInfo,
    ErrorRecord,
]


def error(kind: ErrorKind, hint: str = "", message: str | None = None) -> ErrorRecord:
    """Shortcut for building an error record."""
    return ErrorRecord(type=kind, hint=hint, message=message)
