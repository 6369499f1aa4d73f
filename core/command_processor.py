"""Command dispatch, persistence and rendering."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from core.config import ProcessorConfig
from core.results import (
    DisplayedInfo,
    ErrorKind,
    HelpText,
    InfoResult,
    error,
)
from providers.directory_listing import list_directory
from providers.file_stats import stat_file
from providers.system_info import inspect_system
from providers.user_info import inspect_user
from store.info_store import InfoStore, StoreReadError

logger = logging.getLogger("sysinfo.processor")


class CommandName(str, Enum):
    """Recognized first tokens."""

    HELP = "help"
    SYSTEM = "system"
    USER = "user"
    DIRECTORY = "directory"
    DETAILS = "details"
    DISPLAY = "display"
    EXIT = "exit"


DISPLAY_OPTIONS: dict[str, CommandName] = {
    "s": CommandName.SYSTEM,
    "u": CommandName.USER,
    "d": CommandName.DIRECTORY,
}

HELP_COMMANDS: dict[str, str] = {
    "help": "show this message",
    "system": "operating system, architecture, hostname, cpus, memory and uptime",
    "user": "uid, gid, username, home directory and shell of the current user",
    "directory": "files in the working directory",
    "details <name>": "stat information for a file",
    "display [s|u|d]": "show saved system (s), user (u) or directory (d) info, or all saved files",
    "exit": "leave interactive mode",
}


@dataclass(frozen=True)
class Command:
    """One parsed line of tokens."""

    tokens: tuple[str, ...]
    save: bool

    @property
    def name(self) -> str:
        return self.tokens[0] if self.tokens else ""

    @property
    def operand(self) -> str | None:
        if len(self.tokens) < 2:
            return None
        if self.save and len(self.tokens) == 2:
            return None
        return self.tokens[1]

    @classmethod
    def parse(cls, source: str | Sequence[str], save_flag: str = "-s") -> Command:
        """Build a command from a raw line or an argument list."""
        tokens = tuple(source.split()) if isinstance(source, str) else tuple(source)
        save = len(tokens) > 1 and tokens[-1] == save_flag
        return cls(tokens=tokens or ("",), save=save)


@dataclass
class CommandOutcome:
    """What processing a command produced."""

    text: str
    result: InfoResult | None = None
    exit_requested: bool = False
    saved_path: Path | None = None


Handler = Callable[[Command], InfoResult]


class CommandProcessor:
    """Maps commands to info providers and optionally persists the result."""

    def __init__(self, config: ProcessorConfig, store: InfoStore | None = None) -> None:
        self.config = config
        self.store = store or InfoStore(config.store_dir, display_root=config.store_display)
        self._handlers: dict[CommandName, Handler] = {
            CommandName.HELP: self._help,
            CommandName.SYSTEM: lambda _cmd: inspect_system(),
            CommandName.USER: lambda _cmd: inspect_user(),
            CommandName.DIRECTORY: self._directory,
            CommandName.DETAILS: self._details,
            CommandName.DISPLAY: self._display,
        }

    def parse(self, source: str | Sequence[str]) -> Command:
        return Command.parse(source, save_flag=self.config.save_flag)

    def process(self, command: Command) -> CommandOutcome:
        """Run ``command`` and return the text to print."""
        if command.name == CommandName.EXIT.value:
            return CommandOutcome(text="", exit_requested=True)

        result = self.execute(command)
        if not command.save:
            return CommandOutcome(text=result.render(), result=result)
        return self._save(command, result)

    def execute(self, command: Command) -> InfoResult:
        """Dispatch without persistence; provider failures become error records."""
        try:
            handler = self._handlers[CommandName(command.name)]
        except (ValueError, KeyError):
            return error(
                ErrorKind.ERROR_MESSAGE,
                hint="type `help` to list available commands",
                message="unrecognized command",
            )
        try:
            return handler(command)
        except Exception as exc:
            logger.warning("Command '%s' failed: %s", command.name, exc)
            return error(
                ErrorKind.ERROR_MESSAGE,
                hint="type `help` to list available commands",
                message=f"{command.name} failed: {exc}",
            )

    def _save(self, command: Command, result: InfoResult) -> CommandOutcome:
        try:
            existed = self.store.path_for(command.name).exists()
            path = self.store.write(command.name, result.to_json_value())
        except (OSError, ValueError) as exc:
            logger.warning("Could not save '%s': %s", command.name, exc)
            failure = error(ErrorKind.FILE_ERROR, f"could not save result: {exc}")
            return CommandOutcome(text=failure.render(), result=failure)
        verb = "updated" if existed else "created"
        shown = self.store.display_path(command.name)
        return CommandOutcome(text=f"file {verb}: {shown}", result=result, saved_path=path)

    def _help(self, command: Command) -> InfoResult:
        _ = command
        return HelpText(
            title="sys-info: host, user and directory information",
            commands=dict(HELP_COMMANDS),
            flags={self.config.save_flag: f"save the result to {self.config.store_display}/<command>.json"},
        )

    def _directory(self, command: Command) -> InfoResult:
        _ = command
        return list_directory(
            self.config.listing_root,
            self.config.ignore_names,
            program_name=self.config.program_name,
        )

    def _details(self, command: Command) -> InfoResult:
        return stat_file(command.operand, self.config.listing_root)

    def _display(self, command: Command) -> InfoResult:
        option = command.operand
        try:
            if option is None:
                return DisplayedInfo(raw=self.store.read_all_raw())
            target = DISPLAY_OPTIONS.get(option)
            if target is None:
                return error(
                    ErrorKind.WRONG_OPTION,
                    f"unrecognized display option: {option}, use one of s, u, d",
                )
            return DisplayedInfo(document=self.store.read(target.value))
        except StoreReadError as exc:
            return error(exc.kind, exc.hint)
