"""Typer command handlers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

import typer

from core.command_processor import CommandProcessor
from core.config import build_processor_config, load_effective_config
from core.session import INTERACTIVE_FLAG, USAGE_EXIT_CODE, Session

USAGE = """\
Usage: sysinfo <command> [option] [-s]
       sysinfo -i

Commands:
  help               list commands
  system             host system information
  user               current user information
  directory          files in the working directory
  details <name>     stat information for a file
  display [s|u|d]    show saved information

Flags:
  -s                 save the result to info/<command>.json
  -i                 interactive mode, one command per line until `exit`"""


def _session(root: Path | None = None) -> Session:
    root = (root or Path.cwd()).resolve()
    config = load_effective_config(root)
    processor_config = build_processor_config(
        config,
        root,
        program_name=Path(sys.argv[0]).name,
    )
    return Session(CommandProcessor(processor_config), echo=typer.echo)


def usage() -> int:
    """Print usage text and return the failure status."""
    typer.echo(USAGE)
    return USAGE_EXIT_CODE


def run(tokens: Sequence[str], stdin: Iterable[str] | None = None, root: Path | None = None) -> int:
    """Select script or interactive mode from ``tokens`` and run it."""
    if not tokens:
        return usage()
    try:
        session = _session(root)
    except ValueError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        return 1
    if tokens[0] == INTERACTIVE_FLAG:
        return session.run_interactive(stdin if stdin is not None else sys.stdin)
    return session.run_script(tokens)
