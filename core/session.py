"""Script and interactive session loops."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from core.command_processor import CommandProcessor

logger = logging.getLogger("sysinfo.session")

INTERACTIVE_FLAG = "-i"
INTERACTIVE_BANNER = "interactive mode entered, rest of params ignored"
USAGE_EXIT_CODE = 1


class Session:
    """Feeds command lines to the processor and echoes one output per line."""

    def __init__(self, processor: CommandProcessor, echo: Callable[[str], None]) -> None:
        self.processor = processor
        self.echo = echo

    def handle(self, source: str | Sequence[str]) -> bool:
        """Process one command; return False once the session should end."""
        outcome = self.processor.process(self.processor.parse(source))
        if outcome.exit_requested:
            return False
        self.echo(outcome.text)
        return True

    def run_script(self, tokens: Sequence[str]) -> int:
        """Process exactly one command built from ``tokens``."""
        if not tokens:
            return USAGE_EXIT_CODE
        self.handle(list(tokens))
        return 0

    def run_interactive(self, lines: Iterable[str]) -> int:
        """Process lines until ``exit`` or end of input."""
        self.echo(INTERACTIVE_BANNER)
        for line in lines:
            if not self.handle(line.strip()):
                logger.info("Session closed by exit command")
                return 0
        logger.info("Session closed at end of input")
        return 0
