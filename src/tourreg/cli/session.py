"""A command session: one registry, one console, many command lines.

``Session.execute`` takes a raw line, splits it with ``shlex``, looks the
command up, checks its argument count, runs it and prints the result.
Command-layer errors are printed rather than raised, so a bad line never
ends the session.
"""
from __future__ import annotations

import logging
import shlex

from rich.console import Console

from tourreg.cli.commands import (
    COMMANDS,
    CommandNotFoundError,
    CommandTable,
    CommandUsageError,
    HandlerResult,
)
from tourreg.config import Settings
from tourreg.render.messages import Message
from tourreg.render.renderer import LineStyle, RenderedLine, print_lines, render
from tourreg.service.registry import OperatorRegistry

logger = logging.getLogger(__name__)


class Session:
    """Runs command lines against a single ``OperatorRegistry``.

    Parameters
    ----------
    console:
        Where output is printed.
    settings:
        Front-end settings; only ``color`` is used here.
    registry:
        The registry to operate on.  A fresh, empty one by default.
    commands:
        The command table.  Defaults to the built-in ``COMMANDS``.
    """

    def __init__(
        self,
        console: Console,
        settings: Settings | None = None,
        registry: OperatorRegistry | None = None,
        commands: CommandTable | None = None,
    ) -> None:
        self.console = console
        self.settings = settings if settings is not None else Settings()
        self.registry = registry if registry is not None else OperatorRegistry()
        self.commands = commands if commands is not None else COMMANDS
        self.finished = False
        self.error_count = 0

    def execute(self, line: str) -> list[RenderedLine]:
        """Run one command line, print its output and return the printed lines.

        Blank lines and ``#`` comments produce no output.
        """
        lines = self._run(line)
        print_lines(self.console, lines, color=self.settings.color)
        return lines

    def _run(self, line: str) -> list[RenderedLine]:
        try:
            tokens = shlex.split(line, comments=True)
        except ValueError as exc:
            return self._command_error(Message.UNPARSEABLE_LINE.format(exc))
        if not tokens:
            return []

        name, args = tokens[0], tokens[1:]
        try:
            command = self.commands.get(name)
            command.check_arguments(args)
            logger.debug("Running %s with %d argument(s)", command.name, len(args))
            result = command.handler(self, args)
        except (CommandNotFoundError, CommandUsageError) as exc:
            return self._command_error(str(exc))
        return self._to_lines(result)

    def _command_error(self, text: str) -> list[RenderedLine]:
        self.error_count += 1
        logger.debug("Command error: %s", text)
        return [RenderedLine(text, LineStyle.ERROR)]

    @staticmethod
    def _to_lines(result: HandlerResult) -> list[RenderedLine]:
        if isinstance(result, list):
            return result
        return render(result)
