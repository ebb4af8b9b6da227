"""Command table for the tourreg shell.

Each shell command is a handler function registered under a kebab-case
name with the number of arguments it accepts.  Handlers receive the
running ``Session`` and the already-tokenised arguments, and return either
a registry outcome or ready-made lines.

Example
-------
Register a command with the decorator::

    @COMMANDS.register("view-activities", min_args=1, usage="OPERATOR_ID")
    def view_activities(session: Session, args: list[str]) -> Outcome:
        return session.registry.view_activities(args[0])

Look it up and validate a call::

    command = COMMANDS.get("VIEW-ACTIVITIES")
    command.check_arguments(["AT-AKL-001"])
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from tourreg.model.places import ActivityType, Location
from tourreg.render.messages import Message
from tourreg.render.renderer import RenderedLine
from tourreg.service.outcomes import Outcome

if TYPE_CHECKING:
    from tourreg.cli.session import Session

logger = logging.getLogger(__name__)

HandlerResult = Union[Outcome, list[RenderedLine]]
Handler = Callable[["Session", list[str]], HandlerResult]

# Default for ``max_args``: accept exactly ``min_args`` arguments.
SAME_AS_MIN = -1


class CommandNotFoundError(KeyError):
    """Raised when a command name is not in the table."""

    def __init__(self, name: str) -> None:
        self.command_name = name
        super().__init__(Message.COMMAND_NOT_FOUND.format(name))

    def __str__(self) -> str:
        return str(self.args[0])


class CommandAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a name that already exists."""

    def __init__(self, name: str, table_name: str) -> None:
        self.command_name = name
        self.table_name = table_name
        super().__init__(
            f"Command {name!r} is already registered in the {table_name!r} table. "
            "Use a unique name or deregister the existing entry first."
        )


class CommandUsageError(ValueError):
    """Raised when a command line is well-formed but its arguments are unusable.

    Handlers raise it for argument values they cannot act on; the session
    prints the message and counts it as a command error.
    """


class CommandArgumentError(CommandUsageError):
    """Raised when a command is called with the wrong number of arguments."""

    def __init__(self, name: str, expected: str, got: int) -> None:
        self.command_name = name
        self.expected = expected
        self.got = got
        super().__init__(Message.WRONG_ARGUMENT_COUNT.format(name, expected, got))


@dataclass(frozen=True)
class Command:
    """A registered shell command.

    Parameters
    ----------
    name:
        Lower-case kebab-case name typed by the user.
    handler:
        Function run with the session and the arguments.
    min_args:
        Fewest arguments accepted.
    max_args:
        Most arguments accepted; ``None`` for no upper bound.
    usage:
        Argument synopsis shown by ``help``.
    help:
        One-line description shown by ``help``.
    """

    name: str
    handler: Handler
    min_args: int = 0
    max_args: int | None = 0
    usage: str = ""
    help: str = ""

    @property
    def expected(self) -> str:
        if self.max_args is None:
            return f"at least {self.min_args}"
        if self.max_args == self.min_args:
            return str(self.min_args)
        return f"{self.min_args} to {self.max_args}"

    def check_arguments(self, args: list[str]) -> None:
        """Raise ``CommandArgumentError`` unless ``args`` has an allowed length."""
        too_few = len(args) < self.min_args
        too_many = self.max_args is not None and len(args) > self.max_args
        if too_few or too_many:
            raise CommandArgumentError(self.name, self.expected, len(args))


class CommandTable:
    """Name → ``Command`` lookup with decorator registration.

    Names are matched case-insensitively.

    Parameters
    ----------
    name:
        A human-readable name for this table (used in error messages).
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._commands: dict[str, Command] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self,
        name: str,
        *,
        min_args: int = 0,
        max_args: int | None = SAME_AS_MIN,
        usage: str = "",
        help: str = "",  # noqa: A002
    ) -> Callable[[Handler], Handler]:
        """Return a decorator that registers the decorated handler.

        ``max_args`` defaults to ``min_args``; pass ``None`` for commands
        that take any number of trailing arguments.

        Raises
        ------
        CommandAlreadyRegisteredError
            If ``name`` is already in use in this table.
        """

        def decorator(handler: Handler) -> Handler:
            self.register_command(
                Command(
                    name=name.lower(),
                    handler=handler,
                    min_args=min_args,
                    max_args=min_args if max_args == SAME_AS_MIN else max_args,
                    usage=usage,
                    help=help,
                )
            )
            return handler

        return decorator

    def register_command(self, command: Command) -> None:
        """Register a ``Command`` directly.

        Raises
        ------
        CommandAlreadyRegisteredError
            If the name is already taken.
        """
        if command.name in self._commands:
            raise CommandAlreadyRegisteredError(command.name, self._name)
        self._commands[command.name] = command
        logger.debug("Registered command %r in table %r", command.name, self._name)

    def deregister(self, name: str) -> None:
        """Remove a command from the table.

        Raises
        ------
        CommandNotFoundError
            If ``name`` is not currently registered.
        """
        key = name.lower()
        if key not in self._commands:
            raise CommandNotFoundError(name)
        del self._commands[key]
        logger.debug("Deregistered command %r from table %r", key, self._name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> Command:
        """Return the command registered under ``name``.

        Raises
        ------
        CommandNotFoundError
            If no command is registered under ``name``.
        """
        try:
            return self._commands[name.lower()]
        except KeyError:
            raise CommandNotFoundError(name) from None

    def list_commands(self) -> list[str]:
        """Return command names in registration order."""
        return list(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def __repr__(self) -> str:
        return f"CommandTable(name={self._name!r}, commands={self.list_commands()})"


COMMANDS = CommandTable("tourreg")


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


@COMMANDS.register(
    "create-operator",
    min_args=2,
    usage="NAME LOCATION",
    help="Create an operator at a location (name, abbreviation or te reo name).",
)
def create_operator(session: Session, args: list[str]) -> HandlerResult:
    return session.registry.create_operator(args[0], args[1])


@COMMANDS.register(
    "search-operators",
    min_args=0,
    max_args=1,
    usage="[KEYWORD]",
    help="Search operators by name or location; '*' lists all.",
)
def search_operators(session: Session, args: list[str]) -> HandlerResult:
    return session.registry.search_operators(args[0] if args else "")


# ---------------------------------------------------------------------------
# Activities
# ---------------------------------------------------------------------------


@COMMANDS.register(
    "create-activity",
    min_args=3,
    usage="NAME TYPE OPERATOR_ID",
    help="Create an activity for an operator.",
)
def create_activity(session: Session, args: list[str]) -> HandlerResult:
    return session.registry.create_activity(args[0], args[1], args[2])


@COMMANDS.register(
    "view-activities",
    min_args=1,
    usage="OPERATOR_ID",
    help="List the activities of an operator.",
)
def view_activities(session: Session, args: list[str]) -> HandlerResult:
    return session.registry.view_activities(args[0])


@COMMANDS.register(
    "search-activities",
    min_args=0,
    max_args=1,
    usage="[KEYWORD]",
    help="Search activities by name, type or location; '*' lists all.",
)
def search_activities(session: Session, args: list[str]) -> HandlerResult:
    return session.registry.search_activities(args[0] if args else "")


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------


@COMMANDS.register(
    "add-public-review",
    min_args=1,
    max_args=None,
    usage="ACTIVITY_ID AUTHOR ANONYMOUS(y/n) RATING TEXT",
    help="Add a public review to an activity.",
)
def add_public_review(session: Session, args: list[str]) -> HandlerResult:
    return session.registry.add_public_review(args[0], args[1:])


@COMMANDS.register(
    "add-private-review",
    min_args=1,
    max_args=None,
    usage="ACTIVITY_ID AUTHOR CONTACT RATING TEXT FOLLOW_UP(y/n)",
    help="Add a private review to an activity.",
)
def add_private_review(session: Session, args: list[str]) -> HandlerResult:
    return session.registry.add_private_review(args[0], args[1:])


@COMMANDS.register(
    "add-expert-review",
    min_args=1,
    max_args=None,
    usage="ACTIVITY_ID AUTHOR RATING TEXT RECOMMENDED(y/n)",
    help="Add an expert review to an activity.",
)
def add_expert_review(session: Session, args: list[str]) -> HandlerResult:
    return session.registry.add_expert_review(args[0], args[1:])


@COMMANDS.register(
    "display-reviews",
    min_args=1,
    usage="ACTIVITY_ID",
    help="Show every review of an activity.",
)
def display_reviews(session: Session, args: list[str]) -> HandlerResult:
    return session.registry.display_reviews(args[0])


@COMMANDS.register(
    "endorse-review",
    min_args=1,
    usage="REVIEW_ID",
    help="Endorse a public review.",
)
def endorse_review(session: Session, args: list[str]) -> HandlerResult:
    return session.registry.endorse_review(args[0])


@COMMANDS.register(
    "resolve-review",
    min_args=1,
    max_args=2,
    usage="REVIEW_ID [RESPONSE]",
    help="Resolve a private review with a response.",
)
def resolve_review(session: Session, args: list[str]) -> HandlerResult:
    return session.registry.resolve_review(args[0], args[1] if len(args) > 1 else None)


@COMMANDS.register(
    "upload-review-image",
    min_args=2,
    usage="REVIEW_ID IMAGE",
    help="Attach an image to an expert review.",
)
def upload_review_image(session: Session, args: list[str]) -> HandlerResult:
    return session.registry.upload_review_image(args[0], args[1])


@COMMANDS.register(
    "display-top-activities",
    usage="",
    help="Show the best-rated activity in every location.",
)
def display_top_activities(session: Session, args: list[str]) -> HandlerResult:
    return session.registry.display_top_activities()


# ---------------------------------------------------------------------------
# Session commands
# ---------------------------------------------------------------------------

EXPORT_FORMATS = ("json", "yaml")


@COMMANDS.register(
    "export",
    min_args=0,
    max_args=1,
    usage="[json|yaml]",
    help="Print a snapshot of the registry (default: yaml).",
)
def export(session: Session, args: list[str]) -> HandlerResult:
    from tourreg.export import RegistrySerializer

    output_format = args[0].lower() if args else "yaml"
    if output_format not in EXPORT_FORMATS:
        raise CommandUsageError(
            Message.UNKNOWN_EXPORT_FORMAT.format(args[0], ", ".join(EXPORT_FORMATS))
        )
    serializer = RegistrySerializer()
    if output_format == "json":
        text = serializer.to_json(session.registry)
    else:
        text = serializer.to_yaml(session.registry).rstrip("\n")
    return [RenderedLine(text)]


@COMMANDS.register("help", usage="", help="List the available commands.")
def show_help(session: Session, args: list[str]) -> HandlerResult:
    lines = [RenderedLine("Available commands:")]
    for command in session.commands:
        synopsis = f"{command.name} {command.usage}".rstrip()
        lines.append(RenderedLine(f"  {synopsis:<62} {command.help}"))
    types = ", ".join(t.display_name for t in ActivityType)
    locations = ", ".join(loc.abbreviation for loc in Location)
    lines.append(RenderedLine(f"Activity types: {types}"))
    lines.append(RenderedLine(f"Locations: {locations}"))
    return lines


@COMMANDS.register("exit", usage="", help="Leave the shell.")
def exit_shell(session: Session, args: list[str]) -> HandlerResult:
    session.finished = True
    return [RenderedLine(Message.EXIT.format())]
