"""tourreg — a registry of activity operators, their activities and reviews.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import tourreg

    registry = tourreg.OperatorRegistry()
    registry.create_operator("Adventure Tours", "AKL")

    # Or drive it with shell commands and collect the printed lines
    lines = tourreg.run_script('''
        create-operator "Adventure Tours" AKL
        create-activity "Bungee Jump" Adventure AT-AKL-001
        add-public-review AT-AKL-001-001 Alice n 6 "Loved it"
        display-top-activities
    ''')

    tourreg.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from tourreg.model import ActivityType, Location
from tourreg.service import OperatorRegistry

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from tourreg.render.renderer import RenderedLine
    from tourreg.service.outcomes import Outcome


def render_outcome(outcome: "Outcome") -> list["RenderedLine"]:
    """Render a registry outcome into display lines.

    Parameters
    ----------
    outcome:
        The value returned by any ``OperatorRegistry`` operation.

    Returns
    -------
    list[RenderedLine]
        One or more lines; ``str(line)`` gives the plain text.
    """
    from tourreg.render.renderer import render as _render

    return _render(outcome)


def run_script(script: str, registry: OperatorRegistry | None = None) -> list[str]:
    """Run newline-separated shell commands and return the output text.

    Parameters
    ----------
    script:
        Shell commands, one per line.  Blank lines and ``#`` comments are
        skipped.
    registry:
        Registry to run against.  A new empty registry is used by default.

    Returns
    -------
    list[str]
        Every line the commands produced, in order.
    """
    import io

    from rich.console import Console

    from tourreg.cli.session import Session

    session = Session(Console(file=io.StringIO()), registry=registry)
    output: list[str] = []
    for line in script.splitlines():
        output.extend(str(rendered) for rendered in session.execute(line))
        if session.finished:
            break
    return output


__all__ = [
    "__version__",
    "ActivityType",
    "Location",
    "OperatorRegistry",
    "render_outcome",
    "run_script",
]
