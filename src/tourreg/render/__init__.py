"""Message catalogue and outcome rendering."""
from __future__ import annotations

from tourreg.render.messages import Message, plural_parts
from tourreg.render.renderer import LineStyle, RenderedLine, print_lines, render

__all__ = [
    "LineStyle",
    "Message",
    "RenderedLine",
    "plural_parts",
    "print_lines",
    "render",
]
