"""Identifier formatting for operators.

Activity and review IDs derive from their parent's ID and are produced by
``Operator.next_activity_id`` and ``Activity.next_review_id``.
"""
from __future__ import annotations

from tourreg.model.places import Location


def initials(name: str) -> str:
    """Return the uppercase first letter of every whitespace-separated word."""
    return "".join(word[0].upper() for word in name.split())


def operator_id(name: str, location: Location, sequence: int) -> str:
    """Format an operator ID such as ``AT-AKL-001``.

    Parameters
    ----------
    name:
        The trimmed operator name.
    location:
        The operator's location.
    sequence:
        1-based position of this operator among those at ``location``.
    """
    return f"{initials(name)}-{location.abbreviation}-{sequence:03d}"
