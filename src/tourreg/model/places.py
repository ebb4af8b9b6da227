"""Enumerated locations and activity types.

Both enums are process-wide constants.  ``Location`` members are iterated in
declaration order by the top-activity aggregation, so the order below is
part of the observable output.
"""
from __future__ import annotations

from enum import Enum


class Location(Enum):
    """A known location with its te reo Māori and English names.

    Each value is a ``(te_reo_name, english_name, abbreviation)`` triple.
    """

    AKL = ("Tāmaki Makaurau", "Auckland", "AKL")
    HLZ = ("Kirikiriroa", "Hamilton", "HLZ")
    TRG = ("Tauranga", "Tauranga", "TRG")
    TUO = ("Taupō-nui-a-Tia", "Taupō", "TUO")
    WLG = ("Te Whanganui-a-Tara", "Wellington", "WLG")
    NSN = ("Whakatū", "Nelson", "NSN")
    CHC = ("Ōtautahi", "Christchurch", "CHC")
    DUD = ("Ōtepoti", "Dunedin", "DUD")

    def __init__(self, te_reo_name: str, english_name: str, abbreviation: str) -> None:
        self.te_reo_name = te_reo_name
        self.english_name = english_name
        self.abbreviation = abbreviation

    @property
    def full_name(self) -> str:
        """Return the bilingual display name, e.g. ``"Tāmaki Makaurau | Auckland"``."""
        return f"{self.te_reo_name} | {self.english_name}"

    def __str__(self) -> str:
        return self.full_name

    @classmethod
    def from_text(cls, text: str | None) -> "Location | None":
        """Parse free text into a ``Location``.

        Matches the abbreviation, either name, or the full name,
        case-insensitively after trimming.  Returns ``None`` when nothing
        matches.
        """
        if text is None:
            return None
        needle = text.strip().casefold()
        if not needle:
            return None
        for location in cls:
            candidates = (
                location.abbreviation,
                location.te_reo_name,
                location.english_name,
                location.full_name,
            )
            if any(needle == candidate.casefold() for candidate in candidates):
                return location
        return None


class ActivityType(Enum):
    """Kinds of activity an operator can offer."""

    ADVENTURE = "Adventure"
    CULTURE = "Culture"
    FOOD = "Food"
    SCENIC = "Scenic"
    WILDLIFE = "Wildlife"
    OTHER = "Other"

    @property
    def display_name(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_text(cls, text: str | None) -> "ActivityType":
        """Parse free text into an ``ActivityType``, falling back to ``OTHER``."""
        if text is None:
            return cls.OTHER
        needle = text.strip().casefold()
        for activity_type in cls:
            if needle in (activity_type.name.casefold(), activity_type.value.casefold()):
                return activity_type
        return cls.OTHER
