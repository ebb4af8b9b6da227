"""Review variants attached to an activity.

``Review`` is a closed union of three dataclasses.  Code that needs
variant-specific behaviour dispatches with ``isinstance`` checks against the
concrete classes; there is no downcasting and no catch-all branch.

Ratings are clamped to ``[MIN_RATING, MAX_RATING]`` when a review is
constructed, so every stored rating is already in range.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

MIN_RATING = 1
MAX_RATING = 5
ANONYMOUS_AUTHOR = "Anonymous"
UNRESOLVED_TEXT = "-"


def clamp_rating(rating: int) -> int:
    """Clamp ``rating`` into the inclusive ``[1, 5]`` range."""
    return max(MIN_RATING, min(MAX_RATING, rating))


# ---------------------------------------------------------------------------
# Private review resolution state
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Unresolved:
    """A private review nobody has responded to yet."""


@dataclass(frozen=True, slots=True)
class Resolved:
    """A private review with an admin response.

    ``text`` may be empty: resolving with nothing is still a resolution.
    """

    text: str


Resolution = Union[Unresolved, Resolved]


# ---------------------------------------------------------------------------
# Review variants
# ---------------------------------------------------------------------------


@dataclass
class _ReviewBase:
    """Fields shared by every review variant."""

    kind: ClassVar[str] = ""

    id: str
    rating: int
    author: str
    content: str

    def __post_init__(self) -> None:
        self.rating = clamp_rating(self.rating)


@dataclass
class PublicReview(_ReviewBase):
    """A review visible to everyone; an admin can endorse it once."""

    kind: ClassVar[str] = "Public"

    endorsed: bool = False

    def endorse(self) -> None:
        self.endorsed = True


@dataclass
class PrivateReview(_ReviewBase):
    """A review sent to the operator only, optionally asking for follow-up."""

    kind: ClassVar[str] = "Private"

    contact: str = ""
    follow_up: bool = False
    resolution: Resolution = field(default_factory=Unresolved)

    def resolve(self, text: str) -> None:
        self.resolution = Resolved(text)

    @property
    def is_resolved(self) -> bool:
        return isinstance(self.resolution, Resolved)

    @property
    def resolution_text(self) -> str:
        """Return the response for display; ``"-"`` when absent or blank."""
        if isinstance(self.resolution, Resolved) and self.resolution.text.strip():
            return self.resolution.text
        return UNRESOLVED_TEXT


@dataclass
class ExpertReview(_ReviewBase):
    """A review by an expert, who may recommend the activity and attach images."""

    kind: ClassVar[str] = "Expert"

    recommended: bool = False
    images: list[str] = field(default_factory=list)

    def add_image(self, image_name: str) -> None:
        self.images.append(image_name)


Review = Union[PublicReview, PrivateReview, ExpertReview]

# Variants that make an activity eligible for the top-activity ranking.
RANKED_REVIEW_TYPES: tuple[type, ...] = (PublicReview, ExpertReview)
