"""Operators and the activities they offer.

Entities compare by identity: two operators with the same fields are still
different registry entries.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from tourreg.model.places import ActivityType, Location
from tourreg.model.reviews import Review


@dataclass(eq=False)
class Activity:
    """An offering owned by exactly one operator.

    Parameters
    ----------
    name:
        Trimmed activity name.
    type:
        The activity type; unknown input has already become ``OTHER``.
    id:
        ``<operator id>-<NNN>``, assigned once by the registry.
    operator:
        The owning operator.
    reviews:
        Reviews in the order they were added.
    """

    name: str
    type: ActivityType
    id: str
    operator: "Operator" = field(repr=False)
    reviews: list[Review] = field(default_factory=list)

    @property
    def location(self) -> Location:
        return self.operator.location

    @property
    def description(self) -> str:
        return f"{self.name}: [{self.id}/{self.type}] offered by {self.operator.name}"

    def add_review(self, review: Review) -> None:
        self.reviews.append(review)

    def next_review_id(self, prefix: str | None = None) -> str:
        """Return the ID the next review gets, built on ``prefix`` when given."""
        return f"{prefix or self.id}-R{len(self.reviews) + 1}"

    def average_rating(self) -> float:
        """Return the mean rating across all reviews, or ``0.0`` without reviews."""
        if not self.reviews:
            return 0.0
        return sum(review.rating for review in self.reviews) / len(self.reviews)


@dataclass(eq=False)
class Operator:
    """A named business at one location, offering activities."""

    name: str
    location: Location
    id: str
    activities: list[Activity] = field(default_factory=list)

    def add_activity(self, activity: Activity) -> None:
        self.activities.append(activity)

    def next_activity_id(self, prefix: str | None = None) -> str:
        """Return the ID the next activity gets, built on ``prefix`` when given."""
        return f"{prefix or self.id}-{len(self.activities) + 1:03d}"
