"""Domain model: locations, operators, activities and reviews."""
from __future__ import annotations

from tourreg.model.entities import Activity, Operator
from tourreg.model.places import ActivityType, Location
from tourreg.model.reviews import (
    ANONYMOUS_AUTHOR,
    MAX_RATING,
    MIN_RATING,
    ExpertReview,
    PrivateReview,
    PublicReview,
    Resolution,
    Resolved,
    Review,
    Unresolved,
    clamp_rating,
)

__all__ = [
    "ANONYMOUS_AUTHOR",
    "MAX_RATING",
    "MIN_RATING",
    "Activity",
    "ActivityType",
    "ExpertReview",
    "Location",
    "Operator",
    "PrivateReview",
    "PublicReview",
    "Resolution",
    "Resolved",
    "Review",
    "Unresolved",
    "clamp_rating",
]
