"""Registry service and the outcomes its operations return."""
from __future__ import annotations

from tourreg.service.outcomes import (
    ActivityCreated,
    ActivityMatches,
    Failure,
    FailureKind,
    ImageUploaded,
    OperatorCreated,
    OperatorMatches,
    Outcome,
    ReviewAction,
    ReviewAdded,
    ReviewEndorsed,
    ReviewListing,
    ReviewResolved,
    Subject,
    TopActivities,
    TopActivityEntry,
)
from tourreg.service.registry import OperatorRegistry

__all__ = [
    "ActivityCreated",
    "ActivityMatches",
    "Failure",
    "FailureKind",
    "ImageUploaded",
    "OperatorCreated",
    "OperatorMatches",
    "OperatorRegistry",
    "Outcome",
    "ReviewAction",
    "ReviewAdded",
    "ReviewEndorsed",
    "ReviewListing",
    "ReviewResolved",
    "Subject",
    "TopActivities",
    "TopActivityEntry",
]
