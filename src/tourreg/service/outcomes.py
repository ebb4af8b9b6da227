"""Outcome types returned by ``OperatorRegistry`` operations.

Every registry operation returns exactly one outcome.  Successful outcomes
carry the entities involved; a ``Failure`` names what went wrong and the
input that caused it.  The registry never raises for bad user input, and
it never formats text: rendering is the job of ``tourreg.render``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union

from tourreg.model.entities import Activity, Operator
from tourreg.model.places import Location
from tourreg.model.reviews import Review


class FailureKind(Enum):
    """Named failure reports."""

    INVALID_NAME = auto()
    INVALID_LOCATION = auto()
    DUPLICATE_OPERATOR = auto()
    OPERATOR_NOT_FOUND = auto()
    ACTIVITY_NOT_FOUND = auto()
    REVIEW_NOT_FOUND = auto()
    WRONG_REVIEW_TYPE = auto()
    NO_MATCHES = auto()
    MALFORMED_OPTIONS = auto()


class Subject(Enum):
    """What kind of entity an operation was working on."""

    OPERATOR = auto()
    ACTIVITY = auto()
    REVIEW = auto()


class ReviewAction(Enum):
    """Review operations a failure can refer to.

    ``ADD`` applies to every variant; the other three each apply to one
    variant only and get their own wrong-type message.
    """

    ENDORSE = auto()
    RESOLVE = auto()
    UPLOAD_IMAGE = auto()
    ADD = auto()


@dataclass(frozen=True)
class Failure:
    """A recoverable failure report.

    Parameters
    ----------
    kind:
        Which failure this is.
    subject:
        The entity kind being created, searched or looked up.
    value:
        The offending user input (a name, an ID, a location text...).
    detail:
        Extra context, e.g. the location full name for a duplicate
        operator, or the expected option count for malformed options.
    action:
        For review failures, the operation that was attempted.
    expected:
        For malformed review options, the option count the review kind
        requires.  ``None`` when the options were counted correctly but a
        value (the rating) could not be parsed.
    """

    kind: FailureKind
    subject: Subject
    value: str = ""
    detail: str = field(default="")
    action: ReviewAction | None = field(default=None)
    expected: int | None = field(default=None)

    def __str__(self) -> str:
        action = f" during {self.action.name}" if self.action else ""
        detail = f" ({self.detail})" if self.detail else ""
        return f"{self.kind.name} {self.subject.name}{action}: {self.value!r}{detail}"

    @property
    def is_failure(self) -> bool:
        return True


# ---------------------------------------------------------------------------
# Successful outcomes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OperatorCreated:
    operator: Operator

    is_failure = False


@dataclass(frozen=True)
class OperatorMatches:
    operators: tuple[Operator, ...]

    is_failure = False


@dataclass(frozen=True)
class ActivityCreated:
    activity: Activity

    is_failure = False


@dataclass(frozen=True)
class ActivityMatches:
    activities: tuple[Activity, ...]

    is_failure = False


@dataclass(frozen=True)
class ReviewAdded:
    review: Review
    activity: Activity

    is_failure = False


@dataclass(frozen=True)
class ReviewEndorsed:
    review_id: str

    is_failure = False


@dataclass(frozen=True)
class ReviewResolved:
    review_id: str
    response: str

    is_failure = False


@dataclass(frozen=True)
class ImageUploaded:
    review_id: str
    image_name: str

    is_failure = False


@dataclass(frozen=True)
class ReviewListing:
    """All reviews of one activity; ``reviews`` may be empty."""

    activity: Activity
    reviews: tuple[Review, ...]

    is_failure = False


@dataclass(frozen=True)
class TopActivityEntry:
    """The best-rated eligible activity at one location, if any."""

    location: Location
    activity: Activity | None = None
    average_rating: float = 0.0


@dataclass(frozen=True)
class TopActivities:
    entries: tuple[TopActivityEntry, ...]

    is_failure = False


Outcome = Union[
    Failure,
    OperatorCreated,
    OperatorMatches,
    ActivityCreated,
    ActivityMatches,
    ReviewAdded,
    ReviewEndorsed,
    ReviewResolved,
    ImageUploaded,
    ReviewListing,
    TopActivities,
]
