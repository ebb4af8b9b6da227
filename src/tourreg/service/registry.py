"""The operator registry: every query and mutation on the entity graph.

The registry owns all operators; operators own their activities and
activities own their reviews.  Lookups are linear scans in insertion order,
which also fixes the tie-break order of ``display_top_activities``.

Usage
-----
::

    from tourreg.service import OperatorRegistry

    registry = OperatorRegistry()
    created = registry.create_operator("Adventure Tours", "AKL")
    registry.create_activity("Bungee Jump", "Adventure", created.operator.id)
"""
from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Sequence

from tourreg.model.entities import Activity, Operator
from tourreg.model.places import ActivityType, Location
from tourreg.model.reviews import (
    ANONYMOUS_AUTHOR,
    RANKED_REVIEW_TYPES,
    UNRESOLVED_TEXT,
    ExpertReview,
    PrivateReview,
    PublicReview,
    Review,
)
from tourreg.service.identifiers import operator_id as format_operator_id
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

logger = logging.getLogger(__name__)

MIN_NAME_LENGTH = 3
WILDCARD = "*"
# The full location names contain "|", so it would otherwise match everything.
OPERATOR_SEARCH_SKIP = "|"

PUBLIC_OPTION_COUNT = 4
PRIVATE_OPTION_COUNT = 5
EXPERT_OPTION_COUNT = 4

# Plain decimal integers only: no underscores, no non-ASCII digits.
RATING_PATTERN = re.compile(r"[+-]?[0-9]+")


def _is_yes(text: str) -> bool:
    return text.strip().lower() in ("y", "yes")


def _parse_rating(text: str) -> int | None:
    text = text.strip()
    if not RATING_PATTERN.fullmatch(text):
        return None
    return int(text)


class OperatorRegistry:
    """In-memory registry of operators, activities and reviews.

    Construct one per session and pass it to whatever drives it; the
    registry is not thread-safe and keeps no global state.
    """

    def __init__(self) -> None:
        self._operators: list[Operator] = []

    @property
    def operators(self) -> tuple[Operator, ...]:
        return tuple(self._operators)

    def __len__(self) -> int:
        return len(self._operators)

    def __repr__(self) -> str:
        return f"OperatorRegistry(operators={len(self._operators)})"

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def iter_activities(self) -> Iterator[Activity]:
        """Yield every activity, operator by operator, in insertion order."""
        for operator in self._operators:
            yield from operator.activities

    def iter_reviews(self) -> Iterator[Review]:
        for activity in self.iter_activities():
            yield from activity.reviews

    def find_operator(self, operator_id: str) -> Operator | None:
        """Return the operator whose ID matches case-insensitively."""
        wanted = operator_id.strip().lower()
        for operator in self._operators:
            if operator.id.lower() == wanted:
                return operator
        logger.debug("No operator with id %r", operator_id)
        return None

    def find_activity(self, activity_id: str) -> Activity | None:
        """Return the activity whose ID matches case-insensitively."""
        wanted = activity_id.strip().lower()
        for activity in self.iter_activities():
            if activity.id.lower() == wanted:
                return activity
        logger.debug("No activity with id %r", activity_id)
        return None

    def find_review(self, review_id: str) -> Review | None:
        """Return the review whose ID matches case-insensitively."""
        wanted = review_id.strip().lower()
        for review in self.iter_reviews():
            if review.id.lower() == wanted:
                return review
        logger.debug("No review with id %r", review_id)
        return None

    def _failed(self, failure: Failure) -> Failure:
        logger.debug("Operation failed: %s", failure)
        return failure

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def create_operator(self, name: str, location_text: str) -> Outcome:
        """Create an operator at a location.

        The ID is the operator's initials, the location abbreviation and a
        3-digit sequence counting operators at that location.
        """
        name = name.strip()
        if len(name) < MIN_NAME_LENGTH:
            return self._failed(Failure(FailureKind.INVALID_NAME, Subject.OPERATOR, name))

        location = Location.from_text(location_text)
        if location is None:
            return self._failed(
                Failure(FailureKind.INVALID_LOCATION, Subject.OPERATOR, location_text)
            )

        at_location = [op for op in self._operators if op.location is location]
        if any(op.name.lower() == name.lower() for op in at_location):
            return self._failed(
                Failure(
                    FailureKind.DUPLICATE_OPERATOR,
                    Subject.OPERATOR,
                    name,
                    detail=location.full_name,
                )
            )

        operator = Operator(
            name=name,
            location=location,
            id=format_operator_id(name, location, len(at_location) + 1),
        )
        self._operators.append(operator)
        logger.info("Created operator %s (%s)", operator.id, operator.name)
        return OperatorCreated(operator)

    def search_operators(self, keyword: str | None) -> Outcome:
        """Find operators whose name or location contains ``keyword``.

        ``"*"`` returns every operator; a blank keyword returns nothing.
        """
        if keyword is None or not keyword.strip():
            return self._failed(Failure(FailureKind.NO_MATCHES, Subject.OPERATOR, ""))

        needle = keyword.strip().lower()
        if needle == WILDCARD:
            matches = list(self._operators)
        elif needle == OPERATOR_SEARCH_SKIP:
            matches = []
        else:
            matches = [
                op
                for op in self._operators
                if needle in op.name.lower()
                or needle in op.location.full_name.lower()
                or needle in op.location.abbreviation.lower()
            ]

        if not matches:
            return self._failed(Failure(FailureKind.NO_MATCHES, Subject.OPERATOR, keyword))
        return OperatorMatches(tuple(matches))

    # ------------------------------------------------------------------
    # Activities
    # ------------------------------------------------------------------

    def create_activity(self, name: str, type_text: str, operator_id: str) -> Outcome:
        """Create an activity under an existing operator.

        An unrecognised ``type_text`` becomes ``ActivityType.OTHER``.
        """
        name = name.strip()
        if len(name) < MIN_NAME_LENGTH:
            return self._failed(Failure(FailureKind.INVALID_NAME, Subject.ACTIVITY, name))

        activity_type = ActivityType.from_text(type_text)

        operator = self.find_operator(operator_id)
        if operator is None:
            return self._failed(
                Failure(FailureKind.OPERATOR_NOT_FOUND, Subject.ACTIVITY, operator_id)
            )

        activity = Activity(
            name=name,
            type=activity_type,
            id=operator.next_activity_id(operator_id.strip()),
            operator=operator,
        )
        operator.add_activity(activity)
        logger.info("Created activity %s (%s)", activity.id, activity.name)
        return ActivityCreated(activity)

    def view_activities(self, operator_id: str) -> Outcome:
        operator = self.find_operator(operator_id)
        if operator is None:
            return self._failed(
                Failure(FailureKind.OPERATOR_NOT_FOUND, Subject.OPERATOR, operator_id)
            )
        if not operator.activities:
            return self._failed(Failure(FailureKind.NO_MATCHES, Subject.ACTIVITY, operator_id))
        return ActivityMatches(tuple(operator.activities))

    def search_activities(self, keyword: str) -> Outcome:
        """Find activities by name, type or location.

        Unlike operator search a blank keyword is not special: the empty
        string is contained in every field, so it matches everything.
        """
        needle = keyword.strip().lower()
        matches = [
            activity
            for activity in self.iter_activities()
            if needle == WILDCARD
            or needle in activity.name.lower()
            or needle in activity.type.display_name.lower()
            or needle in activity.location.full_name.lower()
            or needle in activity.location.abbreviation.lower()
        ]
        if not matches:
            return self._failed(Failure(FailureKind.NO_MATCHES, Subject.ACTIVITY, keyword))
        return ActivityMatches(tuple(matches))

    # ------------------------------------------------------------------
    # Reviews: creation
    # ------------------------------------------------------------------

    def _check_options(
        self, kind: str, expected: int, options: Sequence[str]
    ) -> Failure | None:
        if len(options) != expected:
            return Failure(
                FailureKind.MALFORMED_OPTIONS,
                Subject.REVIEW,
                str(len(options)),
                detail=kind,
                action=ReviewAction.ADD,
                expected=expected,
            )
        return None

    def _rating_failure(self, kind: str, rating_text: str) -> Failure:
        return Failure(
            FailureKind.MALFORMED_OPTIONS,
            Subject.REVIEW,
            rating_text.strip(),
            detail=kind,
            action=ReviewAction.ADD,
        )

    def _activity_failure(self, activity_id: str) -> Failure:
        return Failure(
            FailureKind.ACTIVITY_NOT_FOUND,
            Subject.REVIEW,
            activity_id,
            action=ReviewAction.ADD,
        )

    def _attach(self, activity: Activity, review: Review) -> Outcome:
        activity.add_review(review)
        logger.info("Added %s review %s to %s", review.kind, review.id, activity.id)
        return ReviewAdded(review, activity)

    def add_public_review(self, activity_id: str, options: Sequence[str]) -> Outcome:
        """Add a public review.

        ``options`` is ``[author, anonymous, rating, text]``.  An anonymous
        flag of "y"/"yes" replaces the author with ``"Anonymous"``.
        """
        kind = PublicReview.kind
        failure = self._check_options(kind, PUBLIC_OPTION_COUNT, options)
        if failure is not None:
            return self._failed(failure)

        author, anonymous, rating_text, text = (option.strip() for option in options)
        rating = _parse_rating(rating_text)
        if rating is None:
            return self._failed(self._rating_failure(kind, rating_text))
        if _is_yes(anonymous):
            author = ANONYMOUS_AUTHOR

        activity = self.find_activity(activity_id)
        if activity is None:
            return self._failed(self._activity_failure(activity_id))

        review = PublicReview(
            id=activity.next_review_id(activity_id.strip()),
            rating=rating,
            author=author,
            content=text,
        )
        return self._attach(activity, review)

    def add_private_review(self, activity_id: str, options: Sequence[str]) -> Outcome:
        """Add a private review.

        ``options`` is ``[author, contact, rating, text, follow_up]``.
        """
        kind = PrivateReview.kind
        failure = self._check_options(kind, PRIVATE_OPTION_COUNT, options)
        if failure is not None:
            return self._failed(failure)

        author, contact, rating_text, text, follow_up = (option.strip() for option in options)
        rating = _parse_rating(rating_text)
        if rating is None:
            return self._failed(self._rating_failure(kind, rating_text))

        activity = self.find_activity(activity_id)
        if activity is None:
            return self._failed(self._activity_failure(activity_id))

        review = PrivateReview(
            id=activity.next_review_id(activity_id.strip()),
            rating=rating,
            author=author,
            content=text,
            contact=contact,
            follow_up=_is_yes(follow_up),
        )
        return self._attach(activity, review)

    def add_expert_review(self, activity_id: str, options: Sequence[str]) -> Outcome:
        """Add an expert review.

        ``options`` is ``[author, rating, text, recommended]``.
        """
        kind = ExpertReview.kind
        failure = self._check_options(kind, EXPERT_OPTION_COUNT, options)
        if failure is not None:
            return self._failed(failure)

        author, rating_text, text, recommended = (option.strip() for option in options)
        rating = _parse_rating(rating_text)
        if rating is None:
            return self._failed(self._rating_failure(kind, rating_text))

        activity = self.find_activity(activity_id)
        if activity is None:
            return self._failed(self._activity_failure(activity_id))

        review = ExpertReview(
            id=activity.next_review_id(activity_id.strip()),
            rating=rating,
            author=author,
            content=text,
            recommended=_is_yes(recommended),
        )
        return self._attach(activity, review)

    # ------------------------------------------------------------------
    # Reviews: lifecycle
    # ------------------------------------------------------------------

    def _review_not_found(self, review_id: str, action: ReviewAction) -> Failure:
        return self._failed(
            Failure(FailureKind.REVIEW_NOT_FOUND, Subject.REVIEW, review_id, action=action)
        )

    def _wrong_type(self, review: Review, review_id: str, action: ReviewAction) -> Failure:
        return self._failed(
            Failure(
                FailureKind.WRONG_REVIEW_TYPE,
                Subject.REVIEW,
                review_id,
                detail=review.kind,
                action=action,
            )
        )

    def endorse_review(self, review_id: str) -> Outcome:
        review = self.find_review(review_id)
        if review is None:
            return self._review_not_found(review_id, ReviewAction.ENDORSE)
        if not isinstance(review, PublicReview):
            return self._wrong_type(review, review_id, ReviewAction.ENDORSE)
        review.endorse()
        logger.info("Endorsed review %s", review.id)
        return ReviewEndorsed(review_id)

    def resolve_review(self, review_id: str, response: str | None) -> Outcome:
        """Resolve a private review.

        A blank or missing response is stored as ``"-"``; the review still
        counts as resolved.
        """
        review = self.find_review(review_id)
        if review is None:
            return self._review_not_found(review_id, ReviewAction.RESOLVE)
        if not isinstance(review, PrivateReview):
            return self._wrong_type(review, review_id, ReviewAction.RESOLVE)
        text = response.strip() if response is not None else ""
        if not text:
            text = UNRESOLVED_TEXT
        review.resolve(text)
        logger.info("Resolved review %s", review.id)
        return ReviewResolved(review_id, text)

    def upload_review_image(self, review_id: str, image_name: str) -> Outcome:
        review = self.find_review(review_id)
        if review is None:
            return self._review_not_found(review_id, ReviewAction.UPLOAD_IMAGE)
        if not isinstance(review, ExpertReview):
            return self._wrong_type(review, review_id, ReviewAction.UPLOAD_IMAGE)
        review.add_image(image_name)
        logger.info("Attached image %r to review %s", image_name, review.id)
        return ImageUploaded(review_id, image_name)

    def display_reviews(self, activity_id: str) -> Outcome:
        activity = self.find_activity(activity_id)
        if activity is None:
            return self._failed(
                Failure(FailureKind.ACTIVITY_NOT_FOUND, Subject.ACTIVITY, activity_id)
            )
        return ReviewListing(activity, tuple(activity.reviews))

    # ------------------------------------------------------------------
    # Aggregation
    # ------------------------------------------------------------------

    def top_activity(self, location: Location) -> TopActivityEntry:
        """Return the highest-rated activity at ``location``.

        Only activities with at least one public or expert review take
        part.  Ties keep the activity found first.
        """
        best: Activity | None = None
        best_rating = 0.0
        for operator in self._operators:
            if operator.location is not location:
                continue
            for activity in operator.activities:
                if not any(isinstance(r, RANKED_REVIEW_TYPES) for r in activity.reviews):
                    continue
                rating = activity.average_rating()
                if best is None or rating > best_rating:
                    best, best_rating = activity, rating
        return TopActivityEntry(location, best, best_rating)

    def display_top_activities(self) -> Outcome:
        return TopActivities(tuple(self.top_activity(location) for location in Location))
