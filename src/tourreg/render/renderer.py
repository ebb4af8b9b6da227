"""Turn registry outcomes into printable lines.

``render`` is a pure function from an outcome to a list of
``RenderedLine`` objects; ``print_lines`` writes them to a Rich console.
Lines are printed as ``rich.text.Text`` so that brackets in IDs such as
``[AT-AKL-001-001/Adventure]`` are never read as console markup.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rich.console import Console
from rich.text import Text

from tourreg.model.reviews import MAX_RATING, ExpertReview, PrivateReview, PublicReview, Review
from tourreg.render.messages import (
    ACTIVITY_FORMS,
    OPERATOR_FORMS,
    REVIEW_FORMS,
    Message,
    plural_parts,
)
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
)


class LineStyle(Enum):
    """How a line should be highlighted on a color console."""

    OK = "green"
    ERROR = "red"
    INFO = ""


@dataclass(frozen=True)
class RenderedLine:
    text: str
    style: LineStyle = LineStyle.INFO

    def __str__(self) -> str:
        return self.text


def _ok(message: Message, *args: object) -> RenderedLine:
    return RenderedLine(message.format(*args), LineStyle.OK)


def _error(message: Message, *args: object) -> RenderedLine:
    return RenderedLine(message.format(*args), LineStyle.ERROR)


def _info(message: Message, *args: object) -> RenderedLine:
    return RenderedLine(message.format(*args), LineStyle.INFO)


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

_WRONG_TYPE_MESSAGES = {
    ReviewAction.ENDORSE: Message.REVIEW_NOT_ENDORSED,
    ReviewAction.RESOLVE: Message.REVIEW_NOT_RESOLVED,
    ReviewAction.UPLOAD_IMAGE: Message.REVIEW_IMAGE_NOT_ADDED,
}


def render_failure(failure: Failure) -> RenderedLine:
    """Pick the message for a failure report."""
    kind, subject, value = failure.kind, failure.subject, failure.value

    if kind is FailureKind.INVALID_NAME:
        if subject is Subject.ACTIVITY:
            return _error(Message.ACTIVITY_NOT_CREATED_INVALID_NAME, value)
        return _error(Message.OPERATOR_NOT_CREATED_INVALID_NAME, value)
    if kind is FailureKind.INVALID_LOCATION:
        return _error(Message.OPERATOR_NOT_CREATED_INVALID_LOCATION, value)
    if kind is FailureKind.DUPLICATE_OPERATOR:
        return _error(Message.OPERATOR_NOT_CREATED_ALREADY_EXISTS, value, failure.detail)
    if kind is FailureKind.OPERATOR_NOT_FOUND:
        if subject is Subject.ACTIVITY:
            return _error(Message.ACTIVITY_NOT_CREATED_INVALID_OPERATOR, value)
        return _error(Message.OPERATOR_NOT_FOUND, value)
    if kind is FailureKind.ACTIVITY_NOT_FOUND:
        if subject is Subject.REVIEW:
            return _error(Message.REVIEW_NOT_ADDED_INVALID_ACTIVITY, value)
        return _error(Message.ACTIVITY_NOT_FOUND, value)
    if kind is FailureKind.REVIEW_NOT_FOUND:
        return _error(Message.REVIEW_NOT_FOUND, value)
    if kind is FailureKind.WRONG_REVIEW_TYPE:
        message = _WRONG_TYPE_MESSAGES[failure.action or ReviewAction.ENDORSE]
        return _error(message, value)
    if kind is FailureKind.NO_MATCHES:
        if subject is Subject.OPERATOR:
            return _info(Message.NO_MATCHING_OPERATORS)
        return _info(Message.NO_MATCHING_ACTIVITIES)
    if kind is FailureKind.MALFORMED_OPTIONS:
        if failure.expected is not None:
            return _error(
                Message.REVIEW_NOT_ADDED_OPTION_COUNT,
                failure.detail.lower(),
                failure.expected,
                value,
            )
        return _error(Message.REVIEW_NOT_ADDED_INVALID_RATING, value)
    raise ValueError(f"Unhandled failure kind: {kind!r}")


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------


def render_review(review: Review) -> list[RenderedLine]:
    """Render one review entry with its variant-specific trailer."""
    lines = [
        _info(
            Message.REVIEW_ENTRY_HEADER,
            review.rating,
            MAX_RATING,
            review.kind,
            review.id,
            review.author,
        ),
        _info(Message.REVIEW_ENTRY_TEXT, review.content),
    ]

    if isinstance(review, PublicReview):
        if review.endorsed:
            lines.append(_info(Message.REVIEW_ENTRY_ENDORSED))
    elif isinstance(review, PrivateReview):
        # Follow-up is only shown while unresolved; otherwise the resolution
        # line is printed, with "-" when there is none yet.
        if not review.is_resolved and review.follow_up:
            lines.append(_info(Message.REVIEW_ENTRY_FOLLOW_UP, review.contact))
        else:
            lines.append(_info(Message.REVIEW_ENTRY_RESOLVED, review.resolution_text))
    elif isinstance(review, ExpertReview):
        if review.recommended:
            lines.append(_info(Message.REVIEW_ENTRY_RECOMMENDED))
        if review.images:
            lines.append(_info(Message.REVIEW_ENTRY_IMAGES, ",".join(review.images)))
    return lines


def _render_listing(listing: ReviewListing) -> list[RenderedLine]:
    name = listing.activity.name
    if not listing.reviews:
        return [_info(Message.NO_REVIEWS, name)]
    verb, count, suffix = plural_parts(len(listing.reviews), REVIEW_FORMS)
    lines = [_info(Message.REVIEWS_FOUND, verb, count, suffix, name)]
    for review in listing.reviews:
        lines.extend(render_review(review))
    return lines


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def render(outcome: Outcome) -> list[RenderedLine]:
    """Render any registry outcome into display lines."""
    if isinstance(outcome, Failure):
        return [render_failure(outcome)]

    if isinstance(outcome, OperatorCreated):
        op = outcome.operator
        return [_ok(Message.OPERATOR_CREATED, op.name, op.id, op.location.full_name)]

    if isinstance(outcome, OperatorMatches):
        verb, count, suffix = plural_parts(len(outcome.operators), OPERATOR_FORMS)
        lines = [_info(Message.OPERATORS_FOUND, verb, count, suffix)]
        lines.extend(
            _info(Message.OPERATOR_ENTRY, op.name, op.id, op.location.full_name)
            for op in outcome.operators
        )
        return lines

    if isinstance(outcome, ActivityCreated):
        act = outcome.activity
        return [_ok(Message.ACTIVITY_CREATED, act.name, act.id, act.type, act.operator.name)]

    if isinstance(outcome, ActivityMatches):
        verb, count, suffix = plural_parts(len(outcome.activities), ACTIVITY_FORMS)
        lines = [_info(Message.ACTIVITIES_FOUND, verb, count, suffix)]
        lines.extend(
            _info(Message.ACTIVITY_ENTRY, act.name, act.id, act.type, act.operator.name)
            for act in outcome.activities
        )
        return lines

    if isinstance(outcome, ReviewAdded):
        review = outcome.review
        return [_ok(Message.REVIEW_ADDED, review.kind, review.id, outcome.activity.name)]

    if isinstance(outcome, ReviewEndorsed):
        return [_ok(Message.REVIEW_ENDORSED, outcome.review_id)]

    if isinstance(outcome, ReviewResolved):
        return [_ok(Message.REVIEW_RESOLVED, outcome.review_id, outcome.response)]

    if isinstance(outcome, ImageUploaded):
        return [_ok(Message.REVIEW_IMAGE_ADDED, outcome.image_name, outcome.review_id)]

    if isinstance(outcome, ReviewListing):
        return _render_listing(outcome)

    if isinstance(outcome, TopActivities):
        lines = []
        for entry in outcome.entries:
            location = entry.location.full_name
            if entry.activity is None:
                lines.append(_info(Message.NO_REVIEWED_ACTIVITIES, location))
            else:
                lines.append(
                    _info(
                        Message.TOP_ACTIVITY,
                        location,
                        entry.activity.name,
                        f"{entry.average_rating:.2f}",
                    )
                )
        return lines

    raise TypeError(f"Cannot render {type(outcome).__name__}")


def print_lines(console: Console, lines: list[RenderedLine], color: bool = True) -> None:
    """Write rendered lines to ``console``, one per row."""
    for line in lines:
        style = line.style.value if color else ""
        console.print(Text(line.text, style=style), soft_wrap=True)
