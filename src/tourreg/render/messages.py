"""Message catalogue for everything the front end prints.

Templates use ``str.format`` placeholders and are filled positionally by
``Message.format``.  Count headers are built from ``plural_parts``.
"""
from __future__ import annotations

from enum import Enum


class Message(Enum):
    """All user-facing message templates."""

    # Operators
    OPERATORS_FOUND = "There {} {} matching operator{} found:"
    OPERATOR_ENTRY = "* {} ('{}' located in '{}')"
    OPERATOR_CREATED = "Successfully created operator '{}' ('{}') located in '{}'."
    OPERATOR_NOT_CREATED_INVALID_NAME = (
        "Operator not created: '{}' is not a valid operator name."
    )
    OPERATOR_NOT_CREATED_INVALID_LOCATION = "Operator not created: '{}' is an invalid location."
    OPERATOR_NOT_CREATED_ALREADY_EXISTS = (
        "Operator not created: the operator name '{}' already exists same location for '{}'."
    )
    OPERATOR_NOT_FOUND = "Operator not found: '{}' is an invalid operator ID."
    NO_MATCHING_OPERATORS = "There are no matching operators found."

    # Activities
    ACTIVITIES_FOUND = "There {} {} matching activit{} found:"
    ACTIVITY_ENTRY = "* {}: [{}/{}] offered by {}"
    ACTIVITY_CREATED = "Successfully created activity '{}' ('{}': '{}') for '{}'."
    ACTIVITY_NOT_CREATED_INVALID_NAME = (
        "Activity not created: '{}' is not a valid activity name."
    )
    ACTIVITY_NOT_CREATED_INVALID_OPERATOR = (
        "Activity not created: '{}' is an invalid operator ID."
    )
    ACTIVITY_NOT_FOUND = "Activity not found: '{}' is an invalid activity ID."
    NO_MATCHING_ACTIVITIES = "There are no matching activities found."

    # Reviews
    REVIEW_ADDED = "{} review '{}' added successfully for activity '{}'."
    REVIEW_NOT_ADDED_INVALID_ACTIVITY = "Review not added: '{}' is an invalid activity ID."
    REVIEW_NOT_ADDED_OPTION_COUNT = (
        "Review not added: a {} review takes {} options, but {} were given."
    )
    REVIEW_NOT_ADDED_INVALID_RATING = "Review not added: '{}' is not a valid rating."
    REVIEWS_FOUND = "There {} {} review{} for activity '{}'."
    NO_REVIEWS = "There are no reviews for activity '{}'."
    REVIEW_ENTRY_HEADER = "  * [{}/{}] {} review ({}) by '{}'"
    REVIEW_ENTRY_TEXT = '    "{}"'
    REVIEW_ENTRY_ENDORSED = "    Endorsed by admin."
    REVIEW_ENTRY_RESOLVED = '    Resolved: "{}"'
    REVIEW_ENTRY_FOLLOW_UP = "    Need to email '{}' for follow-up."
    REVIEW_ENTRY_RECOMMENDED = "    Recommended by experts."
    REVIEW_ENTRY_IMAGES = "    Images: [{}]"
    REVIEW_NOT_FOUND = "Review not found: '{}' is an invalid review ID."
    REVIEW_ENDORSED = "Review '{}' endorsed successfully."
    REVIEW_NOT_ENDORSED = "Review not endorsed: '{}' is not a public review."
    REVIEW_RESOLVED = "Review '{}' resolved successfully with response '{}'."
    REVIEW_NOT_RESOLVED = "Review not resolved: '{}' is not a private review."
    REVIEW_IMAGE_ADDED = "Image '{}' uploaded successfully for review '{}'."
    REVIEW_IMAGE_NOT_ADDED = "Image not uploaded: '{}' is not an expert review."

    # Aggregation
    NO_REVIEWED_ACTIVITIES = "No reviewed activities found in {}."
    TOP_ACTIVITY = "Top reviewed activity in {} is '{}', with an average rating of {}"

    # Command layer
    COMMAND_NOT_FOUND = "Command '{}' not found. Run 'help' to see the list of available commands."
    WRONG_ARGUMENT_COUNT = "Incorrect number of arguments for the '{}' command: expected {}, got {}."
    UNPARSEABLE_LINE = "Could not read command: {}."
    UNKNOWN_EXPORT_FORMAT = "Unknown export format '{}'. Choose one of: {}."
    EXIT = "Bye!"

    def format(self, *args: object) -> str:  # noqa: A003
        return self.value.format(*args)


OPERATOR_FORMS = ("", "s")
ACTIVITY_FORMS = ("y", "ies")
REVIEW_FORMS = ("", "s")


def plural_parts(count: int, forms: tuple[str, str]) -> tuple[str, str, str]:
    """Return ``(verb, count, suffix)`` for a "There is/are N thing(s)" header.

    ``forms`` holds the singular and plural suffixes, e.g. ``("y", "ies")``
    for "activity"/"activities".
    """
    singular, plural = forms
    if count == 1:
        return "is", "1", singular
    return "are", str(count), plural
