"""Unit tests for tourreg.model.reviews and tourreg.model.entities."""
from __future__ import annotations

import pytest

from tourreg.model import (
    Activity,
    ActivityType,
    ExpertReview,
    Location,
    Operator,
    PrivateReview,
    PublicReview,
    Resolved,
    Unresolved,
    clamp_rating,
)


def _activity() -> Activity:
    operator = Operator(name="Adventure Tours", location=Location.AKL, id="AT-AKL-001")
    activity = Activity(
        name="Bungee Jump", type=ActivityType.ADVENTURE, id="AT-AKL-001-001", operator=operator
    )
    operator.add_activity(activity)
    return activity


# ===========================================================================
# Rating clamp
# ===========================================================================


class TestClampRating:
    @pytest.mark.parametrize(
        ("rating", "expected"), [(0, 1), (-3, 1), (1, 1), (3, 3), (5, 5), (6, 5), (9, 5)]
    )
    def test_clamp(self, rating: int, expected: int) -> None:
        assert clamp_rating(rating) == expected

    def test_review_construction_clamps(self) -> None:
        assert PublicReview(id="R1", rating=0, author="a", content="c").rating == 1
        assert ExpertReview(id="R2", rating=9, author="a", content="c").rating == 5


# ===========================================================================
# Variants
# ===========================================================================


class TestPublicReview:
    def test_not_endorsed_by_default(self) -> None:
        assert PublicReview(id="R1", rating=4, author="a", content="c").endorsed is False

    def test_endorse_is_one_way(self) -> None:
        review = PublicReview(id="R1", rating=4, author="a", content="c")
        review.endorse()
        review.endorse()
        assert review.endorsed is True

    def test_kind(self) -> None:
        assert PublicReview.kind == "Public"


class TestPrivateReview:
    def _review(self) -> PrivateReview:
        return PrivateReview(
            id="R1", rating=2, author="Bo", content="Cold", contact="bo@example.com", follow_up=True
        )

    def test_starts_unresolved(self) -> None:
        review = self._review()
        assert review.resolution == Unresolved()
        assert review.is_resolved is False
        assert review.resolution_text == "-"

    def test_resolve_with_text(self) -> None:
        review = self._review()
        review.resolve("Refund issued")
        assert review.resolution == Resolved("Refund issued")
        assert review.resolution_text == "Refund issued"

    def test_resolve_with_blank_is_still_resolved(self) -> None:
        review = self._review()
        review.resolve("   ")
        assert review.is_resolved is True
        assert review.resolution_text == "-"


class TestExpertReview:
    def test_images_are_append_only_and_not_deduplicated(self) -> None:
        review = ExpertReview(id="R1", rating=5, author="Dr K", content="Superb")
        review.add_image("a.png")
        review.add_image("a.png")
        assert review.images == ["a.png", "a.png"]

    def test_images_not_shared_between_instances(self) -> None:
        first = ExpertReview(id="R1", rating=5, author="x", content="y")
        second = ExpertReview(id="R2", rating=5, author="x", content="y")
        first.add_image("one.jpg")
        assert second.images == []


# ===========================================================================
# Activity / Operator
# ===========================================================================


class TestActivity:
    def test_average_without_reviews_is_zero(self) -> None:
        assert _activity().average_rating() == 0.0

    def test_average_of_three_four_five(self) -> None:
        activity = _activity()
        for rating in (3, 4, 5):
            activity.add_review(
                PublicReview(id=activity.next_review_id(), rating=rating, author="a", content="c")
            )
        assert activity.average_rating() == 4.0

    def test_average_recomputed_after_each_review(self) -> None:
        activity = _activity()
        activity.add_review(PublicReview(id="x-R1", rating=5, author="a", content="c"))
        assert activity.average_rating() == 5.0
        activity.add_review(PrivateReview(id="x-R2", rating=1, author="a", content="c"))
        assert activity.average_rating() == 3.0

    def test_next_review_id(self) -> None:
        activity = _activity()
        assert activity.next_review_id() == "AT-AKL-001-001-R1"

    def test_next_review_id_uses_given_prefix(self) -> None:
        assert _activity().next_review_id("at-akl-001-001") == "at-akl-001-001-R1"

    def test_description(self) -> None:
        assert _activity().description == (
            "Bungee Jump: [AT-AKL-001-001/Adventure] offered by Adventure Tours"
        )

    def test_location_is_operator_location(self) -> None:
        assert _activity().location is Location.AKL

    def test_repr_does_not_recurse_into_operator(self) -> None:
        assert "Bungee Jump" in repr(_activity())


class TestOperator:
    def test_next_activity_id_is_zero_padded(self) -> None:
        operator = Operator(name="Adventure Tours", location=Location.AKL, id="AT-AKL-001")
        assert operator.next_activity_id() == "AT-AKL-001-001"

    def test_next_activity_id_uses_given_prefix(self) -> None:
        operator = Operator(name="Adventure Tours", location=Location.AKL, id="AT-AKL-001")
        assert operator.next_activity_id("at-akl-001") == "at-akl-001-001"

    def test_entities_compare_by_identity(self) -> None:
        first = Operator(name="Same", location=Location.AKL, id="S-AKL-001")
        second = Operator(name="Same", location=Location.AKL, id="S-AKL-001")
        assert first != second
