"""Snapshot export of the registry graph.

Converts an ``OperatorRegistry`` into a plain dict/list structure that maps
naturally onto JSON and YAML.  Review entries carry a ``"kind"``
discriminator so that the variant-specific fields are unambiguous.

Export is one-way: a snapshot is a report, not a save file.

Usage
-----
::

    from tourreg.export import RegistrySerializer

    serializer = RegistrySerializer()
    print(serializer.to_yaml(registry))
"""
from __future__ import annotations

import json

import yaml

from tourreg.model.entities import Activity, Operator
from tourreg.model.reviews import ExpertReview, PrivateReview, PublicReview, Resolved, Review
from tourreg.service.registry import OperatorRegistry


class RegistrySerializer:
    """Converts an ``OperatorRegistry`` into JSON-compatible data."""

    # ------------------------------------------------------------------
    # Registry → dict
    # ------------------------------------------------------------------

    def to_dict(self, registry: OperatorRegistry) -> dict[str, object]:
        """Serialize every operator, activity and review."""
        return {
            "kind": "Registry",
            "operators": [self._operator_to_dict(op) for op in registry.operators],
        }

    def _operator_to_dict(self, operator: Operator) -> dict[str, object]:
        return {
            "kind": "Operator",
            "id": operator.id,
            "name": operator.name,
            "location": {
                "abbreviation": operator.location.abbreviation,
                "full_name": operator.location.full_name,
            },
            "activities": [self._activity_to_dict(a) for a in operator.activities],
        }

    def _activity_to_dict(self, activity: Activity) -> dict[str, object]:
        return {
            "kind": "Activity",
            "id": activity.id,
            "name": activity.name,
            "type": activity.type.display_name,
            "average_rating": round(activity.average_rating(), 2),
            "reviews": [self._review_to_dict(r) for r in activity.reviews],
        }

    def _review_to_dict(self, review: Review) -> dict[str, object]:
        data: dict[str, object] = {
            "kind": review.kind,
            "id": review.id,
            "rating": review.rating,
            "author": review.author,
            "content": review.content,
        }
        if isinstance(review, PublicReview):
            data["endorsed"] = review.endorsed
        elif isinstance(review, PrivateReview):
            data["contact"] = review.contact
            data["follow_up"] = review.follow_up
            data["resolution"] = (
                review.resolution.text if isinstance(review.resolution, Resolved) else None
            )
        elif isinstance(review, ExpertReview):
            data["recommended"] = review.recommended
            data["images"] = list(review.images)
        return data

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, registry: OperatorRegistry, indent: int = 2) -> str:
        """Serialize the registry to a JSON string."""
        return json.dumps(self.to_dict(registry), indent=indent, ensure_ascii=False)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, registry: OperatorRegistry) -> str:
        """Serialize the registry to a YAML string."""
        return yaml.dump(
            self.to_dict(registry),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
