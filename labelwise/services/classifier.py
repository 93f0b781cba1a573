"""
IngredientClassifier — knowledge-base lookup with a heuristic fallback.

Lookup is substring containment against the curated records, evaluated in
descending key length (ties keep table order), so the most specific record
wins: "enriched wheat flour" before "wheat flour", "carbonated water"
before "water". Tokens that match nothing fall through to keyword tiers and
finally to "processed". Pure and deterministic; never raises.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from labelwise.schemas.analysis import Classification, Ingredient, IngredientRecord
from labelwise.utils.food_keywords import NATURAL_HINTS, SYNTHETIC_HINTS
from labelwise.utils.ingredient_data import INGREDIENT_RECORDS
from labelwise.utils.narratives import DEFAULT_DESCRIPTIONS

logger = logging.getLogger(__name__)

# Record fields copied onto an Ingredient when the knowledge base matched
_DETAIL_FIELDS = (
    "chemical_name",
    "why_used",
    "benefits",
    "considerations",
    "who_should_care",
    "evolving_science",
    "allergens",
)


class IngredientClassifier:
    """Classifies parsed tokens. The record table is fixed at construction."""

    def __init__(self, records: Iterable[IngredientRecord] = INGREDIENT_RECORDS) -> None:
        # sorted() is stable, so equal-length keys keep their declaration order
        self._records: tuple[IngredientRecord, ...] = tuple(
            sorted(records, key=lambda record: len(record.key), reverse=True)
        )

    @property
    def records(self) -> tuple[IngredientRecord, ...]:
        """Records in lookup order."""
        return self._records

    def match(self, token: str) -> Optional[IngredientRecord]:
        normalized = token.lower()
        for record in self._records:
            if record.key in normalized:
                return record
        return None

    def classify(self, token: str) -> Classification:
        """
        Knowledge base first, then heuristic tiers.
        Natural hints are checked before synthetic ones, so "natural citric acid"
        is natural. The ordering is a product decision, not a chemical one.
        """
        record = self.match(token)
        if record is not None:
            return record.classification

        normalized = token.lower()
        if any(hint in normalized for hint in NATURAL_HINTS):
            return "natural"
        if any(hint in normalized for hint in SYNTHETIC_HINTS):
            return "synthetic"

        logger.debug("No knowledge-base or heuristic match for %r, defaulting to processed", token)
        return "processed"

    def details(self, token: str) -> dict[str, Any]:
        """Metadata of the matched record; empty on the heuristic path."""
        record = self.match(token)
        if record is None:
            return {}

        details: dict[str, Any] = {}
        for field_name in _DETAIL_FIELDS:
            value = getattr(record, field_name)
            if not value:
                continue
            details[field_name] = list(value) if isinstance(value, tuple) else value
        return details

    def describe(self, token: str, classification: Classification) -> str:
        record = self.match(token)
        if record is not None and record.why_used:
            return record.why_used
        return DEFAULT_DESCRIPTIONS[classification]

    def build_ingredient(self, token: str) -> Ingredient:
        """Classify one parsed token into a fresh Ingredient."""
        classification = self.classify(token)
        return Ingredient(
            name=token[:1].upper() + token[1:],
            classification=classification,
            description=self.describe(token, classification),
            **self.details(token),
        )


# Module-level singleton (stateless after construction)
classifier = IngredientClassifier()
