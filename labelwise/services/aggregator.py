"""
Aggregator / verdict engine — turns classified ingredients into counts,
a summary sentence, a three-tier verdict and the supporting narrative.
All functions are pure.
"""

from __future__ import annotations

import math
from typing import Sequence

from labelwise.schemas.analysis import HealthImpact, Ingredient, IngredientSummary, Verdict
from labelwise.utils import narratives


class EmptyAnalysisError(ValueError):
    """Validation passed but no ingredient tokens were parsed."""

    def __init__(self, message: str = "No ingredients found in the ingredient list.") -> None:
        super().__init__(message)


def _percent(count: int, total: int) -> float:
    if total <= 0:
        raise EmptyAnalysisError()
    return count / total * 100


def _rounded_percent(count: int, total: int) -> int:
    # half-up, so 60.5% reads as 61% in the summary sentence
    return math.floor(_percent(count, total) + 0.5)


# ── Counts ──────────────────────────────────────────────────────────────────


def summarize(ingredients: Sequence[Ingredient]) -> IngredientSummary:
    """Single pass over the ingredients: per-class counts and the allergen union."""
    if not ingredients:
        raise EmptyAnalysisError()

    counts = {"natural": 0, "processed": 0, "synthetic": 0}
    allergens: set[str] = set()
    for ingredient in ingredients:
        counts[ingredient.classification] += 1
        if ingredient.allergens:
            allergens.update(ingredient.allergens)

    natural, processed, synthetic = counts["natural"], counts["processed"], counts["synthetic"]
    return IngredientSummary(
        total_count=len(ingredients),
        natural_count=natural,
        processed_count=processed,
        synthetic_count=synthetic,
        summary_text=summary_text(natural, processed, synthetic),
        allergens=sorted(allergens),
    )


def summary_text(natural: int, processed: int, synthetic: int) -> str:
    total = natural + processed + synthetic
    if _rounded_percent(natural, total) > 60:
        return narratives.SUMMARY_MOSTLY_NATURAL
    if _rounded_percent(synthetic, total) > 30:
        return narratives.SUMMARY_NOTABLE_SYNTHETIC
    return narratives.SUMMARY_MIXED


# ── Verdict ─────────────────────────────────────────────────────────────────


def determine_verdict(natural: int, processed: int, synthetic: int) -> Verdict:
    """
    better-choice: natural > 60% and synthetic < 10%
    not-ideal:     synthetic > 30% or more processed than natural ingredients
    otherwise:     occasional-choice
    """
    total = natural + processed + synthetic
    natural_pct = _percent(natural, total)
    synthetic_pct = _percent(synthetic, total)

    if natural_pct > 60 and synthetic_pct < 10:
        verdict_type = "better-choice"
    elif synthetic_pct > 30 or processed > natural:
        verdict_type = "not-ideal"
    else:
        verdict_type = "occasional-choice"

    return Verdict(type=verdict_type, explanation=narratives.VERDICT_EXPLANATIONS[verdict_type])


# ── Narrative ───────────────────────────────────────────────────────────────


def _name_contains(ingredient: Ingredient, *needles: str) -> bool:
    lowered = ingredient.name.lower()
    return any(needle in lowered for needle in needles)


def opening_statement(
    natural: int,
    processed: int,
    synthetic: int,
    ingredients: Sequence[Ingredient],
) -> str:
    """Context-aware introduction picked from what the ingredient list contains."""
    total = natural + processed + synthetic
    synthetic_pct = _percent(synthetic, total)
    processed_pct = _percent(processed, total)

    has_added_sugar = any(_name_contains(i, "sugar", "syrup", "sweetener") for i in ingredients)
    has_preservatives = any(
        i.classification == "synthetic" and _name_contains(i, "benzoate", "sorbate", "propionate")
        for i in ingredients
    )
    has_flavor_enhancers = any(
        _name_contains(i, "msg", "glutamate", "inosinate") for i in ingredients
    )

    if synthetic_pct > 30 or processed_pct + synthetic_pct > 60:
        if has_flavor_enhancers and has_preservatives:
            return narratives.OPENING_HIGHLY_PROCESSED
        if has_added_sugar:
            return narratives.OPENING_ADDED_SUGAR
        return narratives.OPENING_PROCESSED
    if natural > processed + synthetic:
        return narratives.OPENING_CLEAN
    return narratives.OPENING_MIXED


_IMPACT_LEVELS = (
    ("natural", "good"),
    ("processed", "moderate"),
    ("synthetic", "caution"),
)


def health_impact(summary: IngredientSummary) -> list[HealthImpact]:
    """One bullet per classification, in natural → processed → synthetic order."""
    counts = {
        "natural": summary.natural_count,
        "processed": summary.processed_count,
        "synthetic": summary.synthetic_count,
    }
    return [
        HealthImpact(
            level=level,
            title=narratives.HEALTH_IMPACT_TITLES[classification],
            message=narratives.build_health_impact_message(classification, counts[classification]),
        )
        for classification, level in _IMPACT_LEVELS
    ]
