"""
PersonalizationEngine — goal-keyed insight and the "what matters most" list.

Priority table (higher surfaces first; the first rule with the highest
priority decides the reason):
  high sugar              10   flag_high_sugar
  allergens               10   flag_allergens
  flavor enhancer          9   flag_artificial_additives | flag_preservatives, synthetic
  preservative             8   same flags, synthetic
  artificial color         7   same flags, synthetic
  refined flour            6   goal fitness-focused | health-conscious
  palm oil                 5   goal health-conscious
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from labelwise.schemas.analysis import Ingredient, KeyIngredient, VerdictType
from labelwise.schemas.preferences import UserPreferences
from labelwise.utils import narratives

logger = logging.getLogger(__name__)

_DEFAULT_GOAL = "normal-consumer"


def _name(ingredient: Ingredient) -> str:
    return ingredient.name.lower()


def _additive_flags(prefs: UserPreferences) -> bool:
    return prefs.flag_artificial_additives or prefs.flag_preservatives


@dataclass(frozen=True)
class _PriorityRule:
    priority: int
    applies: Callable[[Ingredient, UserPreferences], bool]
    reason: Callable[[Ingredient], str]


def _is_synthetic_additive(*needles: str) -> Callable[[Ingredient, UserPreferences], bool]:
    def applies(ingredient: Ingredient, prefs: UserPreferences) -> bool:
        return (
            _additive_flags(prefs)
            and ingredient.classification == "synthetic"
            and any(needle in _name(ingredient) for needle in needles)
        )

    return applies


_RULES: tuple[_PriorityRule, ...] = (
    _PriorityRule(
        priority=10,
        applies=lambda i, p: p.flag_high_sugar
        and any(needle in _name(i) for needle in ("sugar", "syrup", "fructose")),
        reason=lambda i: narratives.REASON_HIGH_SUGAR,
    ),
    _PriorityRule(
        priority=10,
        applies=lambda i, p: p.flag_allergens and bool(i.allergens),
        reason=lambda i: narratives.build_allergen_reason(i.allergens or []),
    ),
    _PriorityRule(
        priority=9,
        applies=_is_synthetic_additive("msg", "glutamate", "inosinate", "guanylate"),
        reason=lambda i: narratives.REASON_FLAVOR_ENHANCER,
    ),
    _PriorityRule(
        priority=8,
        applies=_is_synthetic_additive("benzoate", "sorbate", "propionate", "nitrite"),
        reason=lambda i: narratives.REASON_PRESERVATIVE,
    ),
    _PriorityRule(
        priority=7,
        applies=_is_synthetic_additive("color", "yellow", "red"),
        reason=lambda i: narratives.REASON_ARTIFICIAL_COLOR,
    ),
    _PriorityRule(
        priority=6,
        applies=lambda i, p: p.goal in ("fitness-focused", "health-conscious")
        and "flour" in _name(i)
        and "whole" not in _name(i),
        reason=lambda i: narratives.REASON_REFINED_FLOUR,
    ),
    _PriorityRule(
        priority=5,
        applies=lambda i, p: p.goal == "health-conscious" and "palm oil" in _name(i),
        reason=lambda i: narratives.REASON_PALM_OIL,
    ),
)


def _first_sentence(text: str) -> str:
    head, sep, _ = text.partition(". ")
    return head + "." if sep else text


class PersonalizationEngine:
    """Shapes the analysis for the user's goal, flags and tone."""

    def insight(
        self,
        preferences: UserPreferences,
        verdict_type: VerdictType,
        ingredients: Sequence[Ingredient],
    ) -> str:
        """
        Goal-specific paragraph. The verdict and ingredients are accepted so
        callers have a stable signature, but the text is keyed on goal alone.
        """
        return narratives.GOAL_INSIGHTS.get(
            preferences.goal, narratives.GOAL_INSIGHTS[_DEFAULT_GOAL]
        )

    def score(
        self, ingredient: Ingredient, preferences: UserPreferences
    ) -> Optional[KeyIngredient]:
        """Highest-priority matching rule for one ingredient, or None."""
        best: Optional[_PriorityRule] = None
        for rule in _RULES:
            if best is not None and rule.priority <= best.priority:
                continue
            if rule.applies(ingredient, preferences):
                best = rule
        if best is None:
            return None

        reason = best.reason(ingredient)
        if preferences.tone_preference == "simple":
            reason = _first_sentence(reason)
        return KeyIngredient(name=ingredient.name, reason=reason, priority=best.priority)

    def what_matters_most(
        self,
        ingredients: Sequence[Ingredient],
        preferences: UserPreferences,
        limit: int = 2,
    ) -> list[KeyIngredient]:
        """Top `limit` flagged ingredients, highest priority first, ties in list order."""
        scored = [
            key
            for key in (self.score(ingredient, preferences) for ingredient in ingredients)
            if key is not None
        ]
        scored.sort(key=lambda key: key.priority, reverse=True)
        logger.debug("what_matters_most: %d of %d ingredients flagged", len(scored), len(ingredients))
        return scored[: max(0, limit)]


# Module-level singleton
personalization = PersonalizationEngine()
