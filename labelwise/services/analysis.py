"""
Analysis pipeline entry point.

  validate → parse → classify (per token) → summarize → verdict
           → opening statement / what matters most / insight → AnalysisResult

Synchronous and pure: everything it touches is immutable after import, so
it is safe to call from any number of threads or request handlers.
"""

from __future__ import annotations

import logging
from typing import Optional

from labelwise.schemas.analysis import AnalysisResult
from labelwise.schemas.preferences import DEFAULT_PREFERENCES, UserPreferences
from labelwise.services import aggregator
from labelwise.services.aggregator import EmptyAnalysisError
from labelwise.services.classifier import classifier
from labelwise.services.parser import parse_ingredients
from labelwise.services.personalization import personalization
from labelwise.services.validator import ValidationError, validate_food_input
from labelwise.utils.narratives import DISCLAIMER
from labelwise.utils.reference_data import DATA_SOURCES

logger = logging.getLogger(__name__)


def analyze(
    ingredient_list: str,
    preferences: Optional[UserPreferences] = None,
) -> AnalysisResult:
    """
    Analyse a raw ingredient list for the given preferences.

    Raises:
        ValidationError: the text failed the food gate.
        EmptyAnalysisError: the text passed the gate but held no ingredient tokens.
    """
    prefs = preferences or DEFAULT_PREFERENCES

    validation = validate_food_input(ingredient_list)
    if not validation.is_valid:
        raise ValidationError(validation.reason or "Invalid food input")

    tokens = parse_ingredients(ingredient_list)
    if not tokens:
        raise EmptyAnalysisError()

    ingredients = [classifier.build_ingredient(token) for token in tokens]
    summary = aggregator.summarize(ingredients)
    natural, processed, synthetic = (
        summary.natural_count,
        summary.processed_count,
        summary.synthetic_count,
    )
    verdict = aggregator.determine_verdict(natural, processed, synthetic)

    logger.info(
        "Analysed %d ingredients (natural=%d processed=%d synthetic=%d) → %s [goal=%s]",
        summary.total_count, natural, processed, synthetic, verdict.type, prefs.goal,
    )

    return AnalysisResult(
        summary=summary,
        verdict=verdict,
        personalized_insight=personalization.insight(prefs, verdict.type, ingredients),
        ingredients=ingredients,
        sources=list(DATA_SOURCES),
        opening_statement=aggregator.opening_statement(natural, processed, synthetic, ingredients),
        what_matters_most=personalization.what_matters_most(ingredients, prefs),
        health_impact=aggregator.health_impact(summary),
        disclaimer=DISCLAIMER,
    )
