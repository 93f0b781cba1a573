"""
Input validator — the food gate in front of the analysis pipeline.

Permissive: text is rejected only when it contains an explicit non-food
keyword and no food vocabulary at all.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from labelwise.utils.food_keywords import (
    FOOD_KEYWORDS,
    NON_FOOD_EXCEPTIONS,
    NON_FOOD_KEYWORDS,
)
from labelwise.utils.narratives import REASON_NO_TEXT, REASON_NON_FOOD, REASON_TOO_SHORT

logger = logging.getLogger(__name__)

_MIN_INPUT_LENGTH = 3
_MIN_EXTRACTED_LENGTH = 5


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of the food gate. reason is set only when is_valid is False."""

    is_valid: bool
    reason: Optional[str] = None


class ValidationError(ValueError):
    """Raised by the pipeline when the food gate rejects the input."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def validate_food_input(text: str) -> ValidationResult:
    """
    Decide whether `text` plausibly describes food ingredients.

    1. Trimmed length < 3 → invalid (too short).
    2. Any food keyword present → valid, no further checks.
    3. First non-food keyword found (table order) → invalid, unless one of
       its exception phrases also appears.
    4. Otherwise valid.
    """
    normalized = text.strip().lower()
    if len(normalized) < _MIN_INPUT_LENGTH:
        return ValidationResult(is_valid=False, reason=REASON_TOO_SHORT)

    if any(keyword in normalized for keyword in FOOD_KEYWORDS):
        return ValidationResult(is_valid=True)

    for keyword in NON_FOOD_KEYWORDS:
        if keyword not in normalized:
            continue
        exceptions = NON_FOOD_EXCEPTIONS.get(keyword, ())
        if any(exception in normalized for exception in exceptions):
            continue
        logger.info("Rejected non-food input (keyword=%r)", keyword)
        return ValidationResult(is_valid=False, reason=REASON_NON_FOOD.format(keyword=keyword))

    return ValidationResult(is_valid=True)


def validate_extracted_text(text: Optional[str]) -> ValidationResult:
    """Gate for OCR output: blank or near-empty text means nothing was read."""
    if not text or len(text.strip()) < _MIN_EXTRACTED_LENGTH:
        return ValidationResult(is_valid=False, reason=REASON_NO_TEXT)
    return validate_food_input(text)
