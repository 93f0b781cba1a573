"""
Signal fusion — resolves a package photo into ONE ingredient string.

Pipeline per image:
  1. OCR and visual analysis run concurrently (asyncio.gather)
  2. Product keyword override: a known brand name replaces the OCR text wholesale
  3. Food gate on the OCR text (non-food labels stop here)
  4. Sufficient OCR (confidence and length thresholds) → ingredient section of the text
  5. Insufficient OCR → optional food-database enrichment by product name
  6. Still nothing → visual ingredient guess, else an empty "none" result
  7. A food result with a product name gets an openFDA recall check (enrichment only)

Every upstream failure is converted to an absent signal; fuse_signals never
raises for a readable request. The analysis pipeline only ever sees the
single resolved string.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from labelwise.config import settings
from labelwise.schemas.scan import FusionResult, OCRResult, VisualAnalysisResult
from labelwise.services import food_data, ocr, visual
from labelwise.services.validator import validate_extracted_text
from labelwise.utils.narratives import REASON_NO_TEXT
from labelwise.utils.product_keywords import search_product_keywords

logger = logging.getLogger(__name__)

_MIN_READABLE_LENGTH = 5


async def _no_visual() -> None:
    return None


def _ocr_is_sufficient(result: OCRResult) -> bool:
    return (
        result.confidence >= settings.ocr_min_confidence
        and len(result.text.strip()) >= settings.ocr_min_text_length
    )


async def _enrich(product_name: Optional[str]) -> Optional[str]:
    if not settings.enrichment_enabled or not product_name:
        return None
    product = await food_data.search_food_product(product_name)
    if product is None or not product.ingredients.strip():
        return None
    return product.ingredients


async def _resolve(
    ocr_result: OCRResult, visual_result: Optional[VisualAnalysisResult]
) -> FusionResult:
    base = FusionResult(
        ocr_text=ocr_result.text,
        ocr_confidence=ocr_result.confidence,
        label_detected=ocr.detect_food_in_text(ocr_result.text),
        visual=visual_result,
    )

    # ── Product keyword override ────────────────────────────────────────────
    product = search_product_keywords(ocr_result.text)
    if product is not None:
        return base.model_copy(update={
            "ingredient_text": product.ingredients,
            "source": "keyword_database",
            "is_food": True,
            "product_name": product.product_name,
            "category": product.category,
        })

    # ── Food gate ───────────────────────────────────────────────────────────
    readable = len(ocr_result.text.strip()) >= _MIN_READABLE_LENGTH
    if readable:
        gate = validate_extracted_text(ocr_result.text)
        if not gate.is_valid:
            logger.info("Scan rejected by food gate: %s", gate.reason)
            return base.model_copy(update={"is_food": False, "reason": gate.reason})

    product_name = ocr.extract_product_name(ocr_result.text) if readable else None

    # ── OCR text ────────────────────────────────────────────────────────────
    if _ocr_is_sufficient(ocr_result):
        text = ocr.extract_ingredients(ocr_result.text) or ocr_result.text.strip()
        return base.model_copy(update={
            "ingredient_text": text,
            "source": "ocr",
            "is_food": True,
            "product_name": product_name,
        })

    # ── Enrichment ──────────────────────────────────────────────────────────
    enriched = await _enrich(product_name)
    if enriched:
        return base.model_copy(update={
            "ingredient_text": enriched,
            "source": "food_database",
            "is_food": True,
            "product_name": product_name,
        })

    # ── Visual guess ────────────────────────────────────────────────────────
    if visual_result is not None and visual_result.confidence > 0 and visual_result.predicted_ingredients:
        logger.info("Falling back to visual guess (%s)", visual_result.predicted_food_type)
        return base.model_copy(update={
            "ingredient_text": ", ".join(visual_result.predicted_ingredients),
            "source": "visual",
            "is_food": True,
            "category": visual_result.predicted_food_type,
        })

    return base.model_copy(update={"source": "none", "is_food": False, "reason": REASON_NO_TEXT})


async def fuse_signals(image_bytes: bytes, *, use_visual: bool = True) -> FusionResult:
    """Run every signal for one image and return the resolved ingredient text."""
    run_visual = use_visual and settings.visual_analysis_enabled
    ocr_outcome, visual_outcome = await asyncio.gather(
        ocr.extract_text_from_image(image_bytes),
        visual.analyze_image_visually(image_bytes) if run_visual else _no_visual(),
        return_exceptions=True,
    )

    if isinstance(ocr_outcome, BaseException):
        logger.warning("OCR signal unavailable: %s", ocr_outcome)
        ocr_result = OCRResult()
    else:
        ocr_result = ocr_outcome

    visual_result: Optional[VisualAnalysisResult] = None
    if isinstance(visual_outcome, BaseException):
        logger.warning("Visual signal unavailable: %s", visual_outcome)
    else:
        visual_result = visual_outcome

    result = await _resolve(ocr_result, visual_result)

    # ── Recall check ────────────────────────────────────────────────────────
    if settings.enrichment_enabled and result.is_food and result.product_name:
        recalled = await food_data.check_product_recall(result.product_name)
        if recalled:
            logger.warning("Recall reported for %r", result.product_name)
        result = result.model_copy(update={"recalled": recalled})
    return result
