"""
OCR service — wraps Tesseract (via pytesseract) and the text helpers that
pull a product name and an ingredient section out of raw label text.

Tesseract is a blocking subprocess call, so it runs in a worker thread and
is bounded by OCR_TIMEOUT_SECONDS. Failures raise OCRError; the signal
fusion layer turns them into an absent signal.
"""

from __future__ import annotations

import asyncio
import io
import logging
import re
from typing import Optional

import pytesseract
from PIL import Image, ImageOps, UnidentifiedImageError

from labelwise.config import settings
from labelwise.schemas.scan import OCRResult
from labelwise.utils.food_keywords import OCR_FOOD_INDICATORS, OCR_NON_FOOD_INDICATORS

logger = logging.getLogger(__name__)

if settings.tesseract_cmd:
    pytesseract.pytesseract.tesseract_cmd = settings.tesseract_cmd

_INGREDIENTS_RE = re.compile(r"ingredients?\s*:?\s*([^.]+(?:\.[^.]+)*)", re.IGNORECASE)
_CONTAINS_RE = re.compile(r"(?:contains|made with)\s*:?\s*([^.]+)", re.IGNORECASE)


class OCRError(Exception):
    """Raised when the image cannot be read or Tesseract fails."""


# ── Tesseract ───────────────────────────────────────────────────────────────


def tesseract_available() -> bool:
    """True when the tesseract binary can be executed."""
    try:
        pytesseract.get_tesseract_version()
    except (pytesseract.TesseractNotFoundError, OSError) as exc:
        logger.warning("Tesseract not available: %s", exc)
        return False
    return True


def _load_image(image_bytes: bytes) -> Image.Image:
    try:
        image = Image.open(io.BytesIO(image_bytes))
        image.load()
    except (UnidentifiedImageError, OSError) as exc:
        raise OCRError(f"Unreadable image: {exc}") from exc
    # undo EXIF rotation, then grayscale
    return ImageOps.grayscale(ImageOps.exif_transpose(image))


def _run_tesseract(image_bytes: bytes) -> OCRResult:
    """
    Blocking OCR call. Returns line-joined text and the mean confidence of the
    recognised words (Tesseract reports -1 for non-word boxes; those are skipped).
    """
    image = _load_image(image_bytes)
    try:
        data = pytesseract.image_to_data(
            image,
            lang=settings.ocr_language,
            output_type=pytesseract.Output.DICT,
        )
    except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError) as exc:
        raise OCRError(str(exc)) from exc

    lines: dict[tuple[int, int, int], list[str]] = {}
    confidences: list[float] = []
    for i, word in enumerate(data.get("text", [])):
        word = (word or "").strip()
        confidence = float(data["conf"][i])
        if not word or confidence < 0:
            continue
        key = (data["block_num"][i], data["par_num"][i], data["line_num"][i])
        lines.setdefault(key, []).append(word)
        confidences.append(confidence)

    text = "\n".join(" ".join(words) for words in lines.values())
    mean_confidence = sum(confidences) / len(confidences) if confidences else 0.0
    return OCRResult(text=text, confidence=round(mean_confidence, 1))


async def extract_text_from_image(image_bytes: bytes) -> OCRResult:
    """Run Tesseract off the event loop, bounded by OCR_TIMEOUT_SECONDS."""
    try:
        result = await asyncio.wait_for(
            asyncio.to_thread(_run_tesseract, image_bytes),
            timeout=settings.ocr_timeout_seconds,
        )
    except asyncio.TimeoutError as exc:
        raise OCRError(f"OCR timed out after {settings.ocr_timeout_seconds}s") from exc

    logger.info("OCR read %d chars (confidence=%.1f)", len(result.text), result.confidence)
    return result


# ── Text helpers ────────────────────────────────────────────────────────────


def detect_food_in_text(text: str) -> bool:
    """Food vocabulary present and no obvious non-food product words."""
    lowered = text.lower()
    has_food = any(keyword in lowered for keyword in OCR_FOOD_INDICATORS)
    has_non_food = any(keyword in lowered for keyword in OCR_NON_FOOD_INDICATORS)
    return has_food and not has_non_food


def extract_product_name(text: str) -> Optional[str]:
    """
    The first non-empty line is usually the product name. When it is shorter
    than 3 characters or all digits (a barcode), the second line is used.
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        return None

    first = lines[0]
    if len(first) < 3 or first.isdigit():
        return lines[1] if len(lines) > 1 else first
    return first


def extract_ingredients(text: str) -> Optional[str]:
    """
    Pull the ingredient section out of label text, trying in order:
    an "Ingredients:" header, a "Contains:"/"Made with:" phrase, then the
    first line with at least three comma-separated parts.
    """
    match = _INGREDIENTS_RE.search(text)
    if match:
        return match.group(1).strip()

    match = _CONTAINS_RE.search(text)
    if match:
        return match.group(1).strip()

    for line in text.splitlines():
        if len(line.split(",")) >= 3:
            return line.strip()
    return None
