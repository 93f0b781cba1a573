"""
Visual analyser — a coarse colour heuristic used only when OCR gives too
little text. The dominant colour of the package photo picks a food type,
and each type maps to a canned list of likely ingredients.
"""

from __future__ import annotations

import asyncio
import io
import logging
from collections import Counter
from typing import Callable

from PIL import Image, UnidentifiedImageError

from labelwise.schemas.scan import ColorInfo, VisualAnalysisResult
from labelwise.utils.reference_data import VISUAL_FALLBACK_INGREDIENTS, VISUAL_TYPE_INGREDIENTS

logger = logging.getLogger(__name__)

_MAX_SIDE = 200          # images are scaled so the longer side is this many pixels
_PIXEL_STRIDE = 10       # sample every 10th pixel
_QUANT_STEP = 32
_TOP_COLORS = 5
_CONFIDENCE = 0.7


def _quantize(value: int) -> int:
    # half-up rounding to the nearest step, clamped to a valid channel value
    return min(255, int(value / _QUANT_STEP + 0.5) * _QUANT_STEP)


def _to_hex(r: int, g: int, b: int) -> str:
    return "#{:02x}{:02x}{:02x}".format(r, g, b)


def extract_dominant_colors(image: Image.Image, top: int = _TOP_COLORS) -> list[ColorInfo]:
    """Most frequent quantised colours, skipping mostly transparent pixels."""
    rgba = image.convert("RGBA")
    scale = min(_MAX_SIDE / rgba.width, _MAX_SIDE / rgba.height)
    rgba = rgba.resize((max(1, int(rgba.width * scale)), max(1, int(rgba.height * scale))))

    pixels = list(rgba.getdata())
    counts: Counter[tuple[int, int, int]] = Counter()
    for r, g, b, a in pixels[::_PIXEL_STRIDE]:
        if a < 128:
            continue
        counts[(_quantize(r), _quantize(g), _quantize(b))] += 1

    return [
        ColorInfo(r=r, g=g, b=b, hex=_to_hex(r, g, b))
        for (r, g, b), _ in counts.most_common(top)
    ]


# ── Colour rules (checked in order against the primary colour) ──────────────

_ColorRule = tuple[str, Callable[[ColorInfo], bool]]

_FOOD_TYPE_RULES: tuple[_ColorRule, ...] = (
    ("Baked Goods / Grains", lambda c: 100 < c.r < 200 and 60 < c.g < 150 and 30 < c.b < 100),
    ("Dairy / Flour Product", lambda c: c.r > 200 and c.g > 200 and c.b > 200),
    ("Cheese / Snack / Oil", lambda c: c.r > 180 and c.g > 150 and c.b < 100),
    ("Meat / Tomato Product", lambda c: c.r > 150 and c.g < 100 and c.b < 100),
    ("Vegetable / Herb Product", lambda c: c.g > c.r and c.g > c.b and c.g > 100),
    ("Chocolate / Coffee / Dark Sauce", lambda c: c.r < 80 and c.g < 60 and c.b < 50),
    ("Beverage / Liquid", lambda c: not 30 <= (c.r + c.g + c.b) / 3 <= 220),
)


def predict_food_type(colors: list[ColorInfo]) -> str:
    if not colors:
        return "Unknown"
    primary = colors[0]
    for food_type, rule in _FOOD_TYPE_RULES:
        if rule(primary):
            return food_type
    return "Processed Food Product"


def predict_ingredients(food_type: str) -> list[str]:
    return list(VISUAL_TYPE_INGREDIENTS.get(food_type, VISUAL_FALLBACK_INGREDIENTS))


def _analyze(image_bytes: bytes) -> VisualAnalysisResult:
    try:
        image = Image.open(io.BytesIO(image_bytes))
        image.load()
    except (UnidentifiedImageError, OSError) as exc:
        logger.warning("Visual analysis could not read image: %s", exc)
        return VisualAnalysisResult()

    colors = extract_dominant_colors(image)
    if not colors:
        return VisualAnalysisResult()

    food_type = predict_food_type(colors)
    return VisualAnalysisResult(
        dominant_colors=[c.hex for c in colors],
        predicted_food_type=food_type,
        predicted_ingredients=predict_ingredients(food_type),
        confidence=_CONFIDENCE,
    )


async def analyze_image_visually(image_bytes: bytes) -> VisualAnalysisResult:
    """Colour-based food type guess. Confidence is 0 when the image is unusable."""
    result = await asyncio.to_thread(_analyze, image_bytes)
    logger.info(
        "Visual analysis: %s (confidence=%.1f)", result.predicted_food_type, result.confidence
    )
    return result
