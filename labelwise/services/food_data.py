"""
Food data service — best-effort enrichment from public food databases.

  1. USDA FoodData Central search (nutrition facts, branded ingredients)
  2. OpenFoodFacts search as fallback
  3. openFDA enforcement reports for a recall check

Every call runs `requests` in a worker thread under ENRICHMENT_TIMEOUT_SECONDS.
Nothing here raises: failures are logged at WARNING and reported as
None / False so the caller can carry on with what it already has.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import requests
from cachetools import TTLCache

from labelwise.config import settings
from labelwise.schemas.scan import FoodProduct, NutritionFacts

logger = logging.getLogger(__name__)

# Key  : normalised search query
# Value: FoodProduct | None (misses are cached too)
_cache_products: TTLCache = TTLCache(maxsize=1_000, ttl=settings.enrichment_cache_ttl)

# FDC nutrientName (lowercase) → NutritionFacts field
_FDC_NUTRIENTS: dict[str, str] = {
    "energy": "calories",
    "energy (atwater general factors)": "calories",
    "protein": "protein",
    "carbohydrate, by difference": "carbohydrates",
    "carbohydrates": "carbohydrates",
    "total lipid (fat)": "fat",
    "fat": "fat",
    "sodium, na": "sodium",
    "sodium": "sodium",
    "sugars, total including nlea": "sugar",
    "sugars": "sugar",
}

# OpenFoodFacts nutriments key → NutritionFacts field
_OFF_NUTRIMENTS: dict[str, str] = {
    "energy-kcal": "calories",
    "proteins": "protein",
    "carbohydrates": "carbohydrates",
    "fat": "fat",
    "sodium": "sodium",
    "sugars": "sugar",
}


def _get_json(url: str, params: dict[str, Any]) -> dict[str, Any]:
    response = requests.get(url, params=params, timeout=settings.enrichment_timeout_seconds)
    response.raise_for_status()
    return response.json()


# ── FoodData Central ────────────────────────────────────────────────────────


def _parse_fdc_food(food: dict[str, Any]) -> FoodProduct:
    values: dict[str, Any] = {}
    for nutrient in food.get("foodNutrients", []):
        field_name = _FDC_NUTRIENTS.get(str(nutrient.get("nutrientName", "")).lower())
        if field_name and field_name not in values and nutrient.get("value") is not None:
            values[field_name] = nutrient["value"]

    serving = food.get("servingSize")
    if serving is not None:
        values["serving_size"] = f"{serving}{food.get('servingSizeUnit', '')}"

    return FoodProduct(
        name=food.get("description", ""),
        brand=food.get("brandOwner") or food.get("brandName"),
        ingredients=food.get("ingredients") or "",
        nutrition_facts=NutritionFacts(**values) if values else None,
        fdc_id=food.get("fdcId"),
        source="USDA FoodData Central",
    )


def _search_fdc(query: str) -> Optional[FoodProduct]:
    data = _get_json(
        f"{settings.fdc_api_base}/foods/search",
        {"query": query, "pageSize": 1, "api_key": settings.fdc_api_key},
    )
    foods = data.get("foods") or []
    return _parse_fdc_food(foods[0]) if foods else None


# ── OpenFoodFacts ───────────────────────────────────────────────────────────


def _parse_off_product(product: dict[str, Any]) -> FoodProduct:
    nutriments = product.get("nutriments") or {}
    values: dict[str, Any] = {
        field_name: nutriments[key]
        for key, field_name in _OFF_NUTRIMENTS.items()
        if nutriments.get(key) is not None
    }
    if product.get("serving_size"):
        values["serving_size"] = product["serving_size"]

    return FoodProduct(
        name=product.get("product_name", ""),
        brand=product.get("brands"),
        ingredients=product.get("ingredients_text") or "",
        nutrition_facts=NutritionFacts(**values) if values else None,
        source="OpenFoodFacts",
    )


def _search_openfoodfacts(query: str) -> Optional[FoodProduct]:
    data = _get_json(
        f"{settings.openfoodfacts_base}/cgi/search.pl",
        {"search_terms": query, "search_simple": 1, "json": 1, "page_size": 1},
    )
    products = data.get("products") or []
    return _parse_off_product(products[0]) if products else None


# ── Public API ──────────────────────────────────────────────────────────────

# Upstream failures: transport errors, bad JSON and payloads of the wrong shape
_LOOKUP_ERRORS = (requests.RequestException, ValueError, TypeError, AttributeError, KeyError)


async def _run(source: str, func, query: str) -> tuple[Optional[FoodProduct], bool]:
    """(product, answered). answered is False when the source failed or timed out."""
    try:
        product = await asyncio.wait_for(
            asyncio.to_thread(func, query),
            timeout=settings.enrichment_timeout_seconds,
        )
    except asyncio.TimeoutError:
        logger.warning("%s lookup timed out for %r", source, query)
        return None, False
    except _LOOKUP_ERRORS as exc:
        logger.warning("%s lookup failed for %r: %s", source, query, exc)
        return None, False
    return product, True


async def search_food_product(query: str) -> Optional[FoodProduct]:
    """
    Look a product up by name: FoodData Central first, OpenFoodFacts second.
    Hits and clean misses are cached for ENRICHMENT_CACHE_TTL seconds; a miss
    where either source failed is not, so the next scan retries.
    """
    key = query.strip().lower()
    if not key:
        return None
    if key in _cache_products:
        logger.debug("Food data cache hit for %r", key)
        return _cache_products[key]

    product, fdc_answered = await _run("FoodData Central", _search_fdc, key)
    off_answered = True
    if product is None:
        product, off_answered = await _run("OpenFoodFacts", _search_openfoodfacts, key)

    if product is not None or (fdc_answered and off_answered):
        _cache_products[key] = product
    if product is not None:
        logger.info("Food data match for %r: %s (%s)", key, product.name, product.source)
    return product


def _has_recall(product_name: str) -> bool:
    data = _get_json(
        f"{settings.openfda_base}/food/enforcement.json",
        {"search": f'product_description:"{product_name}"', "limit": 1},
    )
    return bool(data.get("results"))


async def check_product_recall(product_name: str) -> bool:
    """True when openFDA lists an enforcement report for the product. False on any failure."""
    try:
        return await asyncio.wait_for(
            asyncio.to_thread(_has_recall, product_name),
            timeout=settings.enrichment_timeout_seconds,
        )
    except asyncio.TimeoutError:
        logger.warning("Recall check timed out for %r", product_name)
    except _LOOKUP_ERRORS as exc:
        # openFDA answers 404 when there are no matching reports
        logger.debug("Recall check returned no result for %r: %s", product_name, exc)
    return False
