"""Product keyword table — known branded products and their ingredient lists."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from labelwise.schemas.scan import ProductKeywordRecord
from labelwise.utils.product_keywords import (
    PRODUCT_KEYWORDS,
    get_product_categories,
    search_product_keywords,
    search_products_by_category,
)

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=list[ProductKeywordRecord])
async def list_products(
    category: Optional[str] = Query(default=None),
) -> list[ProductKeywordRecord]:
    """All known products, or those in one category (case-insensitive)."""
    if category:
        return search_products_by_category(category)
    return list(PRODUCT_KEYWORDS)


@router.get("/categories", response_model=list[str])
async def list_categories() -> list[str]:
    return get_product_categories()


@router.get("/search", response_model=ProductKeywordRecord)
async def search_products(q: str = Query(..., min_length=1)) -> ProductKeywordRecord:
    """First product whose alias appears anywhere in `q` (e.g. raw OCR text)."""
    product = search_product_keywords(q)
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No known product matched",
        )
    return product
