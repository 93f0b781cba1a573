"""Pydantic schemas for the image scan boundary (OCR, visual, keyword, food data)."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from labelwise.schemas.analysis import AnalysisResult


class OCRResult(BaseModel):
    """Text recognised by Tesseract and its mean word confidence (0–100)."""

    text: str = ""
    confidence: float = 0.0


class ColorInfo(BaseModel):
    """A quantised RGB colour."""

    r: int
    g: int
    b: int
    hex: str


class VisualAnalysisResult(BaseModel):
    """Coarse colour-based guess. confidence is 0 when the image could not be read."""

    dominant_colors: list[str] = Field(default_factory=list)
    predicted_food_type: str = "Unknown"
    predicted_ingredients: list[str] = Field(default_factory=list)
    confidence: float = 0.0


class ProductKeywordRecord(BaseModel):
    """A known branded product; matching any keyword overrides OCR text."""

    model_config = ConfigDict(frozen=True)

    keywords: tuple[str, ...]
    product_name: str
    ingredients: str
    category: str


class NutritionFacts(BaseModel):
    """Per-serving nutrition values as reported by the external database."""

    serving_size: Optional[str] = None
    calories: Optional[float] = None
    protein: Optional[float] = None
    carbohydrates: Optional[float] = None
    fat: Optional[float] = None
    sodium: Optional[float] = None
    sugar: Optional[float] = None


class FoodProduct(BaseModel):
    """A product found in FoodData Central or OpenFoodFacts."""

    name: str
    brand: Optional[str] = None
    ingredients: str = ""
    nutrition_facts: Optional[NutritionFacts] = None
    fdc_id: Optional[int] = None
    source: str


FusionSource = Literal["keyword_database", "ocr", "food_database", "visual", "none"]


class FusionResult(BaseModel):
    """
    The single resolved ingredient string handed to the analysis pipeline,
    plus the signals that produced it.
    """

    ingredient_text: str = ""
    source: FusionSource = "none"
    is_food: bool = False
    reason: Optional[str] = None
    product_name: Optional[str] = None
    category: Optional[str] = None
    ocr_confidence: float = 0.0
    ocr_text: str = ""
    # OCR text reads like a food label and names no non-food product
    label_detected: bool = False
    # openFDA enforcement report found; None when the check did not run
    recalled: Optional[bool] = None
    visual: Optional[VisualAnalysisResult] = None


class ScanResponse(BaseModel):
    """Response for POST /scan. analysis is present only for usable food text."""

    fusion: FusionResult
    analysis: Optional[AnalysisResult] = None
    error: Optional[str] = None
