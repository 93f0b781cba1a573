"""Pydantic schemas for the ingredient analysis pipeline."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from labelwise.schemas.preferences import UserPreferences

Classification = Literal["natural", "processed", "synthetic"]
VerdictType = Literal["better-choice", "occasional-choice", "not-ideal"]


class IngredientRecord(BaseModel):
    """
    A curated knowledge-base entry.
    `key` is the lowercase substring matched against parsed tokens.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    classification: Classification
    chemical_name: Optional[str] = None
    why_used: Optional[str] = None
    benefits: tuple[str, ...] = ()
    considerations: tuple[str, ...] = ()
    who_should_care: Optional[str] = None
    evolving_science: Optional[str] = None
    allergens: tuple[str, ...] = ()


class Ingredient(BaseModel):
    """
    A single classified ingredient, built fresh for every analysis call.
    Metadata fields are only present when the knowledge base matched.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    classification: Classification
    description: str = Field(..., min_length=1)
    chemical_name: Optional[str] = None
    why_used: Optional[str] = None
    benefits: Optional[list[str]] = None
    considerations: Optional[list[str]] = None
    who_should_care: Optional[str] = None
    evolving_science: Optional[str] = None
    allergens: Optional[list[str]] = None


class IngredientSummary(BaseModel):
    """Counts + narrative. natural + processed + synthetic == total."""

    total_count: int
    natural_count: int
    processed_count: int
    synthetic_count: int
    summary_text: str
    allergens: list[str] = Field(default_factory=list)  # sorted, unique


class Verdict(BaseModel):
    """Three-tier overall judgement derived purely from classification counts."""

    type: VerdictType
    explanation: str


class Source(BaseModel):
    """A citation rendered under the analysis."""

    name: str
    description: str
    url: str


class KeyIngredient(BaseModel):
    """One entry of the "what matters most" list."""

    name: str
    reason: str
    priority: int


class HealthImpact(BaseModel):
    """One bullet of the health impact summary (one per classification)."""

    level: Literal["good", "moderate", "caution"]
    title: str
    message: str


class AnalysisResult(BaseModel):
    """Sole output contract of the analysis pipeline."""

    summary: IngredientSummary
    verdict: Verdict
    personalized_insight: str
    ingredients: list[Ingredient]   # parse order
    sources: list[Source]
    opening_statement: str
    what_matters_most: list[KeyIngredient] = Field(default_factory=list)
    health_impact: list[HealthImpact] = Field(default_factory=list)
    disclaimer: str = ""


class AnalyzeRequest(BaseModel):
    """Body for POST /analyze."""

    ingredient_list: str = Field(..., max_length=10_000)
    preferences: Optional[UserPreferences] = None


class SampleProduct(BaseModel):
    """A built-in sample product offered by the sample picker."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category: str
    ingredient_list: str
