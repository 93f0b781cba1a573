"""Pydantic schemas package."""

from labelwise.schemas.preferences import (
    DEFAULT_PREFERENCES,
    PreferencesPatch,
    TonePreference,
    UserGoal,
    UserPreferences,
)
from labelwise.schemas.analysis import (
    AnalysisResult,
    AnalyzeRequest,
    Classification,
    HealthImpact,
    Ingredient,
    IngredientRecord,
    IngredientSummary,
    KeyIngredient,
    SampleProduct,
    Source,
    Verdict,
    VerdictType,
)
from labelwise.schemas.scan import (
    ColorInfo,
    FoodProduct,
    FusionResult,
    NutritionFacts,
    OCRResult,
    ProductKeywordRecord,
    ScanResponse,
    VisualAnalysisResult,
)

__all__ = [
    "DEFAULT_PREFERENCES", "PreferencesPatch", "TonePreference", "UserGoal",
    "UserPreferences",
    "AnalysisResult", "AnalyzeRequest", "Classification", "HealthImpact",
    "Ingredient", "IngredientRecord", "IngredientSummary", "KeyIngredient",
    "SampleProduct", "Source", "Verdict", "VerdictType",
    "ColorInfo", "FoodProduct", "FusionResult", "NutritionFacts", "OCRResult",
    "ProductKeywordRecord", "ScanResponse", "VisualAnalysisResult",
]
