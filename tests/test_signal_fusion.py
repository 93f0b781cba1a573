import pytest

from labelwise.config import settings
from labelwise.schemas.scan import FoodProduct, OCRResult, VisualAnalysisResult
from labelwise.services import food_data, ocr, visual
from labelwise.services.ocr import OCRError
from labelwise.services.signal_fusion import fuse_signals

BROWN_GUESS = VisualAnalysisResult(
    dominant_colors=["#a06040"],
    predicted_food_type="Baked Goods / Grains",
    predicted_ingredients=["Wheat Flour", "Sugar", "Yeast"],
    confidence=0.7,
)


def _ocr_returns(monkeypatch, text, confidence):
    async def _fake(image_bytes):
        return OCRResult(text=text, confidence=confidence)

    monkeypatch.setattr(ocr, "extract_text_from_image", _fake)


def _visual_returns(monkeypatch, result):
    async def _fake(image_bytes):
        return result

    monkeypatch.setattr(visual, "analyze_image_visually", _fake)


@pytest.fixture(autouse=True)
def _defaults(monkeypatch):
    monkeypatch.setattr(settings, "visual_analysis_enabled", True)
    monkeypatch.setattr(settings, "enrichment_enabled", False)
    monkeypatch.setattr(settings, "ocr_min_confidence", 60.0)
    monkeypatch.setattr(settings, "ocr_min_text_length", 20)
    _visual_returns(monkeypatch, BROWN_GUESS)

    async def _no_recall(name):
        return False

    monkeypatch.setattr(food_data, "check_product_recall", _no_recall)


async def test_product_keyword_overrides_ocr(monkeypatch):
    _ocr_returns(monkeypatch, "Coca-Cola Classic 330ml", 40.0)
    result = await fuse_signals(b"img")
    assert result.source == "keyword_database"
    assert result.is_food
    assert result.product_name == "Coca-Cola"
    assert result.ingredient_text.startswith("Carbonated Water")


async def test_sufficient_ocr_uses_ingredient_section(monkeypatch):
    _ocr_returns(
        monkeypatch, "Crunchy Oat Bar\nIngredients: rolled oats, honey, almonds, sea salt", 91.0
    )
    result = await fuse_signals(b"img")
    assert result.source == "ocr"
    assert result.ingredient_text == "rolled oats, honey, almonds, sea salt"
    assert result.product_name == "Crunchy Oat Bar"
    assert result.visual == BROWN_GUESS


async def test_non_food_label_stops_the_pipeline(monkeypatch):
    _ocr_returns(monkeypatch, "Anti-Dandruff Shampoo for daily use", 95.0)
    result = await fuse_signals(b"img")
    assert not result.is_food
    assert "shampoo" in result.reason
    assert result.ingredient_text == ""


async def test_ocr_failure_falls_back_to_visual(monkeypatch):
    async def _fail(image_bytes):
        raise OCRError("tesseract missing")

    monkeypatch.setattr(ocr, "extract_text_from_image", _fail)
    result = await fuse_signals(b"img")
    assert result.source == "visual"
    assert result.ingredient_text == "Wheat Flour, Sugar, Yeast"
    assert result.category == "Baked Goods / Grains"
    assert result.ocr_confidence == 0.0


async def test_low_confidence_without_visual_is_none(monkeypatch):
    _ocr_returns(monkeypatch, "sugar salt", 20.0)
    result = await fuse_signals(b"img", use_visual=False)
    assert result.source == "none"
    assert not result.is_food
    assert result.visual is None


async def test_visual_failure_is_absent_signal(monkeypatch):
    async def _fail(image_bytes):
        raise RuntimeError("decoder crashed")

    monkeypatch.setattr(visual, "analyze_image_visually", _fail)
    _ocr_returns(monkeypatch, "Ingredients: wheat flour, water, salt, yeast", 88.0)
    result = await fuse_signals(b"img")
    assert result.source == "ocr"
    assert result.visual is None


async def test_enrichment_by_product_name(monkeypatch):
    monkeypatch.setattr(settings, "enrichment_enabled", True)
    _ocr_returns(monkeypatch, "Mystery Crackers\nwheat", 30.0)
    seen = []

    async def _search(name):
        seen.append(name)
        return FoodProduct(name=name, ingredients="wheat flour, salt", source="OpenFoodFacts")

    monkeypatch.setattr(food_data, "search_food_product", _search)
    result = await fuse_signals(b"img")
    assert seen == ["Mystery Crackers"]
    assert result.source == "food_database"
    assert result.ingredient_text == "wheat flour, salt"


async def test_enrichment_miss_falls_through_to_visual(monkeypatch):
    monkeypatch.setattr(settings, "enrichment_enabled", True)
    _ocr_returns(monkeypatch, "Mystery Crackers\nwheat", 30.0)

    async def _search(name):
        return None

    monkeypatch.setattr(food_data, "search_food_product", _search)
    result = await fuse_signals(b"img")
    assert result.source == "visual"


async def test_malformed_enrichment_payload_is_absent_signal(monkeypatch):
    monkeypatch.setattr(settings, "enrichment_enabled", True)
    monkeypatch.setattr(food_data, "_get_json", lambda url, params: {"foods": ["unexpected"]})
    food_data._cache_products.clear()
    _ocr_returns(monkeypatch, "Mystery Crackers\nwheat", 30.0)

    result = await fuse_signals(b"img", use_visual=False)
    assert result.source == "none"
    assert not result.is_food
    assert result.recalled is None


async def test_recall_is_reported_for_named_products(monkeypatch):
    monkeypatch.setattr(settings, "enrichment_enabled", True)
    checked = []

    async def _recalled(name):
        checked.append(name)
        return True

    monkeypatch.setattr(food_data, "check_product_recall", _recalled)
    _ocr_returns(monkeypatch, "Crunchy Oat Bar\nIngredients: rolled oats, honey, almonds, sea salt", 91.0)
    result = await fuse_signals(b"img")
    assert checked == ["Crunchy Oat Bar"]
    assert result.recalled is True


async def test_recall_not_checked_without_enrichment(monkeypatch):
    _ocr_returns(monkeypatch, "Crunchy Oat Bar\nIngredients: rolled oats, honey, almonds, sea salt", 91.0)
    result = await fuse_signals(b"img")
    assert result.recalled is None


async def test_label_vocabulary_is_flagged(monkeypatch):
    _ocr_returns(monkeypatch, "Nutrition Facts\nServing size 30g\nCalories 120", 85.0)
    assert (await fuse_signals(b"img")).label_detected

    _ocr_returns(monkeypatch, "Anti-Dandruff Shampoo for daily use", 95.0)
    assert not (await fuse_signals(b"img")).label_detected
