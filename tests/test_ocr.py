import asyncio
import time

import pytest

from labelwise.config import settings
from labelwise.services import ocr
from labelwise.services.ocr import OCRError


# ── Text helpers ────────────────────────────────────────────────────────────


def test_product_name_first_line():
    assert ocr.extract_product_name("Crunchy Oat Bar\nIngredients: oats") == "Crunchy Oat Bar"


def test_product_name_skips_barcode_and_short_lines():
    assert ocr.extract_product_name("\n0123456789\nChoco Crunch\n") == "Choco Crunch"
    assert ocr.extract_product_name("AB\nOat Bar") == "Oat Bar"
    assert ocr.extract_product_name("AB") == "AB"


def test_product_name_empty():
    assert ocr.extract_product_name(" \n \n") is None


def test_ingredients_header():
    text = "Choco Crunch\nINGREDIENTS: sugar, cocoa butter, milk"
    assert ocr.extract_ingredients(text) == "sugar, cocoa butter, milk"


def test_contains_phrase():
    assert ocr.extract_ingredients("Trail mix\nContains: peanuts, raisins. Keep dry") == (
        "peanuts, raisins"
    )


def test_comma_line_fallback():
    text = "Crunchy Bar\noats, honey, almonds\nNet 40g"
    assert ocr.extract_ingredients(text) == "oats, honey, almonds"


def test_no_ingredient_section():
    assert ocr.extract_ingredients("Hello world\nNet 40g") is None


def test_detect_food_in_text():
    assert ocr.detect_food_in_text("Nutrition Facts\nServing size 30g")
    assert not ocr.detect_food_in_text("Shampoo with purified water")
    assert not ocr.detect_food_in_text("random words")


# ── Tesseract wrapper ───────────────────────────────────────────────────────


def _fake_data(**_kwargs):
    return {
        "text": ["Oat", "Bar", "", "Ingredients:", "oats,", "honey"],
        "conf": ["95.0", "85.0", "-1", "90", "80", "70"],
        "block_num": [1, 1, 1, 2, 2, 2],
        "par_num": [1, 1, 1, 1, 1, 1],
        "line_num": [1, 1, 1, 1, 1, 1],
    }


def test_run_tesseract_joins_lines_and_averages_confidence(monkeypatch, solid_png):
    monkeypatch.setattr(ocr.pytesseract, "image_to_data", lambda image, **kw: _fake_data())
    result = ocr._run_tesseract(solid_png((255, 255, 255)))
    assert result.text == "Oat Bar\nIngredients: oats, honey"
    assert result.confidence == 84.0


def test_run_tesseract_unreadable_image():
    with pytest.raises(OCRError):
        ocr._run_tesseract(b"definitely not an image")


def test_run_tesseract_wraps_tesseract_errors(monkeypatch, solid_png):
    def _boom(image, **kw):
        raise ocr.pytesseract.TesseractError(1, "bad")

    monkeypatch.setattr(ocr.pytesseract, "image_to_data", _boom)
    with pytest.raises(OCRError):
        ocr._run_tesseract(solid_png((0, 0, 0)))


async def test_extract_text_from_image(monkeypatch):
    monkeypatch.setattr(
        ocr, "_run_tesseract", lambda data: ocr.OCRResult(text="sugar, salt", confidence=88.0)
    )
    result = await ocr.extract_text_from_image(b"img")
    assert result.text == "sugar, salt"


async def test_extract_text_from_image_timeout(monkeypatch):
    def _slow(data):
        time.sleep(0.3)
        return ocr.OCRResult()

    monkeypatch.setattr(ocr, "_run_tesseract", _slow)
    monkeypatch.setattr(settings, "ocr_timeout_seconds", 0.01)
    with pytest.raises(OCRError):
        await ocr.extract_text_from_image(b"img")
    await asyncio.sleep(0.35)  # let the worker thread finish


def test_tesseract_available_false_when_missing(monkeypatch):
    def _missing():
        raise ocr.pytesseract.TesseractNotFoundError()

    monkeypatch.setattr(ocr.pytesseract, "get_tesseract_version", _missing)
    assert ocr.tesseract_available() is False
