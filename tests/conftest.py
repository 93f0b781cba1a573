"""Shared fixtures for the labelwise test suite."""

from __future__ import annotations

import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from labelwise.main import app
from labelwise.schemas.preferences import UserPreferences
from labelwise.services.classifier import IngredientClassifier

SCENARIO_BREAD = (
    "Wheat flour, water, sugar, yeast, salt, vegetable oil, preservatives (calcium propionate)"
)
SCENARIO_SODA = (
    "carbonated water, sugar, caramel color, phosphoric acid, natural flavors, caffeine, "
    "sodium benzoate"
)


@pytest.fixture
def default_prefs() -> UserPreferences:
    return UserPreferences()


@pytest.fixture
def classifier() -> IngredientClassifier:
    return IngredientClassifier()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def solid_png():
    """Factory for an in-memory PNG filled with one colour."""

    def _make(color, mode: str = "RGB", size: tuple[int, int] = (50, 50)) -> bytes:
        buffer = io.BytesIO()
        Image.new(mode, size, color).save(buffer, format="PNG")
        return buffer.getvalue()

    return _make
