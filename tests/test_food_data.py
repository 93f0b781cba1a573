import pytest
import requests

from labelwise.services import food_data


class _FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code}")

    def json(self):
        return self._payload


@pytest.fixture(autouse=True)
def _clear_cache():
    food_data._cache_products.clear()
    yield
    food_data._cache_products.clear()


FDC_PAYLOAD = {
    "foods": [
        {
            "fdcId": 123,
            "description": "Cheddar Crackers",
            "brandOwner": "Acme Foods",
            "ingredients": "wheat flour, cheddar cheese, salt",
            "servingSize": 28,
            "servingSizeUnit": "g",
            "foodNutrients": [
                {"nutrientName": "Protein", "value": 3.5},
                {"nutrientName": "Energy", "value": 140},
                {"nutrientName": "Sodium, Na", "value": 250},
                {"nutrientName": "Iron, Fe", "value": 1.1},
            ],
        }
    ]
}

OFF_PAYLOAD = {
    "products": [
        {
            "product_name": "Oat Crackers",
            "brands": "Nordic",
            "ingredients_text": "oats, sunflower oil, salt",
            "serving_size": "30 g",
            "nutriments": {"energy-kcal": 420, "proteins": 9, "sugars": 1.5},
        }
    ]
}


async def test_fdc_result_is_mapped(monkeypatch):
    monkeypatch.setattr(
        food_data.requests, "get", lambda url, params=None, timeout=None: _FakeResponse(FDC_PAYLOAD)
    )
    product = await food_data.search_food_product("Cheddar Crackers")
    assert product.source == "USDA FoodData Central"
    assert product.fdc_id == 123
    assert product.brand == "Acme Foods"
    facts = product.nutrition_facts
    assert (facts.protein, facts.calories, facts.sodium) == (3.5, 140, 250)
    assert facts.serving_size == "28g"


async def test_falls_back_to_openfoodfacts(monkeypatch):
    def _get(url, params=None, timeout=None):
        if "foods/search" in url:
            return _FakeResponse({"foods": []})
        return _FakeResponse(OFF_PAYLOAD)

    monkeypatch.setattr(food_data.requests, "get", _get)
    product = await food_data.search_food_product("oat crackers")
    assert product.source == "OpenFoodFacts"
    assert product.ingredients == "oats, sunflower oil, salt"
    assert product.nutrition_facts.calories == 420
    assert product.nutrition_facts.sugar == 1.5


async def test_network_failures_return_none(monkeypatch):
    def _get(url, params=None, timeout=None):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(food_data.requests, "get", _get)
    assert await food_data.search_food_product("anything") is None


async def test_results_are_cached(monkeypatch):
    calls = []

    def _get(url, params=None, timeout=None):
        calls.append(url)
        return _FakeResponse(FDC_PAYLOAD)

    monkeypatch.setattr(food_data.requests, "get", _get)
    first = await food_data.search_food_product("Cheddar Crackers")
    second = await food_data.search_food_product("  cheddar crackers ")
    assert first == second
    assert len(calls) == 1


async def test_blank_query_skips_lookup(monkeypatch):
    def _get(url, params=None, timeout=None):
        raise AssertionError("no request expected")

    monkeypatch.setattr(food_data.requests, "get", _get)
    assert await food_data.search_food_product("   ") is None


async def test_recall_check(monkeypatch):
    monkeypatch.setattr(
        food_data.requests,
        "get",
        lambda url, params=None, timeout=None: _FakeResponse({"results": [{"recall_number": "F-1"}]}),
    )
    assert await food_data.check_product_recall("peanut butter") is True


async def test_recall_check_not_found(monkeypatch):
    monkeypatch.setattr(
        food_data.requests,
        "get",
        lambda url, params=None, timeout=None: _FakeResponse({}, status_code=404),
    )
    assert await food_data.check_product_recall("plain water") is False


async def test_failed_lookup_is_retried(monkeypatch):
    calls = []

    def _get(url, params=None, timeout=None):
        calls.append(url)
        if len(calls) <= 2:
            raise requests.ConnectionError("offline")
        return _FakeResponse(FDC_PAYLOAD)

    monkeypatch.setattr(food_data.requests, "get", _get)
    assert await food_data.search_food_product("oat bar") is None
    product = await food_data.search_food_product("oat bar")
    assert product is not None
    assert product.name == "Cheddar Crackers"
    assert len(calls) == 3


async def test_clean_miss_is_cached(monkeypatch):
    calls = []

    def _get(url, params=None, timeout=None):
        calls.append(url)
        if "foods/search" in url:
            return _FakeResponse({"foods": []})
        return _FakeResponse({"products": []})

    monkeypatch.setattr(food_data.requests, "get", _get)
    assert await food_data.search_food_product("unobtainium bar") is None
    assert await food_data.search_food_product("unobtainium bar") is None
    assert len(calls) == 2


@pytest.mark.parametrize("payload", [{"foods": ["unexpected"]}, ["not", "a", "dict"]])
async def test_malformed_payload_returns_none(monkeypatch, payload):
    monkeypatch.setattr(
        food_data.requests, "get", lambda url, params=None, timeout=None: _FakeResponse(payload)
    )
    assert await food_data.search_food_product("crackers") is None
    assert "crackers" not in food_data._cache_products


async def test_recall_check_malformed_payload(monkeypatch):
    monkeypatch.setattr(
        food_data.requests, "get", lambda url, params=None, timeout=None: _FakeResponse(["x"])
    )
    assert await food_data.check_product_recall("peanut butter") is False
