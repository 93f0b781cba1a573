import pytest

from labelwise.schemas.analysis import IngredientRecord
from labelwise.services.classifier import IngredientClassifier, classifier as shared_classifier
from labelwise.utils.ingredient_data import INGREDIENT_RECORDS


@pytest.mark.parametrize(
    "token, expected",
    [
        ("water", "natural"),
        ("salt", "natural"),
        ("yeast", "natural"),
        ("carbonated water", "natural"),
        ("caffeine", "natural"),
        ("sugar", "processed"),
        ("wheat flour", "processed"),
        ("caramel color", "processed"),
        ("natural flavors", "processed"),
        ("phosphoric acid", "synthetic"),
        ("sodium benzoate", "synthetic"),
        ("preservatives (calcium propionate)", "synthetic"),
    ],
)
def test_knowledge_base_classifications(classifier, token, expected):
    assert classifier.classify(token) == expected


def test_longest_key_wins(classifier):
    assert classifier.match("enriched wheat flour (niacin, iron)").key == "enriched wheat flour"
    assert classifier.match("carbonated water").key == "carbonated water"
    assert classifier.match("sea salt").key == "sea salt"


def test_equal_length_keys_keep_declaration_order(classifier):
    token = "protein blend (milk protein isolate, whey protein isolate)"
    assert len("whey protein isolate") == len("milk protein isolate")
    assert classifier.match(token).key == "whey protein isolate"


def test_lookup_order_is_descending_length(classifier):
    lengths = [len(record.key) for record in classifier.records]
    assert lengths == sorted(lengths, reverse=True)
    assert len(classifier.records) == len(INGREDIENT_RECORDS)


def test_heuristic_tiers(classifier):
    assert classifier.classify("rosemary herb extract") == "natural"
    assert classifier.classify("ascorbic acid") == "synthetic"
    assert classifier.classify("artificial vanilla") == "synthetic"


def test_natural_hint_checked_before_synthetic(classifier):
    assert classifier.classify("natural lactic acid") == "natural"


def test_unknown_token_degrades_to_processed(classifier):
    assert classifier.classify("vegetable oil") == "processed"
    assert classifier.classify("zzzz") == "processed"
    assert classifier.details("zzzz") == {}


def test_classification_is_deterministic(classifier):
    tokens = ["sugar", "vegetable oil", "soy lecithin", "mystery powder"]
    first = [classifier.classify(t) for t in tokens]
    for _ in range(3):
        assert [classifier.classify(t) for t in tokens] == first
    assert [IngredientClassifier().classify(t) for t in tokens] == first


def test_details_copy_only_populated_fields(classifier):
    details = classifier.details("soybean oil")
    assert details["allergens"] == ["Soy"]
    assert details["chemical_name"] == "Refined Soybean Oil"
    assert "evolving_science" not in details


def test_describe_prefers_why_used_then_default(classifier):
    assert classifier.describe("water", "natural").startswith("Essential for hydration")
    assert classifier.describe("quinoa", "processed") == (
        "A processed ingredient derived from natural sources."
    )
    assert classifier.describe("herb blend", "natural") == "A naturally occurring ingredient."


def test_build_ingredient(classifier):
    ingredient = classifier.build_ingredient("soy lecithin")
    assert ingredient.name == "Soy lecithin"
    assert ingredient.classification == "processed"
    assert ingredient.allergens == ["Soy"]
    assert ingredient.description

    heuristic = classifier.build_ingredient("mystery powder")
    assert heuristic.name == "Mystery powder"
    assert heuristic.allergens is None
    assert heuristic.benefits is None


def test_custom_record_table():
    custom = IngredientClassifier(
        [
            IngredientRecord(key="oat", classification="natural"),
            IngredientRecord(key="oat milk", classification="processed"),
        ]
    )
    assert custom.classify("organic oat milk") == "processed"
    assert custom.classify("rolled oats") == "natural"


def test_shared_singleton_uses_full_table():
    assert len(shared_classifier.records) == len(INGREDIENT_RECORDS)
