from labelwise.services import validator
from labelwise.services.validator import (
    ValidationError,
    validate_extracted_text,
    validate_food_input,
)


def test_empty_input_is_too_short():
    result = validate_food_input("")
    assert not result.is_valid
    assert "too short" in result.reason.lower()


def test_whitespace_only_is_too_short():
    assert not validate_food_input("   \n ").is_valid


def test_non_food_keyword_rejected_and_quoted():
    result = validate_food_input("detergent, surfactants, enzymes, fragrance")
    assert not result.is_valid
    assert '"detergent"' in result.reason


def test_food_keyword_short_circuits_non_food():
    # "oil" is food vocabulary, so "motor oil" never reaches the non-food table
    assert validate_food_input("motor oil").is_valid


def test_first_non_food_keyword_in_table_order_is_reported():
    result = validate_food_input("laptop charger")
    assert not result.is_valid
    # "charger" precedes "laptop" in the table
    assert '"charger"' in result.reason


def test_exception_phrase_exempts_non_food_keyword(monkeypatch):
    monkeypatch.setattr(validator, "NON_FOOD_KEYWORDS", ("gizmo",))
    monkeypatch.setattr(validator, "NON_FOOD_EXCEPTIONS", {"gizmo": ("gizmo pouch",)})

    rejected = validate_food_input("gizmo")
    assert not rejected.is_valid
    assert '"gizmo"' in rejected.reason
    assert validate_food_input("gizmo pouch").is_valid


def test_heart_foundation_mark_is_not_cosmetics():
    assert not validate_food_input("liquid foundation").is_valid
    assert validate_food_input("Heart Foundation approved").is_valid


def test_unknown_words_pass_permissively():
    assert validate_food_input("quinoa, chia seeds").is_valid


def test_validation_is_total_for_odd_strings():
    for text in ["(((", "🍎🍌", "a" * 5000, "\x00\x01"]:
        result = validate_food_input(text)
        assert isinstance(result.is_valid, bool)


def test_extracted_text_blank_means_no_text():
    for text in [None, "", "abc "]:
        result = validate_extracted_text(text)
        assert not result.is_valid
        assert result.reason == "No text detected in image"


def test_extracted_text_delegates_to_food_gate():
    assert validate_extracted_text("Ingredients: sugar, cocoa").is_valid
    assert not validate_extracted_text("Anti-dandruff shampoo").is_valid


def test_validation_error_carries_reason():
    exc = ValidationError("nope")
    assert exc.reason == "nope"
    assert isinstance(exc, ValueError)
