import pydantic
import pytest

from labelwise.schemas.preferences import DEFAULT_PREFERENCES, PreferencesPatch, UserPreferences
from labelwise.services.preferences_store import PreferencesStore


def test_defaults():
    prefs = UserPreferences.defaults()
    assert prefs.goal == "normal-consumer"
    assert prefs.tone_preference == "balanced"
    assert not any(
        [prefs.flag_high_sugar, prefs.flag_artificial_additives,
         prefs.flag_preservatives, prefs.flag_allergens]
    )
    assert prefs == DEFAULT_PREFERENCES


def test_updates_return_new_values():
    prefs = UserPreferences()
    updated = prefs.with_goal("fitness-focused").with_tone("simple").with_flags(flag_allergens=True)
    assert updated.goal == "fitness-focused"
    assert updated.tone_preference == "simple"
    assert updated.flag_allergens
    assert prefs == DEFAULT_PREFERENCES


def test_preferences_are_immutable():
    with pytest.raises(pydantic.ValidationError):
        DEFAULT_PREFERENCES.goal = "fitness-focused"


def test_invalid_values_rejected():
    with pytest.raises(pydantic.ValidationError):
        UserPreferences().with_goal("astronaut")
    with pytest.raises(ValueError):
        UserPreferences().with_flags(flag_spicy=True)


def test_patch_flags_only_returns_set_fields():
    patch = PreferencesPatch(goal="health-conscious", flag_high_sugar=False)
    assert patch.flags() == {"flag_high_sugar": False}


def test_store_get_unknown_session_is_default():
    store = PreferencesStore(maxsize=10, ttl=60)
    assert store.get("nobody") == DEFAULT_PREFERENCES


def test_store_updates_are_per_session():
    store = PreferencesStore(maxsize=10, ttl=60)
    store.update_goal("a", "curious-learner")
    store.update_tone("a", "detailed")
    store.update_flags("a", flag_preservatives=True)

    a = store.get("a")
    assert (a.goal, a.tone_preference, a.flag_preservatives) == (
        "curious-learner", "detailed", True,
    )
    assert store.get("b") == DEFAULT_PREFERENCES


def test_store_apply_patch_keeps_unset_fields():
    store = PreferencesStore(maxsize=10, ttl=60)
    store.update_flags("s", flag_allergens=True)
    prefs = store.apply_patch("s", PreferencesPatch(goal="medical-sensitivity"))
    assert prefs.goal == "medical-sensitivity"
    assert prefs.flag_allergens


def test_store_reset():
    store = PreferencesStore(maxsize=10, ttl=60)
    store.update_goal("s", "fitness-focused")
    assert store.reset("s") == DEFAULT_PREFERENCES
    assert store.get("s") == DEFAULT_PREFERENCES


def test_stored_value_is_replaced_not_mutated():
    store = PreferencesStore(maxsize=10, ttl=60)
    before = store.update_goal("s", "fitness-focused")
    store.update_flags("s", flag_high_sugar=True)
    assert not before.flag_high_sugar
