from labelwise.schemas.preferences import UserPreferences
from labelwise.services.classifier import classifier
from labelwise.services.parser import parse_ingredients
from labelwise.services.personalization import PersonalizationEngine
from labelwise.utils import narratives
from labelwise.utils.reference_data import SAMPLES_BY_ID

engine = PersonalizationEngine()


def _ingredients(raw):
    return [classifier.build_ingredient(token) for token in parse_ingredients(raw)]


def test_no_flags_no_key_ingredients(default_prefs):
    assert engine.what_matters_most(_ingredients("sugar, water, soybean oil"), default_prefs) == []


def test_high_sugar_flag():
    prefs = UserPreferences(flag_high_sugar=True)
    result = engine.what_matters_most(_ingredients("water, sugar, salt"), prefs)
    assert [(k.name, k.priority) for k in result] == [("Sugar", 10)]
    assert result[0].reason == narratives.REASON_HIGH_SUGAR


def test_allergen_flag_names_allergens():
    prefs = UserPreferences(flag_allergens=True)
    result = engine.what_matters_most(_ingredients("salt, soybean oil"), prefs)
    assert result[0].name == "Soybean oil"
    assert result[0].priority == 10
    assert result[0].reason.startswith("Contains Soy, a common allergen.")


def test_flavor_enhancer_flag_on_noodles():
    prefs = UserPreferences(flag_artificial_additives=True)
    ingredients = _ingredients(SAMPLES_BY_ID["instant-noodles"].ingredient_list)
    result = engine.what_matters_most(ingredients, prefs)
    assert len(result) == 1
    assert result[0].priority == 9
    assert result[0].name.startswith("Flavor enhancers")


def test_preservative_rule_requires_synthetic():
    prefs = UserPreferences(flag_preservatives=True)
    result = engine.what_matters_most(_ingredients("sodium benzoate, potassium sorbate"), prefs)
    assert [k.priority for k in result] == [8, 8]


def test_highest_priority_rule_wins_per_ingredient():
    # flagged for sugar and allergens at once: the sugar rule comes first in the table
    prefs = UserPreferences(flag_high_sugar=True, flag_allergens=True)
    result = engine.what_matters_most(_ingredients("sugar, soy lecithin"), prefs)
    assert [(k.name, k.priority) for k in result] == [("Sugar", 10), ("Soy lecithin", 10)]


def test_sorted_by_priority_and_stable_on_ties():
    prefs = UserPreferences(
        goal="health-conscious",
        flag_high_sugar=True,
        flag_preservatives=True,
    )
    raw = "palm oil, wheat flour, sodium benzoate, high fructose corn syrup, sugar"
    result = engine.what_matters_most(_ingredients(raw), prefs, limit=5)
    assert [(k.name, k.priority) for k in result] == [
        ("High fructose corn syrup", 10),
        ("Sugar", 10),
        ("Sodium benzoate", 8),
        ("Wheat flour", 6),
        ("Palm oil", 5),
    ]


def test_default_limit_is_two():
    prefs = UserPreferences(flag_high_sugar=True)
    result = engine.what_matters_most(_ingredients("sugar, cane syrup, fructose"), prefs)
    assert len(result) == 2


def test_refined_flour_only_for_fitness_or_health_goals():
    flour = _ingredients("wheat flour, whole wheat flour")
    fitness = engine.what_matters_most(flour, UserPreferences(goal="fitness-focused"))
    assert [(k.name, k.priority) for k in fitness] == [("Wheat flour", 6)]
    assert engine.what_matters_most(flour, UserPreferences(goal="curious-learner")) == []


def test_palm_oil_only_for_health_conscious():
    palm = _ingredients("palm oil")
    assert engine.what_matters_most(palm, UserPreferences(goal="health-conscious"))[0].priority == 5
    assert engine.what_matters_most(palm, UserPreferences(goal="fitness-focused")) == []


def test_simple_tone_keeps_first_sentence():
    prefs = UserPreferences(flag_high_sugar=True, tone_preference="simple")
    result = engine.what_matters_most(_ingredients("sugar"), prefs)
    assert result[0].reason == "This is a major source of added sugar."


def test_insight_keyed_on_goal():
    for goal, text in narratives.GOAL_INSIGHTS.items():
        prefs = UserPreferences(goal=goal)
        assert engine.insight(prefs, "not-ideal", []) == text
        assert engine.insight(prefs, "better-choice", []) == text


def test_insight_unknown_goal_falls_back():
    prefs = UserPreferences.model_construct(goal="astronaut")
    assert engine.insight(prefs, "not-ideal", []) == narratives.GOAL_INSIGHTS["normal-consumer"]
