"""
Narrative text for analysis results.
All user-facing sentences live here — no hardcoded copy elsewhere in the codebase.
"""

from __future__ import annotations

# ── Ingredient descriptions (heuristic path) ────────────────────────────────

DEFAULT_DESCRIPTIONS: dict[str, str] = {
    "natural": "A naturally occurring ingredient.",
    "processed": "A processed ingredient derived from natural sources.",
    "synthetic": "A synthetically produced ingredient.",
}

# ── Summary & verdict ───────────────────────────────────────────────────────

SUMMARY_MOSTLY_NATURAL = (
    "This product primarily consists of natural ingredients with some processed components."
)
SUMMARY_NOTABLE_SYNTHETIC = (
    "This product contains a notable amount of synthetic additives and processed ingredients."
)
SUMMARY_MIXED = "This product is a mix of natural, processed, and synthetic ingredients."

VERDICT_EXPLANATIONS: dict[str, str] = {
    "better-choice": (
        "This product contains mostly natural ingredients with minimal synthetic additives, "
        "making it a better choice for regular consumption."
    ),
    "not-ideal": (
        "This product contains significant amounts of processed and synthetic ingredients, "
        "making it not ideal for daily consumption."
    ),
    "occasional-choice": (
        "While it contains natural ingredients, the presence of processed and synthetic "
        "components makes it suitable for occasional consumption rather than a daily staple."
    ),
}

# ── Opening statements ──────────────────────────────────────────────────────

OPENING_HIGHLY_PROCESSED = (
    "This looks like a highly processed packaged food. In products like this, what usually "
    "matters most is digestion impact and additive load, so I'll focus on those."
)
OPENING_ADDED_SUGAR = (
    "This appears to be a processed food product with added sugars. For products like this, "
    "the key concerns are typically blood sugar impact and overall nutritional density, so "
    "I'll prioritize those aspects."
)
OPENING_PROCESSED = (
    "This is a processed food product. What matters most here is understanding which "
    "ingredients are natural versus synthetic, and how they might affect your health goals."
)
OPENING_CLEAN = (
    "This product has a relatively clean ingredient list with mostly natural components. "
    "I'll focus on highlighting what makes it a better choice and any minor considerations."
)
OPENING_MIXED = (
    "This product has a mix of natural and processed ingredients. I'll help you understand "
    "which ones matter most for your health and why."
)

# ── Personalized insight (keyed on goal) ────────────────────────────────────

GOAL_INSIGHTS: dict[str, str] = {
    "normal-consumer": (
        "This product is primarily a source of carbohydrates and fat, with flavor coming from a "
        "mix of natural spices and synthetic enhancers. If you're looking for a quick meal, it "
        "can fit, but consider its nutritional density and the presence of refined ingredients "
        "and additives."
    ),
    "fitness-focused": (
        "From a fitness perspective, this product may not provide optimal nutrition. It's high "
        "in refined carbohydrates and may contain additives that don't support performance "
        "goals. Consider whole food alternatives for better nutrient density."
    ),
    "health-conscious": (
        "For health-conscious individuals, this product contains several processed and "
        "synthetic ingredients that may not align with clean eating principles. The presence "
        "of additives and refined ingredients suggests it's better as an occasional choice."
    ),
    "medical-sensitivity": (
        "If you have specific sensitivities or medical conditions, pay close attention to the "
        "synthetic additives and processed ingredients in this product. Some individuals report "
        "sensitivity to certain flavor enhancers and preservatives."
    ),
    "curious-learner": (
        "This product offers an interesting case study in food manufacturing. It combines "
        "natural spices with synthetic flavor enhancers and processed ingredients to create a "
        "convenient, shelf-stable product. Understanding these ingredients helps you make "
        "informed choices."
    ),
}

GOAL_LABELS: dict[str, str] = {
    "normal-consumer": "NORMAL CONSUMER",
    "fitness-focused": "FITNESS-FOCUSED",
    "health-conscious": "HEALTH-CONSCIOUS",
    "medical-sensitivity": "MEDICAL SENSITIVITY",
    "curious-learner": "CURIOUS LEARNER",
}

# ── What matters most ───────────────────────────────────────────────────────

REASON_HIGH_SUGAR = (
    "This is a major source of added sugar. Evidence shows excessive sugar intake is linked to "
    "weight gain, blood sugar spikes, and increased diabetes risk. Effects vary by individual, "
    "but most health organizations recommend limiting added sugars."
)
REASON_ALLERGEN = (
    "Contains {allergens}, a common allergen. Critical for those with sensitivities or "
    "allergies. Effects range from mild discomfort to severe reactions depending on "
    "individual tolerance."
)
REASON_FLAVOR_ENHANCER = (
    "This flavor enhancer is controversial. Research is evolving: while FDA considers it safe, "
    "some individuals report sensitivity. It may increase appetite and mask lower-quality "
    "ingredients."
)
REASON_PRESERVATIVE = (
    "This preservative extends shelf life but is synthetic. Evidence is mixed on long-term "
    "effects. Some people report headaches or digestive issues, though reactions vary by "
    "individual."
)
REASON_ARTIFICIAL_COLOR = (
    "Artificial colors have no nutritional value. Research is evolving on potential behavioral "
    "effects in children. Many health-conscious consumers prefer to avoid them."
)
REASON_REFINED_FLOUR = (
    "Refined flour is stripped of fiber and nutrients. Evidence shows it causes faster blood "
    "sugar spikes compared to whole grains. Impact varies, but those managing weight or blood "
    "sugar should be aware."
)
REASON_PALM_OIL = (
    "Palm oil is high in saturated fat. Research is mixed: some studies link it to increased "
    "cholesterol, while others show neutral effects. Health impact depends on overall diet and "
    "individual metabolism."
)

# ── Health impact bullets ───────────────────────────────────────────────────

HEALTH_IMPACT_TITLES: dict[str, str] = {
    "natural": "Good for Health",
    "processed": "Moderate Concerns",
    "synthetic": "Health Cautions",
}

HEALTH_IMPACT_PRESENT: dict[str, str] = {
    "natural": (
        "Contains {count} natural ingredient{plural} that provide nutritional benefits, "
        "vitamins, minerals, and support overall health without artificial processing."
    ),
    "processed": (
        "Contains {count} processed ingredient{plural} that have been refined or modified. "
        "These may lack fiber, nutrients, or contain added sugars and unhealthy fats."
    ),
    "synthetic": (
        "Contains {count} synthetic ingredient{plural} that are artificially created. These may "
        "include preservatives, artificial sweeteners, or flavor enhancers that some people "
        "prefer to avoid."
    ),
}

HEALTH_IMPACT_ABSENT: dict[str, str] = {
    "natural": "No natural ingredients found in this product.",
    "processed": "No processed ingredients found.",
    "synthetic": "No synthetic ingredients found.",
}

DISCLAIMER = (
    "This app summarizes public research and regulatory guidance. It does not provide medical "
    "advice. Always consult healthcare professionals for dietary concerns."
)

# ── Validation messages ─────────────────────────────────────────────────────

REASON_TOO_SHORT = "Input too short. Please enter a valid ingredient list."
REASON_NON_FOOD = (
    'This appears to be a non-food item (detected: "{keyword}"). '
    "Please scan or enter food product ingredients only."
)
REASON_NO_TEXT = "No text detected in image"


def build_health_impact_message(classification: str, count: int) -> str:
    if count <= 0:
        return HEALTH_IMPACT_ABSENT[classification]
    return HEALTH_IMPACT_PRESENT[classification].format(
        count=count, plural="s" if count > 1 else ""
    )


def build_allergen_reason(allergens: list[str]) -> str:
    return REASON_ALLERGEN.format(allergens=", ".join(allergens))
