"""
Keyword tables for the food gate, the heuristic classifier tiers and the OCR
text helpers. Tables are tuples so their scan order is fixed at import.
"""

# Any of these present → the text is food, no further checks.
# Chemical names of additives are listed on purpose: they are food ingredients.
FOOD_KEYWORDS: tuple[str, ...] = (
    # basics
    "flour", "sugar", "salt", "water", "oil", "butter", "milk", "egg",
    "wheat", "corn", "rice", "oat", "barley", "soy", "protein",
    # additive classes
    "vitamin", "mineral", "preservative", "flavor", "color", "starch",
    "yeast", "baking", "spice", "herb", "extract", "acid", "syrup",
    "sweetener", "emulsifier", "thickener", "stabilizer", "lecithin",
    "gelatin", "pectin", "agar", "carrageenan", "gum", "fiber",
    # named additives
    "monosodium glutamate", "msg", "sodium benzoate", "potassium sorbate",
    "calcium propionate", "ascorbic acid", "citric acid", "malic acid",
    "xanthan gum", "guar gum", "modified starch", "maltodextrin",
    "high fructose corn syrup", "hfcs", "dextrose", "fructose", "glucose",
    "aspartame", "sucralose", "stevia", "erythritol", "sorbitol",
    "caramel color", "annatto", "turmeric", "paprika extract",
    "natural flavor", "artificial flavor", "flavoring",
    "monoglyceride", "diglyceride", "polysorbate",
    "sodium nitrite", "sodium nitrate", "bht", "bha",
    "phosphoric acid", "lactic acid", "acetic acid",
    # label vocabulary
    "ingredient", "nutrition", "calories", "carbohydrate", "fat", "sodium",
    "edible", "food", "beverage", "drink", "snack", "meal",
)

# Scanned in order; the first hit rejects the text.
NON_FOOD_KEYWORDS: tuple[str, ...] = (
    # household cleaning
    "detergent", "bleach", "disinfectant", "sanitizer", "floor cleaner", "toilet cleaner",
    # personal care
    "shampoo", "conditioner", "body wash", "hand soap", "face wash",
    "lipstick", "mascara", "foundation", "nail polish", "perfume", "cologne",
    "deodorant", "antiperspirant", "toothpaste", "mouthwash", "dental floss",
    # electronics
    "battery", "lithium-ion", "rechargeable battery", "charger", "power adapter",
    "electronic device", "computer", "laptop", "smartphone", "tablet device",
    # textiles
    "polyester fabric", "cotton fabric", "textile", "machine washable", "tumble dry",
    "clothing item", "garment",
    # tools
    "screwdriver", "wrench", "hammer", "power tool", "drill bit",
    # automotive
    "motor oil", "engine oil", "gasoline", "diesel fuel", "antifreeze", "brake fluid",
    # stationery
    "printer paper", "copy paper", "stapler", "paper clip",
    # prescription medicine
    "prescription drug", "pharmaceutical", "medication tablet",
)

# A non-food keyword is skipped when one of its exception phrases is also present.
# Only consulted for text with no food keyword, so phrases must avoid FOOD_KEYWORDS.
NON_FOOD_EXCEPTIONS: dict[str, tuple[str, ...]] = {
    "foundation": ("heart foundation", "foundation approved"),
    "pharmaceutical": ("pharmaceutical grade",),
}

# ── Heuristic classifier tiers (natural is checked before synthetic) ────────

NATURAL_HINTS: tuple[str, ...] = ("natural", "water", "salt", "spice", "herb")

SYNTHETIC_HINTS: tuple[str, ...] = (
    "acid", "glutamate", "propionate", "benzoate",
    "artificial", "synthetic", "sucralose", "aspartame",
)

# ── OCR text indicators ─────────────────────────────────────────────────────

OCR_FOOD_INDICATORS: tuple[str, ...] = (
    "ingredients", "nutrition facts", "serving size", "calories",
    "protein", "carbohydrate", "fat", "sodium", "sugar",
    "flour", "milk", "egg", "oil", "salt", "water",
    "preservative", "flavor", "color", "vitamin", "mineral",
)

OCR_NON_FOOD_INDICATORS: tuple[str, ...] = (
    "shampoo", "detergent", "battery", "electronic",
    "machine washable", "fabric", "perfume", "cologne",
)
