"""
Static reference data: sample products, cited data sources and the
ingredient guesses the visual analyser attaches to each colour category.
"""

from labelwise.schemas.analysis import SampleProduct, Source

SAMPLE_PRODUCTS: tuple[SampleProduct, ...] = (
    SampleProduct(
        id="packaged-bread",
        name="Packaged Bread",
        category="Bakery",
        ingredient_list=(
            "Enriched wheat flour (wheat flour, malted barley flour, niacin, reduced iron, "
            "thiamine mononitrate, riboflavin, folic acid), water, high fructose corn syrup, "
            "yeast, soybean oil, salt, calcium propionate (preservative), monoglycerides, datem, "
            "calcium sulfate, soy lecithin"
        ),
    ),
    SampleProduct(
        id="instant-noodles",
        name="Instant Noodles",
        category="Packaged Food",
        ingredient_list=(
            "Maida (all-purpose flour), palm oil, salt, wheat gluten, onion (spice), "
            "garlic (spice), turmeric (spice), coriander (spice), chili (spice), flavor enhancers "
            "(monosodium glutamate, disodium inosinate, disodium guanylate), thickeners "
            "(modified starch, xanthan gum)"
        ),
    ),
    SampleProduct(
        id="protein-bar",
        name="Protein Bar",
        category="Nutrition",
        ingredient_list=(
            "Protein blend (whey protein isolate, milk protein isolate), soluble corn fiber, "
            "almonds, water, erythritol, natural flavors, cocoa butter, sea salt, "
            "sunflower lecithin, sucralose, steviol glycosides"
        ),
    ),
    SampleProduct(
        id="soft-drink",
        name="Soft Drink",
        category="Beverage",
        ingredient_list=(
            "Carbonated water, high fructose corn syrup, caramel color, phosphoric acid, "
            "natural flavors, caffeine, citric acid"
        ),
    ),
)

SAMPLES_BY_ID: dict[str, SampleProduct] = {sample.id: sample for sample in SAMPLE_PRODUCTS}

DATA_SOURCES: tuple[Source, ...] = (
    Source(
        name="FDA (Food & Drug Administration)",
        description="Food additive status lists and GRAS notices.",
        url="https://www.fda.gov/food",
    ),
    Source(
        name="Nutrition.gov",
        description="USDA consumer nutrition guidance.",
        url="https://www.nutrition.gov",
    ),
    Source(
        name="EFSA (European Food Safety Authority)",
        description="Scientific opinions on food additives and E-numbers.",
        url="https://www.efsa.europa.eu",
    ),
    Source(
        name="WHO (World Health Organization)",
        description="Guidelines on sugar, sodium and fat intake.",
        url="https://www.who.int/health-topics/nutrition",
    ),
    Source(
        name="PubChem",
        description="Chemical identities of food ingredients.",
        url="https://pubchem.ncbi.nlm.nih.gov",
    ),
    Source(
        name="NIH / NCBI",
        description="Peer-reviewed research on ingredient health effects.",
        url="https://www.ncbi.nlm.nih.gov",
    ),
)

# Visual food type → likely ingredients. Unlisted types use VISUAL_FALLBACK_INGREDIENTS.
VISUAL_TYPE_INGREDIENTS: dict[str, tuple[str, ...]] = {
    "Baked Goods / Grains": ("Wheat Flour", "Sugar", "Yeast", "Salt", "Water", "Vegetable Oil"),
    "Dairy / Flour Product": ("Milk", "Flour", "Sugar", "Salt", "Butter", "Cream"),
    "Cheese / Snack / Oil": ("Corn", "Vegetable Oil", "Salt", "Cheese Powder", "Flavor Enhancers"),
    "Meat / Tomato Product": ("Tomato Paste", "Salt", "Sugar", "Spices", "Preservatives"),
    "Vegetable / Herb Product": ("Vegetables", "Herbs", "Salt", "Oil", "Vinegar"),
    "Chocolate / Coffee / Dark Sauce": ("Cocoa", "Sugar", "Milk", "Soy Sauce", "Caramel Color"),
    "Beverage / Liquid": ("Water", "Sugar", "Flavoring", "Preservatives", "Citric Acid"),
}
VISUAL_FALLBACK_INGREDIENTS: tuple[str, ...] = (
    "Various Ingredients", "Preservatives", "Flavor Enhancers",
)
