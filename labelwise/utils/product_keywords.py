"""
Known branded products and their published ingredient lists.
When a scanned label mentions one of the aliases, the stored list replaces
whatever OCR read off the package.
"""

from __future__ import annotations

import logging
from typing import Optional

from labelwise.schemas.scan import ProductKeywordRecord

logger = logging.getLogger(__name__)

PRODUCT_KEYWORDS: tuple[ProductKeywordRecord, ...] = (
    # ── Chocolate ───────────────────────────────────────────────────────────
    ProductKeywordRecord(
        keywords=("dairy milk", "cadbury"),
        product_name="Dairy Milk Chocolate",
        ingredients="Sugar, Milk Solids, Cocoa Butter, Cocoa Solids, Emulsifiers (E442, E476), Flavoring",
        category="Chocolate",
    ),
    ProductKeywordRecord(
        keywords=("kit kat", "kitkat"),
        product_name="Kit Kat",
        ingredients=(
            "Sugar, Wheat Flour, Milk Solids, Cocoa Butter, Cocoa Mass, Vegetable Fat, Yeast, "
            "Emulsifier (Soya Lecithin), Raising Agent (Sodium Bicarbonate), Salt, "
            "Natural Vanilla Flavoring"
        ),
        category="Chocolate",
    ),
    ProductKeywordRecord(
        keywords=("snickers",),
        product_name="Snickers",
        ingredients=(
            "Milk Chocolate (Sugar, Cocoa Butter, Chocolate, Skim Milk, Lactose, Milkfat, "
            "Soy Lecithin), Peanuts, Corn Syrup, Sugar, Palm Oil, Skim Milk, Lactose, Salt, "
            "Egg Whites, Artificial Flavor"
        ),
        category="Chocolate",
    ),
    # ── Beverages ───────────────────────────────────────────────────────────
    ProductKeywordRecord(
        keywords=("coca cola", "coke", "coca-cola"),
        product_name="Coca-Cola",
        ingredients=(
            "Carbonated Water, Sugar, Caramel Color (E150d), Phosphoric Acid, "
            "Natural Flavors, Caffeine"
        ),
        category="Beverage",
    ),
    ProductKeywordRecord(
        keywords=("pepsi",),
        product_name="Pepsi",
        ingredients=(
            "Carbonated Water, High Fructose Corn Syrup, Caramel Color, Sugar, "
            "Phosphoric Acid, Caffeine, Citric Acid, Natural Flavor"
        ),
        category="Beverage",
    ),
    ProductKeywordRecord(
        keywords=("sprite",),
        product_name="Sprite",
        ingredients=(
            "Carbonated Water, Sugar, Citric Acid, Natural Lemon and Lime Flavors, "
            "Sodium Citrate, Sodium Benzoate (Preservative)"
        ),
        category="Beverage",
    ),
    ProductKeywordRecord(
        keywords=("mountain dew",),
        product_name="Mountain Dew",
        ingredients=(
            "Carbonated Water, High Fructose Corn Syrup, Concentrated Orange Juice, Citric Acid, "
            "Natural Flavor, Sodium Benzoate, Caffeine, Sodium Citrate, Gum Arabic, "
            "Calcium Disodium EDTA, Brominated Vegetable Oil, Yellow 5"
        ),
        category="Beverage",
    ),
    # ── Snacks ──────────────────────────────────────────────────────────────
    ProductKeywordRecord(
        keywords=("lays", "lay's"),
        product_name="Lay's Chips",
        ingredients="Potatoes, Vegetable Oil (Sunflower, Corn, and/or Canola Oil), Salt",
        category="Snack",
    ),
    ProductKeywordRecord(
        keywords=("doritos",),
        product_name="Doritos",
        ingredients=(
            "Corn, Vegetable Oil (Corn, Canola, and/or Sunflower Oil), Maltodextrin, Salt, "
            "Cheddar Cheese (Milk, Cheese Cultures, Salt, Enzymes), Whey, Monosodium Glutamate, "
            "Buttermilk, Romano Cheese, Whey Protein Concentrate, Onion Powder, Corn Flour, "
            "Natural and Artificial Flavor, Dextrose, Tomato Powder, Lactose, Spices, "
            "Artificial Color (Yellow 6, Yellow 5, Red 40), Lactic Acid, Citric Acid, Sugar, "
            "Garlic Powder, Skim Milk, Red and Green Bell Pepper Powder, Disodium Inosinate, "
            "Disodium Guanylate"
        ),
        category="Snack",
    ),
    ProductKeywordRecord(
        keywords=("pringles",),
        product_name="Pringles",
        ingredients=(
            "Dried Potatoes, Vegetable Oil (Corn, Cottonseed, High Oleic Soybean, and/or "
            "Sunflower Oil), Degerminated Yellow Corn Flour, Cornstarch, Rice Flour, "
            "Maltodextrin, Mono- and Diglycerides, Salt, Wheat Starch"
        ),
        category="Snack",
    ),
    ProductKeywordRecord(
        keywords=("cheetos",),
        product_name="Cheetos",
        ingredients=(
            "Enriched Corn Meal (Corn Meal, Ferrous Sulfate, Niacin, Thiamin Mononitrate, "
            "Riboflavin, Folic Acid), Vegetable Oil (Corn, Canola, and/or Sunflower Oil), "
            "Cheese Seasoning (Whey, Cheddar Cheese [Milk, Cheese Cultures, Salt, Enzymes], "
            "Canola Oil, Maltodextrin, Natural and Artificial Flavors, Salt, "
            "Whey Protein Concentrate, Monosodium Glutamate, Lactic Acid, Citric Acid, "
            "Artificial Color [Yellow 6]), Salt"
        ),
        category="Snack",
    ),
    # ── Cookies & biscuits ──────────────────────────────────────────────────
    ProductKeywordRecord(
        keywords=("oreo",),
        product_name="Oreo",
        ingredients=(
            "Sugar, Unbleached Enriched Flour (Wheat Flour, Niacin, Reduced Iron, "
            "Thiamine Mononitrate, Riboflavin, Folic Acid), Palm and/or Canola Oil, "
            "Cocoa (Processed with Alkali), High Fructose Corn Syrup, Leavening "
            "(Baking Soda and/or Calcium Phosphate), Salt, Soy Lecithin, Chocolate, "
            "Artificial Flavor"
        ),
        category="Cookie",
    ),
    ProductKeywordRecord(
        keywords=("parle-g", "parle g"),
        product_name="Parle-G",
        ingredients=(
            "Wheat Flour, Sugar, Edible Vegetable Oil (Palm), Invert Sugar Syrup, "
            "Leavening Agents (503(ii), 500(ii)), Milk Solids, Salt, Emulsifier (322), "
            "Dough Conditioner (223)"
        ),
        category="Biscuit",
    ),
    # ── Instant noodles ─────────────────────────────────────────────────────
    ProductKeywordRecord(
        keywords=("maggi", "maggie"),
        product_name="Maggi Noodles",
        ingredients=(
            "Wheat Flour (Maida), Palm Oil, Salt, Wheat Gluten, Guar Gum, Acidity Regulators "
            "(501(i), 500(i), 330), Humectant (412), Colour (101(i)), Mixed Spices (Onion Powder, "
            "Coriander Powder, Turmeric Powder, Red Chilli Powder, Garlic Powder, Cumin Powder, "
            "Ginger Powder, Black Pepper Powder), Sugar, Flavour Enhancers (635, 627), "
            "Hydrolysed Groundnut Protein, Starch, Thickener (508), Colour (150d)"
        ),
        category="Instant Noodles",
    ),
    ProductKeywordRecord(
        keywords=("top ramen", "nissin"),
        product_name="Top Ramen",
        ingredients=(
            "Enriched Wheat Flour (Wheat Flour, Niacin, Reduced Iron, Thiamine Mononitrate, "
            "Riboflavin, Folic Acid), Vegetable Oil (Canola, Cottonseed, Palm), TBHQ, Salt, "
            "Soy Sauce (Water, Wheat, Soybeans, Salt), Potassium Carbonate, Sodium Phosphate, "
            "Sodium Carbonate, Turmeric"
        ),
        category="Instant Noodles",
    ),
    # ── Cereal & bread ──────────────────────────────────────────────────────
    ProductKeywordRecord(
        keywords=("corn flakes", "kelloggs"),
        product_name="Corn Flakes",
        ingredients=(
            "Milled Corn, Sugar, Malt Flavor, High Fructose Corn Syrup, Salt, BHT for Freshness, "
            "Iron (Ferric Phosphate), Niacinamide, Vitamin B6 (Pyridoxine Hydrochloride), "
            "Vitamin B2 (Riboflavin), Vitamin B1 (Thiamin Hydrochloride), Folic Acid, "
            "Vitamin D3, Vitamin B12"
        ),
        category="Cereal",
    ),
    ProductKeywordRecord(
        keywords=("white bread", "sandwich bread"),
        product_name="White Bread",
        ingredients=(
            "Enriched Wheat Flour (Flour, Malted Barley Flour, Niacin, Reduced Iron, "
            "Thiamine Mononitrate, Riboflavin, Folic Acid), Water, High Fructose Corn Syrup, "
            "Yeast, Soybean Oil, Salt, Wheat Gluten, Dough Conditioners (Sodium Stearoyl "
            "Lactylate, Monoglycerides, DATEM, Enzymes, Ascorbic Acid), Calcium Propionate "
            "(Preservative), Soy Lecithin"
        ),
        category="Bread",
    ),
    # ── Dairy ───────────────────────────────────────────────────────────────
    ProductKeywordRecord(
        keywords=("amul milk",),
        product_name="Amul Milk",
        ingredients="Milk, Vitamin A, Vitamin D3",
        category="Dairy",
    ),
    # ── Energy drinks ───────────────────────────────────────────────────────
    ProductKeywordRecord(
        keywords=("red bull", "redbull"),
        product_name="Red Bull",
        ingredients=(
            "Carbonated Water, Sucrose, Glucose, Citric Acid, Taurine, Sodium Bicarbonate, "
            "Magnesium Carbonate, Caffeine, Niacinamide, Calcium Pantothenate, Pyridoxine HCl, "
            "Vitamin B12, Natural and Artificial Flavors, Colors"
        ),
        category="Energy Drink",
    ),
    ProductKeywordRecord(
        keywords=("monster energy", "monster"),
        product_name="Monster Energy",
        ingredients=(
            "Carbonated Water, Sugar, Glucose, Citric Acid, Natural Flavors, Taurine, "
            "Sodium Citrate, Color Added, Panax Ginseng Root Extract, L-Carnitine, Caffeine, "
            "Sorbic Acid, Benzoic Acid, Niacinamide, Sucralose, Salt, D-Glucuronolactone, "
            "Inositol, Guarana Extract, Pyridoxine Hydrochloride, Riboflavin, Maltodextrin, "
            "Cyanocobalamin"
        ),
        category="Energy Drink",
    ),
)


def search_product_keywords(text: Optional[str]) -> Optional[ProductKeywordRecord]:
    """
    Return the first product whose alias appears in `text`, scanning products
    and their aliases in table order. Text shorter than 3 characters never matches.
    """
    if not text or len(text.strip()) < 3:
        return None

    lowered = text.lower()
    for product in PRODUCT_KEYWORDS:
        for keyword in product.keywords:
            if keyword in lowered:
                logger.info("Product keyword match: %r → %s", keyword, product.product_name)
                return product
    return None


def get_product_categories() -> list[str]:
    """Sorted, de-duplicated list of product categories."""
    return sorted({product.category for product in PRODUCT_KEYWORDS})


def search_products_by_category(category: str) -> list[ProductKeywordRecord]:
    wanted = category.strip().lower()
    return [p for p in PRODUCT_KEYWORDS if p.category.lower() == wanted]
