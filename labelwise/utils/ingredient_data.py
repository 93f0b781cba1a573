"""
Curated ingredient knowledge base — single source of truth for ingredient
classification metadata. The classifier imports exclusively from here.

Matching is by substring containment, so the classifier orders these records
by descending key length (ties keep declaration order below). A generic key
such as "wheat flour" can therefore never shadow "enriched wheat flour".
"""

from labelwise.schemas.analysis import IngredientRecord

INGREDIENT_RECORDS: tuple[IngredientRecord, ...] = (
    # ── Flours & grains ─────────────────────────────────────────────────────
    IngredientRecord(
        key="wheat flour",
        classification="processed",
        chemical_name="Refined Wheat Flour",
        why_used="It's inexpensive, creates a desirable texture (chewy and soft), and is easy to process.",
        benefits=(
            "Provides carbohydrates for energy",
            "Source of some B vitamins and iron (when enriched)",
            "Easy to digest for most people",
        ),
        considerations=(
            "Low in fiber compared to whole wheat",
            "Stripped of many vitamins and minerals during refining",
            "High glycemic index may cause blood sugar spikes",
            "Contains gluten which some people cannot tolerate",
        ),
        who_should_care=(
            "Individuals managing blood sugar levels, those looking for higher fiber intake, "
            "people with celiac disease or gluten sensitivity, or anyone prioritizing nutrient-dense foods."
        ),
        allergens=("Wheat", "Gluten"),
    ),
    IngredientRecord(
        key="enriched wheat flour",
        classification="processed",
        chemical_name="Enriched Refined Wheat Flour",
        why_used="Refined flour with added vitamins and minerals to replace nutrients lost during processing.",
        benefits=(
            "Provides carbohydrates for energy",
            "Fortified with B vitamins (niacin, thiamine, riboflavin, folic acid) and iron",
            "Helps prevent nutrient deficiencies",
        ),
        considerations=(
            "Still low in fiber compared to whole wheat",
            "High glycemic index may cause blood sugar spikes",
            "Contains gluten",
            "Enrichment doesn't replace all lost nutrients from refining",
        ),
        who_should_care=(
            "Individuals managing blood sugar levels, those looking for higher fiber intake, "
            "people with celiac disease or gluten sensitivity."
        ),
        allergens=("Wheat", "Gluten"),
    ),
    IngredientRecord(
        key="maida",
        classification="processed",
        chemical_name="Refined All-Purpose Flour (Maida)",
        why_used="Creates desirable texture, inexpensive, easy to process.",
        benefits=("Provides carbohydrates for energy", "Creates soft, chewy texture"),
        considerations=(
            "Highly refined with almost no fiber",
            "Stripped of all nutrients during processing",
            "Very high glycemic index (causes rapid blood sugar spikes)",
            "May contribute to weight gain",
            "Linked to increased risk of diabetes and heart disease",
            "Can cause digestive issues",
            "Contains gluten",
        ),
        who_should_care=(
            "People with diabetes or prediabetes, those managing weight, individuals with celiac "
            "disease or gluten sensitivity, anyone prioritizing nutrient-dense foods."
        ),
        allergens=("Wheat", "Gluten"),
    ),
    IngredientRecord(
        key="wheat gluten",
        classification="processed",
        chemical_name="Vital Wheat Gluten",
        why_used="Provides elasticity and chewiness to doughs and noodles.",
        benefits=("High in protein", "Improves texture and chewiness", "Helps dough hold together"),
        considerations=(
            "Problematic for people with celiac disease",
            "Can trigger gluten sensitivity",
            "May cause digestive issues",
            "Highly processed protein isolate",
        ),
        who_should_care=(
            "People with celiac disease, those with gluten sensitivity or intolerance, "
            "individuals with wheat allergies."
        ),
        allergens=("Wheat", "Gluten"),
    ),
    # ── Water & salts ───────────────────────────────────────────────────────
    IngredientRecord(
        key="water",
        classification="natural",
        why_used="Essential for hydration and as a base for mixing ingredients.",
        benefits=(
            "Essential for life and bodily functions",
            "Zero calories",
            "Helps with hydration",
            "No additives or processing",
        ),
    ),
    IngredientRecord(
        key="carbonated water",
        classification="natural",
        why_used="Provides fizz and refreshing sensation.",
        benefits=(
            "Hydration",
            "Zero calories",
            "No sugar",
            "May help with digestion",
            "Satisfying alternative to sugary sodas",
        ),
        considerations=(
            "May cause bloating or gas in some people",
            "Can erode tooth enamel if consumed in large amounts (due to carbonic acid)",
            "May trigger IBS symptoms in sensitive individuals",
        ),
        who_should_care="People with IBS or digestive sensitivities, those concerned about dental health.",
    ),
    IngredientRecord(
        key="salt",
        classification="natural",
        why_used="Enhances flavor and acts as a preservative.",
        benefits=(
            "Essential mineral (sodium) needed for nerve and muscle function",
            "Helps maintain fluid balance",
            "Flavor enhancement",
            "Natural preservative",
        ),
        considerations=(
            "Excessive intake can lead to high blood pressure",
            "May increase risk of heart disease and stroke per American Heart Association",
            "Can cause water retention",
            "Linked to kidney problems in excess",
            "FDA recommends limiting sodium to less than 2,300mg per day (about 1 teaspoon of salt)",
        ),
        who_should_care=(
            "Individuals with hypertension, heart conditions, kidney disease, or those on "
            "sodium-restricted diets."
        ),
    ),
    IngredientRecord(
        key="sea salt",
        classification="natural",
        why_used="Enhances flavor, contains trace minerals.",
        benefits=(
            "Contains trace minerals (magnesium, calcium, potassium)",
            "Less processed than table salt",
            "Natural flavor enhancement",
        ),
        considerations=(
            "Still high in sodium",
            "Excessive intake can lead to high blood pressure",
            "Trace minerals present in very small amounts",
        ),
        who_should_care="Individuals with hypertension, heart conditions, or on sodium-restricted diets.",
    ),
    # ── Sugars & sweeteners ─────────────────────────────────────────────────
    IngredientRecord(
        key="high fructose corn syrup",
        classification="processed",
        chemical_name="High Fructose Corn Syrup (HFCS)",
        why_used="Sweetener that is cheaper than sugar and extends shelf life.",
        benefits=(
            "Provides sweetness and energy",
            "Cost-effective for manufacturers",
            "Extends product shelf life",
        ),
        considerations=(
            "High in calories with no nutritional value",
            "May contribute to weight gain and obesity",
            "Linked to increased risk of type 2 diabetes",
            "Associated with non-alcoholic fatty liver disease when consumed in excess",
            "Can increase triglyceride levels",
            "Dietary Guidelines for Americans recommend limiting added sugars to less than 10% of daily calories",
        ),
        who_should_care=(
            "Anyone watching their sugar intake, managing weight, people with diabetes or "
            "prediabetes, those concerned about metabolic health."
        ),
    ),
    IngredientRecord(
        key="sugar",
        classification="processed",
        chemical_name="Sucrose",
        why_used="Provides sweetness and enhances flavor.",
        benefits=("Quick source of energy", "Enhances taste and palatability"),
        considerations=(
            "High in calories with no nutritional value (empty calories)",
            "Can cause blood sugar spikes",
            "Linked to tooth decay and cavities",
            "Excessive consumption associated with obesity, type 2 diabetes, and heart disease",
            "American Heart Association recommends limiting added sugars to 25g/day for women and 36g/day for men",
        ),
        who_should_care=(
            "People with diabetes, those managing weight, individuals concerned about dental "
            "health, anyone trying to reduce sugar intake."
        ),
    ),
    IngredientRecord(
        key="erythritol",
        classification="processed",
        chemical_name="Erythritol",
        why_used="Sugar alcohol used as a low-calorie sweetener.",
        benefits=(
            "Very low calorie (0.2 calories per gram)",
            "Does not spike blood sugar or insulin",
            "Tooth-friendly (doesn't cause cavities)",
            "About 70% as sweet as sugar",
        ),
        considerations=(
            "May cause digestive discomfort (bloating, gas) in large amounts",
            "Can have a cooling aftertaste",
            "Laxative effect if consumed in excess",
        ),
        who_should_care=(
            "Individuals managing blood sugar (positive), those sensitive to sugar alcohols, "
            "people with digestive issues."
        ),
        evolving_science=(
            "Recent research has raised questions about potential cardiovascular effects of "
            "erythritol, though more studies are needed to confirm these findings. Most health "
            "authorities still consider it safe at typical consumption levels."
        ),
    ),
    IngredientRecord(
        key="sucralose",
        classification="synthetic",
        chemical_name="Sucralose",
        why_used="Artificial sweetener that is 600 times sweeter than sugar with no calories.",
        benefits=(
            "Zero calories",
            "Does not affect blood sugar or insulin levels",
            "Heat-stable for cooking",
        ),
        considerations=(
            "Artificial sweetener some prefer to avoid",
            "May alter gut bacteria composition",
            "Possible effects on glucose metabolism with regular use",
            "May increase cravings for sweet foods",
        ),
        who_should_care=(
            "Those avoiding artificial ingredients, people concerned about gut health, "
            "individuals preferring natural alternatives."
        ),
        evolving_science=(
            "Emerging research suggests sucralose may affect gut microbiome and glucose "
            "metabolism, though it's still approved as safe by regulatory agencies. Long-term "
            "effects are still being studied."
        ),
    ),
    IngredientRecord(
        key="aspartame",
        classification="synthetic",
        chemical_name="Aspartame (E951)",
        why_used="Artificial sweetener about 200 times sweeter than sugar.",
        benefits=("Very low calorie", "Does not raise blood sugar"),
        considerations=(
            "Contains phenylalanine (dangerous for people with phenylketonuria)",
            "Some individuals report headaches",
            "Not heat-stable",
        ),
        who_should_care="People with phenylketonuria (PKU), those avoiding artificial sweeteners.",
        evolving_science=(
            "In 2023 IARC classified aspartame as 'possibly carcinogenic', while JECFA kept the "
            "acceptable daily intake unchanged. Evidence remains limited and under review."
        ),
    ),
    IngredientRecord(
        key="acesulfame potassium",
        classification="synthetic",
        chemical_name="Acesulfame K (E950)",
        why_used="Calorie-free artificial sweetener, often blended with sucralose or aspartame.",
        benefits=("Zero calories", "Heat-stable", "Does not affect blood sugar"),
        considerations=(
            "Artificial sweetener some prefer to avoid",
            "Can leave a bitter aftertaste",
            "Limited long-term human studies",
        ),
        who_should_care="Those avoiding artificial sweeteners.",
    ),
    IngredientRecord(
        key="steviol glycosides",
        classification="processed",
        chemical_name="Steviol Glycosides (from Stevia)",
        why_used="Natural-origin sweetener extracted from stevia plant.",
        benefits=(
            "Zero calories",
            "Does not affect blood sugar",
            "Derived from natural plant source",
            "200-300 times sweeter than sugar",
        ),
        considerations=(
            "Can have a bitter or licorice-like aftertaste",
            "Highly processed despite natural origin",
            "May cause digestive issues in some people",
        ),
        who_should_care=(
            "People with low blood pressure, those sensitive to stevia, individuals preferring "
            "less processed sweeteners."
        ),
    ),
    IngredientRecord(
        key="soluble corn fiber",
        classification="processed",
        chemical_name="Soluble Corn Fiber",
        why_used="Adds fiber and sweetness while reducing calories.",
        benefits=(
            "Provides dietary fiber",
            "Low glycemic impact",
            "Prebiotic properties (feeds beneficial gut bacteria)",
        ),
        considerations=(
            "Highly processed",
            "May cause digestive issues (gas, bloating) in some people",
            "Not the same as natural fiber from whole foods",
        ),
        who_should_care=(
            "People with digestive sensitivities, those avoiding GMOs, individuals preferring "
            "whole food fiber sources."
        ),
    ),
    IngredientRecord(
        key="maltodextrin",
        classification="processed",
        chemical_name="Maltodextrin",
        why_used="Inexpensive filler and thickener that improves texture and shelf life.",
        benefits=("Easily digestible carbohydrate", "Improves texture and mouthfeel"),
        considerations=(
            "Very high glycemic index",
            "Nutritionally empty",
            "Often derived from corn",
        ),
        who_should_care="People managing blood sugar, those with diabetes.",
    ),
    # ── Leavening, fermentation, stimulants ─────────────────────────────────
    IngredientRecord(
        key="yeast",
        classification="natural",
        why_used="Leavening agent that helps dough rise through natural fermentation.",
        benefits=(
            "Natural fermentation process",
            "Provides B vitamins",
            "Source of protein and minerals",
            "Improves digestibility of grains",
        ),
        considerations=(
            "May cause issues for people with yeast allergies",
            "Can trigger symptoms in those with candida overgrowth",
        ),
        who_should_care="Individuals with yeast allergies or sensitivities, people managing candida issues.",
    ),
    IngredientRecord(
        key="caffeine",
        classification="natural",
        why_used="Stimulant that provides energy boost and enhances alertness.",
        benefits=(
            "Increased alertness and focus",
            "Improved physical performance",
            "May boost metabolism",
            "Enhances mood",
        ),
        considerations=(
            "Can cause jitters, anxiety, and restlessness",
            "May disrupt sleep patterns",
            "Can lead to dependency and withdrawal symptoms",
            "May increase heart rate and blood pressure",
        ),
        who_should_care=(
            "Those sensitive to caffeine, people with anxiety disorders, individuals with heart "
            "conditions, pregnant women, those managing sleep issues."
        ),
    ),
    # ── Preservatives & acidulants ──────────────────────────────────────────
    IngredientRecord(
        key="calcium propionate",
        classification="synthetic",
        chemical_name="Calcium Propionate (E282)",
        why_used="Preservative that prevents mold and bacterial growth.",
        benefits=(
            "Extends shelf life significantly",
            "Generally recognized as safe by FDA",
            "Prevents food waste",
        ),
        considerations=(
            "Some individuals report headaches or migraines",
            "May cause digestive issues in sensitive people",
            "Possible link to behavioral changes in children (limited evidence)",
            "Synthetic additive some prefer to avoid",
        ),
        who_should_care=(
            "Individuals who report sensitivity to preservatives, parents of children with "
            "behavioral concerns, those preferring to avoid synthetic additives."
        ),
    ),
    IngredientRecord(
        key="sodium benzoate",
        classification="synthetic",
        chemical_name="Sodium Benzoate (E211)",
        why_used="Preservative that inhibits yeasts, moulds and bacteria in acidic foods and drinks.",
        benefits=("Extends shelf life", "Effective at low concentrations"),
        considerations=(
            "Can form small amounts of benzene when combined with vitamin C (ascorbic acid)",
            "Possible link to hyperactivity in children when combined with certain colors",
            "Synthetic additive",
        ),
        who_should_care="Parents of young children, people sensitive to preservatives.",
    ),
    IngredientRecord(
        key="potassium sorbate",
        classification="synthetic",
        chemical_name="Potassium Sorbate (E202)",
        why_used="Preservative that inhibits mold and yeast growth.",
        benefits=("Extends shelf life", "Considered one of the better-tolerated preservatives"),
        considerations=("Rare skin or allergic reactions", "Synthetic additive"),
        who_should_care="Those avoiding synthetic preservatives.",
    ),
    IngredientRecord(
        key="phosphoric acid",
        classification="synthetic",
        chemical_name="Phosphoric Acid (E338)",
        why_used="Provides tangy flavor and acts as a preservative and acidulant.",
        benefits=("Flavor enhancement", "Preservative properties", "Prevents bacterial growth"),
        considerations=(
            "May interfere with calcium absorption",
            "Linked to lower bone mineral density",
            "Can contribute to kidney problems with excessive consumption",
            "May erode tooth enamel",
        ),
        who_should_care=(
            "Individuals concerned about bone health, people with kidney disease or at risk, "
            "those with osteoporosis, children and adolescents building bone mass."
        ),
    ),
    IngredientRecord(
        key="citric acid",
        classification="processed",
        chemical_name="Citric Acid (E330)",
        why_used="Provides tartness, acts as preservative, and enhances flavor.",
        benefits=("Natural preservative", "Enhances flavor", "Antioxidant properties"),
        considerations=(
            "Usually manufactured from mold (Aspergillus niger) rather than citrus fruits",
            "May cause tooth enamel erosion in high concentrations",
            "May cause digestive upset in large amounts",
        ),
        who_should_care=(
            "People with citrus allergies, those with sensitive teeth, individuals with "
            "digestive sensitivities."
        ),
    ),
    IngredientRecord(
        key="tbhq",
        classification="synthetic",
        chemical_name="tert-Butylhydroquinone (E319)",
        why_used="Antioxidant preservative that keeps oils and fried foods from going rancid.",
        benefits=("Extends shelf life of fats and oils",),
        considerations=(
            "Petroleum-derived synthetic antioxidant",
            "Strict legal limits on the amount allowed",
            "Some animal studies raise questions at high doses",
        ),
        who_should_care="Those avoiding synthetic preservatives.",
    ),
    # ── Flavor enhancers & flavorings ───────────────────────────────────────
    IngredientRecord(
        key="monosodium glutamate",
        classification="synthetic",
        chemical_name="Monosodium Glutamate (MSG)",
        why_used=(
            "Flavor enhancer that intensifies savory (umami) taste, allowing manufacturers to use "
            "less natural ingredients."
        ),
        benefits=(
            "Enhances savory flavor significantly",
            "Allows for reduced sodium in some products",
            "Generally recognized as safe by FDA",
        ),
        considerations=(
            "Some individuals report sensitivity symptoms (headaches, flushing, sweating)",
            "May increase appetite and food intake",
            "Can mask poor quality ingredients",
        ),
        who_should_care=(
            "Individuals who report sensitivity to MSG, those trying to control appetite, people "
            "preferring whole food ingredients, anyone avoiding synthetic additives."
        ),
        evolving_science=(
            "Research on MSG sensitivity is mixed: while some individuals report symptoms, "
            "large-scale studies haven't consistently linked it to adverse reactions in the "
            "general population when consumed at typical levels."
        ),
    ),
    IngredientRecord(
        key="disodium inosinate",
        classification="synthetic",
        chemical_name="Disodium Inosinate (E631)",
        why_used="Flavor enhancer that works synergistically with MSG to boost savory taste.",
        benefits=("Enhances umami flavor", "Allows for reduced use of other flavor enhancers"),
        considerations=(
            "Often used alongside MSG",
            "May cause reactions in people sensitive to flavor enhancers",
            "Derived from animal or fish sources (concern for vegetarians)",
        ),
        who_should_care=(
            "Vegetarians and vegans, people sensitive to flavor enhancers, those avoiding "
            "synthetic additives."
        ),
    ),
    IngredientRecord(
        key="disodium guanylate",
        classification="synthetic",
        chemical_name="Disodium Guanylate (E627)",
        why_used="Flavor enhancer that amplifies savory taste, often used with MSG.",
        benefits=("Enhances umami flavor", "Effective at low concentrations"),
        considerations=(
            "Often combined with MSG",
            "Not recommended for people with gout (contains purines)",
            "Derived from yeast or fish",
        ),
        who_should_care=(
            "People with gout or high uric acid levels, those sensitive to flavor enhancers, "
            "individuals avoiding synthetic additives."
        ),
    ),
    IngredientRecord(
        key="natural flavors",
        classification="processed",
        chemical_name="Natural Flavoring Substances",
        why_used="Enhances or adds specific flavors to products.",
        benefits=(
            "Derived from natural sources (plants, animals)",
            "Enhances taste without adding calories",
            "Allows for consistent flavor",
        ),
        considerations=(
            'Highly processed despite "natural" label',
            "Can contain dozens of chemical compounds",
            "Vague term that doesn't specify exact ingredients",
        ),
        who_should_care=(
            "People with food allergies, those preferring whole foods, individuals sensitive to "
            "additives."
        ),
    ),
    IngredientRecord(
        key="artificial flavors",
        classification="synthetic",
        chemical_name="Artificial Flavoring Substances",
        why_used="Provides specific flavors at lower cost than natural alternatives.",
        benefits=("Cost-effective", "Consistent flavor", "Stable shelf life"),
        considerations=(
            "Synthetic chemicals created in laboratories",
            "May contain petroleum-derived compounds",
            "No nutritional value",
            "Long-term health effects not fully understood",
        ),
        who_should_care=(
            "Those avoiding synthetic additives, people with chemical sensitivities, anyone "
            "preferring natural ingredients."
        ),
    ),
    IngredientRecord(
        key="caramel color",
        classification="processed",
        chemical_name="Caramel Color (E150)",
        why_used="Provides brown color to beverages and foods.",
        benefits=("Aesthetic appeal", "Consistent color", "Cost-effective"),
        considerations=(
            "Some types (Class III and IV) may contain 4-methylimidazole (4-MEI), a potential carcinogen",
            "Purely cosmetic with no nutritional value",
            "Highly processed",
        ),
        who_should_care=(
            "Those preferring to minimize processed additives, people concerned about potential "
            "carcinogens, anyone prioritizing whole foods."
        ),
    ),
    # ── Fats & oils ─────────────────────────────────────────────────────────
    IngredientRecord(
        key="palm oil",
        classification="processed",
        why_used="Used for frying and adding texture; stable at high temperatures with long shelf life.",
        benefits=(
            "Stable at high temperatures for cooking",
            "Long shelf life reduces food waste",
            "Source of vitamin E (tocotrienols and tocopherols)",
            "Does not require hydrogenation (no trans fats)",
        ),
        considerations=(
            "High in saturated fat (approximately 50% of total fat content)",
            "May raise LDL (bad) cholesterol levels",
            "Environmental concerns (deforestation, habitat destruction)",
        ),
        who_should_care=(
            "Those monitoring saturated fat intake, people with high cholesterol or heart disease, "
            "environmentally conscious consumers."
        ),
    ),
    IngredientRecord(
        key="soybean oil",
        classification="processed",
        chemical_name="Refined Soybean Oil",
        why_used="Inexpensive cooking oil that adds moisture and extends shelf life.",
        benefits=("Source of polyunsaturated fats", "Contains vitamin E", "Neutral flavor"),
        considerations=(
            "Highly processed and refined",
            "High in omega-6 fatty acids",
            "Often genetically modified",
            "May contain trans fats if partially hydrogenated",
        ),
        who_should_care=(
            "People concerned about omega-6 to omega-3 ratio, those avoiding GMOs, individuals "
            "with soy allergies."
        ),
        allergens=("Soy",),
    ),
    IngredientRecord(
        key="cocoa butter",
        classification="natural",
        chemical_name="Theobroma Cacao Seed Butter",
        why_used="Provides creamy texture and chocolate flavor.",
        benefits=(
            "Contains healthy fats",
            "Rich in antioxidants",
            "Natural source of polyphenols",
        ),
        considerations=(
            "High in calories and saturated fat",
            "Can contribute to weight gain if consumed in excess",
        ),
        who_should_care="Those managing weight or saturated fat intake.",
    ),
    # ── Proteins ────────────────────────────────────────────────────────────
    IngredientRecord(
        key="whey protein isolate",
        classification="processed",
        why_used="High-quality protein source for muscle building and recovery.",
        benefits=(
            "High protein content (90%+ protein)",
            "Complete amino acid profile",
            "Fast absorption for muscle recovery",
            "Low in lactose",
        ),
        considerations=(
            "May cause digestive issues for some people",
            "Processed dairy product",
            "Not suitable for vegans",
        ),
        who_should_care=(
            "Athletes and fitness enthusiasts (positive), people with dairy sensitivities, vegans."
        ),
        allergens=("Milk", "Dairy"),
    ),
    IngredientRecord(
        key="milk protein isolate",
        classification="processed",
        chemical_name="Milk Protein Isolate",
        why_used="Concentrated protein source with slow and fast-digesting proteins.",
        benefits=(
            "High protein content",
            "Contains both whey and casein proteins",
            "Provides sustained amino acid release",
        ),
        considerations=(
            "Contains lactose (may cause issues for lactose-intolerant individuals)",
            "Processed dairy product",
            "Not suitable for vegans",
        ),
        who_should_care="People with lactose intolerance, those with dairy allergies, vegans.",
        allergens=("Milk", "Dairy", "Lactose"),
    ),
    # ── Thickeners & emulsifiers ────────────────────────────────────────────
    IngredientRecord(
        key="modified starch",
        classification="processed",
        chemical_name="Modified Food Starch",
        why_used="Thickening agent that improves texture and stability.",
        benefits=("Improves texture and consistency", "Prevents separation", "Gluten-free"),
        considerations=(
            "Highly processed",
            "May be derived from GMO corn",
            "Can cause blood sugar spikes",
            "Nutritionally empty",
        ),
        who_should_care=(
            "People managing blood sugar, those avoiding GMOs, individuals with digestive "
            "sensitivities."
        ),
    ),
    IngredientRecord(
        key="xanthan gum",
        classification="processed",
        chemical_name="Xanthan Gum (E415)",
        why_used="Thickening and stabilizing agent.",
        benefits=("Effective thickener at low concentrations", "Gluten-free", "Provides fiber"),
        considerations=(
            "May cause digestive issues (bloating, gas) in large amounts",
            "Produced by bacterial fermentation",
            "May be derived from corn, wheat, soy, or dairy (allergen concerns)",
        ),
        who_should_care=(
            "People with digestive sensitivities, those with allergies to source ingredients, "
            "individuals with IBS."
        ),
    ),
    IngredientRecord(
        key="monoglycerides",
        classification="processed",
        chemical_name="Monoglycerides and Diglycerides",
        why_used="Emulsifiers that help mix oil and water, improve texture.",
        benefits=("Improves texture and consistency", "Extends shelf life", "Prevents separation"),
        considerations=(
            "Highly processed",
            "May contain trans fats",
            "Can be derived from animal or plant sources (concern for vegetarians)",
        ),
        who_should_care=(
            "Vegetarians and vegans (if animal-derived), people avoiding trans fats, those "
            "concerned about processed additives."
        ),
    ),
    IngredientRecord(
        key="soy lecithin",
        classification="processed",
        chemical_name="Soy Lecithin (E322)",
        why_used="Emulsifier that helps ingredients blend together.",
        benefits=("Effective emulsifier", "Contains choline", "Helps improve texture"),
        considerations=(
            "Often derived from GMO soybeans",
            "May cause allergic reactions in people with soy allergies",
            "Extracted using chemical solvents (hexane)",
        ),
        who_should_care=(
            "People with soy allergies, those avoiding GMOs, individuals concerned about chemical "
            "extraction processes."
        ),
        allergens=("Soy",),
    ),
    IngredientRecord(
        key="sunflower lecithin",
        classification="processed",
        chemical_name="Sunflower Lecithin",
        why_used="Emulsifier that helps ingredients blend, alternative to soy lecithin.",
        benefits=("Effective emulsifier", "Soy-free alternative", "Often non-GMO"),
        considerations=(
            "Highly processed",
            "May be extracted using chemical solvents",
            "Can cause allergic reactions in people with sunflower seed allergies",
        ),
        who_should_care="People with sunflower seed allergies, those concerned about processing methods.",
    ),
    # ── Whole foods, spices, nuts ───────────────────────────────────────────
    IngredientRecord(
        key="almonds",
        classification="natural",
        why_used="Provides protein, healthy fats, and nutrients.",
        benefits=(
            "High in healthy monounsaturated fats",
            "Good source of protein and fiber",
            "Rich in vitamin E, magnesium, and antioxidants",
            "Supports heart health",
        ),
        considerations=("High in calories", "Common allergen"),
        who_should_care="People with tree nut allergies, those managing calorie intake.",
        allergens=("Tree Nuts", "Almonds"),
    ),
    IngredientRecord(
        key="onion",
        classification="natural",
        why_used="Provides savory and aromatic flavor.",
        benefits=(
            "Rich in antioxidants and vitamin C",
            "Contains anti-inflammatory compounds",
            "Contains prebiotic fiber",
        ),
        considerations=(
            "May cause digestive discomfort or gas in some people",
            "Can trigger heartburn or acid reflux",
        ),
        who_should_care="People with IBS or digestive sensitivities, those prone to heartburn.",
    ),
    IngredientRecord(
        key="garlic",
        classification="natural",
        why_used="Provides pungent, savory, and aromatic flavor.",
        benefits=(
            "Contains allicin (powerful antioxidant)",
            "Anti-inflammatory and antimicrobial properties",
            "Supports heart health",
        ),
        considerations=(
            "May cause digestive upset in some people",
            "Can interact with blood thinners",
        ),
        who_should_care="People on blood-thinning medications, those with digestive sensitivities.",
    ),
    IngredientRecord(
        key="turmeric",
        classification="natural",
        why_used="Adds color and a distinct earthy, slightly bitter flavor.",
        benefits=(
            "Contains curcumin (powerful anti-inflammatory)",
            "Rich in antioxidants",
            "Supports digestive health",
        ),
        considerations=(
            "May interact with blood thinners",
            "Can cause digestive upset in large amounts",
        ),
        who_should_care=(
            "People on blood-thinning medications, those with gallbladder issues, individuals "
            "taking diabetes medications."
        ),
    ),
    IngredientRecord(
        key="coriander",
        classification="natural",
        why_used="Contributes a warm, nutty, and citrusy flavor.",
        benefits=("Rich in antioxidants", "Supports digestive health", "Anti-inflammatory properties"),
        considerations=("May cause allergic reactions in some people",),
        who_should_care="People with spice allergies, those taking diabetes medications.",
    ),
    IngredientRecord(
        key="chili",
        classification="natural",
        why_used="Provides heat and a pungent flavor.",
        benefits=(
            "Contains capsaicin (may boost metabolism)",
            "Rich in vitamins A and C",
            "Anti-inflammatory properties",
        ),
        considerations=(
            "Can cause digestive upset or heartburn",
            "Can trigger IBS symptoms",
        ),
        who_should_care=(
            "People with IBS, those with sensitive stomachs, individuals prone to heartburn or "
            "acid reflux."
        ),
    ),
)
