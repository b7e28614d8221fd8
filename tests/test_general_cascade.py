"""
Test suite for the general rule cascade.

Covers rule precedence, the shared signals that gate produce rules and the
weak fallbacks at the end of the cascade.
"""

import unittest

from receipt_engine.categorisation.engine import (
    CLASSIFICATION_RULES,
    ClassificationRule,
    Confidence,
    ReceiptCategorizer,
    compute_signals,
)
from receipt_engine.categorisation.preprocess import normalize_text
from receipt_engine.categorisation.registry import build_category_registry
from receipt_engine.config.categorizer_config import get_default_category_names


class TestGeneralCascade(unittest.TestCase):
    """Test cases for classify_general against the default taxonomy."""

    def setUp(self):
        self.categorizer = ReceiptCategorizer()
        self.registry = build_category_registry(get_default_category_names())

    def _classify(self, description):
        text, tokens = normalize_text(description)
        return self.categorizer.classify_general(text, tokens, self.registry)

    def test_strong_matches(self):
        """Common descriptions land in the expected category."""
        cases = [
            ("Patatas fritas Lay's", "Salty Snacks", "salty_snacks"),
            ("Helado de vainilla", "Ice Cream & Desserts", "ice_cream_desserts"),
            ("Bolsa plástico", "Bags", "bags"),
            ("Arroz redondo", "Pasta, Rice & Grains", "rice_grains"),
            ("Pan integral", "Bread", "bread"),
            ("Pechuga de pollo", "Meat & Poultry", "meat_poultry"),
            ("Salmón fresco", "Fish & Seafood", "fish_seafood"),
            ("Huevos L docena", "Eggs", "eggs"),
            ("Queso Manchego Curado", "Cheese", "cheese"),
            ("Queso crema", "Cheese", "cheese"),
            ("Leche Semidesnatada", "Dairy (Milk/Yogurt)", "milk_yogurt"),
            ("Mantequilla sin sal", "Oils & Vinegars", "butter"),
            ("Plátanos de Canarias", "Fruits", "fruits"),
            ("Coca-Cola 2L", "Soft Drinks", "soft_drinks"),
            ("Cerveza Mahou 33cl", "Beer", "beer"),
            ("Cerveza 0,0 Sin Alcohol", "Low/No Alcohol", "low_no_alcohol"),
            ("Vino tinto Rioja", "Wine", "wine"),
            ("Jabón lavavajillas", "Cleaning Supplies", "cleaning"),
            ("Gel de ducha Dove", "Hygiene & Toiletries", "soap"),
            ("Papel higiénico", "Paper Goods", "paper_goods"),
            ("Galletas María", "Cookies & Biscuits", "cookies_biscuits"),
            ("Pizza congelada", "Frozen Meals", "frozen_meals"),
            ("Muesli crujiente", "Breakfast & Spreads", "breakfast_cereals"),
            ("Sándwich mixto", "Sandwiches / Takeaway", "sandwiches_takeaway"),
            ("Pizza cuatro quesos", "Sandwiches / Takeaway", "sandwiches_takeaway"),
            ("Pan rallado", "Baking Ingredients", "baking_ingredients"),
            ("Energy bar", "Chocolate & Candy", "snack_bars"),
            ("Garbanzos cocidos", "Legumes", "legumes"),
        ]
        for description, category, reason in cases:
            with self.subTest(description=description):
                suggestion = self._classify(description)
                self.assertIsNotNone(suggestion)
                self.assertEqual(suggestion.category, category)
                self.assertEqual(suggestion.reason, reason)
                self.assertEqual(suggestion.confidence, Confidence.STRONG)

    def test_snack_brand_beats_flavour_vegetable(self):
        """A snack brand with an onion flavour is a snack, not produce."""
        suggestion = self._classify("Pringles Onion Flavor")
        self.assertEqual(suggestion.category, "Salty Snacks")
        self.assertEqual(suggestion.reason, "salty_snacks")
        self.assertEqual(suggestion.score, 0.88)

    def test_drink_with_vegetable_word_is_a_drink(self):
        suggestion = self._classify("Onion Energy Drink 250ml")
        self.assertEqual(suggestion.category, "Energy & Sports Drinks")
        self.assertNotEqual(suggestion.reason, "vegetables")

    def test_deli_before_meat(self):
        suggestion = self._classify("Jamón Serrano")
        self.assertEqual(suggestion.category, "Deli / Cold Cuts")
        self.assertEqual(suggestion.reason, "deli_cold_cuts")

    def test_fruit_juice_is_juice(self):
        suggestion = self._classify("Orange Juice 1L")
        self.assertEqual(suggestion.category, "Juice")
        self.assertEqual(suggestion.reason, "juice")

    def test_fish_before_canned_goods(self):
        self.assertEqual(self._classify("Atún en lata").category, "Fish & Seafood")

    def test_coconut_water_is_water(self):
        suggestion = self._classify("Agua de coco")
        self.assertEqual(suggestion.category, "Water")
        self.assertEqual(suggestion.reason, "water")

    def test_micellar_water_is_skin_care(self):
        self.assertEqual(self._classify("Agua micelar").category, "Skin Care")

    def test_sauce_with_vegetable_word_is_a_sauce(self):
        suggestion = self._classify("Tomate Frito Hida")
        self.assertEqual(suggestion.category, "Sauces")
        self.assertEqual(suggestion.reason, "sauces_condiments")

    def test_cleaning_product_with_fruit_word(self):
        suggestion = self._classify("Detergente Limón")
        self.assertEqual(suggestion.category, "Cleaning Supplies")

    def test_toothpaste_is_not_pasta(self):
        suggestion = self._classify("Pasta de dientes Colgate")
        self.assertEqual(suggestion.category, "Oral Care")

    def test_energy_bar_is_a_snack_bar(self):
        suggestion = self._classify("Barrita energética")
        self.assertEqual(suggestion.category, "Chocolate & Candy")
        self.assertEqual(suggestion.reason, "snack_bars")
        self.assertEqual(suggestion.confidence, Confidence.STRONG)

    def test_frozen_vegetables(self):
        suggestion = self._classify("Guisantes congelados")
        self.assertEqual(suggestion.category, "Frozen Vegetables & Fruit")
        self.assertEqual(suggestion.reason, "frozen_generic")

    def test_fresh_qualifier_is_weak(self):
        suggestion = self._classify("Bio Mix")
        self.assertEqual(suggestion.reason, "fresh_qualifier_guess")
        self.assertEqual(suggestion.confidence, Confidence.WEAK)
        self.assertEqual(suggestion.score, 0.45)
        self.assertEqual(suggestion.category, "Fruits")

    def test_short_description_is_weak(self):
        suggestion = self._classify("Kale")
        self.assertEqual(suggestion.reason, "short_description_guess")
        self.assertEqual(suggestion.confidence, Confidence.WEAK)
        self.assertEqual(suggestion.score, 0.40)
        self.assertEqual(suggestion.category, "Vegetables")

    def test_no_match(self):
        """Long unknown descriptions and very short ones get nothing."""
        for description in ("Xyzzy Plugh Quux", "ab", ""):
            with self.subTest(description=description):
                self.assertIsNone(self._classify(description))

    def test_fired_rule_without_registered_category(self):
        """The first rule that fires decides, even if nothing resolves."""
        registry = build_category_registry(["Vegetables"])
        text, tokens = normalize_text("Pringles Onion Flavor")
        self.assertIsNone(self.categorizer.classify_general(text, tokens, registry))

    def test_legacy_category_names(self):
        registry = build_category_registry(["Snacks", "Other"])
        text, tokens = normalize_text("Pringles Original")
        suggestion = self.categorizer.classify_general(text, tokens, registry)
        self.assertEqual(suggestion.category, "Snacks")

    def test_fallback_to_other(self):
        registry = build_category_registry(["Other"])
        text, tokens = normalize_text("Pringles Original")
        suggestion = self.categorizer.classify_general(text, tokens, registry)
        self.assertEqual(suggestion.category, "Other")
        self.assertEqual(suggestion.reason, "salty_snacks")


class TestSignals(unittest.TestCase):
    """Test cases for the shared signals."""

    def _signals(self, description):
        return compute_signals(*normalize_text(description))

    def test_beverage(self):
        for description in ("Agua 1,5 L", "Zumo", "Leche 500 ml", "ml", "Refresco lata"):
            with self.subTest(description=description):
                self.assertTrue(self._signals(description).beverage)

    def test_other_signals(self):
        self.assertTrue(self._signals("Salsa barbacoa").sauce)
        self.assertTrue(self._signals("Lejía").cleaning)
        self.assertTrue(self._signals("Barrita proteica").energy_snack)
        self.assertTrue(self._signals("Doritos").snack_brand)

    def test_plain_produce_has_no_signals(self):
        signals = self._signals("Manzana")
        self.assertFalse(signals.beverage)
        self.assertFalse(signals.sauce)
        self.assertFalse(signals.cleaning)
        self.assertFalse(signals.energy_snack)
        self.assertFalse(signals.snack_brand)


class TestRuleTable(unittest.TestCase):
    """Test cases for the compiled rule table."""

    def test_reasons_are_unique(self):
        reasons = [rule.reason for rule in CLASSIFICATION_RULES]
        self.assertEqual(len(reasons), len(set(reasons)))

    def test_scores_follow_confidence_tier(self):
        for rule in CLASSIFICATION_RULES:
            with self.subTest(rule=rule.reason):
                if rule.confidence == Confidence.STRONG:
                    self.assertGreaterEqual(rule.score, 0.70)
                    self.assertLessEqual(rule.score, 0.90)
                else:
                    self.assertGreaterEqual(rule.score, 0.40)
                    self.assertLessEqual(rule.score, 0.45)

    def test_first_preference_is_a_default_category(self):
        names = set(get_default_category_names())
        for rule in CLASSIFICATION_RULES:
            with self.subTest(rule=rule.reason):
                self.assertIn(rule.categories[0], names)

    def test_weak_rules_come_last(self):
        tiers = [rule.confidence for rule in CLASSIFICATION_RULES]
        first_weak = tiers.index(Confidence.WEAK)
        self.assertTrue(all(tier == Confidence.WEAK for tier in tiers[first_weak:]))

    def test_unknown_signal_is_rejected(self):
        definition = {
            "reason": "broken",
            "regex_patterns": [r"\bx\b"],
            "exclude_signals": ["alcohol"],
            "categories": ["Other"],
            "confidence": "strong",
            "score": 0.8,
        }
        with self.assertRaises(ValueError):
            ClassificationRule.from_dict(definition)


if __name__ == "__main__":
    unittest.main()
