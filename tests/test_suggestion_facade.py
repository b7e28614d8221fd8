"""
Test suite for the suggestion entry points.

Tests get_suggestion, the category registry, reconciliation of upstream
categories, spend summaries and run_receipt_categorisation.
"""

import unittest

from receipt_engine import run_receipt_categorisation
from receipt_engine.categorisation.engine import (
    CategorySuggestion,
    Confidence,
    ReceiptCategorizer,
    get_suggestion,
)
from receipt_engine.categorisation.registry import build_category_registry, resolve_category
from receipt_engine.config.categorizer_config import get_default_category_names


SAMPLE_DESCRIPTIONS = [
    "Pringles Onion Flavor",
    "Onion Energy Drink 250ml",
    "Jamón Serrano",
    "Orange Juice 1L",
    "Pan integral",
    "Leche Semidesnatada",
    "Detergente Limón",
    "Bio Mix",
    "Kale",
    "Xyzzy Plugh Quux",
]


class TestCategoryRegistry(unittest.TestCase):
    """Test cases for the category registry."""

    def test_build_registry(self):
        registry = build_category_registry([" Fruits ", "fruits", "Other", "", None, 3])
        self.assertEqual(registry, {"fruits": "Fruits", "other": "Other"})

    def test_build_registry_empty(self):
        self.assertEqual(build_category_registry([]), {})
        self.assertEqual(build_category_registry(None), {})

    def test_resolve_in_preference_order(self):
        registry = build_category_registry(["Meat", "Deli", "Other"])
        self.assertEqual(resolve_category(["Deli / Cold Cuts", "Deli", "Meat"], registry), "Deli")

    def test_resolve_is_case_insensitive(self):
        registry = build_category_registry(["salty snacks", "OTHER"])
        self.assertEqual(resolve_category(["Salty Snacks"], registry), "salty snacks")
        self.assertEqual(resolve_category(["Juice"], registry), "OTHER")

    def test_resolve_empty_registry(self):
        self.assertIsNone(resolve_category(["Fruits"], {}))

    def test_resolve_custom_fallback(self):
        registry = build_category_registry(["Misc"])
        self.assertEqual(resolve_category(["Fruits"], registry, fallback="Misc"), "Misc")
        self.assertIsNone(resolve_category(["Fruits"], registry))


class TestGetSuggestion(unittest.TestCase):
    """Test cases for get_suggestion."""

    def setUp(self):
        self.registry = build_category_registry(get_default_category_names())

    def test_empty_descriptions(self):
        for description in (None, "", "   ", "\n", 42, "...!"):
            with self.subTest(description=description):
                self.assertIsNone(get_suggestion(description, self.registry))

    def test_empty_registry(self):
        for description in SAMPLE_DESCRIPTIONS:
            with self.subTest(description=description):
                self.assertIsNone(get_suggestion(description, {}, "es"))

    def test_deterministic(self):
        for description in SAMPLE_DESCRIPTIONS:
            for locale in (None, "es", "en"):
                with self.subTest(description=description, locale=locale):
                    first = get_suggestion(description, self.registry, locale)
                    second = get_suggestion(description, self.registry, locale)
                    self.assertEqual(first, second)

    def test_suggestion_is_always_registered(self):
        registry = build_category_registry(["Salty Snacks", "Juice", "Bread", "Other"])
        for description in SAMPLE_DESCRIPTIONS:
            for locale in (None, "es", "en"):
                with self.subTest(description=description, locale=locale):
                    suggestion = get_suggestion(description, registry, locale)
                    if suggestion is not None:
                        self.assertIn(suggestion.category, registry.values())

    def test_surrounding_whitespace_is_ignored(self):
        self.assertEqual(
            get_suggestion("  Jamón Serrano  ", self.registry),
            get_suggestion("Jamón Serrano", self.registry),
        )

    def test_to_dict(self):
        suggestion = CategorySuggestion(
            category="Bread", confidence=Confidence.STRONG, score=0.84, reason="locale_es"
        )
        self.assertEqual(
            suggestion.to_dict(),
            {"category": "Bread", "confidence": "strong", "score": 0.84, "reason": "locale_es"},
        )


class TestReconciliation(unittest.TestCase):
    """Test cases for reconcile_item_category."""

    def setUp(self):
        self.categorizer = ReceiptCategorizer()
        self.registry = build_category_registry(get_default_category_names())

    def test_other_is_replaced(self):
        for current in ("Other", None, "", "Not A Category"):
            with self.subTest(current=current):
                category, suggestion = self.categorizer.reconcile_item_category(
                    "Plátanos", current, self.registry
                )
                self.assertEqual(category, "Fruits")
                self.assertEqual(suggestion.category, "Fruits")

    def test_drink_mismatch_is_replaced(self):
        category, _ = self.categorizer.reconcile_item_category(
            "Coca Cola 33cl", "Fruits", self.registry
        )
        self.assertEqual(category, "Soft Drinks")

    def test_same_broad_type_is_kept(self):
        category, suggestion = self.categorizer.reconcile_item_category(
            "Plátanos", "vegetables", self.registry
        )
        self.assertEqual(category, "Vegetables")
        self.assertEqual(suggestion.category, "Fruits")

        category, _ = self.categorizer.reconcile_item_category(
            "Agua mineral", "Juice", self.registry
        )
        self.assertEqual(category, "Juice")

    def test_no_suggestion_keeps_current(self):
        category, suggestion = self.categorizer.reconcile_item_category(
            "Xyzzy Plugh Quux", "Cheese", self.registry
        )
        self.assertEqual(category, "Cheese")
        self.assertIsNone(suggestion)


class TestCategorySummary(unittest.TestCase):
    """Test cases for get_category_summary."""

    def test_summary(self):
        items = [
            {"category": "Fruits", "total_price": 1.5},
            {"category": "Fruits", "total_price": 2.0},
            {"category": "Water", "total_price": 0.6},
            {"category": None, "total_price": 3.0},
        ]
        summary = ReceiptCategorizer().get_category_summary(items)

        self.assertEqual(summary["by_category"]["Fruits"], {"total": 3.5, "count": 2})
        self.assertEqual(summary["by_category"]["Water"], {"total": 0.6, "count": 1})
        self.assertEqual(summary["by_broad_type"]["Food"], {"total": 3.5, "count": 2})
        self.assertEqual(summary["by_broad_type"]["Drinks"], {"total": 0.6, "count": 1})
        self.assertEqual(summary["total_amount"], 4.1)
        self.assertEqual(summary["item_count"], 3)

    def test_unknown_category_is_other(self):
        summary = ReceiptCategorizer().get_category_summary(
            [{"category": "Gadgets", "total_price": None}]
        )
        self.assertEqual(summary["by_broad_type"]["Other"], {"total": 0.0, "count": 1})


class TestRunReceiptCategorisation(unittest.TestCase):
    """Test cases for the package entry point."""

    def test_run(self):
        result = run_receipt_categorisation(
            items=[
                {"description": "Pan integral", "total_price": 1.2},
                {"description": "", "total_price": 0.5},
            ],
            locale="es-ES",
        )

        self.assertEqual(result["locale"], "es")
        self.assertEqual(result["uncategorised"], 1)
        self.assertEqual(result["items"][0]["category"], "Bread")
        self.assertEqual(result["items"][0]["confidence"], "strong")
        self.assertEqual(result["items"][0]["reason"], "locale_es")
        self.assertIsNone(result["items"][1]["category"])
        self.assertEqual(result["summary"]["total_amount"], 1.2)
        self.assertEqual(result["summary"]["item_count"], 1)

    def test_custom_categories(self):
        result = run_receipt_categorisation(
            items=[{"description": "Pringles Original", "total_price": 2.0}],
            categories=["Snacks", "Other"],
        )
        self.assertEqual(result["locale"], "unknown")
        self.assertEqual(result["items"][0]["category"], "Snacks")


if __name__ == "__main__":
    unittest.main()
