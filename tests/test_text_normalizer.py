"""
Test suite for receipt text normalization.

Covers description normalization for pattern matching, locale gating and
the preference keys built from item descriptions and store names.
"""

import unittest

from receipt_engine.categorisation.preprocess import (
    normalize_text,
    normalize_locale,
    normalize_description_key,
    normalize_store_key,
)


class TestNormalizeText(unittest.TestCase):
    """Test cases for normalize_text."""

    def test_accents_and_separators(self):
        """Accents are stripped and slashes become spaces."""
        text, tokens = normalize_text("Jamón  Serrano / 100g")
        self.assertEqual(text, "jamon serrano 100g")
        self.assertEqual(tokens, ["jamon", "serrano", "100g"])

    def test_letter_substitutions(self):
        """Letters NFKD does not decompose are expanded explicitly."""
        cases = [
            ("Straße", "strasse"),
            ("Œufs frais", "oeufs frais"),
            ("Cæsar Salad", "caesar salad"),
            ("Crème Brûlée", "creme brulee"),
        ]
        for raw, expected in cases:
            with self.subTest(raw=raw):
                self.assertEqual(normalize_text(raw)[0], expected)

    def test_ampersand_becomes_and(self):
        text, tokens = normalize_text("Fish&Chips")
        self.assertEqual(text, "fish and chips")
        self.assertEqual(tokens, ["fish", "and", "chips"])

    def test_underscores_and_hyphens_split_words(self):
        self.assertEqual(normalize_text("coca-cola_zero")[0], "coca cola zero")

    def test_punctuation_is_removed(self):
        """Punctuation is dropped without inserting spaces."""
        self.assertEqual(normalize_text("Leche 1.5L (x6)!")[0], "leche 15l x6")
        self.assertEqual(normalize_text("Lay's")[0], "lays")

    def test_empty_input(self):
        """Empty, blank and None inputs normalize to nothing."""
        for raw in (None, "", "   ", "\t\n", "!!! ..."):
            with self.subTest(raw=raw):
                self.assertEqual(normalize_text(raw), ("", []))

    def test_tokens_never_empty(self):
        _, tokens = normalize_text("  pan   --  integral  ")
        self.assertEqual(tokens, ["pan", "integral"])


class TestNormalizeLocale(unittest.TestCase):
    """Test cases for locale gating."""

    def test_supported_locales(self):
        for locale in ("es", "en", "pt", "fr", "it", "de", "nl", "ca"):
            with self.subTest(locale=locale):
                self.assertEqual(normalize_locale(locale), locale)

    def test_region_tags_and_casing(self):
        cases = [("es-ES", "es"), ("pt_BR", "pt"), ("EN", "en"), (" fr-CA ", "fr")]
        for raw, expected in cases:
            with self.subTest(raw=raw):
                self.assertEqual(normalize_locale(raw), expected)

    def test_unrecognised_locales_become_unknown(self):
        for raw in (None, "", "unknown", "xx", "ja-JP", 42):
            with self.subTest(raw=raw):
                self.assertEqual(normalize_locale(raw), "unknown")


class TestPreferenceKeys(unittest.TestCase):
    """Test cases for description and store keys."""

    def test_description_key_drops_quantities_and_units(self):
        self.assertEqual(normalize_description_key("Leche Entera 1,5 L"), "leche entera")
        self.assertEqual(normalize_description_key("LECHE ENTERA 1 l"), "leche entera")
        self.assertEqual(normalize_description_key("Café Molido 250 g"), "cafe molido")

    def test_description_key_blank(self):
        self.assertEqual(normalize_description_key(""), "")
        self.assertEqual(normalize_description_key("   "), "")
        self.assertEqual(normalize_description_key(None), "")

    def test_description_key_is_capped(self):
        self.assertEqual(len(normalize_description_key("a" * 500)), 160)

    def test_store_key(self):
        self.assertEqual(normalize_store_key("  Mercadona   S.A. "), "mercadona s.a.")
        self.assertEqual(normalize_store_key(None), "")
        self.assertEqual(len(normalize_store_key("x" * 300)), 120)


if __name__ == "__main__":
    unittest.main()
