"""
Test suite for the receipt taxonomy loader.
"""

import os
import tempfile
import unittest

from receipt_engine.config.categorizer_config import (
    DEFAULT_RECEIPT_CATEGORIES,
    get_default_category_names,
)
from receipt_engine.config.taxonomy_loader import (
    build_broad_type_map,
    get_broad_type,
    load_taxonomy_csv,
)
from receipt_engine.patterns.category_synonyms import CATEGORY_SYNONYMS


class TestLoadTaxonomyCsv(unittest.TestCase):
    """Test cases for load_taxonomy_csv."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.csv_path = os.path.join(self.temp_dir.name, "taxonomy.csv")

    def tearDown(self):
        self.temp_dir.cleanup()

    def _write(self, content):
        with open(self.csv_path, "w", encoding="utf-8") as f:
            f.write(content)

    def test_load(self):
        self._write(
            "name,type,broad_type\n"
            "Fruits,Fiber,Food\n"
            "Water,Other,Drinks\n"
            "Gadgets,,\n"
        )
        taxonomy = load_taxonomy_csv(self.csv_path)

        self.assertEqual(len(taxonomy), 3)
        self.assertEqual(taxonomy[0], {"name": "Fruits", "type": "Fiber", "broad_type": "Food"})
        self.assertEqual(taxonomy[2], {"name": "Gadgets", "type": "Other", "broad_type": "Other"})

    def test_duplicates_and_blank_names_are_skipped(self):
        self._write(
            "name,type,broad_type\n"
            "Fruits,Fiber,Food\n"
            " fruits ,Fiber,Drinks\n"
            ",Other,Other\n"
        )
        taxonomy = load_taxonomy_csv(self.csv_path)
        self.assertEqual([row["name"] for row in taxonomy], ["Fruits"])
        self.assertEqual(taxonomy[0]["broad_type"], "Food")

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_taxonomy_csv(os.path.join(self.temp_dir.name, "missing.csv"))


class TestBroadTypes(unittest.TestCase):
    """Test cases for broad type lookups."""

    def test_default_map(self):
        broad_types = build_broad_type_map()
        self.assertEqual(get_broad_type("Water", broad_types), "Drinks")
        self.assertEqual(get_broad_type("  fruits ", broad_types), "Food")
        self.assertEqual(get_broad_type("Bags", broad_types), "Household")

    def test_unknown_category(self):
        broad_types = build_broad_type_map()
        self.assertEqual(get_broad_type("Gadgets", broad_types), "Other")
        self.assertEqual(get_broad_type(None, broad_types), "Other")

    def test_custom_taxonomy(self):
        broad_types = build_broad_type_map([
            {"name": "Refrescos", "broad_type": "Drinks"},
            {"name": "Varios"},
        ])
        self.assertEqual(broad_types, {"refrescos": "Drinks", "varios": "Other"})


class TestDefaultTaxonomy(unittest.TestCase):
    """Test cases for the built-in taxonomy."""

    def test_names_are_unique(self):
        names = [name.lower() for name in get_default_category_names()]
        self.assertEqual(len(names), len(set(names)))

    def test_other_is_present(self):
        self.assertIn("Other", get_default_category_names())

    def test_every_row_has_a_broad_type(self):
        for row in DEFAULT_RECEIPT_CATEGORIES:
            with self.subTest(name=row["name"]):
                self.assertTrue(row["broad_type"])

    def test_synonyms_refer_to_default_categories(self):
        names = set(get_default_category_names())
        for category in CATEGORY_SYNONYMS:
            with self.subTest(category=category):
                self.assertIn(category, names)


if __name__ == "__main__":
    unittest.main()
