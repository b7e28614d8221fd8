"""
Configuration module for the receipt categorisation engine.

This module contains configuration dictionaries and the default taxonomy.
"""

from .categorizer_config import (
    CATEGORIZER_CONFIG,
    DEFAULT_RECEIPT_CATEGORIES,
    SUPPORTED_LOCALES,
    UNKNOWN_LOCALE,
    get_default_category_names,
)
from .taxonomy_loader import load_taxonomy_csv, build_broad_type_map, get_broad_type

__all__ = [
    "CATEGORIZER_CONFIG",
    "DEFAULT_RECEIPT_CATEGORIES",
    "SUPPORTED_LOCALES",
    "UNKNOWN_LOCALE",
    "get_default_category_names",
    "load_taxonomy_csv",
    "build_broad_type_map",
    "get_broad_type",
]
