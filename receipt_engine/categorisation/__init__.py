"""
Receipt categorisation module.

Text normalization, the category registry and the rule-based categorizer.
"""

from .engine import (
    ReceiptCategorizer,
    CategorySuggestion,
    Confidence,
    ClassificationRule,
    ReceiptSignals,
    compute_signals,
    get_suggestion,
    match_locale,
    classify_general,
)
from .preprocess import (
    normalize_text,
    normalize_locale,
    normalize_description_key,
    normalize_store_key,
)
from .registry import build_category_registry, resolve_category, CategoryLabelResolver

__all__ = [
    "ReceiptCategorizer",
    "CategorySuggestion",
    "Confidence",
    "ClassificationRule",
    "ReceiptSignals",
    "compute_signals",
    "get_suggestion",
    "match_locale",
    "classify_general",
    "normalize_text",
    "normalize_locale",
    "normalize_description_key",
    "normalize_store_key",
    "build_category_registry",
    "resolve_category",
    "CategoryLabelResolver",
]
