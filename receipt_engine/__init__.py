"""
Receipt Engine - rule-based receipt line-item categorisation.

Maps free-text purchase descriptions from scanned receipts (es, en, pt, fr,
it, de, nl, ca) to a caller-supplied category taxonomy with a confidence
tier. Deterministic, no model, no I/O.

Main Components:
    - patterns: Locale hints, the general rule cascade and label synonyms
    - config: Categorizer settings and the default taxonomy
    - categorisation: Normalization, registry and the categorizer
"""

from typing import Dict, List, Optional

from .categorisation.engine import (
    ReceiptCategorizer,
    CategorySuggestion,
    Confidence,
    ClassificationRule,
    get_suggestion,
    match_locale,
    classify_general,
)
from .categorisation.preprocess import (
    normalize_text,
    normalize_locale,
    normalize_description_key,
    normalize_store_key,
)
from .categorisation.registry import (
    build_category_registry,
    resolve_category,
    CategoryLabelResolver,
)

from .config.categorizer_config import (
    CATEGORIZER_CONFIG,
    DEFAULT_RECEIPT_CATEGORIES,
    SUPPORTED_LOCALES,
    get_default_category_names,
)
from .config.taxonomy_loader import load_taxonomy_csv, build_broad_type_map


__version__ = "1.0.0"
__all__ = [
    # Categorisation
    "ReceiptCategorizer",
    "CategorySuggestion",
    "Confidence",
    "ClassificationRule",
    "get_suggestion",
    "match_locale",
    "classify_general",
    # Normalization
    "normalize_text",
    "normalize_locale",
    "normalize_description_key",
    "normalize_store_key",
    # Registry
    "build_category_registry",
    "resolve_category",
    "CategoryLabelResolver",
    # Configuration
    "CATEGORIZER_CONFIG",
    "DEFAULT_RECEIPT_CATEGORIES",
    "SUPPORTED_LOCALES",
    "get_default_category_names",
    "load_taxonomy_csv",
    "build_broad_type_map",
    # Main function
    "run_receipt_categorisation",
]


def run_receipt_categorisation(
    items: List[Dict],
    categories: Optional[List[str]] = None,
    locale: Optional[str] = None,
) -> Dict:
    """
    Main entry point for receipt categorisation.

    This function orchestrates the pipeline for one receipt:
    1. Build the category registry once
    2. Suggest a category for every item
    3. Summarise spend per category and broad type

    Args:
        items: List of item dictionaries with keys:
            - description: Item description as printed on the receipt
            - total_price: (Optional) Line total
        categories: Category names of the active taxonomy
            (defaults to the built-in taxonomy)
        locale: (Optional) Receipt locale tag, e.g. "es" or "pt-BR"

    Returns:
        Dictionary containing:
            - locale: Normalized locale tag
            - items: Items with category, confidence, score and reason
            - summary: Totals and counts per category and broad type
            - uncategorised: Number of items without a suggestion

    Example:
        >>> result = run_receipt_categorisation(
        ...     items=[{"description": "Pan integral", "total_price": 1.2}],
        ...     locale="es",
        ... )
        >>> result["items"][0]["category"]
        'Bread'
    """
    if categories is None:
        categories = get_default_category_names()

    registry = build_category_registry(categories)
    categorizer = ReceiptCategorizer()

    categorised_items = []
    uncategorised = 0
    for item, suggestion in categorizer.categorize_items(items, registry, locale):
        row = {
            "description": item.get("description"),
            "total_price": item.get("total_price"),
            "category": None,
            "confidence": None,
            "score": None,
            "reason": None,
        }
        if suggestion is None:
            uncategorised += 1
        else:
            row.update(suggestion.to_dict())
        categorised_items.append(row)

    return {
        "locale": normalize_locale(locale),
        "items": categorised_items,
        "summary": categorizer.get_category_summary(categorised_items),
        "uncategorised": uncategorised,
    }
