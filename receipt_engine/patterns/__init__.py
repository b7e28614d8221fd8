"""
Pattern definitions for receipt line-item categorisation.
"""

from .receipt_patterns import (
    GENERAL_RULES,
    BEVERAGE_SIGNAL_PATTERNS,
    BEVERAGE_UNIT_TOKENS,
    SAUCE_SIGNAL_PATTERNS,
    CLEANING_SIGNAL_PATTERNS,
    ENERGY_SNACK_SIGNAL_PATTERNS,
    SALTY_SNACK_PATTERNS,
)
from .locale_patterns import LOCALE_HINT_PATTERNS
from .category_synonyms import CATEGORY_SYNONYMS, LABEL_STOPWORDS

__all__ = [
    "GENERAL_RULES",
    "BEVERAGE_SIGNAL_PATTERNS",
    "BEVERAGE_UNIT_TOKENS",
    "SAUCE_SIGNAL_PATTERNS",
    "CLEANING_SIGNAL_PATTERNS",
    "ENERGY_SNACK_SIGNAL_PATTERNS",
    "SALTY_SNACK_PATTERNS",
    "LOCALE_HINT_PATTERNS",
    "CATEGORY_SYNONYMS",
    "LABEL_STOPWORDS",
]
