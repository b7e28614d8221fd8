"""
Preprocessing utilities for receipt line-item categorization.
Handles text normalization, locale gating and preference keys.
"""

import re
import unicodedata
from typing import List, Optional, Tuple

from ..config.categorizer_config import (
    CATEGORIZER_CONFIG,
    SUPPORTED_LOCALES,
    UNKNOWN_LOCALE,
)


# Letters NFKD leaves untouched
LETTER_SUBSTITUTIONS = (
    ("ß", "ss"),
    ("æ", "ae"),
    ("œ", "oe"),
)

_SEPARATORS_RE = re.compile(r"[_\-/]+")
_NON_ALNUM_RE = re.compile(r"[^\w\s]+")
_WHITESPACE_RE = re.compile(r"\s+")

# Quantity and unit noise removed from description keys
_NUMBER_RE = re.compile(r"\b\d+(?:[.,]\d+)?\b")
_UNIT_WORDS_RE = re.compile(r"\b(kg|g|gr|l|ml|cl|oz|lb|x|pcs|pc|uds|ud|unit|units)\b")


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_text(text: Optional[str]) -> Tuple[str, List[str]]:
    """
    Normalize a receipt item description for pattern matching.

    Lowercases, strips accents, expands ß/æ/œ, turns "&" into "and",
    splits on underscores, hyphens and slashes, drops punctuation and
    collapses whitespace.

    Args:
        text: Raw description (may be None or empty)

    Returns:
        Tuple of (normalized_text, tokens)

    Example:
        >>> normalize_text("Jamón  Serrano / 100g")
        ('jamon serrano 100g', ['jamon', 'serrano', '100g'])
    """
    if not text:
        return "", []

    value = text.lower()
    for source, target in LETTER_SUBSTITUTIONS:
        value = value.replace(source, target)
    value = _strip_accents(value)
    value = value.replace("&", " and ")
    value = _SEPARATORS_RE.sub(" ", value)
    value = _NON_ALNUM_RE.sub("", value)
    value = _WHITESPACE_RE.sub(" ", value).strip()

    return value, value.split()


def normalize_locale(locale: Optional[str]) -> str:
    """
    Normalize a locale tag to the closed set of supported locales.

    Region tags ("es-ES", "pt_BR") collapse to their base language;
    anything unrecognised becomes "unknown".

    Args:
        locale: Locale tag from the locale detector (optional)

    Returns:
        One of SUPPORTED_LOCALES or "unknown"
    """
    if not locale or not isinstance(locale, str):
        return UNKNOWN_LOCALE

    base = re.split(r"[-_]", locale.strip().lower(), maxsplit=1)[0]
    if base in SUPPORTED_LOCALES:
        return base
    return UNKNOWN_LOCALE


def normalize_description_key(description: Optional[str]) -> str:
    """
    Build the lookup key for a per-store item category preference.

    Quantities and unit words are dropped so "LECHE 1 L" and "Leche 1,5 l"
    share a key.

    Args:
        description: Raw item description

    Returns:
        Normalized key (empty string for blank input)
    """
    if not description or not description.strip():
        return ""

    value = _strip_accents(description.strip().lower())
    value = _NUMBER_RE.sub(" ", value)
    value = re.sub(r"[^a-z0-9\s]", " ", value)
    value = _UNIT_WORDS_RE.sub(" ", value)
    value = _WHITESPACE_RE.sub(" ", value).strip()

    max_length = CATEGORIZER_CONFIG["receipt_defaults"]["max_description_key_length"]
    return value[:max_length]


def normalize_store_key(store_name: Optional[str]) -> str:
    """Normalize a store name to its preference key."""
    value = _WHITESPACE_RE.sub(" ", (store_name or "").strip().lower())
    max_length = CATEGORIZER_CONFIG["receipt_defaults"]["max_store_key_length"]
    return value[:max_length]
