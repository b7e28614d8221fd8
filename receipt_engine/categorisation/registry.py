"""
Category registry and label resolution.

The registry is the caller's taxonomy as a lowercase name -> display name
lookup. The engine only ever reads it.
"""

import logging
from typing import Dict, Iterable, List, Optional

from ..config.categorizer_config import CATEGORIZER_CONFIG
from ..patterns.category_synonyms import CATEGORY_SYNONYMS, LABEL_STOPWORDS
from .pattern_matching import match_keywords
from .preprocess import normalize_text

logger = logging.getLogger(__name__)


def build_category_registry(category_names: Iterable[str]) -> Dict[str, str]:
    """
    Build a case-insensitive category registry.

    Blank and non-string names are skipped; the first spelling registered
    for a name is kept.

    Args:
        category_names: Category display names from the active taxonomy

    Returns:
        Dictionary mapping lowercase names to display names

    Example:
        >>> build_category_registry(["Fruits", "Other"])
        {'fruits': 'Fruits', 'other': 'Other'}
    """
    registry: Dict[str, str] = {}
    for name in category_names or []:
        if not isinstance(name, str):
            continue
        display = name.strip()
        if not display:
            continue
        registry.setdefault(display.lower(), display)
    return registry


def resolve_category(
    candidates: Iterable[str],
    registry: Dict[str, str],
    fallback: Optional[str] = None
) -> Optional[str]:
    """
    Resolve a preference list against the registry.

    Candidates are tried in order, then the fallback category.

    Args:
        candidates: Preferred category names, most specific first
        registry: Category registry
        fallback: Last resort name (defaults to the configured "Other")

    Returns:
        Registered display name, or None if nothing resolves
    """
    if not registry:
        return None

    if fallback is None:
        fallback = CATEGORIZER_CONFIG["fallback_category"]

    for name in list(candidates) + [fallback]:
        if not name:
            continue
        resolved = registry.get(name.lower())
        if resolved is not None:
            return resolved
    return None


def _strip_stopwords(key: str) -> str:
    return " ".join(token for token in key.split() if token not in LABEL_STOPWORDS)


def _singularize_token(token: str) -> str:
    if len(token) > 3 and token.endswith("ies"):
        return token[:-3] + "y"
    if len(token) > 3 and token.endswith("es"):
        return token[:-2]
    if len(token) > 3 and token.endswith("s"):
        return token[:-1]
    return token


def _singularize(key: str) -> str:
    return " ".join(_singularize_token(token) for token in key.split())


def _label_keys(label: str) -> List[str]:
    """Lookup keys for a label, most literal first."""
    base, _ = normalize_text(label)
    if not base:
        return []

    no_stop = _strip_stopwords(base)
    keys = []
    for key in (base, no_stop, _singularize(base), _singularize(no_stop)):
        if key and key not in keys:
            keys.append(key)
    return keys


class CategoryLabelResolver:
    """
    Maps free-form category labels onto a category registry.

    Labels from an upstream extraction step ("veggies", "Cold cuts",
    "zumos") are matched by normalized key, stopword-stripped key and
    singular key against the registry names and their known synonyms.
    A rapidfuzz ratio match catches near misses ("vegetbles").
    """

    def __init__(
        self,
        category_names: Iterable[str],
        fuzzy_threshold: Optional[int] = None
    ):
        settings = CATEGORIZER_CONFIG["label_resolver"]
        self.registry = build_category_registry(category_names)
        self.fuzzy_threshold = (
            settings["fuzzy_threshold"] if fuzzy_threshold is None else fuzzy_threshold
        )
        self.min_label_length = settings["min_label_length"]
        self._index: Dict[str, str] = {}

        for display in self.registry.values():
            self._add_label(display, display)

        # Only synonyms of registered categories are indexed
        for category, synonyms in CATEGORY_SYNONYMS.items():
            display = self.registry.get(category.lower())
            if display is None:
                continue
            for synonym in synonyms:
                self._add_label(synonym, display)

        logger.debug(
            f"Label resolver indexed {len(self._index)} keys "
            f"for {len(self.registry)} categories"
        )

    def _add_label(self, label: str, display: str) -> None:
        for key in _label_keys(label):
            self._index.setdefault(key, display)

    def resolve(self, label: Optional[str]) -> Optional[str]:
        """
        Resolve a free-form label to a registered category.

        Args:
            label: Category label as produced upstream

        Returns:
            Registered display name, or None
        """
        if not label or not isinstance(label, str):
            return None

        keys = _label_keys(label)
        for key in keys:
            resolved = self._index.get(key)
            if resolved is not None:
                return resolved

        if not keys or len(keys[0]) < self.min_label_length:
            return None

        match = match_keywords(keys[0], list(self._index), self.fuzzy_threshold)
        if match is None:
            return None

        keyword, confidence, _ = match
        logger.debug(f"Fuzzy label match: {label!r} -> {keyword!r} ({confidence:.2f})")
        return self._index[keyword]
