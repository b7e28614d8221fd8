"""
Receipt Item Categorizer.
Suggests a spending category for a receipt line-item description.
"""

import logging
import re
from dataclasses import dataclass, fields
from enum import Enum
from typing import Dict, List, Optional, Pattern, Sequence, Tuple

from ..config.categorizer_config import CATEGORIZER_CONFIG, UNKNOWN_LOCALE
from ..config.taxonomy_loader import build_broad_type_map, get_broad_type
from ..patterns.locale_patterns import LOCALE_HINT_PATTERNS
from ..patterns.receipt_patterns import (
    GENERAL_RULES,
    BEVERAGE_SIGNAL_PATTERNS,
    BEVERAGE_UNIT_TOKENS,
    SAUCE_SIGNAL_PATTERNS,
    CLEANING_SIGNAL_PATTERNS,
    ENERGY_SNACK_SIGNAL_PATTERNS,
    SALTY_SNACK_PATTERNS,
)
from .pattern_matching import compile_patterns, matches_any
from .preprocess import normalize_locale, normalize_text
from .registry import resolve_category

logger = logging.getLogger(__name__)


class Confidence(Enum):
    """Confidence tiers for a suggestion."""
    STRONG = "strong"  # apply automatically
    WEAK = "weak"      # ask the user to confirm


@dataclass(frozen=True)
class CategorySuggestion:
    """Result of receipt item categorization."""
    category: str
    confidence: Confidence
    score: float
    reason: Optional[str] = None

    def to_dict(self) -> Dict:
        return {
            "category": self.category,
            "confidence": self.confidence.value,
            "score": self.score,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class ReceiptSignals:
    """Boolean flags derived once per description and shared by rules."""
    beverage: bool = False
    sauce: bool = False
    cleaning: bool = False
    energy_snack: bool = False
    snack_brand: bool = False


@dataclass(frozen=True)
class ClassificationRule:
    """One entry of the general cascade."""
    reason: str
    patterns: Tuple[Pattern, ...]
    categories: Tuple[str, ...]
    confidence: Confidence
    score: float
    requires: Tuple[Pattern, ...] = ()
    excludes: Tuple[Pattern, ...] = ()
    exclude_signals: Tuple[str, ...] = ()
    max_tokens: Optional[int] = None
    min_length: Optional[int] = None

    @classmethod
    def from_dict(cls, definition: Dict) -> "ClassificationRule":
        """Build a rule from a GENERAL_RULES entry."""
        exclude_signals = tuple(definition.get("exclude_signals", ()))
        unknown = set(exclude_signals) - {field.name for field in fields(ReceiptSignals)}
        if unknown:
            raise ValueError(
                f"Rule {definition['reason']!r} references unknown signals: {sorted(unknown)}"
            )

        return cls(
            reason=definition["reason"],
            patterns=compile_patterns(definition.get("regex_patterns", ())),
            categories=tuple(definition["categories"]),
            confidence=Confidence(definition["confidence"]),
            score=float(definition["score"]),
            requires=compile_patterns(definition.get("requires_patterns", ())),
            excludes=compile_patterns(definition.get("exclude_patterns", ())),
            exclude_signals=exclude_signals,
            max_tokens=definition.get("max_tokens"),
            min_length=definition.get("min_length"),
        )

    def matches(self, text: str, tokens: Sequence[str], signals: ReceiptSignals) -> bool:
        """Check whether this rule fires for a normalized description."""
        if self.max_tokens is not None and len(tokens) > self.max_tokens:
            return False
        if self.min_length is not None and len(text) < self.min_length:
            return False
        if self.patterns and not matches_any(text, self.patterns):
            return False
        if self.requires and not matches_any(text, self.requires):
            return False
        if self.excludes and matches_any(text, self.excludes):
            return False
        return not any(getattr(signals, name) for name in self.exclude_signals)


# Compiled once at import; order is the cascade order
CLASSIFICATION_RULES: Tuple[ClassificationRule, ...] = tuple(
    ClassificationRule.from_dict(definition) for definition in GENERAL_RULES
)

LOCALE_HINT_RULES: Dict[str, Tuple[Tuple[Pattern, Tuple[str, ...]], ...]] = {
    locale: tuple((re.compile(pattern), tuple(categories)) for pattern, categories in rules)
    for locale, rules in LOCALE_HINT_PATTERNS.items()
}

_BEVERAGE_SIGNAL = compile_patterns(BEVERAGE_SIGNAL_PATTERNS)
_SAUCE_SIGNAL = compile_patterns(SAUCE_SIGNAL_PATTERNS)
_CLEANING_SIGNAL = compile_patterns(CLEANING_SIGNAL_PATTERNS)
_ENERGY_SNACK_SIGNAL = compile_patterns(ENERGY_SNACK_SIGNAL_PATTERNS)
_SNACK_BRAND_SIGNAL = compile_patterns(SALTY_SNACK_PATTERNS)


def compute_signals(text: str, tokens: Sequence[str]) -> ReceiptSignals:
    """
    Compute the shared boolean signals for a normalized description.

    Args:
        text: Normalized description
        tokens: Its tokens

    Returns:
        ReceiptSignals
    """
    beverage = matches_any(text, _BEVERAGE_SIGNAL) or any(
        token in BEVERAGE_UNIT_TOKENS for token in tokens
    )
    return ReceiptSignals(
        beverage=beverage,
        sauce=matches_any(text, _SAUCE_SIGNAL),
        cleaning=matches_any(text, _CLEANING_SIGNAL),
        energy_snack=matches_any(text, _ENERGY_SNACK_SIGNAL),
        snack_brand=matches_any(text, _SNACK_BRAND_SIGNAL),
    )


class ReceiptCategorizer:
    """Categorizes receipt line items against a caller-supplied registry."""

    def __init__(
        self,
        debug_mode: bool = False,
        broad_types: Optional[Dict[str, str]] = None
    ):
        """Initialize the categorizer.

        Args:
            debug_mode: If True, log which rule fired for every suggestion
            broad_types: Lowercase category name -> broad type, used for
                reconciliation and summaries (defaults to the built-in taxonomy)
        """
        self.rules = CLASSIFICATION_RULES
        self.locale_rules = LOCALE_HINT_RULES
        self.broad_types = broad_types if broad_types is not None else build_broad_type_map()
        self.debug_mode = debug_mode

    def _log_match(self, text: str, suggestion: CategorySuggestion) -> None:
        if self.debug_mode:
            logger.debug(
                f"{suggestion.reason}: {text!r} -> {suggestion.category} "
                f"({suggestion.confidence.value}, {suggestion.score:.2f})"
            )

    def match_locale(
        self,
        locale: str,
        normalized_text: str,
        registry: Dict[str, str]
    ) -> Optional[CategorySuggestion]:
        """
        Try the locale-specific keyword rules.

        Args:
            locale: Supported locale tag (never "unknown")
            normalized_text: Output of normalize_text
            registry: Category registry

        Returns:
            Strong CategorySuggestion for the first matching keyword, or None
        """
        for pattern, categories in self.locale_rules.get(locale, ()):
            if not pattern.search(normalized_text):
                continue

            category = resolve_category(categories, registry)
            if category is None:
                return None

            suggestion = CategorySuggestion(
                category=category,
                confidence=Confidence.STRONG,
                score=CATEGORIZER_CONFIG["locale_hint_score"],
                reason=f"locale_{locale}",
            )
            self._log_match(normalized_text, suggestion)
            return suggestion

        return None

    def classify_general(
        self,
        normalized_text: str,
        tokens: Sequence[str],
        registry: Dict[str, str]
    ) -> Optional[CategorySuggestion]:
        """
        Run the multilingual rule cascade.

        Rules are evaluated in order and the first one that fires decides the
        outcome, even when none of its categories are registered.

        Args:
            normalized_text: Output of normalize_text
            tokens: Tokens of the normalized text
            registry: Category registry

        Returns:
            CategorySuggestion, or None when no rule fires or nothing resolves
        """
        if not normalized_text:
            return None

        signals = compute_signals(normalized_text, tokens)

        for rule in self.rules:
            if not rule.matches(normalized_text, tokens, signals):
                continue

            category = resolve_category(rule.categories, registry)
            if category is None:
                if self.debug_mode:
                    logger.debug(f"{rule.reason}: no registered category for {normalized_text!r}")
                return None

            suggestion = CategorySuggestion(
                category=category,
                confidence=rule.confidence,
                score=rule.score,
                reason=rule.reason,
            )
            self._log_match(normalized_text, suggestion)
            return suggestion

        return None

    def get_suggestion(
        self,
        description: Optional[str],
        registry: Dict[str, str],
        locale: Optional[str] = None
    ) -> Optional[CategorySuggestion]:
        """
        Suggest a category for a receipt item description.

        Args:
            description: Raw item description
            registry: Category registry
            locale: Receipt locale tag (optional; unknown values are ignored)

        Returns:
            CategorySuggestion or None

        Example:
            >>> registry = build_category_registry(["Bread", "Other"])
            >>> ReceiptCategorizer().get_suggestion("Pan integral", registry, "es")
            CategorySuggestion(category='Bread', confidence=<Confidence.STRONG: 'strong'>, score=0.84, reason='locale_es')
        """
        if not description or not isinstance(description, str) or not description.strip():
            return None

        text, tokens = normalize_text(description.strip())
        if not text:
            return None

        locale_tag = normalize_locale(locale)
        if locale_tag != UNKNOWN_LOCALE:
            suggestion = self.match_locale(locale_tag, text, registry)
            if suggestion is not None:
                return suggestion

        return self.classify_general(text, tokens, registry)

    def reconcile_item_category(
        self,
        description: Optional[str],
        current_category: Optional[str],
        registry: Dict[str, str],
        locale: Optional[str] = None
    ) -> Tuple[Optional[str], Optional[CategorySuggestion]]:
        """
        Reconcile an upstream-assigned category with the heuristic suggestion.

        The suggestion replaces the current category only when the current
        one is missing or "Other", or when exactly one of the two is a drink
        category.

        Args:
            description: Raw item description
            current_category: Category assigned upstream (may be unregistered)
            registry: Category registry
            locale: Receipt locale tag (optional)

        Returns:
            Tuple of (final category or None, suggestion or None)
        """
        fallback = CATEGORIZER_CONFIG["fallback_category"]
        drinks = CATEGORIZER_CONFIG["reconciliation"]["drinks_broad_type"]

        current = registry.get(current_category.strip().lower()) if current_category else None
        if current is None:
            current = registry.get(fallback.lower())

        suggestion = self.get_suggestion(description, registry, locale)
        if suggestion is None:
            return current, None

        current_is_other = current is None or current.lower() == fallback.lower()
        current_is_drink = get_broad_type(current, self.broad_types) == drinks
        suggested_is_drink = get_broad_type(suggestion.category, self.broad_types) == drinks

        if current_is_other or current_is_drink != suggested_is_drink:
            if self.debug_mode:
                logger.debug(f"Reconciled {description!r}: {current} -> {suggestion.category}")
            return suggestion.category, suggestion

        return current, suggestion

    def categorize_items(
        self,
        items: List[Dict],
        registry: Dict[str, str],
        locale: Optional[str] = None
    ) -> List[Tuple[Dict, Optional[CategorySuggestion]]]:
        """
        Suggest categories for a list of receipt items.

        Args:
            items: Item dicts with a "description" key
            registry: Category registry, built once for the whole batch
            locale: Receipt locale tag (optional)

        Returns:
            List of (item, suggestion) tuples
        """
        return [
            (item, self.get_suggestion(item.get("description"), registry, locale))
            for item in items
        ]

    def get_category_summary(self, items: List[Dict]) -> Dict:
        """
        Summarise categorised receipt items.

        Args:
            items: Item dicts with "category" and "total_price" keys; items
                without a category are skipped

        Returns:
            Dictionary with totals and counts per category and per broad type
        """
        summary = {
            "by_category": {},
            "by_broad_type": {},
            "total_amount": 0.0,
            "item_count": 0,
        }

        for item in items:
            category = item.get("category")
            if not category:
                continue

            amount = float(item.get("total_price") or 0.0)
            broad_type = get_broad_type(category, self.broad_types)

            for key, bucket_name in (("by_category", category), ("by_broad_type", broad_type)):
                bucket = summary[key].setdefault(bucket_name, {"total": 0.0, "count": 0})
                bucket["total"] = round(bucket["total"] + amount, 2)
                bucket["count"] += 1

            summary["total_amount"] = round(summary["total_amount"] + amount, 2)
            summary["item_count"] += 1

        return summary


_DEFAULT_CATEGORIZER = ReceiptCategorizer()


def get_suggestion(
    description: Optional[str],
    registry: Dict[str, str],
    locale: Optional[str] = None
) -> Optional[CategorySuggestion]:
    """Suggest a category using the shared default categorizer."""
    return _DEFAULT_CATEGORIZER.get_suggestion(description, registry, locale)


def match_locale(
    locale: str,
    normalized_text: str,
    registry: Dict[str, str]
) -> Optional[CategorySuggestion]:
    """Run only the locale hint rules for a supported locale."""
    return _DEFAULT_CATEGORIZER.match_locale(locale, normalized_text, registry)


def classify_general(
    normalized_text: str,
    tokens: Sequence[str],
    registry: Dict[str, str]
) -> Optional[CategorySuggestion]:
    """Run only the general rule cascade."""
    return _DEFAULT_CATEGORIZER.classify_general(normalized_text, tokens, registry)
