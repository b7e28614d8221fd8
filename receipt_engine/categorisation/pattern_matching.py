"""
Generic Pattern Matching for Receipt Item Categorization.

Provides reusable regex and fuzzy keyword matching used by the rule cascade
and the category label resolver.
"""

import re
from typing import Iterable, List, Optional, Pattern, Sequence, Tuple

from rapidfuzz import fuzz, process


def compile_patterns(patterns: Iterable[str]) -> Tuple[Pattern, ...]:
    """
    Compile a list of regex pattern strings once.

    Args:
        patterns: Regex pattern strings

    Returns:
        Tuple of compiled patterns, in the given order
    """
    return tuple(re.compile(pattern) for pattern in patterns)


def match_regex_patterns(
    text: str,
    patterns: Sequence[Pattern]
) -> Optional[str]:
    """
    Match text against compiled regex patterns.

    Args:
        text: Normalized text to match
        patterns: Compiled patterns

    Returns:
        The pattern source of the first match, or None
    """
    for pattern in patterns:
        if pattern.search(text):
            return pattern.pattern
    return None


def matches_any(text: str, patterns: Sequence[Pattern]) -> bool:
    """Return True if any compiled pattern matches the text."""
    return match_regex_patterns(text, patterns) is not None


def match_keywords(
    text: str,
    keywords: List[str],
    fuzzy_threshold: int = 88
) -> Optional[Tuple[str, float, str]]:
    """
    Match text against a list of keywords.

    Uses exact matching first, then a rapidfuzz ratio match.

    Args:
        text: Normalized text to match
        keywords: List of normalized keyword strings
        fuzzy_threshold: Minimum score for fuzzy matching (0-100)

    Returns:
        Tuple of (matched_keyword, confidence, match_method) or None
    """
    if not text or not keywords:
        return None

    if text in keywords:
        return (text, 1.0, "keyword")

    best = process.extractOne(
        text,
        keywords,
        scorer=fuzz.ratio,
        score_cutoff=fuzzy_threshold,
    )
    if best is None:
        return None

    keyword, score, _ = best
    return (keyword, score / 100.0, "fuzzy")
