"""
Utility functions for OCR extraction
Common helper functions used across document extractors.
"""

import logging
import re
from typing import Callable, Dict, List, NamedTuple, Optional, Sequence

logger = logging.getLogger(__name__)


def collapse_whitespace(s: Optional[str]) -> str:
    """Collapse runs of whitespace (newlines included) into single spaces."""
    if not s:
        return ""
    return re.sub(r'\s+', ' ', s).strip()


def clean_value(s: Optional[str]) -> Optional[str]:
    """Trim a captured value; blank results become None."""
    if s is None:
        return None
    s = s.strip()
    return s or None


def upper_value(s: Optional[str]) -> Optional[str]:
    """Trim, collapse whitespace and upper-case a captured value."""
    s = collapse_whitespace(s)
    return s.upper() if s else None


def normalize_date(s: Optional[str]) -> Optional[str]:
    """Rewrite a DD.MM.YYYY or DD-MM-YYYY token with slash separators."""
    s = clean_value(s)
    if not s:
        return None
    return re.sub(r'[.\-]', '/', s)


def normalize_address(s: Optional[str]) -> Optional[str]:
    """Collapse whitespace and drop characters that never appear in addresses."""
    s = collapse_whitespace(s)
    s = re.sub(r'[^\w\s/°,\-]', '', s)
    return clean_value(collapse_whitespace(s))


class FieldRule(NamedTuple):
    """One step of an ordered fallback chain: a pattern and what to keep from a hit."""

    pattern: re.Pattern
    handler: Callable[[re.Match], Optional[str]]


def group(index: int = 1, transform: Callable[[Optional[str]], Optional[str]] = clean_value):
    """Build a handler that returns a transformed capture group."""
    def handler(m: re.Match) -> Optional[str]:
        return transform(m.group(index))
    return handler


def rule(pattern: str, flags: int = 0, index: int = 1,
         transform: Callable[[Optional[str]], Optional[str]] = clean_value) -> FieldRule:
    return FieldRule(re.compile(pattern, flags), group(index, transform))


def first_match(text: str, rules: Sequence[FieldRule]) -> Optional[str]:
    """
    Evaluate rules in order and return the first non-empty value.

    Within a rule, matches are visited left to right; a handler that
    returns None (blank or rejected value) moves on to the next match.
    """
    if not text:
        return None
    for field_rule in rules:
        for m in field_rule.pattern.finditer(text):
            value = field_rule.handler(m)
            if value:
                logger.debug("Pattern matched: %s -> %s", field_rule.pattern.pattern, value)
                return value
    return None


def expand_two_digit_year(yy: str, pivot: int = 50) -> str:
    """Two-digit years above the pivot are 19xx, the rest 20xx."""
    return f"19{yy}" if int(yy) > pivot else f"20{yy}"


def merge_results(results: List[Dict], bucket_px: int = 5) -> List[Dict]:
    """Merge OCR detections by y-position, keeping all texts on same line."""
    if not results:
        return []

    # Group by y-position bucket
    buckets: Dict[int, List[Dict]] = {}
    for r in results:
        b = int(round(r['y'] / float(bucket_px)) * bucket_px)
        buckets.setdefault(b, []).append(r)

    # For each bucket, sort by x-position and merge texts on same line
    ordered = []
    for b in sorted(buckets.keys()):
        items_sorted = sorted(buckets[b], key=lambda item: item.get('x', 0))
        merged_text = ' '.join(item['text'] for item in items_sorted)
        avg_conf = sum(item['conf'] for item in items_sorted) / len(items_sorted)
        ordered.append({'text': merged_text, 'conf': avg_conf, 'y': b})

    return ordered
