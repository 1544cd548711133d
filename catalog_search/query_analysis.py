"""Rule-based interpretation of free-text catalog queries."""

from __future__ import annotations

import re
from typing import Callable, Dict, List, Optional, Tuple

from loguru import logger

from .config import IMPLIED_MIN_RATING
from .constants import CHEAP_TERMS, EXPENSIVE_TERMS, PRICE_INTENT_HIGH, PRICE_INTENT_LOW
from .normalize import keyword_tokens
from .pipeline_types import QueryConstraints
from .utils.text_clean import clean_query_text

Rule = Tuple[re.Pattern[str], Callable[[re.Match], Dict[str, float]]]

# ---------------------------------------------------------------------------
# Price range rules (first match wins)
# ---------------------------------------------------------------------------

_AMOUNT = r"\$?(\d+(?:\.\d+)?)"


def _between(m: re.Match) -> Dict[str, float]:
    a, b = float(m.group(1)), float(m.group(2))
    return {"min_price": min(a, b), "max_price": max(a, b)}


def _ceiling(m: re.Match) -> Dict[str, float]:
    return {"max_price": float(m.group(1))}


def _floor(m: re.Match) -> Dict[str, float]:
    return {"min_price": float(m.group(1))}


_RANGE_RULES: List[Rule] = [
    (
        re.compile(r"between\s*" + _AMOUNT + r"\s*(?:and|-|–|to)\s*" + _AMOUNT, re.I | re.A),
        _between,
    ),
    (
        re.compile(r"(?:under|below|less\s+than|cheaper\s+than)\s*" + _AMOUNT, re.I | re.A),
        _ceiling,
    ),
    (
        re.compile(r"(?:over|above|more\s+than|at\s+least)\s*" + _AMOUNT, re.I | re.A),
        _floor,
    ),
]

# ---------------------------------------------------------------------------
# Rating rules (explicit star count beats the implied floor)
# ---------------------------------------------------------------------------

_RATING_RULES: List[Rule] = [
    (
        re.compile(r"(\d(?:\.\d)?)\s*stars?", re.I | re.A),
        lambda m: {"min_rating": float(m.group(1))},
    ),
    (
        re.compile(r"\b(?:good|great|high)\s+reviews?\b", re.I | re.A),
        lambda m: {"min_rating": IMPLIED_MIN_RATING},
    ),
]

# ---------------------------------------------------------------------------
# Price tendency
# ---------------------------------------------------------------------------


def _vocabulary_rx(terms: List[str]) -> re.Pattern[str]:
    """Word-bounded alternation where each hyphen may be a space or absent."""
    alts = [r"[-\s]?".join(re.escape(part) for part in t.split("-")) for t in terms]
    return re.compile(r"\b(?:" + "|".join(alts) + r")\b", re.I | re.A)


# expensive is checked first so it wins when both vocabularies appear
_INTENT_RULES: List[Tuple[re.Pattern[str], str]] = [
    (_vocabulary_rx(EXPENSIVE_TERMS), PRICE_INTENT_HIGH),
    (_vocabulary_rx(CHEAP_TERMS), PRICE_INTENT_LOW),
]


def _first_match(rules: List[Rule], text: str) -> Dict[str, float]:
    for rx, action in rules:
        m = rx.search(text)
        if m:
            return action(m)
    return {}


def detect_price_range(text: str) -> Dict[str, float]:
    """Return ``min_price``/``max_price`` hints found in the query."""
    return _first_match(_RANGE_RULES, text)


def detect_min_rating(text: str) -> Optional[float]:
    """Explicit "N stars" floor, else the implied floor for "good reviews"."""
    return _first_match(_RATING_RULES, text).get("min_rating")


def detect_price_intent(text: str) -> Optional[str]:
    """Price tendency ("high" or "low") from the fixed vocabularies; expensive wins."""
    for rx, intent in _INTENT_RULES:
        if rx.search(text):
            return intent
    return None


# ---------------------------------------------------------------------------
# Main entry
# ---------------------------------------------------------------------------


def interpret(raw_query: str) -> QueryConstraints:
    """
    Turn a raw search string into structured constraints.

    Never raises: anything the rules do not recognise simply leaves the
    corresponding field unset. Range, rating, tendency and keywords are
    detected independently of each other.
    """
    text = clean_query_text(raw_query)
    if not text:
        return QueryConstraints()

    price = detect_price_range(text)
    constraints = QueryConstraints(
        max_price=price.get("max_price"),
        min_price=price.get("min_price"),
        min_rating=detect_min_rating(text),
        keywords=keyword_tokens(text),
        price_intent=detect_price_intent(text),
    )
    if constraints.is_empty():
        logger.debug("Query {!r} produced no constraints", text)
    else:
        logger.debug("Interpreted query {!r} -> {}", text, constraints)
    return constraints


__all__ = [
    "interpret",
    "detect_price_range",
    "detect_min_rating",
    "detect_price_intent",
]
