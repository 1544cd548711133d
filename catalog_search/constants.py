from __future__ import annotations

"""Fixed vocabularies used by the query interpreter and the ranker.

Kept in one place so the price-tendency patterns and the keyword stopword
list are derived from the same word lists and cannot drift apart.
"""

PRICE_INTENT_HIGH = "high"
PRICE_INTENT_LOW = "low"

# Hyphenated entries also match with the hyphen replaced by whitespace or
# dropped entirely ("high-end", "high end", "highend").
EXPENSIVE_TERMS = [
    "expensive",
    "premium",
    "high-end",
    "pricey",
    "pricy",
    "top-tier",
]

CHEAP_TERMS = [
    "cheap",
    "budget",
    "affordable",
    "inexpensive",
    "low-cost",
    "low-end",
]

FUNCTION_WORDS = [
    "the", "a", "an", "with", "and", "for",
    "under", "below", "less", "than", "between",
    "over", "above", "at", "least", "most",
    "good", "great", "high", "reviews", "review",
    "stars", "star", "me", "show", "find",
    "in", "on", "of", "to",
]

# Keyword tokens have their hyphens stripped, so the price-tendency words are
# stored in that same form.
STOPWORDS = frozenset(FUNCTION_WORDS) | frozenset(
    t.replace("-", "") for t in EXPENSIVE_TERMS + CHEAP_TERMS
)

CATEGORY_HINTS = frozenset(
    [
        "shoes",
        "electronics",
        "apparel",
        "accessories",
        "watches",
        "bags",
    ]
)
