from __future__ import annotations

"""
Keyword normalisation for free-text catalog queries.

Queries and product text are compared by plain substring presence, so the
only job here is to reduce a query to the tokens worth looking for:

* simple_tokenize(text) -> List[str]
    Lower-case, punctuation to spaces, whitespace split, hyphens removed.

* keyword_tokens(text) -> List[str]
    simple_tokenize minus stopwords and bare numbers.
"""

import re
from typing import Iterable, List

from .constants import STOPWORDS

_NON_KEYWORD_CHARS = re.compile(r"[^a-z0-9\s-]")
_NUMBER_TOKEN = re.compile(r"^\d+(?:\.\d+)?$")


def simple_tokenize(text: str) -> List[str]:
    """Split text into lower-case tokens with hyphens stripped.

    "High-End Shoes!" -> ["highend", "shoes"]
    """
    if not text:
        return []
    cleaned = _NON_KEYWORD_CHARS.sub(" ", text.lower())
    return [tok.replace("-", "") for tok in cleaned.split()]


def is_number_token(token: str) -> bool:
    return bool(_NUMBER_TOKEN.match(token))


def drop_stopwords(tokens: Iterable[str]) -> List[str]:
    return [
        t for t in tokens
        if t and t not in STOPWORDS and not is_number_token(t)
    ]


def keyword_tokens(text: str) -> List[str]:
    """Tokens of ``text`` that can contribute a keyword match.

    Price-tendency words ("cheap", "premium", ...) are stopwords so a query
    like "cheap shoes" does not also reward products describing themselves
    as cheap.
    """
    return drop_stopwords(simple_tokenize(text))
