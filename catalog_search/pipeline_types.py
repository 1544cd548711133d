"""Typed containers shared across pipeline modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .config import Product


@dataclass
class QueryConstraints:
    """Structured constraints inferred from one free-text query."""

    max_price: Optional[float] = None
    min_price: Optional[float] = None
    min_rating: Optional[float] = None
    keywords: List[str] = field(default_factory=list)
    price_intent: Optional[str] = None  # "high" | "low"

    def is_empty(self) -> bool:
        return (
            self.max_price is None
            and self.min_price is None
            and self.min_rating is None
            and not self.keywords
            and self.price_intent is None
        )


@dataclass
class ScoredCandidate:
    """A product with its normalized price position and relevance score."""

    product: Product
    nprice: float
    score: float
