# catalog_search/rerank.py
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np
from loguru import logger

from .config import DEFAULT_WEIGHTS, Product, RankingWeights
from .constants import CATEGORY_HINTS, PRICE_INTENT_HIGH, PRICE_INTENT_LOW
from .pipeline_types import QueryConstraints, ScoredCandidate
from .query_analysis import interpret


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

def build_candidate_text(product: Product) -> str:
    """
    Lower-cased haystack for keyword matching: name + description + category.
    """
    return f"{product.name} {product.description} {product.category}".lower()


def normalized_prices(
    products: Sequence[Product],
    span_floor: float = DEFAULT_WEIGHTS.price_span_floor,
) -> np.ndarray:
    """
    Position of each price within [min, max] of the candidate set, in [0, 1].
    The span is floored so a single-price set maps everything to 0.
    """
    prices = np.asarray([p.price for p in products], dtype="float64")
    if prices.size == 0:
        return prices
    lo = float(prices.min())
    span = max(span_floor, float(prices.max()) - lo)
    return (prices - lo) / span


def score_product(
    product: Product,
    constraints: QueryConstraints,
    nprice: float,
    weights: RankingWeights = DEFAULT_WEIGHTS,
) -> float:
    s = 0.0
    hay = build_candidate_text(product)

    for kw in constraints.keywords:
        if kw in hay:
            s += weights.keyword_match

    cat_lower = product.category.lower()
    if cat_lower in CATEGORY_HINTS and cat_lower in constraints.keywords:
        s += weights.category_hint

    if constraints.max_price is not None and product.price <= constraints.max_price:
        s += weights.max_price_bonus
    if constraints.min_price is not None and product.price >= constraints.min_price:
        s += weights.min_price_bonus
    if constraints.min_rating is not None and product.rating >= constraints.min_rating:
        s += weights.min_rating_bonus

    if constraints.price_intent == PRICE_INTENT_HIGH:
        s += nprice * weights.price_intent
    elif constraints.price_intent == PRICE_INTENT_LOW:
        s += (1 - nprice) * weights.price_intent

    s += product.rating * weights.rating_bias
    s -= product.price * weights.price_bias
    return s


def score_candidates(
    products: Sequence[Product],
    constraints: QueryConstraints,
    weights: RankingWeights = DEFAULT_WEIGHTS,
) -> List[ScoredCandidate]:
    nprices = normalized_prices(products, span_floor=weights.price_span_floor)
    return [
        ScoredCandidate(
            product=p,
            nprice=float(n),
            score=score_product(p, constraints, float(n), weights),
        )
        for p, n in zip(products, nprices)
    ]


# ---------------------------------------------------------------------------
# Deterministic ordering
# ---------------------------------------------------------------------------

def _sort_key(c: ScoredCandidate, price_intent: Optional[str]) -> Tuple[float, float, float, float]:
    # score desc, intent-directed price position, rating desc, price asc
    if price_intent == PRICE_INTENT_HIGH:
        intent_key = -c.nprice
    elif price_intent == PRICE_INTENT_LOW:
        intent_key = c.nprice
    else:
        intent_key = 0.0
    return (-c.score, intent_key, -c.product.rating, c.product.price)


def order_candidates(
    candidates: List[ScoredCandidate],
    price_intent: Optional[str] = None,
) -> List[ScoredCandidate]:
    """Stable sort, so full ties keep their input order."""
    return sorted(candidates, key=lambda c: _sort_key(c, price_intent))


# ---------------------------------------------------------------------------
# Main entry
# ---------------------------------------------------------------------------

def rank_products(
    products: Sequence[Product],
    constraints: QueryConstraints,
    weights: RankingWeights = DEFAULT_WEIGHTS,
) -> Sequence[Product]:
    """
    High-level rank:
      1) score every product against the constraints
      2) keep those scoring strictly above the relevance threshold
      3) sort by (-score, intent price position, -rating, price)
      4) if nothing clears the threshold, hand back the input untouched
    """
    if not products:
        return products

    scored = score_candidates(products, constraints, weights)
    relevant = [c for c in scored if c.score > weights.relevance_threshold]

    if not relevant:
        logger.info(
            "No product cleared relevance threshold {} ({} candidates); returning unranked",
            weights.relevance_threshold,
            len(products),
        )
        return products

    ranked = order_candidates(relevant, constraints.price_intent)
    logger.debug(
        "Ranked {} of {} products; top={} score={:.2f}",
        len(ranked),
        len(products),
        ranked[0].product.id,
        ranked[0].score,
    )
    return [c.product for c in ranked]


def search_products(
    products: Sequence[Product],
    raw_query: str,
    weights: RankingWeights = DEFAULT_WEIGHTS,
) -> Sequence[Product]:
    """
    Apply a free-text query to already facet-filtered products.
    A blank query bypasses interpretation and ranking entirely.
    """
    if not raw_query or not raw_query.strip():
        return products
    return rank_products(products, interpret(raw_query), weights)
