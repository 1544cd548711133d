from __future__ import annotations
"""
Mapping utilities to convert catalog products into API / display models.

Centralises price and rating formatting so the HTTP API and the CLI render
results identically.
"""

import math
from typing import List, Sequence

from loguru import logger

from .config import Product, ProductCard, SearchResponse

_FULL_STAR = "★"
_HALF_STAR = "½"


def render_stars(rating: float) -> str:
    """
    Whole stars for the integer part, plus a half mark when the
    fractional part is at least .5 (4.5 -> "★★★★½", 4.4 -> "★★★★").
    """
    full = max(0, min(5, math.floor(rating)))
    half = rating - math.floor(rating) >= 0.5
    return _FULL_STAR * full + (_HALF_STAR if half else "")


def format_price(price: float) -> str:
    return f"${price:.2f}"


def to_product_card(product: Product) -> ProductCard:
    return ProductCard(
        id=product.id,
        name=product.name,
        description=product.description,
        category=product.category,
        price=product.price,
        price_label=format_price(product.price),
        rating=product.rating,
        rating_label=f"{product.rating:.1f}",
        stars=render_stars(product.rating),
    )


def map_products_to_response(
    products: Sequence[Product],
    query: str = "",
) -> SearchResponse:
    """
    Convert an ordered product sequence into a SearchResponse.
    Deduplicates by id while preserving first-seen order.
    """
    seen = set()
    cards: List[ProductCard] = []
    for p in products:
        if p.id in seen:
            logger.warning("Duplicate product id {} in results; skipping", p.id)
            continue
        seen.add(p.id)
        cards.append(to_product_card(p))

    query = query or ""
    return SearchResponse(
        query=query,
        ai_search_active=bool(query.strip()),
        count=len(cards),
        products=cards,
    )
