from __future__ import annotations

import os
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------
# Paths
# ---------------------------

PACKAGE_ROOT = Path(__file__).resolve().parent

DATA_DIR = PACKAGE_ROOT / "data"
DEFAULT_CATALOG_SNAPSHOT_PATH = DATA_DIR / "products.json"
CATALOG_SNAPSHOT_PATH = Path(
    os.getenv("CATALOG_SNAPSHOT_PATH", str(DEFAULT_CATALOG_SNAPSHOT_PATH))
)


# ---------------------------
# Catalog schema
# ---------------------------

CATEGORIES: List[str] = [
    "Shoes",
    "Electronics",
    "Apparel",
    "Accessories",
    "Watches",
    "Bags",
]

CategoryLabel = Literal["Shoes", "Electronics", "Apparel", "Accessories", "Watches", "Bags"]

RATING_MIN = 1.0
RATING_MAX = 5.0


# ---------------------------
# Query handling
# ---------------------------

# longest query accepted at the HTTP and CLI edges
MAX_QUERY_CHARS = int(os.getenv("MAX_QUERY_CHARS", "20000"))

# "good reviews" without an explicit star count implies this floor
IMPLIED_MIN_RATING = 4.0


# ---------------------------
# Ranking settings & env toggles
# ---------------------------

DEFAULT_RELEVANCE_THRESHOLD = 0.5
RELEVANCE_THRESHOLD = float(
    os.getenv("CATALOG_RELEVANCE_THRESHOLD", str(DEFAULT_RELEVANCE_THRESHOLD))
)


class RankingWeights(BaseModel):
    """
    Additive scoring coefficients for free-text ranking.

    Defaults reproduce the catalog browser's behaviour exactly; override
    them for a catalog with a very different price scale.
    """

    model_config = ConfigDict(frozen=True)

    keyword_match: float = 2.5
    category_hint: float = 2.5
    max_price_bonus: float = 2.0
    min_price_bonus: float = 1.5
    min_rating_bonus: float = 2.0
    price_intent: float = 3.0
    rating_bias: float = 0.2
    price_bias: float = 0.01
    price_span_floor: float = 1.0
    relevance_threshold: float = DEFAULT_RELEVANCE_THRESHOLD


DEFAULT_WEIGHTS = RankingWeights(relevance_threshold=RELEVANCE_THRESHOLD)


# ---------------------------
# Pydantic models shared around the app
# ---------------------------

class Product(BaseModel):
    """
    A single catalog entry. Immutable once loaded.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    category: CategoryLabel
    price: float = Field(ge=0)
    rating: float = Field(ge=RATING_MIN, le=RATING_MAX)


class ProductCard(BaseModel):
    """
    Display-ready view of a product, as rendered in the result grid.
    """

    id: str
    name: str
    description: str
    category: str
    price: float
    price_label: str
    rating: float
    rating_label: str
    stars: str


class SearchRequest(BaseModel):
    """
    Request body for POST /search. Every facet is optional.
    """

    query: str = Field(default="", max_length=MAX_QUERY_CHARS)
    category: Optional[str] = None
    max_price: Optional[float] = Field(default=None, ge=0)
    min_rating: Optional[float] = Field(default=None, ge=RATING_MIN, le=RATING_MAX)


class SearchResponse(BaseModel):
    """
    Response body for POST /search.
    """

    query: str
    ai_search_active: bool
    count: int
    products: List[ProductCard]


class InterpretRequest(BaseModel):
    query: str = Field(default="", max_length=MAX_QUERY_CHARS)


class InterpretResponse(BaseModel):
    """
    Structured constraints extracted from a free-text query.
    """

    max_price: Optional[float] = None
    min_price: Optional[float] = None
    min_rating: Optional[float] = None
    keywords: List[str] = Field(default_factory=list)
    price_intent: Optional[Literal["high", "low"]] = None


class CategoriesResponse(BaseModel):
    categories: List[str]


class HealthResponse(BaseModel):
    """
    Response body for GET /health.
    """

    status: str
