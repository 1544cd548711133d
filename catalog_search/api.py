from __future__ import annotations

"""
FastAPI application for the catalog browser.

- Facet filters (category / price ceiling / rating floor) always apply
- A non-blank query is interpreted and ranked; a blank one keeps catalog order
- The catalog is static and cached once per process
"""

from contextlib import asynccontextmanager
from dataclasses import asdict
from typing import List, Optional

import pandas as pd
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from ._singletons import get_catalog_df
from .catalog_build import catalog_categories, catalog_products
from .config import (
    CategoriesResponse,
    HealthResponse,
    InterpretRequest,
    InterpretResponse,
    RankingWeights,
    DEFAULT_WEIGHTS,
    SearchRequest,
    SearchResponse,
)
from .facets import apply_facet_filters
from .mapping import map_products_to_response
from .query_analysis import interpret
from .rerank import search_products


# -----------------------
# Pipeline
# -----------------------

def run_search(
    query: str,
    catalog_df: pd.DataFrame,
    category: Optional[str] = None,
    max_price: Optional[float] = None,
    min_rating: Optional[float] = None,
    weights: RankingWeights = DEFAULT_WEIGHTS,
) -> SearchResponse:
    # --- 1) Facet filters ---
    filtered = apply_facet_filters(
        catalog_df,
        category=category,
        max_price=max_price,
        min_rating=min_rating,
    )
    candidates = catalog_products(filtered)

    # --- 2) Free-text interpretation + ranking (bypassed for blank queries) ---
    ordered = search_products(candidates, query, weights)

    logger.info(
        "Search {!r}: {} of {} products after facets, {} returned",
        query,
        len(candidates),
        len(catalog_df),
        len(ordered),
    )
    return map_products_to_response(ordered, query)


# -----------------------
# FastAPI app + startup
# -----------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting app warmup...")
    df = get_catalog_df()
    logger.info("Warmup complete; catalog has {} products", len(df))
    yield


app = FastAPI(title="catalog-search", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="healthy")


@app.get("/categories", response_model=CategoriesResponse)
def categories() -> CategoriesResponse:
    return CategoriesResponse(categories=catalog_categories(get_catalog_df()))


@app.post("/search", response_model=SearchResponse)
def search(req: SearchRequest) -> SearchResponse:
    return run_search(
        req.query,
        get_catalog_df(),
        category=req.category,
        max_price=req.max_price,
        min_rating=req.min_rating,
    )


@app.post("/interpret", response_model=InterpretResponse)
def interpret_query(req: InterpretRequest) -> InterpretResponse:
    return InterpretResponse(**asdict(interpret(req.query)))


# -----------------------
# CLI convenience
# -----------------------

def search_single_query(query: str) -> List[str]:
    response = run_search(query, get_catalog_df())
    return [card.id for card in response.products]
