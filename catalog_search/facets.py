from __future__ import annotations

"""
Structured facet filtering applied before any free-text ranking.

Facets are plain predicates over catalog columns: category equality,
a price ceiling and a rating floor. An unset facet filters nothing; a
blank category means "all categories". Note that 0 is a real price
ceiling, not "unset".
"""

from typing import Optional

import pandas as pd


def apply_facet_filters(
    catalog_df: pd.DataFrame,
    category: Optional[str] = None,
    max_price: Optional[float] = None,
    min_rating: Optional[float] = None,
) -> pd.DataFrame:
    mask = pd.Series(True, index=catalog_df.index)
    if category:
        mask &= catalog_df["category"] == category
    if max_price is not None:
        mask &= catalog_df["price"] <= max_price
    if min_rating is not None:
        mask &= catalog_df["rating"] >= min_rating
    return catalog_df.loc[mask]
