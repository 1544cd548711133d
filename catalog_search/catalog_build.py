from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import pandas as pd
from loguru import logger

from .config import CATALOG_SNAPSHOT_PATH, CATEGORIES, RATING_MAX, RATING_MIN, Product


CATALOG_COLUMNS: List[str] = ["id", "name", "description", "category", "price", "rating"]
REQUIRED_COLUMNS: List[str] = ["id", "name", "category", "price", "rating"]

# ---------------------------
# Column detection / standardization
# ---------------------------

# Hand-edited catalog files drift in naming; accept a few obvious variants.
COLUMN_CANDIDATES: Dict[str, List[str]] = {
    "id": ["id", "product_id", "sku"],
    "name": ["name", "title", "product_name"],
    "description": ["description", "desc", "summary"],
    "category": ["category", "type"],
    "price": ["price", "price_usd", "cost"],
    "rating": ["rating", "stars", "avg_rating"],
}

_CATEGORY_LOOKUP: Dict[str, str] = {c.lower(): c for c in CATEGORIES}


def _standardize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """
    Rename raw catalog columns to the canonical schema (case-insensitive).
    """
    col_map: Dict[str, str] = {}
    lower_to_original = {str(c).lower(): c for c in df.columns}

    for canon, candidates in COLUMN_CANDIDATES.items():
        for candidate in candidates:
            if candidate in lower_to_original:
                col_map[lower_to_original[candidate]] = canon
                break

    return df.rename(columns=col_map)


def _canonicalize_category(value) -> str:
    """
    Map a raw category to its canonical label ("shoes " -> "Shoes").
    Unknown labels come back as "" so the row can be dropped.
    """
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return _CATEGORY_LOOKUP.get(str(value).strip().lower(), "")


def _drop_rows(df: pd.DataFrame, bad: pd.Series, reason: str) -> pd.DataFrame:
    n_bad = int(bad.sum())
    if n_bad:
        logger.warning(
            "Dropping {} catalog row(s) with {}: {}",
            n_bad,
            reason,
            df.loc[bad, "id"].tolist(),
        )
    return df.loc[~bad]


# ---------------------------
# Catalog normalization
# ---------------------------

def normalize_catalog_df(df_raw: pd.DataFrame) -> pd.DataFrame:
    """
    Turn a raw product table into the canonical catalog frame.

    Output columns: id (str), name (str), description (str),
    category (canonical label), price (float >= 0), rating (float in [1, 5]).
    Invalid rows are dropped with a warning; surviving rows keep their order.
    """
    df = _standardize_columns(df_raw.copy())

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Catalog is missing required columns: {missing}")
    if "description" not in df.columns:
        df["description"] = ""

    df["id"] = df["id"].fillna("").astype(str).str.strip()
    df["name"] = df["name"].fillna("").astype(str).str.strip()
    df["description"] = df["description"].fillna("").astype(str).str.strip()
    df["category"] = df["category"].apply(_canonicalize_category)
    df["price"] = pd.to_numeric(df["price"], errors="coerce")
    df["rating"] = pd.to_numeric(df["rating"], errors="coerce")

    df = _drop_rows(df, (df["id"] == "") | (df["name"] == ""), "blank id or name")
    df = _drop_rows(df, df["category"] == "", "unknown category")
    df = _drop_rows(df, df["price"].isna() | (df["price"] < 0), "invalid price")
    df = _drop_rows(
        df,
        df["rating"].isna() | (df["rating"] < RATING_MIN) | (df["rating"] > RATING_MAX),
        "rating outside [{}, {}]".format(RATING_MIN, RATING_MAX),
    )
    df = _drop_rows(df, df["id"].duplicated(keep="first"), "duplicate id")

    df_out = df[CATALOG_COLUMNS].astype({"price": "float64", "rating": "float64"})
    return df_out.reset_index(drop=True)


# ---------------------------
# IO helpers
# ---------------------------

def load_raw_catalog(path: Path = CATALOG_SNAPSHOT_PATH) -> pd.DataFrame:
    """
    Load raw product records from a JSON array file.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")
    df = pd.read_json(path, orient="records", dtype=False)
    logger.info("Loaded {} rows from raw catalog {}", len(df), path)
    return df


def load_catalog_snapshot(path: Path = CATALOG_SNAPSHOT_PATH) -> pd.DataFrame:
    """
    Convenience helper: load the catalog file and normalize it.
    """
    df = normalize_catalog_df(load_raw_catalog(path))
    logger.info("Catalog snapshot ready with {} products", len(df))
    return df


def catalog_products(catalog_df: pd.DataFrame) -> List[Product]:
    """Frame rows as immutable Product models, in frame order."""
    return [Product(**rec) for rec in catalog_df[CATALOG_COLUMNS].to_dict("records")]


def catalog_categories(catalog_df: pd.DataFrame) -> List[str]:
    """Distinct categories in first-seen order."""
    return list(pd.unique(catalog_df["category"]))
