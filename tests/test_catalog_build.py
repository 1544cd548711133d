import json

import pandas as pd
import pytest

from catalog_search.catalog_build import (
    CATALOG_COLUMNS,
    catalog_categories,
    catalog_products,
    load_catalog_snapshot,
    load_raw_catalog,
    normalize_catalog_df,
)
from catalog_search.config import Product


def test_bundled_snapshot_schema(catalog_df):
    assert list(catalog_df.columns) == CATALOG_COLUMNS
    assert len(catalog_df) == 10
    assert catalog_df["id"].tolist()[:2] == ["p1", "p2"]
    assert catalog_df["price"].dtype == "float64"
    assert catalog_df["rating"].between(1.0, 5.0).all()


def test_normalize_drops_invalid_rows_and_standardizes():
    raw = pd.DataFrame(
        {
            "product_id": ["a1", "a2", "a3", "a4", "a1", "a5", "a6"],
            "title": ["Alpha", "Toy", "Star", "Neg", "Dup", "", "Pack"],
            "category": ["shoes ", "Toys", "Bags", "Bags", "Bags", "Bags", "BAGS"],
            "price": ["10.5", 5, 5, -1, 5, 5, 20],
            "stars": [4.2, 4.0, 6.0, 4.0, 4.0, 4.0, 3.0],
            "desc": [" Nice ", "x", "x", "x", "x", "x", None],
        }
    )

    df = normalize_catalog_df(raw)

    assert list(df.columns) == CATALOG_COLUMNS
    assert df["id"].tolist() == ["a1", "a6"]
    row = df.iloc[0]
    assert row["name"] == "Alpha"
    assert row["category"] == "Shoes"
    assert row["price"] == 10.5
    assert row["description"] == "Nice"
    assert df.iloc[1]["category"] == "Bags"
    assert df.iloc[1]["description"] == ""


def test_normalize_adds_missing_description():
    raw = pd.DataFrame(
        {"id": ["x"], "name": ["X"], "category": ["Watches"], "price": [1], "rating": [5]}
    )
    df = normalize_catalog_df(raw)
    assert df.iloc[0]["description"] == ""


def test_normalize_requires_core_columns():
    with pytest.raises(ValueError):
        normalize_catalog_df(pd.DataFrame({"name": ["X"], "price": [1.0]}))


def test_load_raw_catalog_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_raw_catalog(tmp_path / "nope.json")


def test_load_catalog_snapshot_from_custom_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            [
                {"id": "w1", "name": "Field Watch", "description": "Quartz", "category": "Watches",
                 "price": 80, "rating": 4.4},
                {"id": "b1", "name": "Tote", "description": "Canvas tote", "category": "Bags",
                 "price": 25.5, "rating": 3.9},
            ]
        ),
        encoding="utf-8",
    )
    df = load_catalog_snapshot(path)
    assert df["id"].tolist() == ["w1", "b1"]
    assert catalog_categories(df) == ["Watches", "Bags"]


def test_catalog_products_are_models_in_order(catalog_df):
    items = catalog_products(catalog_df)
    assert all(isinstance(p, Product) for p in items)
    assert [p.id for p in items] == catalog_df["id"].tolist()
    assert items[1].name == "Urban Jogger"
    assert items[1].price == 69.0


def test_catalog_categories_first_seen_order(catalog_df):
    assert catalog_categories(catalog_df) == [
        "Shoes",
        "Electronics",
        "Apparel",
        "Bags",
        "Watches",
        "Accessories",
    ]
