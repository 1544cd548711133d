import pytest

from catalog_search.catalog_build import catalog_products, load_catalog_snapshot
from catalog_search.config import Product


@pytest.fixture
def catalog_df():
    return load_catalog_snapshot()


@pytest.fixture
def products(catalog_df):
    return catalog_products(catalog_df)


def make_product(pid, price, rating, category="Shoes", name=None, description=""):
    return Product(
        id=pid,
        name=name or f"Item {pid}",
        description=description,
        category=category,
        price=price,
        rating=rating,
    )


@pytest.fixture
def make():
    return make_product
