from catalog_search.config import SearchResponse
from catalog_search.mapping import (
    format_price,
    map_products_to_response,
    render_stars,
    to_product_card,
)


def test_render_stars():
    assert render_stars(4.5) == "★★★★½"
    assert render_stars(4.4) == "★★★★"
    assert render_stars(5.0) == "★★★★★"
    assert render_stars(1.0) == "★"


def test_format_price():
    assert format_price(69.0) == "$69.00"
    assert format_price(129.99) == "$129.99"


def test_to_product_card(make):
    card = to_product_card(make("p2", 69.0, 4.1, "Shoes", "Urban Jogger", "Comfy"))
    assert card.id == "p2"
    assert card.price_label == "$69.00"
    assert card.rating_label == "4.1"
    assert card.stars == "★★★★"
    assert card.category == "Shoes"


def test_map_products_to_response_dedups_in_order(make):
    a = make("a", 10.0, 4.0)
    b = make("b", 20.0, 4.6)
    resp = map_products_to_response([b, a, b], "premium")
    assert isinstance(resp, SearchResponse)
    assert [c.id for c in resp.products] == ["b", "a"]
    assert resp.count == 2
    assert resp.ai_search_active is True


def test_blank_query_is_not_ai_search(make):
    resp = map_products_to_response([make("a", 10.0, 4.0)], "   ")
    assert resp.ai_search_active is False
    assert map_products_to_response([], None).query == ""
