from catalog_search.facets import apply_facet_filters


def _ids(df):
    return df["id"].tolist()


def test_no_facets_keeps_everything(catalog_df):
    assert _ids(apply_facet_filters(catalog_df)) == _ids(catalog_df)


def test_blank_category_means_all(catalog_df):
    assert len(apply_facet_filters(catalog_df, category="")) == len(catalog_df)


def test_category_equality(catalog_df):
    assert _ids(apply_facet_filters(catalog_df, category="Bags")) == ["p7", "p8"]
    assert _ids(apply_facet_filters(catalog_df, category="bags")) == []


def test_price_ceiling_inclusive_and_zero_is_a_filter(catalog_df):
    assert _ids(apply_facet_filters(catalog_df, max_price=59.0)) == ["p6", "p7", "p10"]
    assert _ids(apply_facet_filters(catalog_df, max_price=0)) == []


def test_rating_floor_inclusive(catalog_df):
    assert _ids(apply_facet_filters(catalog_df, min_rating=4.4)) == ["p1", "p5", "p7"]


def test_facets_combine(catalog_df):
    out = apply_facet_filters(catalog_df, category="Shoes", max_price=80, min_rating=4.0)
    assert _ids(out) == ["p2"]
