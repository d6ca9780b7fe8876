import pytest

from app.utils.query_builder import (
    AnyOf, Equals, ListQuery, QueryParameterError, Range, SortKey, TextSearch,
    build_blog_query, build_destination_query, build_package_query, build_pagination, filter_to_mongo,
)


def test_filter_kinds_translate_to_mongo_conditions():
    assert filter_to_mongo(TextSearch("beach")) == {"$text": {"$search": "beach"}}
    assert filter_to_mongo(Equals("region", "Asia")) == {"region": "Asia"}
    assert filter_to_mongo(Range("price", gte=100)) == {"price": {"$gte": 100}}
    assert filter_to_mongo(Range("price", gte=100, lte=500)) == {"price": {"$gte": 100, "$lte": 500}}
    assert filter_to_mongo(AnyOf("tags", ("beach", "culture"))) == {"tags": {"$in": ["beach", "culture"]}}


def test_ranges_on_the_same_field_are_merged():
    query = ListQuery(filters=[Range("price", gte=100), Range("price", lte=900)])
    assert query.mongo_filter() == {"price": {"$gte": 100, "$lte": 900}}


def test_destination_defaults():
    query = build_destination_query({})

    assert query.mongo_filter() == {"isActive": True}
    assert query.mongo_sort() == [("name", 1)]
    assert (query.page, query.limit, query.skip) == (1, 12, 0)
    assert query.relevance is False


def test_destination_full_filter_set():
    query = build_destination_query({
        "search": "temples",
        "region": "Asia",
        "minPrice": "500",
        "maxPrice": "1500",
        "featured": "true",
        "tags": " Beach , Culture",
        "sortBy": "price",
        "sortOrder": "desc",
        "page": "2",
        "limit": "5",
    })

    assert query.mongo_filter() == {
        "isActive": True,
        "$text": {"$search": "temples"},
        "region": "Asia",
        "startingPrice": {"$gte": 500.0, "$lte": 1500.0},
        "featured": True,
        "tags": {"$in": ["beach", "culture"]},
    }
    # relevance ranks ahead of the requested order
    assert query.mongo_sort() == [("score", {"$meta": "textScore"}), ("startingPrice", -1)]
    assert query.skip == 5


def test_region_all_and_featured_false_do_not_narrow():
    query = build_destination_query({"region": "All", "featured": "false"})
    assert query.mongo_filter() == {"isActive": True}


def test_unknown_destination_sort_falls_back_to_name():
    query = build_destination_query({"sortBy": "popularity", "sortOrder": "sideways"})
    assert query.sort == [SortKey("name", 1)]


def test_blog_sort_field_is_used_verbatim():
    query = build_blog_query({"sortBy": "viewCount", "sortOrder": "asc"})
    assert query.mongo_sort() == [("viewCount", 1)]

    default = build_blog_query({})
    assert default.mongo_sort() == [("publishedAt", -1)]


def test_blog_tags_keep_their_case():
    query = build_blog_query({"tags": "Asia,Adventure", "category": "Culture"})
    assert query.mongo_filter() == {
        "isActive": True,
        "category": "Culture",
        "tags": {"$in": ["Asia", "Adventure"]},
    }


def test_package_query_has_no_active_filter():
    query = build_package_query({"category": "All", "difficulty": "Easy", "minPrice": "300"})

    assert query.mongo_filter() == {"difficulty": "Easy", "price": {"$gte": 300.0}}
    assert query.mongo_sort() == [("rating", -1)]


@pytest.mark.parametrize("sort_by, field", [
    ("price", "price"),
    ("reviews", "reviewCount"),
    ("title", "title"),
    ("departure", "departureDate"),
    ("bogus", "rating"),
])
def test_package_sort_options(sort_by, field):
    query = build_package_query({"sortBy": sort_by, "sortOrder": "asc"})
    assert query.sort == [SortKey(field, 1)]


def test_blank_page_and_limit_use_defaults():
    query = build_destination_query({"page": "", "limit": ""})
    assert (query.page, query.limit) == (1, 12)


@pytest.mark.parametrize("params", [{"page": "abc"}, {"limit": "1.5"}, {"minPrice": "cheap"}, {"maxPrice": "nan"}])
def test_malformed_numbers_are_rejected(params):
    with pytest.raises(QueryParameterError) as exc_info:
        build_package_query(params)

    name, value = next(iter(params.items()))
    assert exc_info.value.status_code == 400
    assert exc_info.value.message == f"Invalid value for query parameter '{name}': {value}"


def test_zero_and_negative_page_values_pass_through():
    query = build_destination_query({"page": "0", "limit": "-3"})
    assert (query.page, query.limit) == (0, -3)


def test_pagination_block():
    query = ListQuery(page=2, limit=5)
    assert build_pagination(query, 12) == {
        "page": 2,
        "limit": 5,
        "total": 12,
        "totalPages": 3,
        "hasNext": True,
        "hasPrev": True,
    }


def test_pagination_on_last_page_and_blog_naming():
    query = ListQuery(page=3, limit=5)
    pagination = build_pagination(query, 12, next_key="hasNextPage", prev_key="hasPrevPage")

    assert pagination["hasNextPage"] is False
    assert pagination["hasPrevPage"] is True
    assert "hasNext" not in pagination


def test_pagination_with_zero_limit():
    pagination = build_pagination(ListQuery(page=1, limit=0), 7)
    assert pagination["totalPages"] == 0
    assert pagination["hasNext"] is False
