import math
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple, Union
from app.utils.responses import ApiError

ALL = "All"
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 12
ASCENDING = 1
DESCENDING = -1
RELEVANCE_SORT = ("score", {"$meta": "textScore"})

DESTINATION_SORT_FIELDS = {
    "name": "name",
    "price": "startingPrice",
    "rating": "averageRating",
    "reviews": "reviewCount",
}

PACKAGE_SORT_FIELDS = {
    "rating": "rating",
    "price": "price",
    "reviews": "reviewCount",
    "title": "title",
    "departure": "departureDate",
}


class QueryParameterError(ApiError):
    def __init__(self, name: str, value: str):
        super().__init__(400, f"Invalid value for query parameter '{name}': {value}")


# ****************************************************
#  Filter kinds
# ****************************************************

@dataclass(frozen=True)
class TextSearch:
    text: str


@dataclass(frozen=True)
class Equals:
    field: str
    value: Any


@dataclass(frozen=True)
class Range:
    field: str
    gte: Optional[float] = None
    lte: Optional[float] = None


@dataclass(frozen=True)
class AnyOf:
    field: str
    values: Tuple[str, ...]


Criterion = Union[TextSearch, Equals, Range, AnyOf]


def filter_to_mongo(criterion: Criterion) -> dict:
    if isinstance(criterion, TextSearch):
        return {"$text": {"$search": criterion.text}}
    if isinstance(criterion, Equals):
        return {criterion.field: criterion.value}
    if isinstance(criterion, Range):
        bounds = {}
        if criterion.gte is not None:
            bounds["$gte"] = criterion.gte
        if criterion.lte is not None:
            bounds["$lte"] = criterion.lte
        return {criterion.field: bounds}
    if isinstance(criterion, AnyOf):
        return {criterion.field: {"$in": list(criterion.values)}}
    raise TypeError(f"Unsupported filter: {criterion!r}")


@dataclass(frozen=True)
class SortKey:
    field: str
    direction: int


@dataclass
class ListQuery:
    """Filter, sort and page window derived from one list request."""

    filters: List[Criterion] = field(default_factory=list)
    sort: List[SortKey] = field(default_factory=list)
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    relevance: bool = False

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def mongo_filter(self) -> dict:
        query = {}
        for criterion in self.filters:
            for key, condition in filter_to_mongo(criterion).items():
                if isinstance(query.get(key), dict) and isinstance(condition, dict):
                    query[key] = {**query[key], **condition}
                else:
                    query[key] = condition
        return query

    def mongo_sort(self) -> list:
        keys = [RELEVANCE_SORT] if self.relevance else []
        return keys + [(key.field, key.direction) for key in self.sort]


# ****************************************************
#  Query-string parsing
# ****************************************************

def parse_int(params: Mapping[str, str], name: str, default: int) -> int:
    raw = params.get(name)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise QueryParameterError(name, raw)


def parse_float(params: Mapping[str, str], name: str) -> Optional[float]:
    raw = params.get(name)
    if not raw:
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        raise QueryParameterError(name, raw)
    if not math.isfinite(value):
        raise QueryParameterError(name, raw)
    return value


def category_filter(params: Mapping[str, str], name: str, field_name: Optional[str] = None) -> Optional[Equals]:
    value = params.get(name)
    if value and value != ALL:
        return Equals(field_name or name, value)
    return None


def featured_filter(params: Mapping[str, str]) -> Optional[Equals]:
    # only the literal "true" narrows the result; "false" does not exclude
    if params.get("featured") == "true":
        return Equals("featured", True)
    return None


def tags_filter(params: Mapping[str, str], lowercase: bool) -> Optional[AnyOf]:
    raw = params.get("tags")
    if not raw:
        return None
    tags = [tag.strip() for tag in raw.split(",")]
    if lowercase:
        tags = [tag.lower() for tag in tags]
    return AnyOf("tags", tuple(tags))


def price_filter(params: Mapping[str, str], field_name: str) -> Optional[Range]:
    min_price = parse_float(params, "minPrice")
    max_price = parse_float(params, "maxPrice")
    if min_price is None and max_price is None:
        return None
    return Range(field_name, gte=min_price, lte=max_price)


def _compact(filters) -> List[Criterion]:
    return [criterion for criterion in filters if criterion is not None]


# ****************************************************
#  Per-entity builders
# ****************************************************

def build_destination_query(params: Mapping[str, str]) -> ListQuery:
    search = params.get("search") or ""
    filters = _compact([
        Equals("isActive", True),
        TextSearch(search) if search else None,
        category_filter(params, "region"),
        price_filter(params, "startingPrice"),
        featured_filter(params),
        tags_filter(params, lowercase=True),
    ])

    sort_by = params.get("sortBy") or "name"
    sort_order = params.get("sortOrder") or "asc"
    sort_field = DESTINATION_SORT_FIELDS.get(sort_by, "name")
    direction = DESCENDING if sort_order == "desc" else ASCENDING

    return ListQuery(
        filters=filters,
        sort=[SortKey(sort_field, direction)],
        page=parse_int(params, "page", DEFAULT_PAGE),
        limit=parse_int(params, "limit", DEFAULT_LIMIT),
        relevance=bool(search),
    )


def build_blog_query(params: Mapping[str, str]) -> ListQuery:
    search = params.get("search") or ""
    filters = _compact([
        Equals("isActive", True),
        TextSearch(search) if search else None,
        category_filter(params, "category"),
        featured_filter(params),
        tags_filter(params, lowercase=False),
    ])

    # sortBy is used verbatim as the field name
    sort_by = params.get("sortBy") or "publishedAt"
    sort_order = params.get("sortOrder") or "desc"
    direction = ASCENDING if sort_order == "asc" else DESCENDING

    return ListQuery(
        filters=filters,
        sort=[SortKey(sort_by, direction)],
        page=parse_int(params, "page", DEFAULT_PAGE),
        limit=parse_int(params, "limit", DEFAULT_LIMIT),
        relevance=bool(search),
    )


def build_package_query(params: Mapping[str, str]) -> ListQuery:
    search = params.get("search") or ""
    filters = _compact([
        TextSearch(search) if search else None,
        category_filter(params, "category"),
        category_filter(params, "difficulty"),
        price_filter(params, "price"),
        featured_filter(params),
    ])

    sort_by = params.get("sortBy") or "rating"
    sort_order = params.get("sortOrder") or "desc"
    sort_field = PACKAGE_SORT_FIELDS.get(sort_by, "rating")
    direction = ASCENDING if sort_order == "asc" else DESCENDING

    return ListQuery(
        filters=filters,
        sort=[SortKey(sort_field, direction)],
        page=parse_int(params, "page", DEFAULT_PAGE),
        limit=parse_int(params, "limit", DEFAULT_LIMIT),
        relevance=bool(search),
    )


def build_pagination(query: ListQuery, total: int, next_key: str = "hasNext", prev_key: str = "hasPrev") -> dict:
    total_pages = math.ceil(total / query.limit) if query.limit > 0 else 0
    return {
        "page": query.page,
        "limit": query.limit,
        "total": total,
        "totalPages": total_pages,
        next_key: query.page < total_pages,
        prev_key: query.page > 1,
    }
