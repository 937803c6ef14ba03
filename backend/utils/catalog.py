# backend/utils/catalog.py
"""Client-side filtering and ordering of the product list.

Pure functions: they never touch the input list and can be recomputed on
every state change.
"""
from typing import Iterable, List, Optional, Tuple

from schemas.product import Product, FIELD_KINDS, NUMERIC
from utils.coerce import to_number

SEARCH_FIELDS = ("name", "code", "category")


def matches_search(product: Product, search: str) -> bool:
    needle = search.lower()
    return any(needle in (getattr(product, f) or "").lower() for f in SEARCH_FIELDS)


def filter_products(products: Iterable[Product], search: str, trim: bool = False) -> List[Product]:
    if trim:
        search = search.strip()
    if not search:
        return list(products)
    return [p for p in products if matches_search(p, search)]


def _sort_value(value, kind: str):
    if kind == NUMERIC:
        return to_number(value)
    return str(value).lower()


def sort_products(products: Iterable[Product], sort_by: str, direction: str = "asc") -> List[Product]:
    """Stable sort by one field; null values always end up at the bottom."""
    kind = FIELD_KINDS.get(sort_by)
    if kind is None:
        raise ValueError(f"Unknown sort field: {sort_by}")

    present, missing = [], []
    for p in products:
        (missing if getattr(p, sort_by) is None else present).append(p)

    # list.sort keeps ties in input order even with reverse=True
    present.sort(key=lambda p: _sort_value(getattr(p, sort_by), kind), reverse=(direction == "desc"))
    return present + missing


def apply_view(
    products: Iterable[Product],
    search: str,
    sort_by: Optional[str],
    direction: str = "asc",
    trim: bool = False,
) -> List[Product]:
    rows = filter_products(products, search, trim=trim)
    if sort_by:
        rows = sort_products(rows, sort_by, direction)
    return rows


def next_sort(current_field: str, current_direction: str, clicked: str) -> Tuple[str, str]:
    # Same header flips the direction, a new header starts ascending
    if clicked == current_field:
        return clicked, ("desc" if current_direction == "asc" else "asc")
    return clicked, "asc"
