"""Generic filter/sort/paginate pipeline behind list views."""

from __future__ import annotations

import math
import re
import unicodedata
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from seniwise.schemas.listing import (
    Column,
    ListResult,
    Pagination,
    SearchState,
    SortOrder,
    SortState,
)

R = TypeVar("R")

_LEADING_INT = re.compile(r"[+-]?\d+")

SortValue = str | tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ListQuery:
    """Normalized list request state derived from query parameters."""

    search_text: str = ""
    page: int = 0
    sort_key: str = ""
    sort_direction: SortOrder = "asc"

    @classmethod
    def from_params(
        cls,
        *,
        q: str | None = None,
        p: str | int | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> ListQuery:
        return cls(
            search_text=(q or "").strip(),
            page=parse_page(p),
            sort_key=(sort_by or "").strip(),
            sort_direction="desc" if sort_order == "desc" else "asc",
        )


@dataclass(frozen=True, slots=True)
class ListView(Generic[R]):
    """Column schema plus the projections a list view filters, sorts and renders with."""

    columns: tuple[Column, ...]
    sort_fields: Mapping[str, Callable[[R], SortValue]]
    default_sort_key: str
    search_fields: Callable[[R], Iterable[str]]
    tie_breaker: Callable[[R], str]
    project: Callable[[R], dict[str, Any]]
    search_placeholder: str = ""

    def __post_init__(self) -> None:
        if self.default_sort_key not in self.sort_fields:
            raise ValueError(f"Default sort key {self.default_sort_key!r} is not sortable")

    def resolve_sort_key(self, requested: str | None) -> str:
        """Return `requested` when whitelisted, else the default key."""

        if requested and requested in self.sort_fields:
            return requested
        return self.default_sort_key


def parse_page(raw: str | int | None) -> int:
    """Parse a page parameter; anything missing, non-numeric or negative is page 0."""

    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return max(0, raw)
    text = str(raw).strip()
    if not text:
        return 0
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    return max(0, int(match.group()))


def collation_key(value: str | None) -> str:
    """Case- and accent-insensitive comparison key."""

    if not value:
        return ""
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return stripped.casefold()


def matches_search(values: Iterable[str], needle: str) -> bool:
    lowered = needle.lower()
    return any(lowered in (value or "").lower() for value in values)


def paginate(total_items: int, requested_page: int, page_size: int) -> Pagination:
    """Clamp `requested_page` into the valid page range for `total_items`."""

    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    total_pages = math.ceil(total_items / page_size) if total_items > 0 else 0
    max_page = total_pages - 1 if total_pages > 0 else 0
    current = min(max(requested_page, 0), max_page)
    return Pagination(current=current, total=total_pages, total_items=total_items)


def sort_rows(rows: Sequence[R], view: ListView[R], sort_key: str, direction: SortOrder) -> list[R]:
    projection = view.sort_fields[sort_key]

    def _key(row: R) -> tuple[tuple[str, ...], str]:
        value = projection(row)
        values = (value,) if isinstance(value, str) else value
        return tuple(collation_key(item) for item in values), collation_key(view.tie_breaker(row))

    return sorted(rows, key=_key, reverse=direction == "desc")


def transform(
    records: Iterable[R],
    query: ListQuery,
    view: ListView[R],
    page_size: int,
) -> ListResult:
    """Filter, sort and paginate `records` and describe the applied state."""

    rows = list(records)
    if query.search_text:
        rows = [row for row in rows if matches_search(view.search_fields(row), query.search_text)]

    sort_key = view.resolve_sort_key(query.sort_key)
    ordered = sort_rows(rows, view, sort_key, query.sort_direction)

    pagination = paginate(len(ordered), query.page, page_size)
    start = pagination.current * page_size
    page_rows = ordered[start : start + page_size]

    return ListResult(
        pagination=pagination,
        columns=list(view.columns),
        items=[view.project(row) for row in page_rows],
        search=SearchState(query=query.search_text, placeholder=view.search_placeholder),
        sort=SortState(by=sort_key, order=query.sort_direction),
    )
