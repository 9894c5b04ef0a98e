"""Schemas for paginated list views and their column definitions."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

SortOrder = Literal["asc", "desc"]


class Column(BaseModel):
    """Table column definition sent with every list response."""

    key: str
    label: str
    sortable: bool = False
    sort_key: str = ""
    link_template: str | None = None


class Pagination(BaseModel):
    """0-based page position within the filtered result set."""

    model_config = ConfigDict(populate_by_name=True)

    current: int = 0
    total: int = 0
    total_items: int = Field(default=0, alias="totalItems")


class SearchState(BaseModel):
    query: str = ""
    placeholder: str = ""


class SortState(BaseModel):
    by: str
    order: SortOrder = "asc"


class ListResult(BaseModel):
    """One page of a list view with the state the server actually applied."""

    pagination: Pagination
    columns: list[Column]
    items: list[dict[str, Any]]
    search: SearchState
    sort: SortState
