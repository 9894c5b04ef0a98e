"""Async table view client for list endpoints."""

from seniwise.client.table_view import (
    BodyCell,
    HeaderCell,
    QueryParamMap,
    TableFetchError,
    TableSnapshot,
    TableView,
)

__all__ = [
    "BodyCell",
    "HeaderCell",
    "QueryParamMap",
    "TableFetchError",
    "TableSnapshot",
    "TableView",
]
