"""Table view client that drives search, sort and pagination through query parameters."""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

import httpx
from pydantic import ValidationError

from seniwise.schemas.listing import Column, Pagination, SortOrder

logger = logging.getLogger(__name__)

TableStatus = Literal["idle", "loading", "rendered", "errored"]

LOADING_MESSAGE = "Loading..."
_LINK_FIELD = re.compile(r"\{([^}]+)\}")


class TableFetchError(Exception):
    """Any failure to obtain a usable list envelope from the data source."""


@dataclass(frozen=True, slots=True)
class QueryParamMap:
    page: str = "p"
    query: str = "q"
    sort_by: str = "sort_by"
    sort_order: str = "sort_order"


@dataclass(slots=True)
class TableState:
    page: int = 0
    query: str = ""
    sort_by: str = ""
    sort_order: SortOrder = "asc"


@dataclass(frozen=True, slots=True)
class HeaderCell:
    label: str
    sortable: bool = False
    sort_key: str = ""
    direction: SortOrder | None = None


@dataclass(frozen=True, slots=True)
class BodyCell:
    text: str
    href: str | None = None
    is_message: bool = False


@dataclass(frozen=True, slots=True)
class TableSnapshot:
    """Everything a front end needs to paint the table once."""

    status: TableStatus
    headers: tuple[HeaderCell, ...] = ()
    rows: tuple[tuple[BodyCell, ...], ...] = ()
    message: str | None = None
    page_label: str = "Page 0 of 0"
    prev_disabled: bool = True
    next_disabled: bool = True
    search_placeholder: str = ""

    @property
    def header_labels(self) -> list[str]:
        return [cell.label for cell in self.headers]


def cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def resolve_link(template: str, row: Mapping[str, Any]) -> str:
    """Substitute `{field}` placeholders with the row's own values."""

    return _LINK_FIELD.sub(lambda match: cell_text(row.get(match.group(1))), template)


def parse_list_envelope(payload: Any) -> dict[str, Any]:
    """Validate a list envelope and return its normalized result parts."""

    if not isinstance(payload, Mapping) or payload.get("success") is not True:
        raise TableFetchError("Invalid API response")
    result = payload.get("result")
    if not isinstance(result, Mapping):
        raise TableFetchError("Invalid API response")
    try:
        columns = (
            [Column.model_validate(column) for column in result["columns"]]
            if isinstance(result.get("columns"), list)
            else None
        )
        pagination = Pagination.model_validate(result.get("pagination") or {})
    except ValidationError as exc:
        raise TableFetchError("Invalid API response") from exc
    items = result.get("items")
    search = result.get("search")
    sort = result.get("sort")
    return {
        "columns": columns,
        "items": [item for item in items if isinstance(item, Mapping)] if isinstance(items, list) else [],
        "pagination": pagination,
        "placeholder": search.get("placeholder") if isinstance(search, Mapping) else None,
        "sort": sort if isinstance(sort, Mapping) else None,
    }


class TableView:
    """Single-table renderer bound to one list endpoint.

    State moves idle -> loading -> rendered | errored and re-enters loading on
    every search, sort or page change. Each load takes a sequence number and a
    response is only applied while its number is still the newest, so a slow
    older response can never overwrite a newer one.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        data_url: str,
        *,
        search_placeholder: str = "",
        initial_sort_by: str = "",
        initial_sort_order: SortOrder = "asc",
        empty_message: str = "No results.",
        query_param_map: QueryParamMap | None = None,
        debounce_seconds: float = 0.25,
    ) -> None:
        self.client = client
        self.data_url = data_url
        self.search_placeholder = search_placeholder
        self.empty_message = empty_message or "No results."
        self.params = query_param_map or QueryParamMap()
        self.debounce_seconds = debounce_seconds

        self.state = TableState(sort_by=initial_sort_by, sort_order=initial_sort_order or "asc")
        self.status: TableStatus = "idle"
        self.columns: list[Column] = []
        self.items: list[Mapping[str, Any]] = []
        self.pagination = Pagination()
        self.error: TableFetchError | None = None
        self.snapshot = self.render()

        self._sequence = 0
        self._search_timer: asyncio.Task[None] | None = None
        self._tasks: set[asyncio.Task[Any]] = set()

    @property
    def sequence(self) -> int:
        return self._sequence

    def build_url(self) -> httpx.URL:
        url = httpx.URL(self.data_url)
        url = url.copy_set_param(self.params.page, str(self.state.page))
        if self.state.query:
            url = url.copy_set_param(self.params.query, self.state.query)
        else:
            url = url.copy_remove_param(self.params.query)
        if self.state.sort_by:
            url = url.copy_set_param(self.params.sort_by, self.state.sort_by)
            url = url.copy_set_param(self.params.sort_order, self.state.sort_order)
        else:
            url = url.copy_remove_param(self.params.sort_by)
            url = url.copy_remove_param(self.params.sort_order)
        return url

    async def _fetch(self) -> dict[str, Any]:
        try:
            response = await self.client.get(self.build_url(), headers={"Accept": "application/json"})
        except Exception as exc:
            raise TableFetchError(f"Request failed: {exc}") from exc
        if response.is_error:
            raise TableFetchError(f"Request failed: {response.status_code}")
        try:
            payload = response.json()
        except ValueError as exc:
            raise TableFetchError("Invalid API response") from exc
        return parse_list_envelope(payload)

    async def load(self) -> TableSnapshot:
        """Fetch the current state's page and re-render."""

        self._sequence += 1
        sequence = self._sequence
        self.status = "loading"
        self.error = None
        self.snapshot = self.render()

        try:
            parsed = await self._fetch()
        except TableFetchError as exc:
            if sequence != self._sequence:
                logger.debug("residents.table_stale_response sequence=%d latest=%d", sequence, self._sequence)
                return self.snapshot
            logger.warning("residents.table_fetch_failed url=%s error=%s", self.data_url, exc)
            self.items = []
            self.pagination = Pagination()
            self.error = exc
            self.status = "errored"
            self.snapshot = self.render()
            return self.snapshot

        if sequence != self._sequence:
            logger.debug("residents.table_stale_response sequence=%d latest=%d", sequence, self._sequence)
            return self.snapshot

        if parsed["columns"] is not None:
            self.columns = parsed["columns"]
        if isinstance(parsed["placeholder"], str) and not self.search_placeholder:
            self.search_placeholder = parsed["placeholder"]
        sort = parsed["sort"]
        if sort is not None:
            self.state.sort_by = str(sort.get("by") or "")
            self.state.sort_order = "desc" if sort.get("order") == "desc" else "asc"
        self.items = parsed["items"]
        self.pagination = parsed["pagination"]
        self.status = "rendered"
        self.snapshot = self.render()
        return self.snapshot

    def _spawn(self, coro: Any) -> asyncio.Task[Any]:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def on_search_input(self, text: str) -> None:
        """Record a keystroke; the load runs once input has been quiet for the debounce period."""

        if self._search_timer is not None:
            self._search_timer.cancel()
        self._search_timer = self._spawn(self._debounced_search(text))

    async def _debounced_search(self, text: str) -> None:
        await asyncio.sleep(self.debounce_seconds)
        self._search_timer = None
        self.state.query = text.strip()
        self.state.page = 0
        await self.load()

    async def settle(self) -> TableSnapshot:
        """Wait for pending debounce timers and loads to finish."""

        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
        return self.snapshot

    async def toggle_sort(self, column: Column) -> TableSnapshot:
        """Handle a header click: flip the active column, or activate another ascending."""

        if not column.sortable:
            return self.snapshot
        if self.state.sort_by == column.sort_key:
            self.state.sort_order = "desc" if self.state.sort_order == "asc" else "asc"
        else:
            self.state.sort_by = column.sort_key
            self.state.sort_order = "asc"
        self.state.page = 0
        return await self.load()

    async def previous_page(self) -> TableSnapshot:
        if self.pagination.current > 0:
            self.state.page = self.pagination.current - 1
            return await self.load()
        return self.snapshot

    async def next_page(self) -> TableSnapshot:
        if self.pagination.current + 1 < self.pagination.total:
            self.state.page = self.pagination.current + 1
            return await self.load()
        return self.snapshot

    def render(self) -> TableSnapshot:
        """Build a snapshot of headers, body rows and pagination controls."""

        headers = tuple(
            HeaderCell(
                label=column.label,
                sortable=column.sortable,
                sort_key=column.sort_key,
                direction=(
                    self.state.sort_order
                    if column.sortable and self.state.sort_by == column.sort_key
                    else None
                ),
            )
            for column in self.columns
        )

        message: str | None = None
        if self.status == "loading":
            message = LOADING_MESSAGE
        elif self.error is not None:
            message = f"Error: {self.error}"
        elif not self.items:
            message = self.empty_message

        if message is not None:
            width = max(len(self.columns), 1)
            rows: tuple[tuple[BodyCell, ...], ...] = (
                (BodyCell(text=message, is_message=True),) + tuple(BodyCell(text="") for _ in range(width - 1)),
            )
        else:
            rows = tuple(self._render_row(item) for item in self.items)

        total_pages = self.pagination.total or 0
        current_page = self.pagination.current or 0
        return TableSnapshot(
            status=self.status,
            headers=headers,
            rows=rows,
            message=message,
            page_label=f"Page {current_page + 1} of {total_pages}" if total_pages else "Page 0 of 0",
            prev_disabled=current_page <= 0,
            next_disabled=current_page + 1 >= total_pages,
            search_placeholder=self.search_placeholder,
        )

    def _render_row(self, item: Mapping[str, Any]) -> tuple[BodyCell, ...]:
        return tuple(
            BodyCell(
                text=cell_text(item.get(column.key)),
                href=resolve_link(column.link_template, item) if column.link_template else None,
            )
            for column in self.columns
        )
