"""Tests for the async table view client."""

from __future__ import annotations

import asyncio
import unittest

import httpx

from seniwise.client.table_view import QueryParamMap, TableView, resolve_link
from seniwise.config import Settings
from seniwise.main import build_residents_context, create_app
from seniwise.schemas.listing import Column
from seniwise.services.records import ResidentRecordSource, StaffDirectory

COLUMNS = [
    {"key": "name", "label": "Name", "sortable": True, "sort_key": "name", "link_template": "/residents/{uuid}"},
    {"key": "room", "label": "Room", "sortable": True, "sort_key": "room", "link_template": None},
    {"key": "note", "label": "Note", "sortable": False, "sort_key": "", "link_template": None},
]


def _envelope(
    items: list[dict[str, object]],
    *,
    current: int = 0,
    total: int = 1,
    sort_by: str = "name",
    order: str = "asc",
    query: str = "",
) -> dict[str, object]:
    return {
        "success": True,
        "error": None,
        "result": {
            "pagination": {"current": current, "total": total, "totalItems": len(items)},
            "columns": COLUMNS,
            "items": items,
            "search": {"query": query, "placeholder": "Search by name"},
            "sort": {"by": sort_by, "order": order},
        },
    }


class _RecordingServer:
    """Mock list endpoint that records query parameters and echoes them back."""

    def __init__(self, *, total_pages: int = 3) -> None:
        self.requests: list[httpx.QueryParams] = []
        self.total_pages = total_pages

    def __call__(self, request: httpx.Request) -> httpx.Response:
        params = request.url.params
        self.requests.append(params)
        page = min(int(params.get("p", "0")), self.total_pages - 1)
        items = [{"uuid": f"u-{page}", "name": f"Page {page}", "room": "4", "note": None}]
        return httpx.Response(
            200,
            json=_envelope(
                items,
                current=page,
                total=self.total_pages,
                sort_by=params.get("sort_by", "name"),
                order=params.get("sort_order", "asc"),
                query=params.get("q", ""),
            ),
        )


class ResolveLinkTests(unittest.TestCase):
    def test_placeholders_take_row_values(self) -> None:
        self.assertEqual(
            resolve_link("/residents/{uuid}/add-visit?from={name}", {"uuid": "r-1", "name": "Ayse"}),
            "/residents/r-1/add-visit?from=Ayse",
        )

    def test_missing_values_become_empty(self) -> None:
        self.assertEqual(resolve_link("/residents/{uuid}", {}), "/residents/")

    def test_falsy_values_are_kept(self) -> None:
        self.assertEqual(
            resolve_link("/floors/{floor}?active={active}", {"floor": 0, "active": False}),
            "/floors/0?active=false",
        )


class TableViewTests(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self) -> None:
        self.server = _RecordingServer()
        self.client = httpx.AsyncClient(transport=httpx.MockTransport(self.server), base_url="http://testserver")
        self.view = TableView(self.client, "/residents/json", debounce_seconds=0.01)

    async def asyncTearDown(self) -> None:
        await self.client.aclose()

    async def test_initial_state_is_idle(self) -> None:
        self.assertEqual(self.view.status, "idle")
        self.assertEqual(self.view.snapshot.page_label, "Page 0 of 0")
        self.assertTrue(self.view.snapshot.prev_disabled)
        self.assertTrue(self.view.snapshot.next_disabled)

    async def test_header_labels_match_column_labels(self) -> None:
        snapshot = await self.view.load()

        self.assertEqual(snapshot.status, "rendered")
        self.assertEqual(snapshot.header_labels, [column["label"] for column in COLUMNS])
        self.assertEqual(snapshot.headers[0].direction, "asc")
        self.assertIsNone(snapshot.headers[1].direction)
        self.assertEqual(snapshot.search_placeholder, "Search by name")

    async def test_rows_resolve_links_from_their_own_values(self) -> None:
        snapshot = await self.view.load()
        row = snapshot.rows[0]

        self.assertEqual(row[0].text, "Page 0")
        self.assertEqual(row[0].href, "/residents/u-0")
        self.assertIsNone(row[1].href)
        self.assertEqual(row[2].text, "")
        self.assertIsNone(snapshot.message)

    async def test_query_parameters_follow_state(self) -> None:
        await self.view.load()
        first = self.server.requests[-1]
        self.assertEqual(first.get("p"), "0")
        self.assertNotIn("q", first)
        self.assertNotIn("sort_by", first)

        await self.view.toggle_sort(Column.model_validate(COLUMNS[1]))
        second = self.server.requests[-1]
        self.assertEqual((second.get("sort_by"), second.get("sort_order")), ("room", "asc"))

        await self.view.toggle_sort(Column.model_validate(COLUMNS[1]))
        third = self.server.requests[-1]
        self.assertEqual((third.get("sort_by"), third.get("sort_order")), ("room", "desc"))

    async def test_sort_change_resets_page(self) -> None:
        await self.view.load()
        await self.view.next_page()
        self.assertEqual(self.view.pagination.current, 1)

        await self.view.toggle_sort(Column.model_validate(COLUMNS[1]))

        self.assertEqual(self.server.requests[-1].get("p"), "0")
        self.assertEqual(self.view.state.sort_by, "room")

    async def test_unsortable_column_click_is_ignored(self) -> None:
        await self.view.load()
        count = len(self.server.requests)

        await self.view.toggle_sort(Column.model_validate(COLUMNS[2]))

        self.assertEqual(len(self.server.requests), count)

    async def test_pagination_controls_respect_bounds(self) -> None:
        snapshot = await self.view.load()
        self.assertTrue(snapshot.prev_disabled)
        self.assertFalse(snapshot.next_disabled)
        self.assertEqual(snapshot.page_label, "Page 1 of 3")

        await self.view.previous_page()
        self.assertEqual(len(self.server.requests), 1)

        await self.view.next_page()
        snapshot = await self.view.next_page()
        self.assertEqual(snapshot.page_label, "Page 3 of 3")
        self.assertFalse(snapshot.prev_disabled)
        self.assertTrue(snapshot.next_disabled)

        requests_before = len(self.server.requests)
        await self.view.next_page()
        self.assertEqual(len(self.server.requests), requests_before)

        snapshot = await self.view.previous_page()
        self.assertEqual(snapshot.page_label, "Page 2 of 3")

    async def test_search_input_is_debounced(self) -> None:
        await self.view.load()
        await self.view.next_page()

        for text in ("a", "al", "ali "):
            self.view.on_search_input(text)
        snapshot = await self.view.settle()

        self.assertEqual(len(self.server.requests), 3)
        self.assertEqual(self.server.requests[-1].get("q"), "ali")
        self.assertEqual(self.server.requests[-1].get("p"), "0")
        self.assertEqual(snapshot.status, "rendered")

    async def test_clearing_search_drops_query_parameter(self) -> None:
        self.view.on_search_input("ali")
        await self.view.settle()
        self.view.on_search_input("   ")
        await self.view.settle()

        self.assertNotIn("q", self.server.requests[-1])

    async def test_custom_query_parameter_names(self) -> None:
        view = TableView(
            self.client,
            "/residents/json?view=compact",
            initial_sort_by="room",
            initial_sort_order="desc",
            query_param_map=QueryParamMap(page="page", query="search", sort_by="order_by", sort_order="dir"),
        )

        await view.load()
        params = self.server.requests[-1]

        self.assertEqual(params.get("view"), "compact")
        self.assertEqual(params.get("page"), "0")
        self.assertEqual((params.get("order_by"), params.get("dir")), ("room", "desc"))


class TableViewFailureTests(unittest.IsolatedAsyncioTestCase):
    async def _load_with(self, handler) -> TableView:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://testserver") as client:
            view = TableView(client, "/residents/json", empty_message="Nobody here.")
            await view.load()
            return view

    async def test_http_error_renders_inline_message(self) -> None:
        view = await self._load_with(lambda request: httpx.Response(500, json={"success": False}))

        self.assertEqual(view.status, "errored")
        self.assertEqual(view.snapshot.message, "Error: Request failed: 500")
        self.assertEqual(view.items, [])
        self.assertEqual(view.snapshot.page_label, "Page 0 of 0")

    async def test_unsuccessful_envelope_is_a_fetch_failure(self) -> None:
        view = await self._load_with(
            lambda request: httpx.Response(200, json={"success": False, "error": None, "result": None})
        )

        self.assertEqual(view.snapshot.message, "Error: Invalid API response")
        self.assertEqual(len(view.snapshot.rows), 1)
        self.assertTrue(view.snapshot.rows[0][0].is_message)

    async def test_missing_result_is_a_fetch_failure(self) -> None:
        view = await self._load_with(lambda request: httpx.Response(200, json={"success": True}))

        self.assertEqual(view.status, "errored")

    async def test_transport_error_is_a_fetch_failure(self) -> None:
        def _refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        view = await self._load_with(_refuse)

        self.assertEqual(view.status, "errored")
        self.assertTrue(view.snapshot.message.startswith("Error: Request failed:"))

    async def test_unexpected_transport_exception_is_a_fetch_failure(self) -> None:
        def _explode(request: httpx.Request) -> httpx.Response:
            raise RuntimeError("transport blew up")

        view = await self._load_with(_explode)

        self.assertEqual(view.status, "errored")
        self.assertEqual(view.snapshot.message, "Error: Request failed: transport blew up")
        self.assertEqual(view.items, [])

    async def test_invalid_data_url_is_a_fetch_failure(self) -> None:
        transport = httpx.MockTransport(_RecordingServer())
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            view = TableView(client, "/residents/json\x01")
            snapshot = await view.load()

        self.assertEqual(snapshot.status, "errored")
        self.assertTrue(snapshot.message.startswith("Error: Request failed:"))

    async def test_empty_items_show_empty_message(self) -> None:
        view = await self._load_with(lambda request: httpx.Response(200, json=_envelope([], total=0)))

        self.assertEqual(view.status, "rendered")
        self.assertEqual(view.snapshot.message, "Nobody here.")
        self.assertEqual(len(view.snapshot.rows[0]), len(COLUMNS))


class TableViewOrderingTests(unittest.IsolatedAsyncioTestCase):
    async def test_stale_response_is_discarded(self) -> None:
        release_first = asyncio.Event()

        async def handler(request: httpx.Request) -> httpx.Response:
            query = request.url.params.get("q", "")
            if query == "slow":
                await release_first.wait()
            return httpx.Response(200, json=_envelope([{"uuid": query, "name": query}], query=query))

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://testserver") as client:
            view = TableView(client, "/residents/json")
            view.state.query = "slow"
            slow = asyncio.create_task(view.load())
            await asyncio.sleep(0)
            view.state.query = "fast"
            await view.load()

            release_first.set()
            await slow

        self.assertEqual(view.sequence, 2)
        self.assertEqual(view.items, [{"uuid": "fast", "name": "fast"}])
        self.assertEqual(view.snapshot.rows[0][0].text, "fast")

    async def test_loading_snapshot_before_response(self) -> None:
        gate = asyncio.Event()

        async def handler(request: httpx.Request) -> httpx.Response:
            await gate.wait()
            return httpx.Response(200, json=_envelope([{"uuid": "1", "name": "x"}]))

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://testserver") as client:
            view = TableView(client, "/residents/json")
            task = asyncio.create_task(view.load())
            await asyncio.sleep(0)

            self.assertEqual(view.status, "loading")
            self.assertEqual(view.snapshot.message, "Loading...")

            gate.set()
            await task

        self.assertEqual(view.status, "rendered")


class TableViewAgainstApiTests(unittest.IsolatedAsyncioTestCase):
    async def test_round_trip_against_resident_api(self) -> None:
        records = ResidentRecordSource(
            [
                {"profile": {"uuid": "b", "first_name": "Mustafa", "last_name": "Demir"}},
                {"profile": {"uuid": "a", "first_name": "Ayse", "last_name": "Kaya", "room": "12B"}},
            ]
        )
        settings = Settings()
        app = create_app(settings, records=records, staff=StaffDirectory(()))
        app.state.residents = build_residents_context(settings, records=records, staff=StaffDirectory(()))

        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            view = TableView(client, "/api/residents")
            snapshot = await view.load()

        self.assertEqual(
            snapshot.header_labels,
            ["Name", "Responsible Staff", "Birth Date", "Room", "Gender", "Last Visit"],
        )
        self.assertEqual([row[0].text for row in snapshot.rows], ["Ayse Kaya", "Mustafa Demir"])
        self.assertEqual(snapshot.rows[0][0].href, "/residents/a")
        self.assertEqual(snapshot.rows[0][3].text, "12B")
        self.assertEqual(view.state.sort_by, "name")
        self.assertEqual(snapshot.search_placeholder, "Search by name")


if __name__ == "__main__":
    unittest.main()
