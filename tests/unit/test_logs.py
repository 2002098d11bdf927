"""Tests for the logs search API."""

import pytest

from datadog_api import DatadogAPI, DecodeError
from datadog_api.models.logs import (
    LogsListRequestPage,
    LogsQueryFilter,
    LogsQueryOptions,
    LogsResponseStatus,
    LogsSearchRequest,
    LogsSearchResponse,
    LogsSort,
)
from tests.conftest import HOST, reply


class TestLogsSearchRequest:

    def test_wire_names(self) -> None:
        request = LogsSearchRequest(
            filter=LogsQueryFilter(from_="now-1h", to="now", indexes=["main"], query="status:error"),
            options=LogsQueryOptions(time_offset=3600),
            page=LogsListRequestPage(limit=25),
            sort=LogsSort.TIMESTAMP_DESC,
        )

        assert request.body() == {
            "filter": {"from": "now-1h", "to": "now", "indexes": ["main"], "query": "status:error"},
            "options": {"timeOffset": 3600},
            "page": {"limit": 25},
            "sort": "-timestamp",
        }

    def test_empty_request_has_empty_body(self) -> None:
        assert LogsSearchRequest().body() == {}


class TestLogsAPI:

    @pytest.mark.asyncio
    async def test_search_posts_and_decodes(self, make_client) -> None:
        client, transport = make_client(reply(200, {
            "data": [{
                "id": "AAAAAWgN8Xwgr1vKDQAAAABBV2dOOFh3ZzZobm1mWXJFYTR0OA",
                "type": "log",
                "attributes": {"service": "web", "message": "GET /health", "attributes": {"http": {"status_code": 200}}},
            }],
            "links": {"next": "https://api.datadoghq.com/api/v2/logs/events?page[cursor]=xyz"},
            "meta": {"elapsed": 132, "page": {"after": "xyz"}, "request_id": "r-1", "status": "done"},
        }))

        response = await DatadogAPI(client).logs.search(
            LogsSearchRequest(filter=LogsQueryFilter(query="service:web"))
        )

        assert transport.requests[0].method == "POST"
        assert str(transport.requests[0].url) == f"{HOST}/api/v2/logs/events/search"
        assert transport.body() == {"filter": {"query": "service:web"}}
        assert response.data[0].attributes["attributes"]["http"]["status_code"] == 200
        assert response.meta.status is LogsResponseStatus.DONE
        assert response.next_cursor == "xyz"

    @pytest.mark.asyncio
    async def test_search_without_request(self, make_client) -> None:
        client, transport = make_client(reply(200, {"data": []}))

        response = await DatadogAPI(client).logs.search()

        assert transport.body() == {}
        assert response.next_cursor is None

    @pytest.mark.asyncio
    async def test_log_without_id_fails_to_decode(self, make_client) -> None:
        client, _ = make_client(reply(200, {"data": [{"type": "log"}]}))

        with pytest.raises(DecodeError):
            await DatadogAPI(client).logs.search()


class TestNextCursor:

    def test_absent_meta(self) -> None:
        assert LogsSearchResponse().next_cursor is None

    def test_meta_without_page(self) -> None:
        assert LogsSearchResponse.model_validate({"meta": {"status": "timeout"}}).next_cursor is None
