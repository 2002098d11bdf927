"""Tests for the HTTP transport: URLs, credentials and response resolution."""

import httpx
import pytest

from datadog_api import APIError, Client, DecodeError, TransportError, TransportTimeoutError
from datadog_api.models.authentication import ValidateResponse
from datadog_api.models.common import build_path_and_query
from datadog_api.models.monitors import DeleteMonitorResponse, Monitor, MonitorType
from tests.conftest import API_KEY, APP_KEY, HOST, reply


class TestRequestComposition:
    """Every call targets host + path and carries both credentials."""

    @pytest.mark.asyncio
    async def test_url_is_host_followed_by_path(self, make_client) -> None:
        client, transport = make_client(reply(200, {"valid": True}))

        await client.get(build_path_and_query("/api/v1/thing/abc", [("limit", 5)]), ValidateResponse)

        assert transport.calls == 1
        assert str(transport.requests[0].url) == f"{HOST}/api/v1/thing/abc?limit=5"

    @pytest.mark.asyncio
    async def test_credentials_are_sent(self, make_client) -> None:
        client, transport = make_client(reply(200, {"valid": True}))

        await client.get("/api/v1/validate", ValidateResponse)

        headers = transport.requests[0].headers
        assert headers["DD-API-KEY"] == API_KEY
        assert headers["DD-APPLICATION-KEY"] == APP_KEY

    @pytest.mark.asyncio
    async def test_get_sends_no_body(self, make_client) -> None:
        client, transport = make_client(reply(200, {"valid": True}))

        await client.get("/api/v1/validate", ValidateResponse)

        assert transport.requests[0].method == "GET"
        assert transport.requests[0].content == b""

    @pytest.mark.asyncio
    async def test_post_serializes_dict_body(self, make_client) -> None:
        client, transport = make_client(
            reply(200, {"id": 7, "query": "avg(last_5m):avg:system.load.1{*} > 2", "type": "metric alert"})
        )

        await client.post(
            "/api/v1/monitor",
            {"query": "avg(last_5m):avg:system.load.1{*} > 2", "type": "metric alert"},
            Monitor
        )

        request = transport.requests[0]
        assert request.method == "POST"
        assert request.headers["Content-Type"] == "application/json"
        assert transport.body() == {"query": "avg(last_5m):avg:system.load.1{*} > 2", "type": "metric alert"}

    @pytest.mark.asyncio
    async def test_string_bodies_are_sent_verbatim(self, make_client) -> None:
        raw = '{"query": "q", "type": "metric alert"}'
        monitor = {"id": 1, "query": "q", "type": "metric alert"}
        client, transport = make_client(reply(200, monitor), reply(200, monitor), reply(200, {"deleted_monitor_id": 1}))

        await client.post_str("/api/v1/monitor", raw, Monitor)
        await client.put_str("/api/v1/monitor/1", raw, Monitor)
        await client.delete_str("/api/v1/monitor/1", raw, DeleteMonitorResponse)

        assert [r.method for r in transport.requests] == ["POST", "PUT", "DELETE"]
        assert all(r.content == raw.encode() for r in transport.requests)

    @pytest.mark.asyncio
    async def test_delete_with_json_body(self, make_client) -> None:
        client, transport = make_client(reply(200, {"deleted_monitor_id": 3}))

        await client.delete("/api/v1/monitor/3", DeleteMonitorResponse, body={"ids": [3]})

        assert transport.requests[0].method == "DELETE"
        assert transport.body() == {"ids": [3]}

    @pytest.mark.asyncio
    async def test_raw_operations_return_response_untouched(self, make_client) -> None:
        client, _ = make_client(reply(500, text="upstream failure"))

        response = await client.get_raw("/api/v1/validate")

        assert response.status_code == 500
        assert response.text == "upstream failure"


class TestResponseResolution:
    """2xx bodies decode to the model; everything else raises."""

    @pytest.mark.asyncio
    async def test_success_decodes_into_model(self, make_client) -> None:
        client, _ = make_client(reply(200, {"id": 12, "query": "q", "type": "log alert", "tags": ["team:a"]}))

        monitor = await client.get("/api/v1/monitor/12", Monitor)

        assert monitor == Monitor(id=12, query="q", type=MonitorType.LOG_ALERT, tags=["team:a"])

    @pytest.mark.asyncio
    async def test_any_2xx_status_is_success(self, make_client) -> None:
        client, _ = make_client(reply(201, {"valid": True}))

        result = await client.get("/api/v1/validate", ValidateResponse)

        assert result.valid is True

    @pytest.mark.asyncio
    async def test_error_status_raises_api_error(self, make_client) -> None:
        client, _ = make_client(reply(403, {"errors": ["boom"]}))

        with pytest.raises(APIError) as exc_info:
            await client.get("/api/v1/validate", ValidateResponse)

        assert exc_info.value.errors == ["boom"]
        assert exc_info.value.status_code == 403
        assert exc_info.value.is_client_error
        assert str(exc_info.value) == "boom"

    @pytest.mark.asyncio
    async def test_multiple_errors_are_joined_by_newlines(self, make_client) -> None:
        client, _ = make_client(reply(400, {"errors": ["first", "second"]}))

        with pytest.raises(APIError) as exc_info:
            await client.get("/api/v1/validate", ValidateResponse)

        assert str(exc_info.value) == "first\nsecond"

    @pytest.mark.asyncio
    async def test_invalid_json_on_success_raises_decode_error(self, make_client) -> None:
        client, _ = make_client(reply(200, text="<html>not json</html>"))

        with pytest.raises(DecodeError) as exc_info:
            await client.get("/api/v1/validate", ValidateResponse)

        assert not isinstance(exc_info.value, APIError)
        assert exc_info.value.status_code == 200
        assert exc_info.value.model == "ValidateResponse"

    @pytest.mark.asyncio
    async def test_missing_required_field_raises_decode_error(self, make_client) -> None:
        client, _ = make_client(reply(200, {}))

        with pytest.raises(DecodeError):
            await client.get("/api/v1/validate", ValidateResponse)

    @pytest.mark.asyncio
    async def test_undecodable_error_body_raises_decode_error(self, make_client) -> None:
        client, _ = make_client(reply(502, text="Bad Gateway"))

        with pytest.raises(DecodeError) as exc_info:
            await client.get("/api/v1/validate", ValidateResponse)

        assert exc_info.value.status_code == 502
        assert exc_info.value.body == "Bad Gateway"

    @pytest.mark.asyncio
    async def test_identical_calls_give_equal_results(self, make_client) -> None:
        payload = {"id": 5, "query": "q", "type": "composite"}
        client, _ = make_client(reply(200, payload), reply(200, payload))

        first = await client.get("/api/v1/monitor/5", Monitor)
        second = await client.get("/api/v1/monitor/5", Monitor)

        assert first == second


class TestTransportFailures:

    @pytest.mark.asyncio
    async def test_connection_failure_raises_transport_error(self, make_client) -> None:
        client, _ = make_client(httpx.ConnectError("connection refused"))

        with pytest.raises(TransportError) as exc_info:
            await client.get("/api/v1/validate", ValidateResponse)

        assert exc_info.value.method == "GET"
        assert exc_info.value.url == f"{HOST}/api/v1/validate"
        assert not isinstance(exc_info.value, TransportTimeoutError)

    @pytest.mark.asyncio
    async def test_timeout_raises_transport_timeout_error(self, make_client) -> None:
        client, _ = make_client(httpx.ReadTimeout("timed out"))

        with pytest.raises(TransportTimeoutError):
            await client.get("/api/v1/validate", ValidateResponse)


class TestLifecycle:

    @pytest.mark.asyncio
    async def test_close_leaves_caller_http_client_open(self, config) -> None:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: reply(200, {})))
        client = Client(config, http_client=http_client)

        await client.close()

        assert not http_client.is_closed
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_context_manager_closes_owned_http_client(self, config) -> None:
        async with Client(config) as client:
            http_client = client.http_client

        assert http_client.is_closed

    def test_owned_http_client_sets_user_agent(self, config) -> None:
        client = Client(config)

        assert client.http_client.headers["User-Agent"].startswith("datadog-api-python/")
