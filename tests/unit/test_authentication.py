"""Tests for API key validation."""

import pytest

from datadog_api import APIError, DatadogAPI
from tests.conftest import HOST, reply


class TestAuthenticationAPI:

    @pytest.mark.asyncio
    async def test_valid_key(self, make_client) -> None:
        client, transport = make_client(reply(200, {"valid": True}))

        response = await DatadogAPI(client).authentication.validate()

        assert response.valid is True
        assert str(transport.requests[0].url) == f"{HOST}/api/v1/validate"

    @pytest.mark.asyncio
    async def test_invalid_key_raises_api_error(self, make_client) -> None:
        client, _ = make_client(reply(403, {"errors": ["Forbidden"]}))

        with pytest.raises(APIError) as exc_info:
            await DatadogAPI(client).authentication.validate()

        assert exc_info.value.errors == ["Forbidden"]
        assert exc_info.value.status_code == 403
