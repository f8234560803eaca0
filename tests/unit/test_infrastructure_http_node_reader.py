"""Unit tests for HttpNodeReader.

Uses pytest-httpx to mock node responses.
"""

import httpx
import pytest

from clusterauthz.core.enums import ErrorCode
from clusterauthz.core.result import Failure, Success
from clusterauthz.infrastructure.cluster.http_node_reader import HttpNodeReader

NODE = "http://node1:8080"
URL = f"{NODE}/v1/schema/ABC/tenants/Tenant1"


@pytest.mark.unit
class TestHttpNodeReader:
    """Test node responses mapping."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(("status_code", "exists"), [(200, True), (404, False)])
    async def test_existence(self, httpx_mock, status_code, exists):
        httpx_mock.add_response(method="HEAD", url=URL, status_code=status_code)

        result = await HttpNodeReader().tenant_exists(NODE, "ABC", "Tenant1")

        assert result == Success(value=exists)
        request = httpx_mock.get_request()
        assert request.headers["consistency"] == "false"

    @pytest.mark.asyncio
    async def test_names_are_quoted(self, httpx_mock):
        httpx_mock.add_response(
            method="HEAD",
            url=f"{NODE}/v1/schema/A%2FB/tenants/T%201",
            status_code=200,
        )

        result = await HttpNodeReader().tenant_exists(NODE + "/", "A/B", "T 1")

        assert result == Success(value=True)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [500, 502, 503])
    async def test_server_errors_are_transient(self, httpx_mock, status_code):
        httpx_mock.add_response(method="HEAD", url=URL, status_code=status_code)

        result = await HttpNodeReader().tenant_exists(NODE, "ABC", "Tenant1")

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.NODE_UNAVAILABLE
        assert result.error.transient is True
        assert result.error.node == NODE

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exception",
        [httpx.ConnectError("refused"), httpx.ReadTimeout("slow")],
    )
    async def test_network_errors_are_transient(self, httpx_mock, exception):
        httpx_mock.add_exception(exception, method="HEAD", url=URL)

        result = await HttpNodeReader().tenant_exists(NODE, "ABC", "Tenant1")

        assert isinstance(result, Failure)
        assert result.error.transient is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [400, 403, 422])
    async def test_client_errors_are_permanent(self, httpx_mock, status_code):
        httpx_mock.add_response(method="HEAD", url=URL, status_code=status_code)

        result = await HttpNodeReader().tenant_exists(NODE, "ABC", "Tenant1")

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.NODE_READ_FAILED
        assert result.error.transient is False

    @pytest.mark.asyncio
    async def test_uses_shared_client(self, httpx_mock):
        httpx_mock.add_response(method="HEAD", url=URL, status_code=200)

        async with httpx.AsyncClient() as client:
            result = await HttpNodeReader(client=client).tenant_exists(
                NODE, "ABC", "Tenant1"
            )

        assert result == Success(value=True)
