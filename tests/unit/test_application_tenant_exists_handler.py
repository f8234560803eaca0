"""Unit tests for TenantExistsHandler."""

from unittest.mock import AsyncMock, Mock

import pytest

from clusterauthz.application.errors import ApplicationErrorCode
from clusterauthz.application.queries.handlers.tenant_exists_handler import (
    TenantExistsHandler,
)
from clusterauthz.application.queries.schema_queries import TenantExists
from clusterauthz.core.enums import ErrorCode
from clusterauthz.core.errors import AuthorizationError
from clusterauthz.core.result import Failure, Success
from clusterauthz.domain.enums import Verb
from clusterauthz.domain.errors.cluster_error import ClusterError
from clusterauthz.domain.value_objects.principal import Principal


def create_handler(authorize_result=None, router_result=None):
    authorizer = AsyncMock()
    authorizer.authorize.return_value = authorize_result or Success(value=None)
    router = AsyncMock()
    router.tenant_exists.return_value = router_result or Success(value=True)
    handler = TenantExistsHandler(authorizer=authorizer, router=router, logger=Mock())
    return handler, authorizer, router


def create_query(consistency=True):
    return TenantExists(
        principal=Principal(username="user1"),
        class_name="ABC",
        tenant_name="Tenant1",
        consistency=consistency,
    )


@pytest.mark.unit
class TestTenantExistsHandler:
    """Test tenant existence queries."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("consistency", [True, False])
    async def test_routes_by_consistency(self, consistency):
        handler, authorizer, router = create_handler()

        result = await handler.handle(create_query(consistency))

        assert result == Success(value=True)
        authorizer.authorize.assert_awaited_once_with(
            Principal(username="user1"), Verb.READ, "tenants/ABC/Tenant1"
        )
        router.tenant_exists.assert_awaited_once_with(
            "ABC", "Tenant1", strong=consistency
        )

    @pytest.mark.asyncio
    async def test_absent_tenant(self):
        handler, _, _ = create_handler(router_result=Success(value=False))

        result = await handler.handle(create_query())

        assert result == Success(value=False)

    @pytest.mark.asyncio
    async def test_forbidden_skips_read(self):
        denied = Failure(
            error=AuthorizationError(
                code=ErrorCode.PERMISSION_DENIED, message="forbidden"
            )
        )
        handler, _, router = create_handler(authorize_result=denied)

        result = await handler.handle(create_query())

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN
        router.tenant_exists.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("transient", "code"),
        [
            (True, ApplicationErrorCode.SERVICE_UNAVAILABLE),
            (False, ApplicationErrorCode.QUERY_FAILED),
        ],
    )
    async def test_cluster_errors(self, transient, code):
        failure = Failure(
            error=ClusterError(
                code=ErrorCode.LEADER_UNAVAILABLE,
                message="leader not found",
                transient=transient,
            )
        )
        handler, _, _ = create_handler(router_result=failure)

        result = await handler.handle(create_query())

        assert isinstance(result, Failure)
        assert result.error.code == code
        assert result.error.message == "leader not found"
