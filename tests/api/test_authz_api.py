"""API tests for the role management endpoint.

Tests cover:
- POST /v1/authz/roles/{id}/add-permissions success (200, empty body)
- 400 for invalid roles and names, 403 verbatim, 500 verbatim
- 400 when the body names another role than the path
- 401 when no principal is attached
- 422 for malformed bodies
- X-Request-Id propagation

Architecture:
- Uses real app with dependency overrides
- Real AddPermissionsHandler with mocked authorizer and role controller
"""

from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from clusterauthz.application.commands.handlers.add_permissions_handler import (
    AddPermissionsHandler,
)
from clusterauthz.core.container import get_add_permissions_handler
from clusterauthz.core.enums import ErrorCode
from clusterauthz.core.errors import AuthorizationError
from clusterauthz.core.result import Failure, Success
from clusterauthz.domain.errors.policy_error import PolicyPersistenceError
from clusterauthz.domain.value_objects.principal import Principal
from clusterauthz.main import app
from clusterauthz.presentation.routers.api.middleware.principal_dependencies import (
    get_current_principal,
)

URL = "/v1/authz/roles/newRole/add-permissions"
BODY = {
    "permissions": [
        {
            "action": "create_collections",
            "collections": {"collection": "ABC", "tenant": "Tenant1"},
        }
    ]
}


@pytest.fixture
def authorizer():
    mock = AsyncMock()
    mock.authorize.return_value = Success(value=None)
    return mock


@pytest.fixture
def controller():
    mock = AsyncMock()
    mock.upsert_roles_permissions.return_value = Success(value=None)
    return mock


@pytest.fixture
def client(authorizer, controller):
    logger = Mock()
    logger.bind.return_value = logger
    app.dependency_overrides[get_add_permissions_handler] = lambda: (
        AddPermissionsHandler(authorizer=authorizer, controller=controller, logger=logger)
    )
    app.dependency_overrides[get_current_principal] = lambda: Principal(
        username="user1"
    )
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.mark.api
class TestAddPermissionsEndpoint:
    """Test POST /v1/authz/roles/{id}/add-permissions."""

    def test_success(self, client, controller):
        response = client.post(URL, json=BODY)

        assert response.status_code == 200
        assert response.content == b""
        (policies,) = controller.upsert_roles_permissions.await_args.args
        assert [(p.role, p.action.value, p.resource_pattern) for p in policies] == [
            ("newRole", "create_collections", "ABC/Tenant1")
        ]

    def test_missing_scope_means_global(self, client, controller):
        response = client.post(
            URL, json={"permissions": [{"action": "read_data"}]}
        )

        assert response.status_code == 200
        (policies,) = controller.upsert_roles_permissions.await_args.args
        assert policies[0].resource_pattern == "*/*"

    @pytest.mark.parametrize(
        ("url", "body", "message"),
        [
            (URL, {"permissions": []}, "role has to have at least 1 permission"),
            (
                URL,
                {"permissions": [{"action": "fly"}]},
                'unknown action "fly"',
            ),
            (
                "/v1/authz/roles/admin/add-permissions",
                BODY,
                "you can not update builtin role admin",
            ),
            (
                URL,
                {
                    "permissions": [
                        {"action": "read_data", "collections": {"collection": "A.B"}}
                    ]
                },
                'invalid collection name "A.B"',
            ),
            (
                URL,
                {
                    "permissions": [
                        {"action": "read_data", "collections": {"tenant": "A:B"}}
                    ]
                },
                'invalid tenant name "A:B"',
            ),
        ],
    )
    def test_bad_request(self, client, authorizer, url, body, message):
        response = client.post(url, json=body)

        assert response.status_code == 400
        assert response.json() == {"error": [{"message": message}]}
        authorizer.authorize.assert_not_awaited()

    def test_body_name_must_match_path(self, client, authorizer, controller):
        response = client.post(URL, json={**BODY, "name": "otherRole"})

        assert response.status_code == 400
        assert response.json() == {
            "error": [
                {
                    "message": 'role name "otherRole" does not match '
                    'path role "newRole"'
                }
            ]
        }
        authorizer.authorize.assert_not_awaited()
        controller.upsert_roles_permissions.assert_not_awaited()

    def test_body_name_equal_to_path(self, client, controller):
        response = client.post(URL, json={**BODY, "name": "newRole"})

        assert response.status_code == 200
        controller.upsert_roles_permissions.assert_awaited_once()

    def test_forbidden(self, client, authorizer, controller):
        message = (
            "authorization, forbidden action: user 'user1' has insufficient "
            "permissions to update roles/newRole"
        )
        authorizer.authorize.return_value = Failure(
            error=AuthorizationError(code=ErrorCode.PERMISSION_DENIED, message=message)
        )

        response = client.post(URL, json=BODY)

        assert response.status_code == 403
        assert response.json() == {"error": [{"message": message}]}
        controller.upsert_roles_permissions.assert_not_awaited()

    def test_persistence_failure(self, client, controller):
        controller.upsert_roles_permissions.return_value = Failure(
            error=PolicyPersistenceError(
                code=ErrorCode.POLICY_PERSIST_FAILED, message="database is locked"
            )
        )

        response = client.post(URL, json=BODY)

        assert response.status_code == 500
        assert response.json() == {"error": [{"message": "database is locked"}]}

    def test_malformed_body(self, client):
        response = client.post(URL, json={"permissions": [{"collections": {}}]})

        assert response.status_code == 422
        assert "error" in response.json()

    def test_request_id_is_echoed(self, client):
        response = client.post(URL, json=BODY, headers={"X-Request-Id": "req-1"})

        assert response.headers["X-Request-Id"] == "req-1"


@pytest.mark.api
class TestAddPermissionsUnauthenticated:
    """Test requests without a principal."""

    def test_missing_principal(self, authorizer, controller):
        app.dependency_overrides[get_add_permissions_handler] = lambda: (
            AddPermissionsHandler(
                authorizer=authorizer, controller=controller, logger=Mock()
            )
        )
        try:
            client = TestClient(app, raise_server_exceptions=False)
            response = client.post(URL, json=BODY)
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 401
        assert response.json() == {"error": [{"message": "anonymous access not allowed"}]}
        controller.upsert_roles_permissions.assert_not_awaited()
