"""Unit tests for AddPermissionsHandler.

Tests cover:
- Success: policies derived and upserted
- Validation failures (400) never reach authorization or persistence
- Authorization failure (403) never reaches persistence, message verbatim
- Persistence failure (500) message verbatim

Architecture:
- Unit tests for application handlers (mocked dependencies)
- Mock authorizer and role controller protocols
"""

from unittest.mock import AsyncMock, Mock

import pytest

from clusterauthz.application.commands.authz_commands import AddPermissions
from clusterauthz.application.commands.handlers.add_permissions_handler import (
    AddPermissionsHandler,
)
from clusterauthz.application.errors import ApplicationErrorCode
from clusterauthz.core.enums import ErrorCode
from clusterauthz.core.errors import AuthorizationError
from clusterauthz.core.result import Failure, Success
from clusterauthz.domain.enums import ActionKind, Verb
from clusterauthz.domain.errors.policy_error import PolicyPersistenceError
from clusterauthz.domain.value_objects.permission import Permission
from clusterauthz.domain.value_objects.principal import Principal

FORBIDDEN_MESSAGE = (
    "authorization, forbidden action: user 'user1' has insufficient "
    "permissions to update roles/newRole"
)


def create_handler(authorize_result=None, upsert_result=None, logger=None):
    """Build a handler with mocked ports."""
    authorizer = AsyncMock()
    authorizer.authorize.return_value = authorize_result or Success(value=None)
    controller = AsyncMock()
    controller.upsert_roles_permissions.return_value = upsert_result or Success(
        value=None
    )
    if logger is None:
        logger = Mock()
        logger.bind.return_value = logger
    handler = AddPermissionsHandler(
        authorizer=authorizer, controller=controller, logger=logger
    )
    return handler, authorizer, controller


def create_command(role_name="newRole", permissions=None):
    if permissions is None:
        permissions = (
            Permission(action="create_collections", collection="ABC", tenant="Tenant1"),
        )
    return AddPermissions(
        principal=Principal(username="user1"),
        role_name=role_name,
        permissions=permissions,
    )


@pytest.mark.unit
class TestAddPermissionsHandlerSuccess:
    """Test successful permission upserts."""

    @pytest.mark.asyncio
    async def test_upserts_single_policy(self):
        handler, authorizer, controller = create_handler()

        result = await handler.handle(create_command())

        assert isinstance(result, Success)
        authorizer.authorize.assert_awaited_once_with(
            Principal(username="user1"), Verb.UPDATE, "roles/newRole"
        )
        controller.upsert_roles_permissions.assert_awaited_once()
        (policies,) = controller.upsert_roles_permissions.await_args.args
        assert len(policies) == 1
        assert policies[0].role == "newRole"
        assert policies[0].action is ActionKind.CREATE_COLLECTIONS
        assert policies[0].resource_pattern == "ABC/Tenant1"

    @pytest.mark.asyncio
    async def test_logs_added_policies(self, mock_logger):
        handler, _, _ = create_handler(logger=mock_logger)

        await handler.handle(create_command())

        mock_logger.bind.assert_called_once_with(role="newRole", username="user1")
        mock_logger.info.assert_called_once_with(
            "role_permissions_added", policy_count=1
        )


@pytest.mark.unit
class TestAddPermissionsHandlerValidation:
    """Test bad requests are rejected before authorization."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("role_name", "permissions", "message"),
        [
            ("", None, "role name is required"),
            ("newRole", (), "role has to have at least 1 permission"),
            ("newRole", (Permission(action="fly"),), 'unknown action "fly"'),
            ("admin", None, "you can not update builtin role admin"),
            ("viewer", None, "you can not update builtin role viewer"),
            (
                "newRole",
                (Permission(action="read_data", collection="A.B"),),
                'invalid collection name "A.B"',
            ),
            (
                "newRole",
                (Permission(action="read_data", tenant="T/1"),),
                'invalid tenant name "T/1"',
            ),
        ],
    )
    async def test_bad_request(self, role_name, permissions, message):
        handler, authorizer, controller = create_handler()

        result = await handler.handle(create_command(role_name, permissions))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.message == message
        authorizer.authorize.assert_not_awaited()
        controller.upsert_roles_permissions.assert_not_awaited()


@pytest.mark.unit
class TestAddPermissionsHandlerFailures:
    """Test authorization and persistence failures."""

    @pytest.mark.asyncio
    async def test_forbidden_message_verbatim(self):
        denied = Failure(
            error=AuthorizationError(
                code=ErrorCode.PERMISSION_DENIED,
                message=FORBIDDEN_MESSAGE,
                verb="U",
                resource="roles/newRole",
            )
        )
        handler, _, controller = create_handler(authorize_result=denied)

        result = await handler.handle(create_command())

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN
        assert result.error.message == FORBIDDEN_MESSAGE
        controller.upsert_roles_permissions.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_persistence_message_verbatim(self):
        failed = Failure(
            error=PolicyPersistenceError(
                code=ErrorCode.POLICY_PERSIST_FAILED,
                message="database is locked",
                role="newRole",
            )
        )
        handler, _, _ = create_handler(upsert_result=failed)

        result = await handler.handle(create_command())

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_EXECUTION_FAILED
        assert result.error.message == "database is locked"

    @pytest.mark.asyncio
    async def test_anonymous_principal_is_passed_to_authorizer(self):
        handler, authorizer, _ = create_handler()
        command = AddPermissions(
            principal=None,
            role_name="newRole",
            permissions=(Permission(action="read_data"),),
        )

        await handler.handle(command)

        assert authorizer.authorize.await_args.args[0] is None
