"""Add permissions handler.

Flow:
1. Validate role (name, permissions, actions, not builtin) -> 400
2. Authorize principal for UPDATE on the role -> 403
3. Convert permissions into policies
4. Upsert policies through the role controller -> 500
5. Return success

No step runs before the previous one succeeded; nothing is converted or
persisted for a request that failed validation or authorization.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- Authorizer and role controller are injected via protocols
"""

from clusterauthz.application.commands.authz_commands import AddPermissions
from clusterauthz.application.errors import ApplicationError, ApplicationErrorCode
from clusterauthz.core.enums import ErrorCode
from clusterauthz.core.errors import ValidationError
from clusterauthz.core.result import Failure, Result, Success
from clusterauthz.domain.entities.role import Role
from clusterauthz.domain.enums.action import Verb
from clusterauthz.domain.protocols.authorizer_protocol import AuthorizerProtocol
from clusterauthz.domain.protocols.logger_protocol import LoggerProtocol
from clusterauthz.domain.protocols.role_controller_protocol import (
    RoleControllerProtocol,
)
from clusterauthz.domain.services.policy_converter import PolicyConverter
from clusterauthz.domain.value_objects.resources import roles_resource


class AddPermissionsHandler:
    """Handler for the AddPermissions command."""

    def __init__(
        self,
        authorizer: AuthorizerProtocol,
        controller: RoleControllerProtocol,
        logger: LoggerProtocol,
        converter: PolicyConverter | None = None,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            authorizer: Authorization decisions for the caller.
            controller: Role policy persistence.
            logger: Structured logger.
            converter: Role to policy converter (stateless).
        """
        self._authorizer = authorizer
        self._controller = controller
        self._logger = logger
        self._converter = converter or PolicyConverter()

    async def handle(self, cmd: AddPermissions) -> Result[None, ApplicationError]:
        """Handle the AddPermissions command.

        Args:
            cmd: Role name, permissions and caller.

        Returns:
            Success(None) once the policies are persisted.
            Failure(ApplicationError) with code COMMAND_VALIDATION_FAILED,
            FORBIDDEN or COMMAND_EXECUTION_FAILED.
        """
        role = Role(name=cmd.role_name, permissions=cmd.permissions)
        username = cmd.principal.username if cmd.principal else None
        log = self._logger.bind(role=role.name, username=username)

        # Step 1: Validate
        validation = self._validate(role)
        if isinstance(validation, Failure):
            log.info(
                "add_permissions_rejected",
                reason=validation.error.code.value,
            )
            return Failure(
                error=ApplicationError.from_domain(
                    ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                    validation.error,
                )
            )

        # Step 2: Authorize
        authorized = await self._authorizer.authorize(
            cmd.principal, Verb.UPDATE, roles_resource(role.name)
        )
        if isinstance(authorized, Failure):
            log.warning("add_permissions_forbidden")
            return Failure(
                error=ApplicationError.from_domain(
                    ApplicationErrorCode.FORBIDDEN, authorized.error
                )
            )

        # Step 3: Convert
        converted = self._converter.convert(role)
        if isinstance(converted, Failure):
            return Failure(
                error=ApplicationError.from_domain(
                    ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                    converted.error,
                )
            )
        policies = converted.value

        # Step 4: Persist
        persisted = await self._controller.upsert_roles_permissions(policies)
        if isinstance(persisted, Failure):
            log.error(
                "add_permissions_persist_failed",
                error_message=persisted.error.message,
            )
            return Failure(
                error=ApplicationError.from_domain(
                    ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
                    persisted.error,
                )
            )

        log.info("role_permissions_added", policy_count=len(policies))
        return Success(value=None)

    def _validate(self, role: Role) -> Result[None, ValidationError]:
        checked = self._converter.validate(role)
        if isinstance(checked, Failure):
            return checked
        if role.is_builtin:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.BUILTIN_ROLE_IMMUTABLE,
                    message=f"you can not update builtin role {role.name}",
                    field="name",
                )
            )
        return Success(value=None)
