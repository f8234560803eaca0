"""Role to policy conversion.

Translates a role's permissions into enforceable policies, one per
permission, in request order. Conversion is pure: no authorization, no
persistence, and the same role always yields the same policies.

Usage:
    converter = PolicyConverter()
    match converter.convert(role):
        case Success(value=policies):
            ...
        case Failure(error=error):
            ...  # ValidationError
"""

from clusterauthz.core.enums import ErrorCode
from clusterauthz.core.errors import ValidationError
from clusterauthz.core.result import Failure, Result, Success
from clusterauthz.domain.entities.policy import Policy
from clusterauthz.domain.entities.role import Role
from clusterauthz.domain.enums.action import ActionKind
from clusterauthz.domain.value_objects.resource_pattern import is_valid_name

ROLE_NAME_REQUIRED = "role name is required"
ROLE_PERMISSIONS_REQUIRED = "role has to have at least 1 permission"


class PolicyConverter:
    """Converts roles into policies."""

    def validate(self, role: Role) -> Result[None, ValidationError]:
        """Check a role can be converted.

        Args:
            role: Role to check.

        Returns:
            Success(None) if the role is convertible.
            Failure(ValidationError) for an empty name, no permissions, an
            unknown action or a malformed collection or tenant name.
        """
        match self._resolve_actions(role):
            case Failure(error=error):
                return Failure(error=error)
        return Success(value=None)

    def convert(self, role: Role) -> Result[tuple[Policy, ...], ValidationError]:
        """Convert a role into its policies.

        Identical permissions collapse into one policy; the first
        occurrence keeps its position.

        Args:
            role: Role to convert.

        Returns:
            Success(policies) in permission order.
            Failure(ValidationError) if the role is not valid.
        """
        resolved = self._resolve_actions(role)
        if isinstance(resolved, Failure):
            return Failure(error=resolved.error)
        actions = resolved.value

        policies: list[Policy] = []
        seen: set[tuple[str, str, str]] = set()
        for permission, action in zip(role.permissions, actions):
            policy = Policy(
                role=role.name,
                action=action,
                resource_pattern=str(permission.resource_pattern),
            )
            if policy.key in seen:
                continue
            seen.add(policy.key)
            policies.append(policy)

        return Success(value=tuple(policies))

    def _resolve_actions(
        self, role: Role
    ) -> Result[tuple[ActionKind, ...], ValidationError]:
        if not role.name:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.ROLE_NAME_REQUIRED,
                    message=ROLE_NAME_REQUIRED,
                    field="name",
                )
            )
        if not role.permissions:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.ROLE_PERMISSIONS_REQUIRED,
                    message=ROLE_PERMISSIONS_REQUIRED,
                    field="permissions",
                )
            )

        actions: list[ActionKind] = []
        for permission in role.permissions:
            try:
                actions.append(ActionKind(permission.action))
            except ValueError:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.UNKNOWN_ACTION,
                        message=f'unknown action "{permission.action}"',
                        field="action",
                    )
                )
            pattern = permission.resource_pattern
            for field, name in (
                ("collection", pattern.collection),
                ("tenant", pattern.tenant),
            ):
                if name is not None and not is_valid_name(name):
                    return Failure(
                        error=ValidationError(
                            code=ErrorCode.INVALID_RESOURCE_NAME,
                            message=f'invalid {field} name "{name}"',
                            field=field,
                        )
                    )
        return Success(value=tuple(actions))
