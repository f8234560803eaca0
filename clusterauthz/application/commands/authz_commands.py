"""Authorization management commands (CQRS write operations).

Commands are immutable data containers; handlers hold the logic and return
Result types.
"""

from dataclasses import dataclass, field

from clusterauthz.domain.value_objects.permission import Permission
from clusterauthz.domain.value_objects.principal import Principal


@dataclass(frozen=True, kw_only=True)
class AddPermissions:
    """Extend a role with permissions.

    Attributes:
        principal: Caller, None for anonymous.
        role_name: Role to extend (created if it has no policies yet).
        permissions: Permissions to add, in request order.

    Example:
        >>> command = AddPermissions(
        ...     principal=Principal(username="user1"),
        ...     role_name="newRole",
        ...     permissions=(
        ...         Permission(action="create_collections", collection="ABC"),
        ...     ),
        ... )
        >>> result = await handler.handle(command)
    """

    principal: Principal | None
    role_name: str
    permissions: tuple[Permission, ...] = field(default_factory=tuple)
