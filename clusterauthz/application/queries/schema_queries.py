"""Schema queries (CQRS read operations).

Queries NEVER change state.
"""

from dataclasses import dataclass

from clusterauthz.domain.value_objects.principal import Principal


@dataclass(frozen=True, kw_only=True)
class TenantExists:
    """Check whether a tenant exists in a collection.

    Attributes:
        principal: Caller, None for anonymous.
        class_name: Collection (class) name.
        tenant_name: Tenant name.
        consistency: True routes the read to the leader (read-after-write);
            False lets the local replica answer.

    Example:
        >>> query = TenantExists(
        ...     principal=Principal(username="user1"),
        ...     class_name="ABC",
        ...     tenant_name="Tenant1",
        ... )
        >>> result = await handler.handle(query)
    """

    principal: Principal | None
    class_name: str
    tenant_name: str
    consistency: bool = True
