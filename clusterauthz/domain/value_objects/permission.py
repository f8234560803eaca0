"""Permission value object.

A permission grants one action, optionally scoped to a collection and/or a
tenant. ``None`` for a dimension means every value of that dimension.

The action may hold a raw string as received from the transport; it is
resolved against ``ActionKind`` by the policy converter, which reports
unknown actions as validation errors.
"""

from dataclasses import dataclass

from clusterauthz.domain.enums.action import ActionKind
from clusterauthz.domain.value_objects.resource_pattern import ResourcePattern


@dataclass(frozen=True, slots=True, kw_only=True)
class Permission:
    """Single action grant.

    Attributes:
        action: Action to grant (ActionKind or its wire name).
        collection: Collection name, None for every collection.
        tenant: Tenant name, None for every tenant.
    """

    action: ActionKind | str
    collection: str | None = None
    tenant: str | None = None

    @property
    def resource_pattern(self) -> ResourcePattern:
        """Pattern derived from this permission's scope."""
        return ResourcePattern.derive(collection=self.collection, tenant=self.tenant)
