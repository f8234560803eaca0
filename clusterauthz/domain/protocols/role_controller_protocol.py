"""Role controller protocol (port).

Persists role policies.

Guarantees required from implementations:
    - All policies of a role in one call commit atomically (all or none)
    - Policies are merged on (role, action, resource_pattern): re-upserting
      a key leaves one entry, other keys of the role are retained
    - At most one upsert in flight per role; distinct roles are independent
    - Storage failures come back as PolicyPersistenceError with the
      underlying message preserved

Builtin roles are rejected before reaching the controller.
"""

from collections.abc import Sequence
from typing import Protocol

from clusterauthz.core.result import Result
from clusterauthz.domain.entities.policy import Policy
from clusterauthz.domain.errors.policy_error import PolicyPersistenceError


class RoleControllerProtocol(Protocol):
    """Protocol for role policy persistence."""

    async def upsert_roles_permissions(
        self, policies: Sequence[Policy]
    ) -> Result[None, PolicyPersistenceError]:
        """Merge policies into the store.

        Args:
            policies: Policies to upsert, possibly for several roles.

        Returns:
            Success(None) when every role's batch committed.
            Failure(PolicyPersistenceError) otherwise.
        """
        ...

    async def get_role_policies(self, role: str) -> list[Policy]:
        """Get a role's stored policies, most specific pattern first.

        Args:
            role: Role name.

        Returns:
            list[Policy]: Empty if the role has no policies.
        """
        ...
