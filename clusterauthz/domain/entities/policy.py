"""Policy domain entity.

A policy is the enforceable form of one permission for one role. Its
identity is the ``(role, action, resource_pattern)`` triple; upserting the
same triple twice leaves a single policy.
"""

from dataclasses import dataclass

from clusterauthz.domain.enums.action import ActionKind
from clusterauthz.domain.value_objects.resource_pattern import ResourcePattern


@dataclass(frozen=True, slots=True, kw_only=True)
class Policy:
    """Flattened, enforceable permission.

    Attributes:
        role: Name of the role the policy belongs to.
        action: Granted action.
        resource_pattern: ``collection/tenant`` pattern, ``*`` for wildcards.
    """

    role: str
    action: ActionKind
    resource_pattern: str

    @property
    def key(self) -> tuple[str, str, str]:
        """Merge key of this policy."""
        return (self.role, self.action.value, self.resource_pattern)

    @property
    def pattern(self) -> ResourcePattern:
        """Parsed resource pattern."""
        return ResourcePattern.parse(self.resource_pattern)
