"""Role domain entity.

A role is a named bundle of permissions. Roles built from a request are
transient; what persists are the policies derived from them.
"""

from dataclasses import dataclass, field

from clusterauthz.domain.enums.builtin_role import BUILTIN_ROLES
from clusterauthz.domain.value_objects.permission import Permission


@dataclass(frozen=True, slots=True, kw_only=True)
class Role:
    """Named set of permissions.

    Business Rules:
        - Name must be non-empty
        - At least one permission
        - Builtin roles can not be mutated

    Attributes:
        name: Role name.
        permissions: Granted permissions, in request order.
    """

    name: str
    permissions: tuple[Permission, ...] = field(default_factory=tuple)

    @property
    def is_builtin(self) -> bool:
        """Whether this role is reserved by the system."""
        return self.name in BUILTIN_ROLES
