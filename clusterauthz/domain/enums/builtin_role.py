"""Builtin roles.

Builtin roles are defined by the system and can not be modified through the
role management operations. ``BUILTIN_ROLES`` is built once at import time
and is read-only afterwards.

Policies granted to each builtin role:
    ADMIN:  every action, global scope
    EDITOR: every collections/tenants/data action, global scope
    VIEWER: every read action, global scope
"""

from enum import Enum


class BuiltinRole(str, Enum):
    """Reserved role names."""

    ADMIN = "admin"
    """Full access, including role and cluster management."""

    EDITOR = "editor"
    """Schema and data management, no role or cluster management."""

    VIEWER = "viewer"
    """Read-only access to everything."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all builtin role names.

        Returns:
            list[str]: ['admin', 'editor', 'viewer'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_builtin(cls, name: str) -> bool:
        """Check if a role name is reserved."""
        return name in BUILTIN_ROLES


BUILTIN_ROLES: frozenset[str] = frozenset(BuiltinRole.values())
