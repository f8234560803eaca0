"""Actions that can be granted to roles.

An action is a domain plus the verbs it grants. ``manage_*`` actions grant
every verb on their domain; the others grant exactly one.

The roles and cluster domains are not collection-scoped, so their policies
apply domain-wide whatever collection/tenant the permission names.

Usage:
    from clusterauthz.domain.enums import ActionKind, Verb

    ActionKind("create_collections").verbs  # (Verb.CREATE,)
    ActionKind.MANAGE_ROLES.domain          # ActionDomain.ROLES
"""

from enum import Enum


class Verb(str, Enum):
    """Verbs checked by the authorizer."""

    CREATE = "C"
    READ = "R"
    UPDATE = "U"
    DELETE = "D"


class ActionDomain(str, Enum):
    """Resource domains an action applies to."""

    ROLES = "roles"
    CLUSTER = "cluster"
    COLLECTIONS = "collections"
    TENANTS = "tenants"
    DATA = "data"

    @property
    def is_scoped(self) -> bool:
        """Whether policies in this domain carry a collection/tenant scope."""
        return self not in {ActionDomain.ROLES, ActionDomain.CLUSTER}


class ActionKind(str, Enum):
    """Grantable actions.

    Values are the wire names accepted in permission payloads.
    """

    MANAGE_ROLES = "manage_roles"
    READ_ROLES = "read_roles"

    MANAGE_CLUSTER = "manage_cluster"

    CREATE_COLLECTIONS = "create_collections"
    READ_COLLECTIONS = "read_collections"
    UPDATE_COLLECTIONS = "update_collections"
    DELETE_COLLECTIONS = "delete_collections"

    CREATE_TENANTS = "create_tenants"
    READ_TENANTS = "read_tenants"
    UPDATE_TENANTS = "update_tenants"
    DELETE_TENANTS = "delete_tenants"

    CREATE_DATA = "create_data"
    READ_DATA = "read_data"
    UPDATE_DATA = "update_data"
    DELETE_DATA = "delete_data"

    @property
    def domain(self) -> ActionDomain:
        """Domain this action applies to."""
        return ActionDomain(self.value.split("_", 1)[1])

    @property
    def verbs(self) -> tuple[Verb, ...]:
        """Verbs granted by this action, in C, R, U, D order."""
        prefix = self.value.split("_", 1)[0]
        if prefix == "manage":
            return tuple(Verb)
        return (_PREFIX_VERBS[prefix],)

    @classmethod
    def values(cls) -> list[str]:
        """Get all action values as strings.

        Returns:
            list[str]: List of action values.
        """
        return [action.value for action in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string names a known action."""
        return value in cls.values()


_PREFIX_VERBS: dict[str, Verb] = {
    "create": Verb.CREATE,
    "read": Verb.READ,
    "update": Verb.UPDATE,
    "delete": Verb.DELETE,
}
