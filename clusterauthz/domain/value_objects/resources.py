"""Resource identifiers passed to the authorizer.

Identifiers are ``<domain>/<...>`` strings. Scoped domains always carry both
a collection and a tenant segment; ``*`` asks about every value.

Usage:
    roles_resource("newRole")                # "roles/newRole"
    tenants_resource("ABC", "Tenant1")       # "tenants/ABC/Tenant1"
    collections_resource("ABC")              # "collections/ABC/*"
"""

from clusterauthz.domain.enums.action import ActionDomain
from clusterauthz.domain.value_objects.resource_pattern import WILDCARD


def roles_resource(name: str) -> str:
    """Identifier of a single role."""
    return f"{ActionDomain.ROLES.value}/{name}"


def cluster_resource() -> str:
    """Identifier of the cluster."""
    return f"{ActionDomain.CLUSTER.value}/{WILDCARD}"


def scoped_resource(
    domain: ActionDomain,
    collection: str | None = None,
    tenant: str | None = None,
) -> str:
    """Identifier of a collection/tenant scoped resource."""
    return f"{domain.value}/{collection or WILDCARD}/{tenant or WILDCARD}"


def collections_resource(collection: str | None = None, tenant: str | None = None) -> str:
    return scoped_resource(ActionDomain.COLLECTIONS, collection, tenant)


def tenants_resource(collection: str | None = None, tenant: str | None = None) -> str:
    return scoped_resource(ActionDomain.TENANTS, collection, tenant)


def data_resource(collection: str | None = None, tenant: str | None = None) -> str:
    return scoped_resource(ActionDomain.DATA, collection, tenant)
