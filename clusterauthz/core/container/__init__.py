"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from clusterauthz.core.container import get_logger, get_authorizer, ...

The container is organized into modules by concern:
- infrastructure: Core services (logging)
- authorization: Casbin enforcer, authorizer, role controller, command handler
- cluster: Membership, node reader, consistency router, query handler
"""

from clusterauthz.core.container.infrastructure import get_logger

from clusterauthz.core.container.authorization import (
    get_add_permissions_handler,
    get_authorizer,
    get_enforcer,
    get_role_controller,
    init_enforcer,
    reset_enforcer,
)

from clusterauthz.core.container.cluster import (
    get_cluster_membership,
    get_consistency_router,
    get_node_reader,
    get_tenant_exists_handler,
)

__all__ = [
    "get_logger",
    "init_enforcer",
    "reset_enforcer",
    "get_enforcer",
    "get_role_controller",
    "get_authorizer",
    "get_add_permissions_handler",
    "get_cluster_membership",
    "get_node_reader",
    "get_consistency_router",
    "get_tenant_exists_handler",
]
