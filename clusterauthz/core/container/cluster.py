"""Cluster dependency factories.

Leader location, node-to-node reads and the consistency router.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from clusterauthz.core.config import settings
from clusterauthz.core.container.authorization import get_authorizer
from clusterauthz.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from clusterauthz.application.queries.handlers.tenant_exists_handler import (
        TenantExistsHandler,
    )
    from clusterauthz.application.services.consistency_router import (
        ConsistencyRouter,
    )
    from clusterauthz.domain.protocols.cluster_membership_protocol import (
        ClusterMembershipProtocol,
    )
    from clusterauthz.domain.protocols.node_reader_protocol import (
        NodeReaderProtocol,
    )


@lru_cache()
def get_cluster_membership() -> "ClusterMembershipProtocol":
    """Get cluster membership singleton (app-scoped)."""
    from clusterauthz.infrastructure.cluster.static_membership import (
        StaticClusterMembership,
    )

    return StaticClusterMembership(
        local_node=settings.cluster_local_node,
        leader=settings.cluster_leader_node,
    )


@lru_cache()
def get_node_reader() -> "NodeReaderProtocol":
    """Get node reader singleton (app-scoped)."""
    from clusterauthz.infrastructure.cluster.http_node_reader import HttpNodeReader

    return HttpNodeReader(timeout=settings.node_request_timeout_seconds)


@lru_cache()
def get_consistency_router() -> "ConsistencyRouter":
    """Get consistency router singleton (app-scoped)."""
    from clusterauthz.application.services.consistency_router import (
        ConsistencyRouter,
    )

    return ConsistencyRouter(
        get_cluster_membership(),
        get_node_reader(),
        get_logger(),
        max_attempts=settings.leader_retry_attempts,
        backoff_seconds=settings.leader_retry_backoff_seconds,
    )


def get_tenant_exists_handler() -> "TenantExistsHandler":
    """Get TenantExists query handler (request-scoped)."""
    from clusterauthz.application.queries.handlers.tenant_exists_handler import (
        TenantExistsHandler,
    )

    return TenantExistsHandler(
        authorizer=get_authorizer(),
        router=get_consistency_router(),
        logger=get_logger(),
    )
