"""Node reader protocol (port).

Answers schema metadata reads from one specific node. The storage and
replication behind the node are external.
"""

from typing import Protocol

from clusterauthz.core.result import Result
from clusterauthz.domain.errors.cluster_error import ClusterError


class NodeReaderProtocol(Protocol):
    """Protocol for per-node schema reads."""

    async def tenant_exists(
        self,
        node: str,
        class_name: str,
        tenant_name: str,
    ) -> Result[bool, ClusterError]:
        """Ask one node whether a tenant exists.

        Args:
            node: Node address.
            class_name: Collection (class) name.
            tenant_name: Tenant name.

        Returns:
            Success(True/False) with the node's answer.
            Failure(ClusterError) with ``transient`` set when a retry may help.
        """
        ...
