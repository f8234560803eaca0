"""Cluster membership from configuration.

Stands in for the cluster's leader-location service: the leader address is
whatever the deployment configured, and None while it is unset.
"""


class StaticClusterMembership:
    """ClusterMembershipProtocol implementation backed by fixed addresses.

    Attributes:
        _local_node: Address of this node.
        _leader: Address of the leader, None if unknown.
    """

    def __init__(self, *, local_node: str, leader: str | None = None) -> None:
        self._local_node = local_node.rstrip("/")
        self._leader = leader.rstrip("/") if leader else None

    async def leader(self) -> str | None:
        return self._leader

    def local_node(self) -> str:
        return self._local_node
