"""Cluster membership protocol (port).

Tells the consistency router where the leader is and which node serves
local reads.
"""

from typing import Protocol


class ClusterMembershipProtocol(Protocol):
    """Protocol for leader location."""

    async def leader(self) -> str | None:
        """Return the current leader's address.

        Returns:
            str | None: Leader address, None while no leader is known
            (election in progress, partition).
        """
        ...

    def local_node(self) -> str:
        """Return the address of the node serving this process."""
        ...
