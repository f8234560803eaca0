"""Cluster read errors."""

from dataclasses import dataclass

from clusterauthz.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ClusterError(DomainError):
    """Failure to read from a cluster node.

    Attributes:
        node: Node the read was sent to, None if no node was available.
        transient: True if the caller may retry (leader election, network
            blip, 5xx); False for errors a retry would not fix.
    """

    node: str | None = None
    transient: bool = False
