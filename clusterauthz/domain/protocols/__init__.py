"""Domain protocols (ports).

Infrastructure adapters implement these structurally (PEP 544); tests pass
alternate implementations through constructors or dependency overrides.
"""

from clusterauthz.domain.protocols.authorizer_protocol import AuthorizerProtocol
from clusterauthz.domain.protocols.cluster_membership_protocol import (
    ClusterMembershipProtocol,
)
from clusterauthz.domain.protocols.logger_protocol import LoggerProtocol
from clusterauthz.domain.protocols.node_reader_protocol import NodeReaderProtocol
from clusterauthz.domain.protocols.role_controller_protocol import (
    RoleControllerProtocol,
)

__all__ = [
    "AuthorizerProtocol",
    "ClusterMembershipProtocol",
    "LoggerProtocol",
    "NodeReaderProtocol",
    "RoleControllerProtocol",
]
