"""Domain errors.

Usage:
    from clusterauthz.domain.errors import ClusterError, PolicyPersistenceError
"""

from clusterauthz.domain.errors.cluster_error import ClusterError
from clusterauthz.domain.errors.policy_error import PolicyPersistenceError

__all__ = ["ClusterError", "PolicyPersistenceError"]
