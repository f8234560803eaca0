"""Domain entities."""

from clusterauthz.domain.entities.policy import Policy
from clusterauthz.domain.entities.role import Role

__all__ = ["Policy", "Role"]
