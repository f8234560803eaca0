"""Pure domain services."""

from clusterauthz.domain.services.policy_converter import PolicyConverter

__all__ = ["PolicyConverter"]
