"""Application services."""

from clusterauthz.application.services.consistency_router import ConsistencyRouter

__all__ = ["ConsistencyRouter"]
