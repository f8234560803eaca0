"""Queries (CQRS read operations)."""

from clusterauthz.application.queries.schema_queries import TenantExists

__all__ = ["TenantExists"]
