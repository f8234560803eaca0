"""Authorization core for a multi-tenant, clustered data platform.

Converts role permission grants into enforceable policies, guards every
role mutation with a principal authorization check, and routes
consistency-sensitive schema reads to the cluster leader.
"""
