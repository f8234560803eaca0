"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.

Categories:
- Validation errors (role input, unknown actions, builtin roles)
- Authorization errors (PERMISSION_DENIED)
- Persistence errors (POLICY_*)
- Cluster errors (LEADER_*, NODE_*, TENANT_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    ROLE_NAME_REQUIRED = "role_name_required"
    ROLE_PERMISSIONS_REQUIRED = "role_permissions_required"
    UNKNOWN_ACTION = "unknown_action"
    BUILTIN_ROLE_IMMUTABLE = "builtin_role_immutable"
    INVALID_CONSISTENCY = "invalid_consistency"
    INVALID_RESOURCE_NAME = "invalid_resource_name"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    AUTHORIZATION_FAILED = "authorization_failed"

    # Persistence errors
    POLICY_PERSIST_FAILED = "policy_persist_failed"
    POLICY_PERSIST_TIMEOUT = "policy_persist_timeout"

    # Cluster errors
    LEADER_UNAVAILABLE = "leader_unavailable"
    NODE_UNAVAILABLE = "node_unavailable"
    NODE_READ_FAILED = "node_read_failed"
