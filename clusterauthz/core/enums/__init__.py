"""Core enums package.

Usage:
    from clusterauthz.core.enums import ErrorCode, Environment
"""

from clusterauthz.core.enums.environment import Environment
from clusterauthz.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
