"""Core errors package.

Usage:
    from clusterauthz.core.errors import DomainError, ValidationError
"""

from clusterauthz.core.errors.common_errors import (
    AuthorizationError,
    ValidationError,
)
from clusterauthz.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "AuthorizationError",
]
