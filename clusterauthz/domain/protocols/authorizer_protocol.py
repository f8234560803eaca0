"""Authorizer protocol (port).

The authorizer decides whether a principal may perform a verb on a resource
identifier (see ``domain/value_objects/resources.py``). Callers invoke it
before any conversion or persistence side effect.

Implementations:
    - CasbinAuthorizer: Production (casbin enforcer)
    - PermissiveAuthorizer: RBAC disabled

Pattern resolution:
    When several stored policies match one resource, the most specific wins:
    exact collection+tenant > collection-wide > tenant-wide > global.

Usage:
    result = await authorizer.authorize(
        principal, Verb.UPDATE, roles_resource("newRole")
    )
    if isinstance(result, Failure):
        ...  # result.error.message goes to the caller unchanged
"""

from typing import Protocol

from clusterauthz.core.errors import AuthorizationError
from clusterauthz.core.result import Result
from clusterauthz.domain.enums.action import Verb
from clusterauthz.domain.value_objects.principal import Principal


class AuthorizerProtocol(Protocol):
    """Protocol for authorization decisions. Read-only, safe to call concurrently."""

    async def authorize(
        self,
        principal: Principal | None,
        verb: Verb,
        resource: str,
    ) -> Result[None, AuthorizationError]:
        """Check if principal may perform verb on resource.

        Args:
            principal: Authenticated caller, None for anonymous.
            verb: Verb to check.
            resource: Resource identifier.

        Returns:
            Success(None) if allowed.
            Failure(AuthorizationError) if denied; the message is meant for
            the caller as-is.
        """
        ...
