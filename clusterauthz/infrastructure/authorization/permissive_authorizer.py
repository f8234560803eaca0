"""Authorizer used while RBAC is disabled.

Allows every request. Selected by the container when
``settings.rbac_enabled`` is False.
"""

from clusterauthz.core.errors import AuthorizationError
from clusterauthz.core.result import Result, Success
from clusterauthz.domain.enums.action import Verb
from clusterauthz.domain.value_objects.principal import Principal


class PermissiveAuthorizer:
    """Allow-all implementation of AuthorizerProtocol."""

    async def authorize(
        self,
        principal: Principal | None,
        verb: Verb,
        resource: str,
    ) -> Result[None, AuthorizationError]:
        return Success(value=None)
