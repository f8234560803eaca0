"""Tenant exists handler.

Flow:
1. Authorize principal for READ on the tenant -> 403
2. Route the read by consistency flag (leader or local replica)
3. Map cluster errors: transient -> SERVICE_UNAVAILABLE, other -> QUERY_FAILED
4. Return existence
"""

from clusterauthz.application.errors import ApplicationError, ApplicationErrorCode
from clusterauthz.application.queries.schema_queries import TenantExists
from clusterauthz.application.services.consistency_router import ConsistencyRouter
from clusterauthz.core.result import Failure, Result, Success
from clusterauthz.domain.enums.action import Verb
from clusterauthz.domain.protocols.authorizer_protocol import AuthorizerProtocol
from clusterauthz.domain.protocols.logger_protocol import LoggerProtocol
from clusterauthz.domain.value_objects.resources import tenants_resource


class TenantExistsHandler:
    """Handler for the TenantExists query."""

    def __init__(
        self,
        authorizer: AuthorizerProtocol,
        router: ConsistencyRouter,
        logger: LoggerProtocol,
    ) -> None:
        self._authorizer = authorizer
        self._router = router
        self._logger = logger

    async def handle(self, query: TenantExists) -> Result[bool, ApplicationError]:
        """Handle the TenantExists query.

        Args:
            query: Collection, tenant, consistency flag and caller.

        Returns:
            Success(True/False) with the tenant's existence.
            Failure(ApplicationError) with code FORBIDDEN,
            SERVICE_UNAVAILABLE or QUERY_FAILED.
        """
        authorized = await self._authorizer.authorize(
            query.principal,
            Verb.READ,
            tenants_resource(query.class_name, query.tenant_name),
        )
        if isinstance(authorized, Failure):
            return Failure(
                error=ApplicationError.from_domain(
                    ApplicationErrorCode.FORBIDDEN, authorized.error
                )
            )

        result = await self._router.tenant_exists(
            query.class_name,
            query.tenant_name,
            strong=query.consistency,
        )
        if isinstance(result, Success):
            return result

        code = (
            ApplicationErrorCode.SERVICE_UNAVAILABLE
            if result.error.transient
            else ApplicationErrorCode.QUERY_FAILED
        )
        self._logger.warning(
            "tenant_exists_failed",
            class_name=query.class_name,
            tenant_name=query.tenant_name,
            consistency=query.consistency,
            transient=result.error.transient,
        )
        return Failure(error=ApplicationError.from_domain(code, result.error))
