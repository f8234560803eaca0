"""Schema router.

Endpoints:
    HEAD /v1/schema/{className}/tenants/{tenantName} - Check tenant existence

The ``consistency`` header picks where the read is answered:
true (default) routes to the leader for read-after-write results, false
lets the local replica answer.
"""

from fastapi import APIRouter, Depends, Header, Path, status
from fastapi.responses import JSONResponse, Response

from clusterauthz.application.queries.handlers.tenant_exists_handler import (
    TenantExistsHandler,
)
from clusterauthz.application.queries.schema_queries import TenantExists
from clusterauthz.core.container import get_tenant_exists_handler
from clusterauthz.core.result import Failure
from clusterauthz.presentation.routers.api.middleware.principal_dependencies import (
    CurrentPrincipal,
)
from clusterauthz.presentation.routers.api.v1.errors import ErrorResponseBuilder
from clusterauthz.schemas.authz_schemas import ErrorResponse

router = APIRouter(prefix="/schema", tags=["Schema"])

TRUE_VALUES = frozenset({"true", "1", "yes", "y", "on", "t", "ok", "done", "enabled"})
FALSE_VALUES = frozenset({"false", "0", "no", "n", "off", "f", "disabled"})


def parse_consistency_header(raw: str | None, default: bool = True) -> bool | None:
    """Decode the consistency header.

    Args:
        raw: Header value as received, None if absent.
        default: Value used for an absent or empty header.

    Returns:
        The decoded flag, or None if the value is not a boolean.
    """
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    return None


@router.head(
    "/{class_name}/tenants/{tenant_name}",
    status_code=status.HTTP_200_OK,
    responses={
        200: {"description": "Tenant exists"},
        401: {"description": "No authenticated principal", "model": ErrorResponse},
        403: {"description": "Caller may not read the tenant", "model": ErrorResponse},
        404: {"description": "Tenant does not exist"},
        422: {"description": "Malformed consistency header", "model": ErrorResponse},
        500: {"description": "Node read failed", "model": ErrorResponse},
        503: {"description": "Leader unavailable, retry later", "model": ErrorResponse},
    },
    summary="Check tenant existence",
)
async def tenant_exists(
    principal: CurrentPrincipal,
    class_name: str = Path(..., description="Collection (class) name"),
    tenant_name: str = Path(..., description="Tenant name"),
    consistency: str | None = Header(default=None),
    handler: TenantExistsHandler = Depends(get_tenant_exists_handler),
) -> Response:
    """Check whether a tenant exists.

    HEAD /v1/schema/{className}/tenants/{tenantName} → 200 / 404

    Args:
        principal: Authenticated caller (injected).
        class_name: Collection (class) name.
        tenant_name: Tenant name.
        consistency: Raw consistency header.
        handler: TenantExists handler (injected).
    """
    strong = parse_consistency_header(consistency)
    if strong is None:
        return JSONResponse(
            status_code=422,
            content=ErrorResponse.of(
                f'consistency in header must be of type bool: "{consistency}"'
            ).model_dump(),
        )

    result = await handler.handle(
        TenantExists(
            principal=principal,
            class_name=class_name,
            tenant_name=tenant_name,
            consistency=strong,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(result.error)

    if not result.value:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_200_OK)
