"""Authorization (role management) router.

Endpoints:
    POST /v1/authz/roles/{role_id}/add-permissions - Extend a role with permissions
"""

from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import JSONResponse, Response

from clusterauthz.application.commands.authz_commands import AddPermissions
from clusterauthz.application.commands.handlers.add_permissions_handler import (
    AddPermissionsHandler,
)
from clusterauthz.core.container import get_add_permissions_handler
from clusterauthz.core.result import Failure
from clusterauthz.presentation.routers.api.middleware.principal_dependencies import (
    CurrentPrincipal,
)
from clusterauthz.presentation.routers.api.v1.errors import ErrorResponseBuilder
from clusterauthz.schemas.authz_schemas import AddPermissionsRequest, ErrorResponse

router = APIRouter(prefix="/authz", tags=["Authorization"])


@router.post(
    "/roles/{role_id}/add-permissions",
    status_code=status.HTTP_200_OK,
    responses={
        200: {"description": "Permissions added"},
        400: {"description": "Invalid role or permissions", "model": ErrorResponse},
        401: {"description": "No authenticated principal", "model": ErrorResponse},
        403: {"description": "Caller may not update the role", "model": ErrorResponse},
        500: {"description": "Policies could not be persisted", "model": ErrorResponse},
    },
    summary="Add permissions to role",
    description="Add permissions to a role. The role is created when it does "
    "not exist yet. Re-adding existing permissions is a no-op.",
)
async def add_permissions(
    data: AddPermissionsRequest,
    principal: CurrentPrincipal,
    role_id: str = Path(..., description="Role name"),
    handler: AddPermissionsHandler = Depends(get_add_permissions_handler),
) -> Response:
    """Add permissions to a role.

    POST /v1/authz/roles/{role_id}/add-permissions → 200 OK

    Args:
        data: Permissions to add.
        principal: Authenticated caller (injected).
        role_id: Role name from the path.
        handler: AddPermissions handler (injected).

    Returns:
        Response: Empty 200 on success.
        JSONResponse: 400/403/500 error body on failure, 400 when the body
            names a different role than the path.
    """
    if data.name is not None and data.name != role_id:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse.of(
                f'role name "{data.name}" does not match path role "{role_id}"'
            ).model_dump(),
        )

    command = AddPermissions(
        principal=principal,
        role_name=role_id,
        permissions=tuple(p.to_permission() for p in data.permissions),
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(result.error)

    return Response(status_code=status.HTTP_200_OK)
