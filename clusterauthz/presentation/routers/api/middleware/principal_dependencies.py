"""Principal dependencies.

Authentication happens upstream; it stores the authenticated caller on
``request.state.principal``. Endpoints read it through
``get_current_principal`` and never authenticate themselves.

Usage:
    from fastapi import Depends
    from clusterauthz.presentation.routers.api.middleware.principal_dependencies import (
        CurrentPrincipal,
    )

    @router.post("/roles/{id}/add-permissions")
    async def add_permissions(principal: CurrentPrincipal): ...
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from clusterauthz.domain.value_objects.principal import Principal


async def get_current_principal(request: Request) -> Principal:
    """Get the authenticated principal of the request.

    Raises:
        HTTPException: 401 if no principal was attached.
    """
    principal = getattr(request.state, "principal", None)
    if not isinstance(principal, Principal):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="anonymous access not allowed",
        )
    return principal


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
