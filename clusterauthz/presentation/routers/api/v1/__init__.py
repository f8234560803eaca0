"""API v1 routers.

Resources:
    /v1/authz/roles/{role_id}/add-permissions        - Role permission upsert
    /v1/schema/{className}/tenants/{tenantName}      - Tenant existence (HEAD)
"""

from fastapi import APIRouter

from clusterauthz.presentation.routers.api.v1.authz import router as authz_router
from clusterauthz.presentation.routers.api.v1.schema import router as schema_router

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(authz_router)
v1_router.include_router(schema_router)

__all__ = [
    "v1_router",
]
