"""Authorization request/response schemas.

Pydantic models for the role management endpoints. Validation here is
structural only; role semantics (known actions, builtin roles) are checked
by the command handler so that they produce 400 responses with the
handler's messages.
"""

from pydantic import BaseModel, ConfigDict, Field

from clusterauthz.domain.value_objects.permission import Permission


class CollectionsSchema(BaseModel):
    """Resource scope of a permission.

    Missing, empty and ``*`` values all mean "any".
    """

    model_config = ConfigDict(extra="ignore")

    collection: str | None = Field(default=None, description="Collection name")
    tenant: str | None = Field(default=None, description="Tenant name")


class PermissionSchema(BaseModel):
    """One permission of a role."""

    model_config = ConfigDict(extra="ignore")

    action: str = Field(..., description="Action kind, e.g. create_collections")
    collections: CollectionsSchema | None = Field(
        default=None, description="Resource scope (defaults to any)"
    )

    def to_permission(self) -> Permission:
        """Convert to the domain value object."""
        scope = self.collections or CollectionsSchema()
        return Permission(
            action=self.action,
            collection=scope.collection,
            tenant=scope.tenant,
        )


class AddPermissionsRequest(BaseModel):
    """Request schema for adding permissions to a role.

    Attributes:
        name: Role name. Optional; when given it must equal the path role.
        permissions: Permissions to add.
    """

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "permissions": [
                    {
                        "action": "create_collections",
                        "collections": {"collection": "ABC", "tenant": "Tenant1"},
                    }
                ]
            }
        },
    )

    name: str | None = Field(
        default=None, description="Role name, must match the path when given"
    )
    permissions: list[PermissionSchema] = Field(default_factory=list)


class ErrorMessage(BaseModel):
    """A single error message."""

    message: str


class ErrorResponse(BaseModel):
    """Error body shared by every endpoint.

    Example:
        {"error": [{"message": "role has to have at least 1 permission"}]}
    """

    error: list[ErrorMessage]

    @classmethod
    def of(cls, message: str) -> "ErrorResponse":
        return cls(error=[ErrorMessage(message=message)])
