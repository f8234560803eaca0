"""Common error classes used across layers.

Error Types:
- ValidationError: Input validation failures (mapped to 400)
- AuthorizationError: Authorizer denial (mapped to 403)

Usage:
    return Failure(error=ValidationError(
        code=ErrorCode.ROLE_NAME_REQUIRED,
        message="role name is required",
        field="name",
    ))
"""

from dataclasses import dataclass

from clusterauthz.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (no permission).

    The message is produced by the authorizer and must reach the caller
    unmodified.

    Attributes:
        verb: Verb that was checked (C, R, U, D).
        resource: Resource identifier that was checked.
    """

    verb: str | None = None
    resource: str | None = None
