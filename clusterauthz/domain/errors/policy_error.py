"""Policy persistence errors."""

from dataclasses import dataclass

from clusterauthz.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class PolicyPersistenceError(DomainError):
    """Policy store failure.

    The message carries the storage layer's message unchanged. Nothing of
    the failed upsert is persisted.

    Attributes:
        role: Role whose upsert failed.
    """

    role: str | None = None
