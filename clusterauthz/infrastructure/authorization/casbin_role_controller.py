"""Casbin implementation of RoleControllerProtocol.

Policies are written through the enforcer's adapter:
- One ``add_policies`` call per role, which the SQLAlchemy adapter commits
  in a single transaction, so a role's batch lands whole or not at all
- Rules already in the model are skipped, which makes upserts idempotent
  and keeps other policies of the role untouched
- One asyncio.Lock per role serializes upserts on the same role; a lock is
  dropped once no upsert holds or waits for it
- The lock wait and the write run under a deadline; a cancelled write
  rolls back with its transaction

Reference:
    - clusterauthz/infrastructure/authorization/policy_rules.py
"""

import asyncio
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from clusterauthz.core.enums import ErrorCode
from clusterauthz.core.result import Failure, Result, Success
from clusterauthz.domain.entities.policy import Policy
from clusterauthz.domain.errors.policy_error import PolicyPersistenceError
from clusterauthz.infrastructure.authorization.policy_rules import (
    policy_to_rule,
    role_subject,
    rule_to_policy,
)

if TYPE_CHECKING:
    import casbin

    from clusterauthz.domain.protocols.logger_protocol import LoggerProtocol


class CasbinRoleController:
    """Role policy persistence backed by a casbin AsyncEnforcer.

    Attributes:
        _enforcer: App-scoped AsyncEnforcer with a persistent adapter.
        _logger: Structured logger.
        _timeout_seconds: Deadline for one role's upsert.
        _locks: Per-role locks, present while in use.
        _lock_users: Upserts holding or waiting for each lock.
    """

    def __init__(
        self,
        enforcer: "casbin.AsyncEnforcer",
        logger: "LoggerProtocol",
        *,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._enforcer = enforcer
        self._logger = logger
        self._timeout_seconds = timeout_seconds
        self._locks: dict[str, asyncio.Lock] = {}
        self._lock_users: dict[str, int] = {}

    async def upsert_roles_permissions(
        self, policies: Sequence[Policy]
    ) -> Result[None, PolicyPersistenceError]:
        """Merge policies into the store, one atomic batch per role.

        Roles are processed in first-seen order; the first failing role
        stops the upsert (earlier roles stay committed).

        Args:
            policies: Policies to upsert.

        Returns:
            Success(None) or Failure(PolicyPersistenceError).
        """
        by_role: dict[str, list[Policy]] = {}
        for policy in policies:
            by_role.setdefault(policy.role, []).append(policy)

        for role, role_policies in by_role.items():
            result = await self._upsert_role(role, role_policies)
            if isinstance(result, Failure):
                return result

        return Success(value=None)

    async def get_role_policies(self, role: str) -> list[Policy]:
        """Get a role's stored policies, most specific pattern first.

        Args:
            role: Role name.

        Returns:
            list[Policy]: Stable order within equal specificity.
        """
        subject = role_subject(role)
        policies = [
            policy
            for rule in self._enforcer.get_policy()
            if rule and rule[0] == subject
            if (policy := rule_to_policy(rule)) is not None
        ]
        return sorted(policies, key=lambda p: p.pattern.specificity, reverse=True)

    async def _upsert_role(
        self, role: str, policies: list[Policy]
    ) -> Result[None, PolicyPersistenceError]:
        rules = [policy_to_rule(policy) for policy in policies]

        try:
            async with asyncio.timeout(self._timeout_seconds):
                async with self._role_lock(role):
                    existing = {tuple(rule) for rule in self._enforcer.get_policy()}
                    new_rules: list[list[str]] = []
                    for rule in rules:
                        if tuple(rule) in existing:
                            continue
                        existing.add(tuple(rule))
                        new_rules.append(rule)

                    if not new_rules:
                        self._logger.debug("role_policies_unchanged", role=role)
                        return Success(value=None)

                    added = await self._enforcer.add_policies(new_rules)
        except TimeoutError:
            self._logger.error(
                "role_policies_persist_timeout",
                role=role,
                timeout_seconds=self._timeout_seconds,
            )
            return Failure(
                error=PolicyPersistenceError(
                    code=ErrorCode.POLICY_PERSIST_TIMEOUT,
                    message=f"timed out persisting policies for role {role}",
                    role=role,
                )
            )
        except Exception as e:
            self._logger.error("role_policies_persist_error", error=e, role=role)
            return Failure(
                error=PolicyPersistenceError(
                    code=ErrorCode.POLICY_PERSIST_FAILED,
                    message=str(e),
                    role=role,
                )
            )

        if not added:
            return Failure(
                error=PolicyPersistenceError(
                    code=ErrorCode.POLICY_PERSIST_FAILED,
                    message=f"policies for role {role} were not persisted",
                    role=role,
                )
            )

        self._logger.info(
            "role_policies_persisted",
            role=role,
            added=len(new_rules),
            skipped=len(rules) - len(new_rules),
        )
        return Success(value=None)

    @asynccontextmanager
    async def _role_lock(self, role: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(role, asyncio.Lock())
        self._lock_users[role] = self._lock_users.get(role, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[role] -= 1
            if not self._lock_users[role]:
                del self._lock_users[role]
                del self._locks[role]
