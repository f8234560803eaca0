"""Casbin implementation of AuthorizerProtocol.

Decisions come from a casbin enforcer loaded with model.conf:
- keyMatch2 on objects, so ``*`` in a stored pattern matches any segment
- regexMatch on verbs, so ``manage_*`` actions grant every verb
- ``g`` rules link users to roles

When ``resolve_matched_pattern`` is set (debug logging), an allowed request
also logs the most specific matching policy (exact > collection-wide >
tenant-wide > global). Resolving it scans the role's policies, so it is off
otherwise.

Following hexagonal architecture:
- Infrastructure implements domain protocol (AuthorizerProtocol)
- Domain doesn't know about casbin
"""

from typing import TYPE_CHECKING

from clusterauthz.core.enums import ErrorCode
from clusterauthz.core.errors import AuthorizationError
from clusterauthz.core.result import Failure, Result, Success
from clusterauthz.domain.enums.action import ActionDomain, Verb
from clusterauthz.domain.value_objects.principal import Principal
from clusterauthz.domain.value_objects.resource_pattern import (
    WILDCARD,
    most_specific,
)
from clusterauthz.infrastructure.authorization.policy_rules import (
    rule_to_policy,
    user_subject,
)

if TYPE_CHECKING:
    import casbin

    from clusterauthz.domain.protocols.logger_protocol import LoggerProtocol


class CasbinAuthorizer:
    """Casbin-based authorizer.

    Attributes:
        _enforcer: Casbin enforcer (sync or async; only ``enforce`` and the
            policy getters are used, which are synchronous on both).
        _logger: Structured logger.
        _resolve_matched_pattern: Log the matching pattern on allow.
    """

    def __init__(
        self,
        enforcer: "casbin.Enforcer | casbin.AsyncEnforcer",
        logger: "LoggerProtocol",
        *,
        resolve_matched_pattern: bool = False,
    ) -> None:
        self._enforcer = enforcer
        self._logger = logger
        self._resolve_matched_pattern = resolve_matched_pattern

    async def authorize(
        self,
        principal: Principal | None,
        verb: Verb,
        resource: str,
    ) -> Result[None, AuthorizationError]:
        """Check if principal may perform verb on resource.

        Enforcer errors fail closed.

        Args:
            principal: Authenticated caller, None for anonymous.
            verb: Verb to check.
            resource: Resource identifier.

        Returns:
            Success(None) if allowed, Failure(AuthorizationError) if denied.
        """
        if principal is None:
            self._logger.info(
                "authorization_denied",
                verb=verb.value,
                resource=resource,
                reason="anonymous",
            )
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.PERMISSION_DENIED,
                    message="authorization, forbidden action: anonymous access not allowed",
                    verb=verb.value,
                    resource=resource,
                )
            )

        subject = user_subject(principal.username)
        try:
            allowed = bool(self._enforcer.enforce(subject, resource, verb.value))
        except Exception as e:
            self._logger.error(
                "authorization_check_error",
                error=e,
                username=principal.username,
                verb=verb.value,
                resource=resource,
            )
            allowed = False

        if not allowed:
            self._logger.info(
                "authorization_denied",
                username=principal.username,
                verb=verb.value,
                resource=resource,
            )
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.PERMISSION_DENIED,
                    message=(
                        "authorization, forbidden action: user "
                        f"'{principal.username}' has insufficient permissions "
                        f"to {verb.name.lower()} {resource}"
                    ),
                    verb=verb.value,
                    resource=resource,
                )
            )

        if self._resolve_matched_pattern:
            self._logger.debug(
                "authorization_granted",
                username=principal.username,
                verb=verb.value,
                resource=resource,
                matched_pattern=self._matched_pattern(subject, verb, resource),
            )
        return Success(value=None)

    def _matched_pattern(self, subject: str, verb: Verb, resource: str) -> str | None:
        """Most specific stored pattern covering a scoped resource, if any."""
        segments = resource.split("/")
        if len(segments) != 3 or segments[0] not in _SCOPED_DOMAINS:
            return None
        collection = None if segments[1] == WILDCARD else segments[1]
        tenant = None if segments[2] == WILDCARD else segments[2]

        subjects = {subject} | {
            rule[1] for rule in self._enforcer.get_grouping_policy() if rule[0] == subject
        }
        patterns = []
        for rule in self._enforcer.get_policy():
            if rule[0] not in subjects:
                continue
            policy = rule_to_policy(rule)
            if (
                policy is not None
                and policy.action.domain.value == segments[0]
                and verb in policy.action.verbs
            ):
                patterns.append(policy.pattern)

        best = most_specific(patterns, collection, tenant)
        return str(best) if best is not None else None


_SCOPED_DOMAINS = {domain.value for domain in ActionDomain if domain.is_scoped}
