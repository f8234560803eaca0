"""Mapping between domain policies and casbin rules.

Rule layout (see model.conf):

    p, role:<name>, <object>, <verb regex>, <action>, <pattern>

- object: ``<domain>/<collection>/<tenant>`` for scoped domains,
  ``<domain>/*`` for roles and cluster
- verb regex: anchored alternation of the verbs the action grants
- action and pattern: the policy's own fields, kept so rules map back
  to policies without loss

Subjects are prefixed so that a user and a role with the same name never
collide: ``user:<username>``, ``role:<name>``.
"""

from clusterauthz.domain.entities.policy import Policy
from clusterauthz.domain.enums.action import ActionKind
from clusterauthz.domain.value_objects.resource_pattern import (
    WILDCARD,
    ResourcePattern,
)

ROLE_PREFIX = "role:"
USER_PREFIX = "user:"


def role_subject(role: str) -> str:
    """Casbin subject of a role."""
    return f"{ROLE_PREFIX}{role}"


def user_subject(username: str) -> str:
    """Casbin subject of a user."""
    return f"{USER_PREFIX}{username}"


def verb_pattern(action: ActionKind) -> str:
    """Anchored regex matching the verbs an action grants."""
    return "^(" + "|".join(verb.value for verb in action.verbs) + ")$"


def policy_object(policy: Policy) -> str:
    """Casbin object a policy applies to."""
    domain = policy.action.domain
    if not domain.is_scoped:
        return f"{domain.value}/{WILDCARD}"
    return f"{domain.value}/{policy.resource_pattern}"


def policy_to_rule(policy: Policy) -> list[str]:
    """Build the casbin rule of a policy."""
    return [
        role_subject(policy.role),
        policy_object(policy),
        verb_pattern(policy.action),
        policy.action.value,
        policy.resource_pattern,
    ]


def rule_to_policy(rule: list[str]) -> Policy | None:
    """Rebuild a policy from a casbin rule.

    Returns None for rules not written by this mapping (user subjects,
    short rules, unknown actions, malformed patterns).
    """
    if len(rule) < 5 or not rule[0].startswith(ROLE_PREFIX):
        return None
    if not ActionKind.is_valid(rule[3]):
        return None
    try:
        ResourcePattern.parse(rule[4])
    except ValueError:
        return None
    return Policy(
        role=rule[0].removeprefix(ROLE_PREFIX),
        action=ActionKind(rule[3]),
        resource_pattern=rule[4],
    )
