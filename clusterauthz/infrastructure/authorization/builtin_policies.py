"""Builtin role policies and root user seeding.

Runs once at enforcer start-up. Seeding is idempotent: existing rules are
left alone, so restarting with the same configuration writes nothing.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from clusterauthz.core.result import Failure, Result, Success
from clusterauthz.domain.entities.policy import Policy
from clusterauthz.domain.enums.action import ActionDomain, ActionKind, Verb
from clusterauthz.domain.enums.builtin_role import BuiltinRole
from clusterauthz.domain.errors.policy_error import PolicyPersistenceError
from clusterauthz.domain.value_objects.resource_pattern import ResourcePattern
from clusterauthz.infrastructure.authorization.policy_rules import (
    role_subject,
    user_subject,
)

if TYPE_CHECKING:
    import casbin

    from clusterauthz.domain.protocols.logger_protocol import LoggerProtocol
    from clusterauthz.domain.protocols.role_controller_protocol import (
        RoleControllerProtocol,
    )

_GLOBAL = str(ResourcePattern.derive())


def builtin_policies() -> list[Policy]:
    """Policies granted to the builtin roles, all with global scope."""
    grants: dict[BuiltinRole, list[ActionKind]] = {
        BuiltinRole.ADMIN: list(ActionKind),
        BuiltinRole.EDITOR: [
            action
            for action in ActionKind
            if action.domain
            in {ActionDomain.COLLECTIONS, ActionDomain.TENANTS, ActionDomain.DATA}
        ],
        BuiltinRole.VIEWER: [
            action for action in ActionKind if action.verbs == (Verb.READ,)
        ],
    }
    return [
        Policy(role=role.value, action=action, resource_pattern=_GLOBAL)
        for role, actions in grants.items()
        for action in actions
    ]


async def seed_builtin_roles(
    enforcer: "casbin.AsyncEnforcer",
    controller: "RoleControllerProtocol",
    root_users: Sequence[str],
    logger: "LoggerProtocol",
) -> Result[None, PolicyPersistenceError]:
    """Write builtin role policies and grant root users the admin role.

    Args:
        enforcer: Initialized AsyncEnforcer.
        controller: Role controller used for the policy upsert.
        root_users: Usernames to link to the admin role.
        logger: Structured logger.

    Returns:
        Success(None), or the controller's failure.
    """
    seeded = await controller.upsert_roles_permissions(builtin_policies())
    if isinstance(seeded, Failure):
        return seeded

    admin = role_subject(BuiltinRole.ADMIN.value)
    existing = {tuple(rule) for rule in enforcer.get_grouping_policy()}
    links = [
        [user_subject(user), admin]
        for user in root_users
        if (user_subject(user), admin) not in existing
    ]
    if links:
        await enforcer.add_grouping_policies(links)

    logger.info(
        "builtin_roles_seeded",
        roles=BuiltinRole.values(),
        root_users_linked=len(links),
    )
    return Success(value=None)
