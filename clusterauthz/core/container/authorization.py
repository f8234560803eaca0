"""Authorization dependency factories.

Casbin RBAC enforcement for role management and resource checks.
Enforcer is initialized at application startup, which also seeds the
builtin roles and links the configured root users to the admin role.
"""

from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from clusterauthz.core.config import settings
from clusterauthz.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from casbin import AsyncEnforcer

    from clusterauthz.application.commands.handlers.add_permissions_handler import (
        AddPermissionsHandler,
    )
    from clusterauthz.domain.protocols.authorizer_protocol import AuthorizerProtocol
    from clusterauthz.domain.protocols.role_controller_protocol import (
        RoleControllerProtocol,
    )


MODEL_PATH = (
    Path(__file__).resolve().parents[2] / "infrastructure" / "authorization" / "model.conf"
)

# Module-level state for enforcer singleton
_enforcer: "AsyncEnforcer | None" = None


async def init_enforcer() -> "AsyncEnforcer":
    """Initialize Casbin AsyncEnforcer at application startup.

    Creates enforcer with:
    - Model config from infrastructure/authorization/model.conf
    - Async SQLAlchemy adapter for persistent policy storage

    Then seeds the builtin roles and root users.

    MUST be called during FastAPI lifespan startup.

    Returns:
        Initialized AsyncEnforcer instance.

    Raises:
        RuntimeError: If enforcer is already initialized, or seeding failed.
    """
    global _enforcer

    if _enforcer is not None:
        raise RuntimeError("Enforcer already initialized")

    import casbin
    from casbin_async_sqlalchemy_adapter import Adapter as CasbinSQLAdapter

    from clusterauthz.core.result import Failure
    from clusterauthz.infrastructure.authorization.builtin_policies import (
        seed_builtin_roles,
    )

    adapter = CasbinSQLAdapter(settings.database_url)
    await adapter.create_table()

    enforcer = casbin.AsyncEnforcer(str(MODEL_PATH), adapter)
    await enforcer.load_policy()
    _enforcer = enforcer

    seeded = await seed_builtin_roles(
        enforcer,
        get_role_controller(),
        settings.root_user_list,
        get_logger(),
    )
    if isinstance(seeded, Failure):
        raise RuntimeError(f"Seeding builtin roles failed: {seeded.error.message}")

    get_logger().info(
        "casbin_enforcer_initialized",
        model_path=str(MODEL_PATH),
        rbac_enabled=settings.rbac_enabled,
    )
    return enforcer


def reset_enforcer() -> None:
    """Drop the enforcer singleton and its dependents (shutdown, tests)."""
    global _enforcer
    _enforcer = None
    get_role_controller.cache_clear()


def get_enforcer() -> "AsyncEnforcer":
    """Get Casbin AsyncEnforcer singleton.

    Raises:
        RuntimeError: If called before init_enforcer().
    """
    if _enforcer is None:
        raise RuntimeError(
            "Enforcer not initialized. Call init_enforcer() during startup."
        )
    return _enforcer


@lru_cache()
def get_role_controller() -> "RoleControllerProtocol":
    """Get role controller singleton (app-scoped).

    One instance for the whole application so that every request shares
    the same per-role locks.
    """
    from clusterauthz.infrastructure.authorization.casbin_role_controller import (
        CasbinRoleController,
    )

    return CasbinRoleController(
        get_enforcer(),
        get_logger(),
        timeout_seconds=settings.persist_timeout_seconds,
    )


def get_authorizer() -> "AuthorizerProtocol":
    """Get authorizer.

    CasbinAuthorizer when RBAC is enabled, PermissiveAuthorizer otherwise.
    """
    if not settings.rbac_enabled:
        from clusterauthz.infrastructure.authorization.permissive_authorizer import (
            PermissiveAuthorizer,
        )

        return PermissiveAuthorizer()

    from clusterauthz.infrastructure.authorization.casbin_authorizer import (
        CasbinAuthorizer,
    )

    return CasbinAuthorizer(
        get_enforcer(),
        get_logger(),
        resolve_matched_pattern=settings.log_level.upper() == "DEBUG",
    )


def get_add_permissions_handler() -> "AddPermissionsHandler":
    """Get AddPermissions command handler (request-scoped)."""
    from clusterauthz.application.commands.handlers.add_permissions_handler import (
        AddPermissionsHandler,
    )

    return AddPermissionsHandler(
        authorizer=get_authorizer(),
        controller=get_role_controller(),
        logger=get_logger(),
    )
