"""Commands (CQRS write operations)."""

from clusterauthz.application.commands.authz_commands import AddPermissions

__all__ = ["AddPermissions"]
