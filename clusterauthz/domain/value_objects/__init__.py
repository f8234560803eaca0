"""Domain value objects (immutable, compared by value)."""

from clusterauthz.domain.value_objects.permission import Permission
from clusterauthz.domain.value_objects.principal import Principal
from clusterauthz.domain.value_objects.resource_pattern import (
    WILDCARD,
    ResourcePattern,
)

__all__ = ["Permission", "Principal", "ResourcePattern", "WILDCARD"]
