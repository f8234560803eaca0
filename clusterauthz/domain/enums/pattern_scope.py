"""Scope of a resource pattern."""

from enum import Enum


class PatternScope(str, Enum):
    """What a resource pattern applies to.

    Each scope has a specificity used to rank patterns that match the same
    resource. Higher wins.
    """

    GLOBAL = "global"
    """All collections and all tenants."""

    TENANT = "tenant"
    """One tenant name across all collections."""

    COLLECTION = "collection"
    """One collection, all of its tenants."""

    EXACT = "exact"
    """One tenant within one collection."""

    @property
    def specificity(self) -> int:
        """Rank of this scope: exact > collection > tenant > global."""
        return _SPECIFICITY[self]


_SPECIFICITY: dict[PatternScope, int] = {
    PatternScope.GLOBAL: 0,
    PatternScope.TENANT: 1,
    PatternScope.COLLECTION: 2,
    PatternScope.EXACT: 3,
}
