"""Resource pattern derived from a permission's collection/tenant scope.

An absent dimension is a wildcard:

    | collection | tenant | pattern | scope      |
    |------------|--------|---------|------------|
    | None       | None   | */*     | GLOBAL     |
    | C          | None   | C/*     | COLLECTION |
    | C          | T      | C/T     | EXACT      |
    | None       | T      | */T     | TENANT     |

Derivation is pure and total: every pair maps to exactly one pattern.

Usage:
    pattern = ResourcePattern.derive(collection="ABC", tenant="Tenant1")
    str(pattern)                           # "ABC/Tenant1"
    pattern.matches("ABC", "Tenant1")      # True
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from clusterauthz.domain.enums.pattern_scope import PatternScope

WILDCARD = "*"
SEPARATOR = "/"

# Collection and tenant names end up inside casbin keyMatch2 patterns, which
# are regexes with ":param" placeholders. Names are limited to characters
# that are literal there and never collide with the separator.
NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,128}$")


@dataclass(frozen=True, slots=True, kw_only=True)
class ResourcePattern:
    """Collection/tenant pattern with wildcard semantics.

    Attributes:
        collection: Collection name, or None for every collection.
        tenant: Tenant name, or None for every tenant.
    """

    collection: str | None = None
    tenant: str | None = None

    @classmethod
    def derive(
        cls, collection: str | None = None, tenant: str | None = None
    ) -> "ResourcePattern":
        """Build the pattern for a (collection, tenant) pair.

        Empty strings and the literal wildcard are treated as absent.
        """
        return cls(collection=_normalize(collection), tenant=_normalize(tenant))

    @classmethod
    def parse(cls, value: str) -> "ResourcePattern":
        """Parse a ``collection/tenant`` pattern string.

        Raises:
            ValueError: If the value is not two segments.
        """
        collection, sep, tenant = value.partition(SEPARATOR)
        if not sep or SEPARATOR in tenant:
            raise ValueError(f"invalid resource pattern: {value!r}")
        return cls.derive(collection=collection, tenant=tenant)

    @property
    def scope(self) -> PatternScope:
        """Scope kind of this pattern."""
        if self.collection is None and self.tenant is None:
            return PatternScope.GLOBAL
        if self.tenant is None:
            return PatternScope.COLLECTION
        if self.collection is None:
            return PatternScope.TENANT
        return PatternScope.EXACT

    @property
    def specificity(self) -> int:
        """Rank used to pick the most specific of several matching patterns."""
        return self.scope.specificity

    def matches(self, collection: str | None, tenant: str | None) -> bool:
        """Check whether this pattern covers a concrete resource.

        A None argument asks about every value of that dimension, which only
        a wildcard in the pattern covers.
        """
        if self.collection is not None and self.collection != collection:
            return False
        if self.tenant is not None and self.tenant != tenant:
            return False
        return True

    def __str__(self) -> str:
        return SEPARATOR.join(
            (self.collection or WILDCARD, self.tenant or WILDCARD)
        )


def most_specific(
    patterns: Iterable[ResourcePattern],
    collection: str | None,
    tenant: str | None,
) -> ResourcePattern | None:
    """Return the most specific pattern that matches, or None.

    Ties on specificity keep the first pattern seen.
    """
    best: ResourcePattern | None = None
    for pattern in patterns:
        if not pattern.matches(collection, tenant):
            continue
        if best is None or pattern.specificity > best.specificity:
            best = pattern
    return best


def _normalize(value: str | None) -> str | None:
    if value is None or value == "" or value == WILDCARD:
        return None
    return value


def is_valid_name(value: str) -> bool:
    """Check a concrete collection or tenant name."""
    return NAME_PATTERN.fullmatch(value) is not None
