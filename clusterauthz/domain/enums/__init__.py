"""Domain enums.

Usage:
    from clusterauthz.domain.enums import ActionKind, BuiltinRole, Verb
"""

from clusterauthz.domain.enums.action import ActionDomain, ActionKind, Verb
from clusterauthz.domain.enums.builtin_role import BUILTIN_ROLES, BuiltinRole
from clusterauthz.domain.enums.pattern_scope import PatternScope

__all__ = [
    "ActionDomain",
    "ActionKind",
    "Verb",
    "BuiltinRole",
    "BUILTIN_ROLES",
    "PatternScope",
]
