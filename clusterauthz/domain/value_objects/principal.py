"""Authenticated caller identity.

Produced by the authentication layer; the core only compares principals and
reads the username.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True, kw_only=True)
class Principal:
    """Caller identity.

    Attributes:
        username: Unique user name.
        groups: Groups the user belongs to.
    """

    username: str
    groups: tuple[str, ...] = field(default_factory=tuple)
