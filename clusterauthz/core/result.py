"""Result types for railway-oriented programming.

Operations that can fail return ``Success`` or ``Failure`` instead of raising.
This keeps the classification of errors (validation, authorization,
persistence, cluster) explicit at every layer boundary.

Usage:
    def convert(role: Role) -> Result[tuple[Policy, ...], ValidationError]:
        if not role.name:
            return Failure(error=ValidationError(...))
        return Success(value=policies)

    match convert(role):
        case Success(value=policies):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
