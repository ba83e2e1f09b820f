"""
Owner scopes

An album collection is addressed either through the authenticated caller
(`ME`) or through an explicit user id. Resolution to a path segment is
pure and never depends on who the caller actually is.
"""

import re
from dataclasses import dataclass
from typing import Union

from .protocols import InvalidArgumentError

CURRENT_USER_SEGMENT = "me"
USERS_ROOT = "users"

# Ids are used as a single path segment and are never escaped
USER_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


@dataclass(frozen=True)
class CurrentUser:
    """The authenticated caller"""

    def __str__(self) -> str:
        return CURRENT_USER_SEGMENT


@dataclass(frozen=True)
class UserId:
    """An explicit user identifier (numeric or string)"""
    value: Union[int, str]

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, str)):
            raise InvalidArgumentError(f"User id must be int or str, got {type(self.value).__name__}")
        if isinstance(self.value, int) and self.value <= 0:
            raise InvalidArgumentError(f"User id must be positive, got {self.value}")
        if isinstance(self.value, str) and not USER_ID_PATTERN.fullmatch(self.value):
            raise InvalidArgumentError(f"Invalid user id: {self.value!r}")

    def __str__(self) -> str:
        return str(self.value)


OwnerScope = Union[CurrentUser, UserId]

ME = CurrentUser()


def resolve_scope(scope: OwnerScope) -> str:
    """Map an owner scope to its path segment (`me` or the user id)"""
    if isinstance(scope, CurrentUser):
        return CURRENT_USER_SEGMENT
    if isinstance(scope, UserId):
        return str(scope.value)
    raise InvalidArgumentError(f"Unsupported owner scope: {scope!r}")


def scope_root(scope: OwnerScope) -> str:
    """Path prefix for a scope: `/me` or `/users/{id}`"""
    segment = resolve_scope(scope)
    if isinstance(scope, CurrentUser):
        return f"/{segment}"
    return f"/{USERS_ROOT}/{segment}"


__all__ = [
    "CurrentUser",
    "UserId",
    "OwnerScope",
    "ME",
    "CURRENT_USER_SEGMENT",
    "resolve_scope",
    "scope_root",
]
