from __future__ import annotations

from enum import IntEnum

from tableacl.common.errors import UnknownRoleError


class Role(IntEnum):
    """Privilege levels, ordered lowest to highest.

    A higher role subsumes every capability of the lower ones.
    """
    # SELECT statements
    READER = 0
    # SELECT, INSERT and UPDATE statements
    WRITER = 1
    # any statement, including DDL
    ADMIN = 2

    @property
    def canonical_name(self) -> str:
        return self.name

    def grants(self, required: "Role") -> bool:
        """True when this role is at or above ``required``."""
        return self >= required


def role_name(value: int) -> str:
    """Returns the canonical name for a role value, or "" when out of range."""
    try:
        return Role(value).canonical_name
    except ValueError:
        return ""


def role_by_name(name: str) -> Role:
    """Resolves a role name case-insensitively.

    Raises:
        UnknownRoleError: If the name matches no defined role.
    """
    try:
        return Role[name.upper()]
    except (KeyError, AttributeError):
        raise UnknownRoleError(name) from None
