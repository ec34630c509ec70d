"""Member roles and the capabilities each role grants.

Pure domain module. Roles are ordered SILVER < GOLD < ADMIN; call sites ask
for a capability instead of comparing role strings.
"""

from enum import StrEnum


class Role(StrEnum):
    """Member role stored on profiles.role."""

    SILVER = "SILVER"
    GOLD = "GOLD"
    ADMIN = "ADMIN"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @classmethod
    def parse(cls, value: str | None) -> "Role":
        """Parse a stored role, treating unknown or missing values as SILVER."""
        if value is None:
            return cls.SILVER
        try:
            return cls(value.strip().upper())
        except ValueError:
            return cls.SILVER


class Capability(StrEnum):
    """Actions gated by role."""

    AUTHOR_RESTRICTED = "author_restricted"  # write into restricted-tier categories
    PROXY_PUBLISH = "proxy_publish"  # publish on behalf of another member
    MANAGE_CONSOLE = "manage_console"  # admin CRUD over users, posts, news, questions
    EDIT_ANY_POST = "edit_any_post"
    BYPASS_TIER = "bypass_tier"  # publish into any tier for any member


_RANKS: dict[Role, int] = {
    Role.SILVER: 0,
    Role.GOLD: 1,
    Role.ADMIN: 2,
}

# Minimum role required for each capability
_CAPABILITY_FLOOR: dict[Capability, Role] = {
    Capability.AUTHOR_RESTRICTED: Role.GOLD,
    Capability.PROXY_PUBLISH: Role.ADMIN,
    Capability.MANAGE_CONSOLE: Role.ADMIN,
    Capability.EDIT_ANY_POST: Role.ADMIN,
    Capability.BYPASS_TIER: Role.ADMIN,
}


def has_capability(role: Role, capability: Capability) -> bool:
    """Return True if ``role`` is at or above the floor for ``capability``."""
    return role.rank >= _CAPABILITY_FLOOR[capability].rank
