"""Acting identity passed explicitly into every permission-checked operation."""

from dataclasses import dataclass
from uuid import UUID

from app.domain.roles import Capability, Role, has_capability

FALLBACK_AUTHOR_NAME = "모험가"


@dataclass(frozen=True)
class ActingIdentity:
    """A member as seen by the services: who is acting, or on whose behalf."""

    user_id: UUID
    role: Role
    email: str | None = None
    nickname: str | None = None

    @property
    def display_name(self) -> str:
        """Nickname, else the email local part, else a generic adventurer name."""
        if self.nickname and self.nickname.strip():
            return self.nickname.strip()
        if self.email and "@" in self.email:
            local = self.email.split("@", 1)[0]
            if local:
                return local
        return FALLBACK_AUTHOR_NAME

    def can(self, capability: Capability) -> bool:
        return has_capability(self.role, capability)

    @classmethod
    def from_profile(cls, profile) -> "ActingIdentity":
        """Build from a Profile row."""
        return cls(
            user_id=profile.id,
            role=Role.parse(profile.role),
            email=profile.email,
            nickname=profile.nickname,
        )
