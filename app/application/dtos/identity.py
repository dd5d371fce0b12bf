"""DTOs for the calling identity (resolved from the access token)."""

from dataclasses import dataclass

from app.domain.enums import UserRole


@dataclass(frozen=True)
class CallerIdentity:
    """Authenticated caller: user id (token sub) and role."""

    user_id: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
