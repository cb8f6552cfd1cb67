from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.ids import timestamp_id
from ..common.log import get_logger
from ..common.validators import require_all
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from .model import StaffMember
from .repository import UserRepository

log = get_logger("users")


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: str
    username: str
    display_name: str
    role: Role

    @classmethod
    def of(cls, member: StaffMember) -> "SessionUser":
        return cls(
            user_id=member.user_id,
            username=member.username,
            display_name=member.display_name,
            role=member.role,
        )


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionUser:
        user = self._users.get_by_username((username or "").strip())
        if not user:
            log.info("login rejected for unknown username %r", username)
            raise AuthenticationError("Invalid credentials.")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except Exception:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            log.info("login rejected for %r", username)
            raise AuthenticationError("Invalid credentials.")

        return SessionUser.of(user)


class UserService:
    """Use case: registration and roster management."""

    def __init__(self, users: UserRepository, *, id_factory: Callable[[], str] | None = None):
        self._users = users
        self._new_id = id_factory or timestamp_id

    def _create(self, *, display_name: str, username: str, password: str, role: Role) -> StaffMember:
        require_all("All fields are required", display_name, username, password)
        username = username.strip()

        if self._users.get_by_username(username):
            raise ValidationError("Username already exists")

        member = StaffMember(
            user_id=self._new_id(),
            username=username,
            display_name=display_name.strip(),
            role=role,
            password_hash=generate_password_hash(password),
        )
        log.info("registered %s account %r", role.value, username)
        return self._users.add(member)

    def register_admin(self, *, display_name: str, username: str, password: str) -> SessionUser:
        """Self-registration is only available for admins."""
        member = self._create(display_name=display_name, username=username, password=password, role=Role.ADMIN)
        return SessionUser.of(member)

    def create_staff(self, *, display_name: str, username: str, password: str) -> StaffMember:
        return self._create(display_name=display_name, username=username, password=password, role=Role.STAFF)

    def list_staff(self) -> Sequence[StaffMember]:
        return self._users.list_by_role(Role.STAFF)
