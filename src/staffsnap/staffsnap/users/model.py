from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class StaffMember:
    """Domain entity: an account on the roster.

    Note: plain data object, no storage access. Immutable after registration.
    """

    user_id: str
    username: str
    display_name: str
    role: Role
    password_hash: str = ""

    @property
    def is_staff(self) -> bool:
        return self.role == Role.STAFF
