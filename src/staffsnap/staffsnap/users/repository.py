from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import StaffMember


class UserRepository(Protocol):
    """Repository interface for accounts.

    Note (DIP): services depend on this interface, never on a concrete store.
    """

    def get_by_id(self, user_id: str) -> Optional[StaffMember]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[StaffMember]:
        raise NotImplementedError

    def add(self, member: StaffMember) -> StaffMember:
        """Raises ValidationError when the username is taken, checked atomically with the insert."""

        raise NotImplementedError

    def list_by_role(self, role: Role) -> Sequence[StaffMember]:
        """Members with the given role, in registration order."""

        raise NotImplementedError
