from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def create(self, *, name: str, email: str, role: Role, class_id: Optional[int] = None) -> User:
        raise NotImplementedError

    def list_students(self, class_id: Optional[int] = None) -> Sequence[User]:
        raise NotImplementedError

    def delete(self, user_id: int) -> bool:
        raise NotImplementedError
