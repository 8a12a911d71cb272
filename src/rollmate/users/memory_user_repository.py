from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..storage.memory_store import MemoryStore
from .model import User
from .repository import UserRepository


class MemoryUserRepository(UserRepository):
    TABLE = "users"

    def __init__(self, store: MemoryStore):
        self._store = store

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._store.table(self.TABLE).get(int(user_id))

    def get_by_email(self, email: str) -> Optional[User]:
        email = email.strip().lower()
        for user in self._store.rows(self.TABLE):
            if user.email.lower() == email:
                return user
        return None

    def create(self, *, name: str, email: str, role: Role, class_id: Optional[int] = None) -> User:
        user_id = self._store.next_id(self.TABLE)
        user = User(
            user_id=user_id,
            name=name,
            email=email,
            role=role,
            class_id=int(class_id) if class_id is not None else None,
        )
        self._store.table(self.TABLE)[user_id] = user
        return user

    def list_students(self, class_id: Optional[int] = None) -> Sequence[User]:
        students = [u for u in self._store.rows(self.TABLE) if u.role == Role.STUDENT]
        if class_id:
            return [s for s in students if s.class_id == class_id]
        return students

    def delete(self, user_id: int) -> bool:
        return self._store.table(self.TABLE).pop(int(user_id), None) is not None
