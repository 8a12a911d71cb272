from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a teacher or a student.

    Note: Plain data object (no storage access). Teachers have no class_id.
    """

    user_id: int
    name: str
    email: str
    role: Role
    class_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "id": self.user_id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "classId": self.class_id,
        }
