from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..common.validators import require_email, require_non_empty, require_positive_id
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    user_id: int
    name: str
    role: Role
    class_id: Optional[int]


class AuthService:
    """Use case: log a user in by email, optionally scoped to a role."""

    def __init__(self, users: UserRepository):
        self._users = users

    def login(self, email: str, role: Optional[Role] = None) -> SessionUser:
        if not email or not email.strip():
            raise ValidationError("Invalid credentials")

        user = self._users.get_by_email(email)
        if not user:
            raise AuthenticationError("Invalid credentials")
        if role is not None and user.role != role:
            logger.info("login refused for %s: role %s requested, has %s", user.email, role.value, user.role.value)
            raise AuthenticationError("Invalid credentials")

        return SessionUser(user_id=user.user_id, name=user.name, role=user.role, class_id=user.class_id)

    def current_user(self, user_id: Optional[int]) -> User:
        if not user_id:
            raise AuthenticationError("Not authenticated")
        user = self._users.get_by_id(int(user_id))
        if not user:
            raise AuthenticationError("Not authenticated")
        return user


class UserService:
    """Use case: sign up users and manage the student roster."""

    def __init__(self, users: UserRepository):
        self._users = users

    def signup(self, *, name: str, email: str, role: Role, class_id: Optional[int] = None) -> User:
        name = require_non_empty(name, "Name")
        email = require_email(email)

        if self._users.get_by_email(email):
            raise ValidationError("Email is already registered")

        if role == Role.TEACHER:
            class_id = None
        elif class_id is not None:
            class_id = require_positive_id(class_id, "Class")

        return self._users.create(name=name, email=email, role=role, class_id=class_id)

    def create_student(self, *, name: str, email: str, class_id: int) -> User:
        return self.signup(name=name, email=email, role=Role.STUDENT, class_id=require_positive_id(class_id, "Class"))

    def list_students(self, class_id: Optional[int] = None) -> Sequence[User]:
        return self._users.list_students(class_id)

    def delete_student(self, *, current_role: Optional[Role], student_id: int) -> None:
        if current_role != Role.TEACHER:
            raise AuthorizationError("Teacher access required")

        user = self._users.get_by_id(student_id)
        if not user or user.role != Role.STUDENT:
            raise NotFoundError("Student not found")

        # Attendance rows of the student are left in place.
        self._users.delete(student_id)
