from __future__ import annotations

from functools import wraps

from flask import session

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            raise AuthenticationError("Not authenticated")
        return view(*args, **kwargs)

    return wrapper


def teacher_required(view):
    """Allow only the teacher role (class, event and student management)."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            raise AuthenticationError("Not authenticated")
        if session.get("role") != Role.TEACHER.value:
            raise AuthorizationError("Teacher access required")
        return view(*args, **kwargs)

    return wrapper


def current_role() -> Role | None:
    role = session.get("role")
    return Role(role) if role else None
