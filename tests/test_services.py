from __future__ import annotations

import pytest

from src.rollmate.core.enums import Role
from src.rollmate.core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, ValidationError
from src.rollmate.storage.memory_store import MemoryStore
from src.rollmate.users.memory_user_repository import MemoryUserRepository
from src.rollmate.users.service import AuthService, UserService


@pytest.fixture
def users():
    return MemoryUserRepository(MemoryStore())


def test_login_by_email_case_insensitive(users):
    user = users.create(name="T", email="t@school.test", role=Role.TEACHER)

    s_user = AuthService(users).login("T@School.test ")

    assert s_user.user_id == user.user_id
    assert s_user.role == Role.TEACHER


def test_login_with_wrong_role_raises(users):
    users.create(name="S", email="s@school.test", role=Role.STUDENT, class_id=1)

    with pytest.raises(AuthenticationError):
        AuthService(users).login("s@school.test", Role.TEACHER)


def test_login_unknown_email_raises(users):
    with pytest.raises(AuthenticationError):
        AuthService(users).login("nobody@school.test")


def test_signup_rejects_duplicate_email(users):
    svc = UserService(users)
    svc.signup(name="A", email="a@school.test", role=Role.STUDENT, class_id=1)

    with pytest.raises(ValidationError):
        svc.signup(name="A2", email="A@school.test", role=Role.STUDENT, class_id=1)


def test_teacher_signup_drops_class(users):
    teacher = UserService(users).signup(name="T", email="t@school.test", role=Role.TEACHER, class_id=3)

    assert teacher.class_id is None


def test_list_students_by_class(users):
    svc = UserService(users)
    svc.signup(name="T", email="t@school.test", role=Role.TEACHER)
    a = svc.create_student(name="A", email="a@school.test", class_id=1)
    svc.create_student(name="B", email="b@school.test", class_id=2)

    assert [s.user_id for s in svc.list_students(1)] == [a.user_id]
    assert len(svc.list_students()) == 2


def test_delete_student_requires_teacher(users):
    svc = UserService(users)
    a = svc.create_student(name="A", email="a@school.test", class_id=1)

    with pytest.raises(AuthorizationError):
        svc.delete_student(current_role=Role.STUDENT, student_id=a.user_id)
    with pytest.raises(NotFoundError):
        svc.delete_student(current_role=Role.TEACHER, student_id=99)

    svc.delete_student(current_role=Role.TEACHER, student_id=a.user_id)
    assert users.get_by_id(a.user_id) is None


def test_store_reset_restarts_counters():
    store = MemoryStore()
    users = MemoryUserRepository(store)
    users.create(name="A", email="a@school.test", role=Role.TEACHER)

    store.reset()

    assert users.create(name="B", email="b@school.test", role=Role.TEACHER).user_id == 1
    assert store.counts()["users"] == 1
