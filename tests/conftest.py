from __future__ import annotations

from datetime import datetime

import pytest

from src.rollmate.container import build_container
from src.rollmate.core.enums import Role


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday
    return datetime(2024, 1, 10, 8, 35, 0)


@pytest.fixture
def container():
    return build_container(grace_minutes=10)


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.rollmate.main import create_app

    return create_app()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def teacher(app):
    c = app.extensions["rollmate"]
    return c.users_repo.create(name="T", email="t@school.test", role=Role.TEACHER)


@pytest.fixture
def teacher_client(client, teacher):
    res = client.post("/api/auth/login", json={"email": teacher.email, "role": "teacher"})
    assert res.status_code == 200
    return client
