from __future__ import annotations

from datetime import datetime, time

import pytest

from src.rollmate.classes.model import TimeSlot
from src.rollmate.core.enums import AttendanceStatus, Role, Weekday
from src.rollmate.core.exceptions import NotFoundError, ValidationError
from src.rollmate.geofence.model import PolygonGeofence

SQUARE = PolygonGeofence(
    ring=((19.99, 9.99), (20.01, 9.99), (20.01, 10.01), (19.99, 10.01), (19.99, 9.99)),
)


@pytest.fixture
def setup(container):
    cls = container.classes_repo.create(
        name="10A",
        schedule=[TimeSlot(weekday=Weekday.WEDNESDAY, start_time=time(8, 30), end_time=time(10, 0))],
        geofence=SQUARE,
    )
    student = container.users_repo.create(name="S", email="s@school.test", role=Role.STUDENT, class_id=cls.class_id)
    return container, cls, student


def test_check_in_inside_geofence_on_time(setup, fixed_now):
    container, cls, student = setup

    rec = container.attendance_service.check_in(student.user_id, lat=10.0, lng=20.0, now=fixed_now)

    assert rec.status == AttendanceStatus.PRESENT
    assert rec.class_id == cls.class_id
    assert rec.location.lat == 10.0


def test_check_in_after_grace_is_late(setup):
    container, _, student = setup

    rec = container.attendance_service.check_in(student.user_id, lat=10.0, lng=20.0, now=datetime(2024, 1, 10, 9, 0))

    assert rec.status == AttendanceStatus.LATE
    assert rec.note == "Checked in 30 min after start"


def test_check_in_outside_geofence_is_refused(setup, fixed_now):
    container, cls, student = setup

    with pytest.raises(ValidationError):
        container.attendance_service.check_in(student.user_id, lat=10.5, lng=20.0, now=fixed_now)
    assert container.attendance_repo.list_by_class(cls.class_id) == []


def test_second_check_in_same_day_is_refused(setup, fixed_now):
    container, _, student = setup
    container.attendance_service.check_in(student.user_id, lat=10.0, lng=20.0, now=fixed_now)

    with pytest.raises(ValidationError):
        container.attendance_service.check_in(student.user_id, lat=10.0, lng=20.0, now=fixed_now.replace(hour=9))


def test_check_in_without_geofence(container, fixed_now):
    cls = container.classes_repo.create(name="No fence")
    student = container.users_repo.create(name="S", email="s@school.test", role=Role.STUDENT, class_id=cls.class_id)

    with pytest.raises(ValidationError):
        container.attendance_service.check_in(student.user_id, lat=0.0, lng=0.0, now=fixed_now)


def test_teacher_cannot_check_in(container, fixed_now):
    teacher = container.users_repo.create(name="T", email="t@school.test", role=Role.TEACHER)

    with pytest.raises(NotFoundError):
        container.attendance_service.check_in(teacher.user_id, lat=0.0, lng=0.0, now=fixed_now)


def test_my_attendance_requires_class(container):
    loner = container.users_repo.create(name="L", email="l@school.test", role=Role.STUDENT)

    with pytest.raises(ValidationError):
        container.attendance_service.my_attendance(loner.user_id)


@pytest.fixture
def two_slot_class(container):
    cls = container.classes_repo.create(
        name="10B",
        schedule=[
            TimeSlot(weekday=Weekday.WEDNESDAY, start_time=time(13, 0), end_time=time(14, 30)),
            TimeSlot(weekday=Weekday.WEDNESDAY, start_time=time(8, 30), end_time=time(10, 0)),
        ],
        geofence=SQUARE,
    )
    student = container.users_repo.create(name="S", email="s2@school.test", role=Role.STUDENT, class_id=cls.class_id)
    return container, student


def test_check_in_uses_slot_running_at_that_time(two_slot_class):
    container, student = two_slot_class

    rec = container.attendance_service.check_in(student.user_id, lat=10.0, lng=20.0, now=datetime(2024, 1, 10, 13, 2))

    assert rec.status == AttendanceStatus.PRESENT
    assert rec.note is None


def test_check_in_between_slots_is_late_for_the_earlier_one(two_slot_class):
    container, student = two_slot_class

    rec = container.attendance_service.check_in(student.user_id, lat=10.0, lng=20.0, now=datetime(2024, 1, 10, 11, 0))

    assert rec.status == AttendanceStatus.LATE
    assert rec.note == "Checked in 150 min after start"


def test_check_in_before_first_slot_is_present(two_slot_class):
    container, student = two_slot_class

    rec = container.attendance_service.check_in(student.user_id, lat=10.0, lng=20.0, now=datetime(2024, 1, 10, 7, 50))

    assert rec.status == AttendanceStatus.PRESENT
