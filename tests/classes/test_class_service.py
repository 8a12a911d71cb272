from __future__ import annotations

from datetime import time

import pytest

from src.rollmate.classes.service import parse_weekday
from src.rollmate.core.enums import Role, Weekday
from src.rollmate.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.rollmate.geofence.model import CircleGeofence, PolygonGeofence


def test_teacher_creates_class_with_schedule(container):
    cls = container.class_service.create_class(
        current_role=Role.TEACHER,
        teacher_id=7,
        name="  10A ",
        schedule=[{"day": "mon", "start": time(8, 30), "end": time(9, 30)}, {"day": 4, "start": time(13, 0), "end": time(14, 0)}],
    )

    assert cls.name == "10A"
    assert cls.teacher_id == 7
    assert [s.weekday for s in cls.schedule] == [Weekday.MONDAY, Weekday.FRIDAY]
    assert cls.to_dict()["schedule"][0] == {"day": "monday", "start": "08:30", "end": "09:30"}


def test_student_cannot_create_class(container):
    with pytest.raises(AuthorizationError):
        container.class_service.create_class(current_role=Role.STUDENT, teacher_id=None, name="10A")


def test_slot_must_end_after_start(container):
    with pytest.raises(ValidationError):
        container.class_service.create_class(
            current_role=Role.TEACHER,
            teacher_id=1,
            name="10A",
            schedule=[{"day": "tue", "start": time(10, 0), "end": time(9, 0)}],
        )


def test_set_and_clear_geofence(container):
    cls = container.class_service.create_class(current_role=Role.TEACHER, teacher_id=1, name="10A")

    updated = container.class_service.set_geofence(
        current_role=Role.TEACHER,
        class_id=cls.class_id,
        geofence={"center": {"lat": 1.0, "lng": 2.0}, "radius": 200},
    )
    assert updated.geofence == CircleGeofence(lat=1.0, lng=2.0, radius=200.0)

    cleared = container.class_service.update_class(current_role=Role.TEACHER, class_id=cls.class_id, changes={"geofence": None})
    assert cleared.geofence is None


def test_polygon_geofence_round_trips_through_class(container):
    ring = [[0, 0], [1, 0], [1, 1], [0, 0]]
    cls = container.class_service.create_class(
        current_role=Role.TEACHER,
        teacher_id=1,
        name="10A",
        geofence={"type": "Polygon", "coordinates": [ring]},
    )

    assert isinstance(cls.geofence, PolygonGeofence)
    assert cls.to_dict()["geofence"] == {"type": "Polygon", "coordinates": [ring]}


def test_get_missing_class(container):
    with pytest.raises(NotFoundError):
        container.class_service.get_class(3)


@pytest.mark.parametrize("value,expected", [(0, Weekday.MONDAY), ("Sunday", Weekday.SUNDAY), ("wed", Weekday.WEDNESDAY)])
def test_parse_weekday(value, expected):
    assert parse_weekday(value) == expected


@pytest.mark.parametrize("value", [7, "mo", "funday", True])
def test_parse_weekday_rejects(value):
    with pytest.raises(ValidationError):
        parse_weekday(value)
