"""Demo data for local runs (``AUTO_SEED=1`` or ``scripts/seed_db.py``)."""
from __future__ import annotations

from datetime import time

from ..classes.model import TimeSlot
from ..core.enums import Role, Weekday
from ..geofence.model import CircleGeofence

DEMO_TEACHER_EMAIL = "teacher@rollmate.test"


def seed_demo_data(container) -> dict[str, int]:
    """Create a teacher, one class with a geofence, and a few students.

    Skips everything when the demo teacher already exists.
    """
    users = container.users_repo
    if users.get_by_email(DEMO_TEACHER_EMAIL):
        return container.store.counts()

    teacher = users.create(name="Demo Teacher", email=DEMO_TEACHER_EMAIL, role=Role.TEACHER)
    cls = container.classes_repo.create(
        name="10A",
        description="Demo class",
        teacher_id=teacher.user_id,
        schedule=[
            TimeSlot(weekday=Weekday.MONDAY, start_time=time(8, 30), end_time=time(10, 0)),
            TimeSlot(weekday=Weekday.WEDNESDAY, start_time=time(8, 30), end_time=time(10, 0)),
            TimeSlot(weekday=Weekday.FRIDAY, start_time=time(13, 0), end_time=time(14, 30)),
        ],
        geofence=CircleGeofence(lat=40.7128, lng=-74.0060, radius=500),
    )
    for i, name in enumerate(("Ana Lima", "Ben Okafor", "Chen Wei"), start=1):
        users.create(name=name, email=f"student{i}@rollmate.test", role=Role.STUDENT, class_id=cls.class_id)

    return container.store.counts()
