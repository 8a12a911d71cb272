from __future__ import annotations

from dataclasses import dataclass

from .attendance.factory import CheckInStrategyFactory
from .attendance.memory_attendance_repository import MemoryAttendanceRepository
from .attendance.service import AttendanceService
from .classes.memory_class_repository import MemoryClassRepository
from .classes.service import ClassService
from .core.constants import DEFAULT_CHECKIN_GRACE_MINUTES
from .events.memory_event_repository import MemoryEventRepository
from .events.service import EventService
from .insights.service import InsightsService
from .storage.memory_store import MemoryStore
from .users.memory_user_repository import MemoryUserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    store: MemoryStore

    users_repo: MemoryUserRepository
    classes_repo: MemoryClassRepository
    events_repo: MemoryEventRepository
    attendance_repo: MemoryAttendanceRepository

    auth_service: AuthService
    user_service: UserService
    class_service: ClassService
    event_service: EventService
    attendance_service: AttendanceService
    insights_service: InsightsService


def build_container(*, store: MemoryStore | None = None, grace_minutes: int = DEFAULT_CHECKIN_GRACE_MINUTES) -> Container:
    store = store or MemoryStore()

    users_repo = MemoryUserRepository(store)
    classes_repo = MemoryClassRepository(store)
    events_repo = MemoryEventRepository(store)
    attendance_repo = MemoryAttendanceRepository(store)

    auth_service = AuthService(users_repo)
    user_service = UserService(users_repo)
    class_service = ClassService(classes_repo)
    event_service = EventService(events_repo, classes_repo)
    attendance_service = AttendanceService(
        attendance_repo,
        users_repo,
        classes_repo,
        strategy_factory=CheckInStrategyFactory(),
        grace_minutes=grace_minutes,
    )
    insights_service = InsightsService(attendance_repo, users_repo)

    return Container(
        store=store,
        users_repo=users_repo,
        classes_repo=classes_repo,
        events_repo=events_repo,
        attendance_repo=attendance_repo,
        auth_service=auth_service,
        user_service=user_service,
        class_service=class_service,
        event_service=event_service,
        attendance_service=attendance_service,
        insights_service=insights_service,
    )
