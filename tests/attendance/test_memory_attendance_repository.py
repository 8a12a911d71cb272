from __future__ import annotations

from datetime import date, datetime

import pytest

from src.rollmate.attendance.memory_attendance_repository import MemoryAttendanceRepository
from src.rollmate.core.enums import AttendanceStatus
from src.rollmate.core.exceptions import NotFoundError
from src.rollmate.storage.memory_store import MemoryStore


@pytest.fixture
def repo():
    return MemoryAttendanceRepository(MemoryStore())


def _mark(repo, *, student_id=1, class_id=1, when=datetime(2024, 1, 10, 9, 0), status=AttendanceStatus.PRESENT, note=None):
    return repo.create(student_id=student_id, class_id=class_id, date=when, status=status, note=note)


def test_ids_are_unique_and_increasing(repo):
    ids = [_mark(repo, student_id=i).attendance_id for i in range(1, 6)]
    assert ids == [1, 2, 3, 4, 5]


def test_create_defaults_note_to_none(repo):
    rec = _mark(repo)
    assert rec.note is None
    assert rec.location is None


def test_same_slot_twice_keeps_both_records(repo):
    first = _mark(repo, status=AttendanceStatus.PRESENT)
    second = _mark(repo, status=AttendanceStatus.LATE)

    rows = repo.get_by_class_and_date(1, date(2024, 1, 10))
    assert {r.attendance_id for r in rows} == {first.attendance_id, second.attendance_id}
    assert {r.status for r in rows} == {AttendanceStatus.PRESENT, AttendanceStatus.LATE}


def test_class_and_date_ignores_time_of_day(repo):
    early = _mark(repo, when=datetime(2024, 1, 10, 0, 0, 1))
    late = _mark(repo, when=datetime(2024, 1, 10, 23, 59, 59))
    _mark(repo, when=datetime(2024, 1, 11, 0, 0, 0))
    _mark(repo, class_id=2, when=datetime(2024, 1, 10, 12, 0))

    rows = repo.get_by_class_and_date(1, datetime(2024, 1, 10, 15, 30))
    assert [r.attendance_id for r in rows] == [early.attendance_id, late.attendance_id]


def test_update_last_write_wins_and_keeps_note(repo):
    rec = _mark(repo, note="bus delay")

    repo.update(rec.attendance_id, {"status": AttendanceStatus.LATE})
    updated = repo.update(rec.attendance_id, {"status": AttendanceStatus.ABSENT, "note": None})

    assert updated.status == AttendanceStatus.ABSENT
    assert updated.note == "bus delay"
    assert repo.get_by_id(rec.attendance_id) == updated


def test_update_accepts_raw_status_string(repo):
    rec = _mark(repo)
    assert repo.update(rec.attendance_id, {"status": "left_early"}).status == AttendanceStatus.LEFT_EARLY


def test_update_missing_record_raises(repo):
    with pytest.raises(NotFoundError):
        repo.update(99, {"status": AttendanceStatus.LATE})


def test_get_by_student_newest_first(repo):
    _mark(repo, when=datetime(2024, 1, 8, 9, 0))
    _mark(repo, when=datetime(2024, 1, 12, 9, 0))
    _mark(repo, when=datetime(2024, 1, 10, 9, 0))
    _mark(repo, student_id=2, when=datetime(2024, 1, 20, 9, 0))

    dates = [r.date.day for r in repo.get_by_student(1)]
    assert dates == [12, 10, 8]
