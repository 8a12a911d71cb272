"""Example: drive the service layer without Flask.

Controllers are a thin layer; the use cases live in the services.
"""

from datetime import datetime

from src.rollmate.container import build_container
from src.rollmate.storage.seed import seed_demo_data


def main():
    container = build_container()
    seed_demo_data(container)

    student = container.user_service.list_students()[0]
    # Monday 08:32, inside the demo class circle.
    record = container.attendance_service.check_in(
        student.user_id, lat=40.7130, lng=-74.0062, now=datetime(2024, 1, 8, 8, 32)
    )
    print(record.to_dict())

    container.attendance_service.update(record.attendance_id, {"note": "seen by teacher"})
    print(container.insights_service.student_summary(student_id=student.user_id))
    print([s.name for s in container.user_service.list_students()])


if __name__ == "__main__":
    main()
