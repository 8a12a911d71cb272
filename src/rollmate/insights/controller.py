from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import local_day, now_local, parse_iso_date
from ..common.decorators import login_required, teacher_required
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/insights/class/<int:class_id>", methods=["GET"], endpoint="class_insights")
    @teacher_required
    def class_insights(class_id: int):
        container.class_service.get_class(class_id)

        date_s = request.args.get("date")
        try:
            day = parse_iso_date(date_s) if date_s else local_day(now_local())
        except ValueError:
            raise ValidationError(f"Invalid date: {date_s!r}")

        return jsonify(container.insights_service.class_overview(class_id=class_id, day=day))

    @app.route("/api/insights/my", methods=["GET"], endpoint="my_insights")
    @login_required
    def my_insights():
        return jsonify(container.insights_service.student_summary(student_id=int(session["user_id"])))
