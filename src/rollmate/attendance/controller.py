from __future__ import annotations

import csv
import io
from datetime import date, timedelta

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import local_day, now_local, parse_iso_date, parse_iso_datetime
from ..common.decorators import login_required, teacher_required
from ..common.payloads import optional_int_arg, parse_payload
from ..container import Container
from ..core.exceptions import AuthenticationError, ValidationError
from .schemas import AttendancePatchPayload, AttendancePayload, CheckInPayload


def register(app: Flask, container: Container) -> None:
    def _parse_date(value: str) -> date:
        try:
            return parse_iso_date(value)
        except ValueError:
            raise ValidationError(f"Invalid date: {value!r}")

    def _write_report_csv(*, data, filename: str):
        """Write report rows to a CSV download."""

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=["date", "time", "student_id", "student_name", "status", "note"])
        writer.writeheader()
        for row in data.rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    @login_required
    def list_attendance():
        class_id_s = request.args.get("classId")
        date_s = request.args.get("date")
        if not class_id_s or not date_s:
            raise ValidationError("Missing classId or date")

        class_id = optional_int_arg(class_id_s)
        try:
            day = parse_iso_datetime(date_s)
        except ValueError:
            raise ValidationError(f"Invalid date: {date_s!r}")

        records = container.attendance_service.for_class_and_date(class_id, day)
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/attendance/my", methods=["GET"], endpoint="my_attendance")
    def my_attendance():
        if "user_id" not in session:
            raise AuthenticationError("Not authenticated")
        records = container.attendance_service.my_attendance(int(session["user_id"]))
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    @teacher_required
    def mark_attendance():
        payload = parse_payload(AttendancePayload, request.get_json(silent=True), message="Invalid attendance data")
        record = container.attendance_service.mark(
            student_id=payload.student_id,
            class_id=payload.class_id,
            date=payload.date,
            status=payload.status,
            note=payload.note,
            location=payload.location,
        )
        return jsonify(record.to_dict())

    @app.route("/api/attendance/<int:attendance_id>", methods=["PATCH"], endpoint="update_attendance")
    @teacher_required
    def update_attendance(attendance_id: int):
        payload = parse_payload(AttendancePatchPayload, request.get_json(silent=True), message="Invalid attendance data")
        record = container.attendance_service.update(attendance_id, payload.model_dump(exclude_unset=True))
        return jsonify(record.to_dict())

    @app.route("/api/attendance/check-in", methods=["POST"], endpoint="attendance_check_in")
    @login_required
    def attendance_check_in():
        payload = parse_payload(CheckInPayload, request.get_json(silent=True), message="Invalid location")
        record = container.attendance_service.check_in(int(session["user_id"]), lat=payload.lat, lng=payload.lng)
        app.logger.info("student %s checked in to class %s as %s", record.student_id, record.class_id, record.status.value)
        return jsonify(record.to_dict()), 201

    @app.route("/api/attendance/export.csv", methods=["GET"], endpoint="export_attendance_csv")
    @teacher_required
    def export_attendance_csv():
        class_id = optional_int_arg(request.args.get("classId"))
        if class_id is None:
            raise ValidationError("Missing classId")

        today = local_day(now_local())
        start = _parse_date(request.args["start"]) if request.args.get("start") else today - timedelta(days=30)
        end = _parse_date(request.args["end"]) if request.args.get("end") else today
        if end < start:
            raise ValidationError("end must not be before start")

        data = container.insights_service.build_class_report(
            class_id=class_id,
            start=start,
            end=end,
            student_id=optional_int_arg(request.args.get("studentId")),
        )
        filename = f"attendance_class{class_id}_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        return _write_report_csv(data=data, filename=filename)
