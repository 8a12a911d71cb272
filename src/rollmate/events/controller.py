from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.decorators import current_role, teacher_required
from ..common.payloads import optional_int_arg, parse_payload
from ..container import Container
from .schemas import EventPayload


def register(app: Flask, container: Container) -> None:
    @app.route("/api/events", methods=["GET"], endpoint="list_events")
    def list_events():
        class_id = optional_int_arg(request.args.get("classId"))
        return jsonify([e.to_dict() for e in container.event_service.list_events(class_id)])

    @app.route("/api/events", methods=["POST"], endpoint="create_event")
    @teacher_required
    def create_event():
        payload = parse_payload(EventPayload, request.get_json(silent=True), message="Invalid event data")
        event = container.event_service.create_event(
            current_role=current_role(),
            class_id=payload.class_id,
            title=payload.title,
            due_date=payload.due_date,
            type=payload.type,
            description=payload.description,
            location=payload.location,
        )
        return jsonify(event.to_dict())
