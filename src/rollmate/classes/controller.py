from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.decorators import current_role, login_required, teacher_required
from ..common.payloads import parse_payload
from ..container import Container
from ..geofence.geometry import as_polygon
from .schemas import ClassPatchPayload, ClassPayload


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes", methods=["GET"], endpoint="list_classes")
    def list_classes():
        return jsonify([c.to_dict() for c in container.class_service.list_classes()])

    @app.route("/api/classes/<int:class_id>", methods=["GET"], endpoint="get_class")
    def get_class(class_id: int):
        return jsonify(container.class_service.get_class(class_id).to_dict())

    @app.route("/api/classes", methods=["POST"], endpoint="create_class")
    @teacher_required
    def create_class():
        payload = parse_payload(ClassPayload, request.get_json(silent=True), message="Invalid class data")
        cls = container.class_service.create_class(
            current_role=current_role(),
            teacher_id=session.get("user_id"),
            name=payload.name,
            description=payload.description,
            schedule=payload.schedule,
            geofence=payload.geofence,
        )
        return jsonify(cls.to_dict())

    @app.route("/api/classes/<int:class_id>", methods=["PATCH"], endpoint="update_class")
    @teacher_required
    def update_class(class_id: int):
        payload = parse_payload(ClassPatchPayload, request.get_json(silent=True), message="Invalid class data")
        cls = container.class_service.update_class(
            current_role=current_role(),
            class_id=class_id,
            changes=payload.model_dump(exclude_unset=True),
        )
        return jsonify(cls.to_dict())

    @app.route("/api/classes/<int:class_id>", methods=["DELETE"], endpoint="delete_class")
    @teacher_required
    def delete_class(class_id: int):
        container.class_service.delete_class(current_role=current_role(), class_id=class_id)
        return "", 204

    @app.route("/api/classes/<int:class_id>/geofence", methods=["GET"], endpoint="get_class_geofence")
    @login_required
    def get_class_geofence(class_id: int):
        geofence = container.class_service.get_geofence(class_id)
        if geofence is None:
            return jsonify({"geofence": None, "polygon": None})
        return jsonify({"geofence": geofence.to_dict(), "polygon": as_polygon(geofence).to_dict()})
