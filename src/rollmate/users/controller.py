from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.decorators import current_role, teacher_required
from ..common.payloads import optional_int_arg, parse_payload
from ..container import Container
from .schemas import LoginPayload, SignupPayload, StudentPayload


def register(app: Flask, container: Container) -> None:
    def _start_session(s_user) -> None:
        session.clear()
        session["user_id"] = s_user.user_id
        session["name"] = s_user.name
        session["role"] = s_user.role.value
        session["class_id"] = s_user.class_id

    @app.route("/api/auth/me", methods=["GET"], endpoint="auth_me")
    def auth_me():
        user = container.auth_service.current_user(session.get("user_id"))
        return jsonify(user.to_dict())

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def auth_login():
        payload = parse_payload(LoginPayload, request.get_json(silent=True), message="Invalid credentials")
        s_user = container.auth_service.login(payload.email, payload.role)
        _start_session(s_user)

        app.logger.info("user %s logged in as %s", s_user.user_id, s_user.role.value)
        return jsonify(container.users_repo.get_by_id(s_user.user_id).to_dict())

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def auth_logout():
        session.clear()
        return "", 204

    @app.route("/api/auth/signup", methods=["POST"], endpoint="auth_signup")
    def auth_signup():
        payload = parse_payload(SignupPayload, request.get_json(silent=True), message="Invalid signup data")
        user = container.user_service.signup(
            name=payload.name,
            email=payload.email,
            role=payload.role,
            class_id=payload.class_id,
        )
        s_user = container.auth_service.login(user.email, user.role)
        _start_session(s_user)
        return jsonify(user.to_dict()), 201

    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    def list_students():
        class_id = optional_int_arg(request.args.get("classId"))
        return jsonify([s.to_dict() for s in container.user_service.list_students(class_id)])

    @app.route("/api/students", methods=["POST"], endpoint="create_student")
    @teacher_required
    def create_student():
        payload = parse_payload(StudentPayload, request.get_json(silent=True), message="Invalid student data")
        student = container.user_service.create_student(
            name=payload.name,
            email=payload.email,
            class_id=payload.class_id,
        )
        return jsonify(student.to_dict())

    @app.route("/api/students/<int:student_id>", methods=["DELETE"], endpoint="delete_student")
    @teacher_required
    def delete_student(student_id: int):
        container.user_service.delete_student(current_role=current_role(), student_id=student_id)
        return "", 204
