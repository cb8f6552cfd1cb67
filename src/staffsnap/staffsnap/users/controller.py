from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.log import get_logger
from ..common.web import admin_required, fail, login_required
from ..container import Container
from ..core.exceptions import AuthenticationError, ValidationError
from .service import SessionUser

log = get_logger("users.controller")


def _start_session(user: SessionUser) -> None:
    session.clear()
    session["user_id"] = user.user_id
    session["username"] = user.username
    session["name"] = user.display_name
    session["role"] = user.role.value


def _session_payload() -> dict:
    return {
        "id": session.get("user_id"),
        "username": session.get("username"),
        "name": session.get("name"),
        "role": session.get("role"),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or {}
        try:
            s_user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))
        except AuthenticationError as e:
            return fail(str(e), 401)

        _start_session(s_user)
        return jsonify({"success": True, "user": _session_payload()}), 200

    @app.route("/api/register", methods=["POST"], endpoint="register_admin")
    def register_admin():
        data = request.get_json(silent=True) or {}
        try:
            s_user = container.user_service.register_admin(
                display_name=data.get("name", ""),
                username=data.get("username", ""),
                password=data.get("password", ""),
            )
        except ValidationError as e:
            return fail(str(e), 400)

        _start_session(s_user)
        return jsonify({"success": True, "user": _session_payload()}), 201

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True}), 200

    @app.route("/api/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        return jsonify({"success": True, "user": _session_payload()}), 200

    @app.route("/api/admin/staff", methods=["GET"], endpoint="list_staff")
    @admin_required
    def list_staff():
        staff = [
            {"id": m.user_id, "username": m.username, "name": m.display_name}
            for m in container.user_service.list_staff()
        ]
        return jsonify({"success": True, "staff": staff}), 200

    @app.route("/api/admin/staff", methods=["POST"], endpoint="add_staff")
    @admin_required
    def add_staff():
        data = request.get_json(silent=True) or {}
        try:
            member = container.user_service.create_staff(
                display_name=data.get("name", ""),
                username=data.get("username", ""),
                password=data.get("password", ""),
            )
        except ValidationError as e:
            return fail(str(e), 400)

        return jsonify(
            {"success": True, "staff": {"id": member.user_id, "username": member.username, "name": member.display_name}}
        ), 201
