from __future__ import annotations

from datetime import timedelta

from flask import Flask, session

from ..common.web import admin_required, json_body, login_required, ok
from ..container import Container
from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        s_user = container.auth_service.sign_in(data.get("email", ""), data.get("password", ""))

        session.clear()
        session.permanent = bool(data.get("remember_me"))
        session["user_id"] = s_user.user_id
        session["email"] = s_user.email
        session["role"] = s_user.role.value

        app.logger.info("Signed in %s as %s", s_user.email, s_user.role.value)
        return ok({"user": {"user_id": s_user.user_id, "email": s_user.email, "role": s_user.role.value}})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok({"message": "Signed out"})

    @app.route("/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        return ok({"user": {"user_id": session["user_id"], "email": session.get("email"), "role": session.get("role")}})

    @app.route("/viewers", methods=["POST"], endpoint="create_viewer")
    def create_viewer():
        data = json_body()
        user_id = container.auth_service.create_viewer(
            email=data.get("email", ""),
            password=data.get("password", ""),
            confirm_password=data.get("confirm_password", ""),
            access_code=data.get("access_code", ""),
        )
        return ok({"user_id": user_id}, 201)

    @app.route("/settings/access-code", methods=["PUT"], endpoint="set_access_code")
    @admin_required
    def set_access_code():
        data = json_body()
        container.auth_service.set_admin_access_code(
            current_role=Role(session.get("role")),
            code=data.get("code", ""),
        )
        return ok({"message": "Access code updated"})
