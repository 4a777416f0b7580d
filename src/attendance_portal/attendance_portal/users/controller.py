from __future__ import annotations

from flask import Flask, g, jsonify, request, session

from ..common.validators import require_non_empty
from ..common.web import capability_required, current_session, login_required
from ..container import Container
from ..core.enums import Capability, Role
from ..core.exceptions import AuthenticationError, NotFoundError
from .model import User
from .service import PortalSession


def _user_ui(user: User) -> dict:
    return {
        "id": user.user_id,
        "name": user.name,
        "role": user.role.value,
        "status": user.status.value,
        "jobProfile": user.job_profile,
        "salaryType": user.salary_type.value,
        "imageUrl": user.image_url or f"https://i.pravatar.cc/150?u={user.user_id}",
    }


def _me(portal: PortalSession) -> dict:
    return {
        "success": True,
        "user": _user_ui(portal.current_user),
        "capabilities": sorted(c.value for c in portal.current_capabilities()),
        "navigation": portal.navigation(),
    }


def register(app: Flask, container: Container) -> None:
    @app.before_request
    def restore_session():
        # One session per request, re-validated so a terminated user loses access.
        portal = container.new_session()
        g.portal_session = portal
        user_id = session.get("user_id")
        if not user_id:
            return None
        try:
            portal.login(user_id)
        except (NotFoundError, AuthenticationError):
            session.clear()
        return None

    @app.route("/users", methods=["GET"], endpoint="login_choices")
    def login_choices():
        users = container.user_service.login_choices()
        return jsonify([{"id": u.user_id, "name": u.name, "role": u.role.value} for u in users])

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or {}
        user_id = require_non_empty(data.get("userId", ""), "userId")

        portal = current_session()
        user = portal.login(user_id)
        session.clear()
        session["user_id"] = user.user_id
        return jsonify(_me(portal))

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        current_session().logout()
        session.clear()
        return jsonify({"success": True, "message": "Logged out."})

    @app.route("/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        return jsonify(_me(current_session()))

    @app.route("/dashboard", methods=["GET"], endpoint="dashboard")
    @capability_required(Capability.VIEW_DASHBOARD)
    def dashboard():
        user = current_session().current_user
        body = {"success": True, "title": "Dashboard", "welcome": f"Welcome, {user.name}!"}
        if user.role == Role.EMPLOYEE:
            body["hint"] = "You can mark your attendance and log your work using the sidebar navigation."
        return jsonify(body)

    @app.route("/wip", methods=["GET"], endpoint="work_in_progress")
    @capability_required(Capability.VIEW_WORK_IN_PROGRESS)
    def work_in_progress():
        if current_session().current_user.role == Role.ADMIN:
            panel = {
                "title": "Work In Progress - Admin View",
                "description": "Define sewing operations and rates for each tracking number.",
            }
        else:
            panel = {
                "title": "Daily Work Entry",
                "description": "Select the type of work you performed today and enter the details.",
            }
        return jsonify({"success": True, **panel})

    @app.route("/employees", methods=["GET"], endpoint="employees")
    @capability_required(Capability.MANAGE_EMPLOYEES)
    def employees():
        rows = container.user_service.list_employees(current_session())
        return jsonify({"success": True, "employees": [_user_ui(u) for u in rows]})
