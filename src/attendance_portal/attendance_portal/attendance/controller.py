from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_iso_date, now_local
from ..common.validators import require_non_empty
from ..common.web import capability_required, current_session, login_required
from ..container import Container
from ..core.enums import Capability


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service

    @app.route("/attendance", methods=["GET"], endpoint="attendance")
    @login_required
    def attendance_page():
        portal = current_session()
        if portal.can(Capability.REVIEW_ALL_ATTENDANCE):
            rows = attendance.list_for_review(portal)
            return jsonify({"success": True, "records": [attendance.to_ui(r) for r in rows]})

        now = now_local()
        rec = attendance.today_record(portal.current_user.user_id, now=now)
        return jsonify(
            {
                "success": True,
                "date": format_iso_date(now.date()),
                "today": attendance.to_ui(rec) if rec else None,
            }
        )

    @app.route("/attendance", methods=["POST"], endpoint="mark_attendance")
    @capability_required(Capability.SUBMIT_OWN_ATTENDANCE)
    def mark_attendance():
        portal = current_session()
        rec = attendance.mark_present(portal, portal.current_user)
        return (
            jsonify(
                {
                    "success": True,
                    "message": "Attendance marked successfully! Awaiting admin approval.",
                    "record": attendance.to_ui(rec),
                }
            ),
            201,
        )

    @app.route("/attendance/<attendance_id>", methods=["PUT"], endpoint="review_attendance")
    @capability_required(Capability.REVIEW_ALL_ATTENDANCE)
    def review_attendance(attendance_id: str):
        data = request.get_json(silent=True) or {}
        decision = require_non_empty(data.get("status", ""), "status")
        portal = current_session()
        rec = attendance.review_attendance(portal, portal.current_user, attendance_id, decision)
        return jsonify({"success": True, "record": attendance.to_ui(rec)})

    @app.route("/refresh", methods=["POST"], endpoint="refresh")
    @login_required
    def refresh():
        container.refresh()
        return jsonify({"success": True, "message": "Data reloaded."})
