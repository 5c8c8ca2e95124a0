from __future__ import annotations

from flask import Flask, current_app, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="api_dashboard")
    def api_dashboard():
        student_id = request.args.get("student_id") or current_app.config["DEFAULT_STUDENT_ID"]
        user_name = request.args.get("name") or current_app.config["DEFAULT_USER_NAME"]

        data = container.dashboard_service.build_summary_ui(student_id, user_name=user_name)
        return jsonify({"success": True, "dashboard": data}), 200
