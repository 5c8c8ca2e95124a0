from __future__ import annotations

from flask import Flask, current_app, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container
from .derivation import tab_from_value


def register(app: Flask, container: Container) -> None:
    @app.route("/api/sessions", methods=["GET"], endpoint="api_sessions")
    def api_sessions():
        student_id = request.args.get("student_id") or current_app.config["DEFAULT_STUDENT_ID"]
        try:
            tab = tab_from_value(request.args.get("tab", "today"))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        groups = container.session_service.tab_view_ui(student_id, tab)
        return jsonify({"success": True, "tab": tab.value, "title": tab.label, "groups": groups}), 200
