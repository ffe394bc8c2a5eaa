from __future__ import annotations

import logging
from datetime import timedelta
from functools import wraps

from flask import Flask, jsonify, request, session

from ..common.responses import error_response
from ..container import Container
from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def operator_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "operator" not in session:
            return jsonify({"success": False, "error": "Please log in to continue"}), 401
        return view(*args, **kwargs)

    return wrapper


def register(app: Flask, container: Container) -> None:
    app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or {}
        try:
            operator = container.auth_service.authenticate(data.get("username"), data.get("password"))
        except AuthenticationError as e:
            logger.warning("Failed login for %r", data.get("username"))
            return error_response(e)

        session.permanent = bool(data.get("remember"))
        session["operator"] = operator.username
        return jsonify({"success": True})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})
