from __future__ import annotations

from flask import jsonify

from ..core.exceptions import (
    AuthenticationError,
    DomainError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

_STATUS_BY_ERROR = (
    (AuthenticationError, 401),
    (NotFoundError, 404),
    (ValidationError, 400),
    (PersistenceError, 500),
)


def status_for(error: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 500


def error_response(error: DomainError):
    return jsonify({"success": False, "error": str(error)}), status_for(error)
