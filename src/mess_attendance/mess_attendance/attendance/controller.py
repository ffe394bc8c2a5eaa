from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.responses import error_response
from ..common.validators import optional_year
from ..container import Container
from ..core.exceptions import DomainError
from ..users.controller import operator_required
from .service import UploadedFile

logger = logging.getLogger(__name__)


def _internal_error(message: str):
    return jsonify({"success": False, "error": message}), 500


def register(app: Flask, container: Container) -> None:
    @app.route("/api/health", endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/upload-attendance", methods=["POST"], endpoint="upload_attendance")
    @operator_required
    def upload_attendance():
        files = [
            UploadedFile(filename=f.filename or "", data=f.read())
            for f in request.files.getlist("file")
            if f and f.filename
        ]
        try:
            results = container.upload_service.ingest_batch(files, mess=request.form.get("mess"))
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Upload failed")
            return _internal_error("Failed to process file. Please check the file format.")

        body = {
            "success": any(r.success for r in results),
            "results": [r.to_dict() for r in results],
        }
        return jsonify(body), (200 if body["success"] else 400)

    @app.route("/api/query-attendance", methods=["GET"], endpoint="query_attendance")
    def query_attendance():
        try:
            summary = container.query_service.query(
                roll_no=request.args.get("rollNo"),
                year=optional_year(request.args.get("year")),
                mess=request.args.get("mess"),
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Query failed")
            return _internal_error("Failed to query attendance data")

        return jsonify(summary.to_dict())

    @app.route("/api/uploaded-sheets", methods=["GET"], endpoint="uploaded_sheets")
    def uploaded_sheets():
        try:
            sheets = container.sheet_service.list_sheets()
        except DomainError as e:
            return error_response(e)
        return jsonify([s.to_dict() for s in sheets])

    @app.route("/api/delete-attendance", methods=["DELETE"], endpoint="delete_attendance")
    @operator_required
    def delete_attendance():
        data = request.get_json(silent=True) or {}
        try:
            deleted = container.sheet_service.delete_sheet(
                month=data.get("month"),
                year=data.get("year"),
                mess=data.get("mess"),
            )
        except DomainError as e:
            return error_response(e)

        return jsonify(
            {
                "success": True,
                "deleted": deleted,
                "message": f"Deleted {deleted} records for {data.get('month')} {data.get('year')}.",
            }
        )
