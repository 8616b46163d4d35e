from __future__ import annotations

import logging
from typing import Any, Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import BadRequest, HTTPException

from ..core.exceptions import DomainError, StoreError, ValidationError

logger = logging.getLogger(__name__)


def success(data: Optional[dict] = None, *, message: Optional[str] = None, status: int = 200):
    body: dict[str, Any] = {"success": True}
    if message:
        body["message"] = message
    body["data"] = data or {}
    return jsonify(body), status


def failure(message: str, *, status: int, errors: Optional[list] = None):
    body: dict[str, Any] = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    return jsonify(body), status


def json_body() -> dict:
    """Request JSON as a dict; missing, malformed or non-object bodies read as empty."""
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def register_error_handlers(app: Flask) -> None:
    """Render every error with the shared ``{success: false, message, errors?}`` shape."""

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        if isinstance(e, StoreError):
            logger.error("Store failure: %s", e.__cause__ or e, exc_info=e.__cause__ or e)
        errors = e.errors if isinstance(e, ValidationError) else None
        return failure(e.message, status=e.status_code, errors=errors)

    @app.errorhandler(BadRequest)
    def handle_bad_request(e: BadRequest):
        return failure("Malformed request body", status=400)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return failure(e.description or e.name, status=e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error")
        return failure("Server error", status=500)
