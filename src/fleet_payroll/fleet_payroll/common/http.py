from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    ConfigurationError,
    DomainError,
    HolidayFeedError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def ok(data=None, status: int = 200, **meta):
    payload = {"success": True, "data": data}
    if meta:
        payload["meta"] = meta
    return jsonify(payload), status


def fail(message: str = "Bad Request", status: int = 400, code: str | None = None):
    err = {"message": message}
    if code:
        err["code"] = code
    return jsonify({"success": False, "error": err}), status


def _status_for(e: DomainError) -> tuple[int, str]:
    if isinstance(e, ValidationError):
        return 400, "VALIDATION_ERROR"
    if isinstance(e, NotFoundError):
        return 404, "NOT_FOUND"
    if isinstance(e, ConfigurationError):
        return 409, "CONFIGURATION_ERROR"
    if isinstance(e, HolidayFeedError):
        return 502, "HOLIDAY_FEED_ERROR"
    return 400, "DOMAIN_ERROR"


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        status, code = _status_for(e)
        return fail(str(e), status=status, code=code)

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return fail(e.description or e.name, status=e.code or 500)

    @app.errorhandler(Exception)
    def _unhandled(e: Exception):
        logger.exception("Unhandled error: %s", e)
        return fail("Internal server error", status=500)
