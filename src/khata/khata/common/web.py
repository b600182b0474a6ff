"""Flask helpers shared by every controller: session guards, JSON shaping, error mapping."""
from __future__ import annotations

import dataclasses
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from functools import wraps
from typing import Any, Optional

from flask import Flask, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from .datetime_utils import month_key, now_local, parse_iso_date, parse_month

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
)


def to_json(value: Any) -> Any:
    """Turn models into plain JSON values (money as strings, dates as ISO)."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_json(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {k: to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value


def ok(payload: Optional[dict] = None, status: int = 200):
    body = {"success": True}
    body.update(payload or {})
    return jsonify(body), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return fail("Please sign in to continue", 401)
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return fail("Please sign in to continue", 401)
        if session.get("role") != Role.ADMIN.value:
            return fail("You do not have permission", 403)
        return view(*args, **kwargs)

    return wrapper


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return request.form.to_dict()
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def date_arg(value: Optional[str], field_name: str, *, default: Optional[date]) -> Optional[date]:
    if not value:
        return default
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")


def month_arg(value: Optional[str]) -> str:
    """YYYY-MM query value, defaulting to the current month."""
    if not value:
        return month_key(now_local())
    try:
        parse_month(value)
    except ValueError:
        raise ValidationError("Month must be a YYYY-MM value")
    return value


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        for error_type, status in _STATUS_BY_ERROR:
            if isinstance(e, error_type):
                app.logger.warning("%s %s -> %d: %s", request.method, request.path, status, e)
                return fail(str(e), status)
        if isinstance(e, StoreError):
            app.logger.error("Store failure on %s %s: %s", request.method, request.path, e)
        else:
            app.logger.exception("Unhandled domain error on %s %s", request.method, request.path)
        return fail("Internal error", 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return fail(e.description or e.name, e.code or 500)
        app.logger.exception("Unexpected error on %s %s", request.method, request.path)
        return fail("Internal error", 500)
