"""Helpers shared by the Flask controllers."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import Flask, g, jsonify, session
from werkzeug.exceptions import HTTPException

from ..core.enums import Capability
from ..core.exceptions import (
    AlreadyMarkedError,
    AuthenticationError,
    AuthorizationError,
    DomainError,
    GatewayError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from ..users.service import PortalSession

logger = logging.getLogger(__name__)

# Most specific first; InactiveUserError is covered by AuthenticationError.
_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (NotFoundError, 404),
    (AuthenticationError, 403),
    (AuthorizationError, 403),
    (AlreadyMarkedError, 409),
    (InvalidTransitionError, 409),
    (GatewayError, 502),
)


def json_error(message: str, status_code: int):
    return jsonify({"success": False, "message": message}), status_code


def status_for(error: DomainError) -> int:
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return code
    return 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return json_error(str(e), status_for(e))

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return json_error(e.description or e.name, e.code or 500)

        logger.exception("Unhandled error")
        if bool(app.config.get("DEBUG", False)):
            return json_error(f"System error: {e}", 500)
        return json_error("System error", 500)


def current_session() -> Optional[PortalSession]:
    """The session built for this request (one per request, never shared)."""
    return g.get("portal_session")


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        portal = current_session()
        if "user_id" not in session or portal is None or not portal.is_authenticated:
            return json_error("Please log in to continue.", 401)
        return view(*args, **kwargs)

    return wrapper


def capability_required(capability: Capability):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            portal = current_session()
            if "user_id" not in session or portal is None or not portal.is_authenticated:
                return json_error("Please log in to continue.", 401)
            if not portal.can(capability):
                return json_error("You do not have permission for this action.", 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator
