from __future__ import annotations

import logging
from typing import Any, Optional

from flask import jsonify

from ..core.exceptions import (
    ConflictError,
    DomainError,
    NotFoundError,
    ReferentialError,
    StoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Order matters: first match wins.
_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (ConflictError, 400),
    (ReferentialError, 400),
    (NotFoundError, 404),
    (StoreError, 500),
)


def status_for(exc: BaseException) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 500


def ok(data: Any = None, *, message: Optional[str] = None, status: int = 200):
    body: dict = {"success": True}
    if data is not None:
        body["data"] = data
    if message:
        body["message"] = message
    return jsonify(body), status


def fail(message: str, *, status: int, error: Optional[str] = None):
    body: dict = {"success": False, "message": message}
    if error:
        body["error"] = error
    return jsonify(body), status


def error_response(exc: Exception, *, action: str):
    """Turn an exception raised by a service into the JSON envelope.

    Client errors carry the domain message; server errors say which ``action``
    failed and put the cause in ``error``.
    """
    status = status_for(exc)
    if status < 500 and isinstance(exc, DomainError):
        return fail(str(exc), status=status)

    if isinstance(exc, StoreError):
        logger.error("%s: %s", action, exc)
    else:
        logger.exception("%s: unexpected error", action)
    return fail(action, status=status, error=str(exc))
