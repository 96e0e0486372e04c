"""
Outcome envelopes returned by every Websets tool.

Success envelopes look like ``{"success": True, "data": ..., **aux}``. Failure
envelopes carry ``error`` plus an ``errorType`` discriminator, and ``details``
when the API returned an error body.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from websets_mcp.tools.validators import ArgumentValidationError
from websets_mcp.websets_api import (
    NetworkError,
    RemoteClientError,
    RemoteServerError,
    WebsetsApiError,
)

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "validation_error"
REMOTE_CLIENT_ERROR = "remote_client_error"
REMOTE_SERVER_ERROR = "remote_server_error"
NETWORK_ERROR = "network_error"
UNKNOWN_ERROR = "unknown_error"


def success(fields: Dict[str, Any]) -> Dict[str, Any]:
    outcome: Dict[str, Any] = {"success": True, "data": fields.get("data")}
    outcome.update(fields)
    return outcome


def failure(
    message: str,
    *,
    error_type: str,
    status_code: Optional[int] = None,
    details: Any = None,
) -> Dict[str, Any]:
    outcome: Dict[str, Any] = {"success": False, "error": message, "errorType": error_type}
    if status_code is not None:
        outcome["statusCode"] = status_code
    if details is not None:
        outcome["details"] = details
    return outcome


def error_type_for(exc: BaseException) -> str:
    if isinstance(exc, ArgumentValidationError):
        return VALIDATION_ERROR
    if isinstance(exc, RemoteClientError):
        return REMOTE_CLIENT_ERROR
    if isinstance(exc, RemoteServerError):
        return REMOTE_SERVER_ERROR
    if isinstance(exc, NetworkError):
        return NETWORK_ERROR
    return UNKNOWN_ERROR


def failure_from_exception(exc: BaseException) -> Dict[str, Any]:
    """Collapse any exception raised while running a tool into a failure envelope."""
    error_type = error_type_for(exc)
    if isinstance(exc, WebsetsApiError):
        return failure(
            str(exc) or "Websets API error.",
            error_type=error_type,
            status_code=exc.status_code,
            details=exc.body,
        )
    if error_type == UNKNOWN_ERROR:
        logger.exception("Unexpected Websets tool error")
    return failure(str(exc) or exc.__class__.__name__, error_type=error_type)
