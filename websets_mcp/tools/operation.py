"""
Declarative Websets operations and the pipeline that runs them.

An :class:`Operation` binds a tool name to an argument schema, an HTTP method
and a path template. :func:`run_operation` validates the arguments, builds the
request, performs exactly one API call and always returns an outcome envelope.
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from websets_mcp.tools.outcomes import failure_from_exception, success
from websets_mcp.tools.request_builder import (
    build_body,
    build_query,
    resolve_path,
)
from websets_mcp.tools.validators import validate_arguments
from websets_mcp.websets_api import WebsetsApiClient, default_client

logger = logging.getLogger(__name__)

ResultShaper = Callable[[Any, Mapping[str, Any]], Dict[str, Any]]
RequestPartBuilder = Callable[[Mapping[str, Any]], Dict[str, Any]]
ToolLogger = Union[logging.Logger, logging.LoggerAdapter]


def as_resource(body: Any, arguments: Mapping[str, Any]) -> Dict[str, Any]:
    return {"data": body}


def deleted(label: str) -> ResultShaper:
    """Shape a delete response; an empty body still reports ``data``."""

    def _shape(body: Any, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        return {
            "data": body if body is not None else {"deleted": True},
            "message": f"{label} deleted successfully",
        }

    return _shape


def updated(label: str) -> ResultShaper:
    def _shape(body: Any, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        return {"data": body, "message": f"{label} updated successfully"}

    return _shape


@dataclass(frozen=True, slots=True)
class Operation:
    name: str
    description: str
    group: str
    method: str
    path: str
    input_schema: Dict[str, Any]
    query_params: Tuple[str, ...] = ()
    body_params: Tuple[str, ...] = ()
    defaults: Mapping[str, Any] = field(default_factory=dict)
    query_builder: Optional[RequestPartBuilder] = None
    body_builder: Optional[RequestPartBuilder] = None
    shape_result: ResultShaper = as_resource

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


def new_request_id(tool_name: str) -> str:
    """Correlation id of the form ``<tool>-<epoch ms>-<5 hex chars>``."""
    return f"{tool_name}-{int(time.time() * 1000)}-{uuid.uuid4().hex[:5]}"


def _prepare_request(
    operation: Operation, arguments: Mapping[str, Any]
) -> Tuple[str, Dict[str, str], Optional[Dict[str, Any]]]:
    path = resolve_path(operation.path, arguments)
    if operation.query_builder is not None:
        query = operation.query_builder(arguments)
    else:
        query = build_query(arguments, operation.query_params)
    body: Optional[Dict[str, Any]] = None
    if operation.body_builder is not None:
        body = operation.body_builder(arguments)
    elif operation.body_params:
        body = build_body(arguments, operation.body_params)
    return path, query, body


async def run_operation(
    operation: Operation,
    arguments: Optional[Dict[str, Any]] = None,
    *,
    client: WebsetsApiClient = default_client,
    tool_logger: Optional[ToolLogger] = None,
) -> Dict[str, Any]:
    """Run one operation end to end and return its outcome envelope.

    Validation failures return before any network activity. Nothing raised
    while building, sending or shaping escapes this function.
    """
    log = tool_logger or logger
    request_id = new_request_id(operation.name)
    extra = {"tool": operation.name, "request_id": request_id}
    started = time.monotonic()
    try:
        validated = validate_arguments(operation.input_schema, arguments)
        effective = {**operation.defaults, **validated}
        path, query, body = _prepare_request(operation, effective)
        log.info(
            "tool=%s stage=start method=%s path=%s request_id=%s",
            operation.name,
            operation.method,
            path,
            request_id,
            extra=extra,
        )
        response_body = await client.request(
            operation.method,
            path,
            params=query or None,
            json_body=body,
            request_id=request_id,
        )
        outcome = success(operation.shape_result(response_body, effective))
    except Exception as exc:  # noqa: BLE001
        outcome = failure_from_exception(exc)
        log.warning(
            "tool=%s stage=error error_type=%s error=%s request_id=%s",
            operation.name,
            outcome["errorType"],
            outcome["error"],
            request_id,
            extra={**extra, "error": outcome["errorType"]},
        )
        return outcome

    duration_ms = (time.monotonic() - started) * 1000
    log.info(
        "tool=%s stage=complete duration_ms=%.2f request_id=%s",
        operation.name,
        duration_ms,
        request_id,
        extra=extra,
    )
    return outcome
