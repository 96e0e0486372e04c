"""FastAPI application wiring Websets MCP tools to HTTP routes."""

from __future__ import annotations

import json
import logging
import time
import uuid
from typing import Any, Dict, Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse, Response

from websets_mcp import mcp
from websets_mcp.config import WebsetsConfig, default_config
from websets_mcp.metrics import default_metrics
from websets_mcp.tools.outcomes import VALIDATION_ERROR, failure
from websets_mcp.websets_api import WebsetsApiClient, default_client

logger = logging.getLogger(__name__)

HEALTH_STATUS = {"status": "ok"}
APP_VERSION = "0.1.0"
MCP_SERVER_NAME = "websets-mcp-server"
MCP_SERVER_VERSION = APP_VERSION


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        for key in ("tool", "request_id", "error", "status_code"):
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload, default=str)


def configure_logging(config: WebsetsConfig = default_config) -> None:
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    if config.log_format.lower() == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logging.basicConfig(level=level, handlers=[handler])
    else:
        logging.basicConfig(level=level)


router = APIRouter()


async def add_request_context(request: Request, call_next):
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    start = time.time()
    default_metrics.incr_request()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    default_metrics.record_duration(request_id, duration_ms)
    response.headers["X-Request-ID"] = request_id
    return response


def _log_tool_result(tool_name: str, result: Dict[str, Any], request_id: Optional[str] = None) -> None:
    if result.get("success") is False:
        error_type = result.get("errorType")
        logger.warning(
            "tool=%s outcome=error error_type=%s error=%s request_id=%s",
            tool_name,
            error_type,
            result.get("error"),
            request_id,
            extra={"tool": tool_name, "request_id": request_id, "error": error_type},
        )
        default_metrics.record_tool(tool_name, success=False, error_type=error_type)
    else:
        logger.info(
            "tool=%s outcome=success request_id=%s",
            tool_name,
            request_id,
            extra={"tool": tool_name, "request_id": request_id},
        )
        default_metrics.record_tool(tool_name, success=True)


async def _dispatch(request: Request, tool_name: str, arguments: Any) -> Dict[str, Any]:
    request_id = getattr(request.state, "request_id", None)
    result = await mcp.call_tool(
        tool_name,
        arguments,
        registry=request.app.state.registry,
        client=request.app.state.client,
    )
    _log_tool_result(tool_name, result, request_id)
    return result


@router.get("/health")
async def health() -> JSONResponse:
    """Lightweight health endpoint for monitoring."""
    return JSONResponse(content=HEALTH_STATUS)


@router.get("/metrics")
async def metrics() -> JSONResponse:
    """Return in-process metrics snapshot."""
    return JSONResponse(content=default_metrics.snapshot())


@router.post("/tools/{tool_name}")
async def tool_route(tool_name: str, request: Request) -> JSONResponse:
    """Run one tool with the JSON request body as its arguments."""
    if tool_name not in request.app.state.registry:
        return JSONResponse(
            status_code=404,
            content=failure(f"Unknown tool: {tool_name}", error_type=VALIDATION_ERROR),
        )
    raw = await request.body()
    if raw.strip():
        try:
            arguments = json.loads(raw)
        except ValueError:
            return JSONResponse(
                status_code=400,
                content=failure("Request body must be valid JSON.", error_type=VALIDATION_ERROR),
            )
    else:
        arguments = {}
    result = await _dispatch(request, tool_name, arguments)
    return JSONResponse(content=result)


@router.post("/mcp")
async def mcp_gateway(request: Request) -> Response:
    """
    Minimal JSON-RPC gateway for MCP integrations.

    Supported methods:
      - initialize
      - list_tools / tools/list
      - call_tool / tools/call
      - notifications/initialized
    """
    request_id = getattr(request.state, "request_id", None)
    start_time = time.time()

    def _respond(
        payload: Dict[str, Any],
        status_code: int = 200,
        *,
        outcome: str,
        method_label: Optional[str] = None,
        tool_label: Optional[str] = None,
        error_code: Optional[int] = None,
    ) -> JSONResponse:
        duration_ms = (time.time() - start_time) * 1000
        logger.debug(
            "mcp outcome=%s method=%s tool=%s id=%s status=%s duration_ms=%.2f error_code=%s",
            outcome,
            method_label,
            tool_label,
            payload.get("id"),
            status_code,
            duration_ms,
            error_code,
            extra={"request_id": request_id, "tool": tool_label, "error": error_code},
        )
        return JSONResponse(status_code=status_code, content=payload)

    try:
        body = await request.json()
    except ValueError:
        payload = _jsonrpc_error_payload(None, -32700, "Parse error")
        return _respond(payload, status_code=400, outcome="error", error_code=-32700)

    if not isinstance(body, dict):
        payload = _jsonrpc_error_payload(None, -32600, "Invalid request")
        return _respond(payload, status_code=400, outcome="error", error_code=-32600)

    method = body.get("method")
    rpc_id = body.get("id")
    raw_params = body.get("params")
    if raw_params is None:
        params: Dict[str, Any] = {}
    elif isinstance(raw_params, dict):
        params = raw_params
    else:
        payload = _jsonrpc_error_payload(rpc_id, -32602, "Invalid params")
        return _respond(payload, outcome="error", method_label=method, error_code=-32602)

    if not method:
        payload = _jsonrpc_error_payload(rpc_id, -32600, "Invalid request")
        return _respond(payload, outcome="error", error_code=-32600)

    if method == "initialize":
        protocol_version = params.get("protocolVersion")
        if not isinstance(protocol_version, str) or not protocol_version:
            payload = _jsonrpc_error_payload(rpc_id, -32602, "Invalid params")
            return _respond(payload, outcome="error", method_label=method, error_code=-32602)
        result = {
            "protocolVersion": protocol_version,
            "serverInfo": {"name": MCP_SERVER_NAME, "version": MCP_SERVER_VERSION},
            "capabilities": {"tools": {"listChanged": False}},
        }
        return _respond(_jsonrpc_success_payload(rpc_id, result), outcome="success", method_label=method)

    if method in ("list_tools", "tools/list"):
        result = {"tools": mcp.list_tools(request.app.state.registry)}
        return _respond(_jsonrpc_success_payload(rpc_id, result), outcome="success", method_label=method)

    if method in ("call_tool", "tools/call"):
        tool_name = params.get("tool") or params.get("name")
        tool_params = params.get("params")
        if tool_params is None:
            tool_params = params.get("arguments")
        if tool_params is None:
            tool_params = {}
        if not isinstance(tool_name, str) or not tool_name.strip():
            payload = _jsonrpc_error_payload(rpc_id, -32602, "Invalid params")
            return _respond(payload, outcome="error", method_label=method, error_code=-32602)
        if not isinstance(tool_params, dict):
            payload = _jsonrpc_error_payload(rpc_id, -32602, "Invalid params")
            return _respond(payload, outcome="error", method_label=method, tool_label=tool_name, error_code=-32602)
        result = await _dispatch(request, tool_name, tool_params)
        return _respond(
            _jsonrpc_success_payload(rpc_id, _wrap_tool_result(result)),
            outcome="success",
            method_label=method,
            tool_label=tool_name,
        )

    if method in ("notifications/initialized", "initialized"):
        # Notifications get no JSON-RPC response body.
        return Response(status_code=204)

    payload = _jsonrpc_error_payload(rpc_id, -32601, "Method not found")
    return _respond(payload, outcome="error", method_label=method, error_code=-32601)


def _jsonrpc_success_payload(rpc_id: Any, result: Any) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": rpc_id, "result": result}


def _jsonrpc_error_payload(rpc_id: Any, code: int, message: str) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": rpc_id, "error": {"code": code, "message": message}}


def _wrap_tool_result(result: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shape an outcome envelope into MCP content.

    Failures are returned in-band with the isError flag; the envelope itself
    always travels as structuredContent.
    """
    if result.get("success") is False:
        text = str(result.get("error") or "Error")
        return {"content": [{"type": "text", "text": text}], "isError": True, "structuredContent": result}
    return {
        "content": [{"type": "text", "text": json.dumps(result, ensure_ascii=True, default=str)}],
        "structuredContent": result,
    }


def create_app(
    config: Optional[WebsetsConfig] = None,
    client: Optional[WebsetsApiClient] = None,
) -> FastAPI:
    """Build the HTTP app; the tool registry is fixed here for the app's lifetime."""
    config = config or default_config
    if client is None:
        client = default_client if config is default_config else WebsetsApiClient(config)
    app = FastAPI(
        title="Websets MCP Server",
        description="Exa Websets tool surface for LLM agents.",
        version=APP_VERSION,
    )
    app.state.config = config
    app.state.client = client
    app.state.registry = mcp.build_registry(config.enabled_tools)
    app.middleware("http")(add_request_context)
    app.include_router(router)
    logger.info("websets mcp app ready tools=%d", len(app.state.registry))
    return app


configure_logging(default_config)
app = create_app()

# Run with: uvicorn websets_mcp.server:app --reload
