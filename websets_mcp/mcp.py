"""
Tool registry and dispatch for MCP-style tooling.

The registry is fixed when it is built: the activation list names the tools
to expose, and anything outside it is unreachable. Dispatch never raises;
every call answers with an outcome envelope.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from websets_mcp.config import default_config
from websets_mcp.tools import ALL_OPERATIONS, Operation, run_operation
from websets_mcp.tools.operation import ToolLogger
from websets_mcp.tools.outcomes import VALIDATION_ERROR, failure
from websets_mcp.websets_api import WebsetsApiClient, default_client

logger = logging.getLogger(__name__)

CATALOG: Dict[str, Operation] = {operation.name: operation for operation in ALL_OPERATIONS}


def build_registry(enabled: Optional[Iterable[str]] = None) -> Dict[str, Operation]:
    """Return the active tools, in catalog order.

    ``None`` or an empty list activates every tool. Unknown names are skipped.
    """
    wanted = [name for name in (enabled or []) if name]
    if not wanted:
        return dict(CATALOG)
    for name in wanted:
        if name not in CATALOG:
            logger.debug("Ignoring unknown tool in activation list: %s", name, extra={"tool": name})
    return {name: operation for name, operation in CATALOG.items() if name in wanted}


TOOL_REGISTRY: Dict[str, Operation] = build_registry(default_config.enabled_tools)


def list_tools(registry: Optional[Dict[str, Operation]] = None) -> List[Dict[str, Any]]:
    """Return name, description and input schema for each active tool."""
    active = TOOL_REGISTRY if registry is None else registry
    return [operation.describe() for operation in active.values()]


async def call_tool(
    tool_name: str,
    params: Optional[Dict[str, Any]] = None,
    *,
    registry: Optional[Dict[str, Operation]] = None,
    client: WebsetsApiClient = default_client,
    tool_logger: Optional[ToolLogger] = None,
) -> Dict[str, Any]:
    """Dispatch to an active tool by name."""
    active = TOOL_REGISTRY if registry is None else registry
    operation = active.get(tool_name)
    if operation is None:
        return failure(f"Unknown tool: {tool_name}", error_type=VALIDATION_ERROR)
    return await run_operation(operation, params, client=client, tool_logger=tool_logger)
