"""Websets tool declarations grouped by API resource."""

from typing import List

from websets_mcp.tools import (
    enrichments,
    events,
    exports,
    imports,
    items,
    monitors,
    searches,
    webhooks,
    websets,
)
from websets_mcp.tools.operation import Operation, run_operation

ALL_OPERATIONS: List[Operation] = [
    *websets.OPERATIONS,
    *items.OPERATIONS,
    *searches.OPERATIONS,
    *enrichments.OPERATIONS,
    *imports.OPERATIONS,
    *monitors.OPERATIONS,
    *webhooks.OPERATIONS,
    *events.OPERATIONS,
    *exports.OPERATIONS,
]

__all__ = ["ALL_OPERATIONS", "Operation", "run_operation"]
