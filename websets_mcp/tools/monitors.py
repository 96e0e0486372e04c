"""Monitor and monitor run tools."""

from __future__ import annotations

from typing import List

from websets_mcp.tools.operation import Operation, deleted
from websets_mcp.tools.pagination import page_result
from websets_mcp.tools.validators import (
    CURSOR_SCHEMA,
    SEARCH_BEHAVIORS,
    enum_schema,
    id_schema,
    limit_schema,
    metadata_schema,
    object_schema,
)
from websets_mcp.tools.websets import WEBSET_ID

CADENCES = ["hourly", "daily", "weekly", "monthly"]
MONITOR_STATUSES = ["active", "paused", "completed", "error"]
MONITOR_UPDATE_STATUSES = ["active", "paused"]
RUN_STATUSES = ["started", "completed", "failed"]

MONITOR_ID = id_schema("The unique identifier of the Monitor")
RUN_ID = id_schema("The unique identifier of the Monitor run")

OPERATIONS: List[Operation] = [
    Operation(
        name="create_webset_monitor_exa",
        description="Create a monitor that re-runs a Webset's search on a schedule and tracks new items.",
        group="monitors",
        method="POST",
        path="/websets/{websetId}/monitors",
        input_schema=object_schema(
            {
                "websetId": WEBSET_ID,
                "cadence": enum_schema(CADENCES, "How often to run the monitor"),
                "query": {"type": "string", "minLength": 1, "description": "Custom query (defaults to the last search)"},
                "searchBehavior": enum_schema(SEARCH_BEHAVIORS, "How to handle new items (default: append)"),
                "metadata": metadata_schema(),
            },
            required=["websetId", "cadence"],
        ),
        body_params=("websetId", "cadence", "query", "searchBehavior", "metadata"),
    ),
    Operation(
        name="get_webset_monitor_exa",
        description="Get a monitor by its ID.",
        group="monitors",
        method="GET",
        path="/websets/{websetId}/monitors/{monitorId}",
        input_schema=object_schema(
            {"websetId": WEBSET_ID, "monitorId": MONITOR_ID}, required=["websetId", "monitorId"]
        ),
    ),
    Operation(
        name="list_webset_monitors_exa",
        description="List the monitors of a Webset.",
        group="monitors",
        method="GET",
        path="/websets/{websetId}/monitors",
        input_schema=object_schema(
            {
                "websetId": WEBSET_ID,
                "status": enum_schema(MONITOR_STATUSES, "Filter by monitor status"),
                "cursor": CURSOR_SCHEMA,
                "limit": limit_schema(),
            },
            required=["websetId"],
        ),
        query_params=("status", "cursor", "limit"),
        shape_result=page_result,
    ),
    Operation(
        name="update_webset_monitor_exa",
        description="Update a monitor's cadence, query, status or search behavior.",
        group="monitors",
        method="PATCH",
        path="/websets/{websetId}/monitors/{monitorId}",
        input_schema=object_schema(
            {
                "websetId": WEBSET_ID,
                "monitorId": MONITOR_ID,
                "cadence": enum_schema(CADENCES, "How often to run the monitor"),
                "query": {"type": "string", "minLength": 1, "description": "Custom search query"},
                "status": enum_schema(MONITOR_UPDATE_STATUSES, "Pause or resume the monitor"),
                "searchBehavior": enum_schema(SEARCH_BEHAVIORS, "How to handle new items"),
                "metadata": metadata_schema(),
            },
            required=["websetId", "monitorId"],
        ),
        body_params=("cadence", "query", "status", "searchBehavior", "metadata"),
    ),
    Operation(
        name="delete_webset_monitor_exa",
        description="Delete a monitor from a Webset.",
        group="monitors",
        method="DELETE",
        path="/websets/{websetId}/monitors/{monitorId}",
        input_schema=object_schema(
            {"websetId": WEBSET_ID, "monitorId": MONITOR_ID}, required=["websetId", "monitorId"]
        ),
        shape_result=deleted("Monitor"),
    ),
    Operation(
        name="list_monitor_runs_exa",
        description="List the runs of a monitor.",
        group="monitors",
        method="GET",
        path="/websets/{websetId}/monitors/{monitorId}/runs",
        input_schema=object_schema(
            {
                "websetId": WEBSET_ID,
                "monitorId": MONITOR_ID,
                "status": enum_schema(RUN_STATUSES, "Filter by run status"),
                "cursor": CURSOR_SCHEMA,
                "limit": limit_schema(),
            },
            required=["websetId", "monitorId"],
        ),
        query_params=("status", "cursor", "limit"),
        shape_result=page_result,
    ),
    Operation(
        name="get_monitor_run_exa",
        description="Get one run of a monitor.",
        group="monitors",
        method="GET",
        path="/websets/{websetId}/monitors/{monitorId}/runs/{runId}",
        input_schema=object_schema(
            {"websetId": WEBSET_ID, "monitorId": MONITOR_ID, "runId": RUN_ID},
            required=["websetId", "monitorId", "runId"],
        ),
    ),
]
