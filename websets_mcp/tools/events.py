"""Event tools (read-only)."""

from __future__ import annotations

from typing import List

from websets_mcp.tools.operation import Operation
from websets_mcp.tools.pagination import page_result
from websets_mcp.tools.validators import CURSOR_SCHEMA, id_schema, limit_schema, object_schema

OPERATIONS: List[Operation] = [
    Operation(
        name="list_events_exa",
        description="List events that occurred in the Websets system, optionally filtered by type or Webset.",
        group="events",
        method="GET",
        path="/events",
        input_schema=object_schema(
            {
                "eventType": {"type": "string", "minLength": 1, "description": "Filter by event type"},
                "websetId": id_schema("Filter by Webset ID"),
                "cursor": CURSOR_SCHEMA,
                "limit": limit_schema(),
            }
        ),
        query_params=("eventType", "websetId", "cursor", "limit"),
        shape_result=page_result,
    ),
    Operation(
        name="get_event_exa",
        description="Get an event by its ID.",
        group="events",
        method="GET",
        path="/events/{eventId}",
        input_schema=object_schema(
            {"eventId": id_schema("The unique identifier of the Event")}, required=["eventId"]
        ),
    ),
]
