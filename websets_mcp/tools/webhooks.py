"""Webhook and webhook delivery attempt tools."""

from __future__ import annotations

from typing import List

from websets_mcp.tools.operation import Operation, deleted
from websets_mcp.tools.pagination import page_result
from websets_mcp.tools.validators import (
    CURSOR_SCHEMA,
    enum_schema,
    id_schema,
    limit_schema,
    object_schema,
)

# Event types a new webhook may subscribe to.
WEBHOOK_EVENT_TYPES = [
    "webset.created",
    "webset.deleted",
    "webset.paused",
    "webset.idle",
    "webset.search.created",
    "webset.search.completed",
    "webset.search.canceled",
    "webset.item.created",
    "webset.item.enriched",
    "import.created",
    "import.completed",
    "webset.monitor.run.started",
    "webset.monitor.run.completed",
]

# Updates accept the full event catalog.
ALL_EVENT_TYPES = WEBHOOK_EVENT_TYPES + [
    "webset.item.updated",
    "webset.item.deleted",
    "import.processing",
    "import.failed",
    "import.canceled",
    "webset.export.created",
    "webset.export.completed",
    "webset.export.failed",
    "webset.monitor.run.failed",
    "webhook.created",
    "webhook.updated",
    "webhook.deleted",
]

WEBHOOK_STATUSES = ["active", "inactive", "error"]
WEBHOOK_UPDATE_STATUSES = ["active", "inactive"]

WEBHOOK_ID = id_schema("The unique identifier of the Webhook")


def _events_schema(event_types: List[str], description: str) -> dict:
    return {
        "type": "array",
        "items": enum_schema(event_types, "Event type"),
        "minItems": 1,
        "uniqueItems": True,
        "description": description,
    }


OPERATIONS: List[Operation] = [
    Operation(
        name="create_webhook_exa",
        description="Register a webhook URL that is notified about the subscribed Webset events.",
        group="webhooks",
        method="POST",
        path="/webhooks",
        input_schema=object_schema(
            {
                "url": {"type": "string", "minLength": 1, "description": "URL that receives notifications"},
                "events": _events_schema(WEBHOOK_EVENT_TYPES, "Event types to subscribe to"),
                "description": {"type": "string", "description": "Webhook description"},
                "secret": {"type": "string", "minLength": 1, "description": "Secret for signature verification"},
            },
            required=["url", "events"],
        ),
        body_params=("url", "events", "description", "secret"),
    ),
    Operation(
        name="get_webhook_exa",
        description="Get a webhook by its ID.",
        group="webhooks",
        method="GET",
        path="/webhooks/{webhookId}",
        input_schema=object_schema({"webhookId": WEBHOOK_ID}, required=["webhookId"]),
    ),
    Operation(
        name="list_webhooks_exa",
        description="List registered webhooks.",
        group="webhooks",
        method="GET",
        path="/webhooks",
        input_schema=object_schema(
            {
                "status": enum_schema(WEBHOOK_STATUSES, "Filter by webhook status"),
                "cursor": CURSOR_SCHEMA,
                "limit": limit_schema(),
            }
        ),
        query_params=("status", "cursor", "limit"),
        shape_result=page_result,
    ),
    Operation(
        name="update_webhook_exa",
        description="Update a webhook's URL, subscribed events, description or status.",
        group="webhooks",
        method="PATCH",
        path="/webhooks/{webhookId}",
        input_schema=object_schema(
            {
                "webhookId": WEBHOOK_ID,
                "url": {"type": "string", "minLength": 1, "description": "New notification URL"},
                "events": _events_schema(ALL_EVENT_TYPES, "New event types to subscribe to"),
                "description": {"type": "string", "description": "New webhook description"},
                "status": enum_schema(WEBHOOK_UPDATE_STATUSES, "Webhook status"),
            },
            required=["webhookId"],
        ),
        body_params=("url", "events", "description", "status"),
    ),
    Operation(
        name="delete_webhook_exa",
        description="Delete a webhook.",
        group="webhooks",
        method="DELETE",
        path="/webhooks/{webhookId}",
        input_schema=object_schema({"webhookId": WEBHOOK_ID}, required=["webhookId"]),
        shape_result=deleted("Webhook"),
    ),
    Operation(
        name="list_webhook_attempts_exa",
        description="List delivery attempts for a webhook, including whether each one succeeded.",
        group="webhooks",
        method="GET",
        path="/webhooks/{webhookId}/attempts",
        input_schema=object_schema(
            {
                "webhookId": WEBHOOK_ID,
                "eventType": {"type": "string", "minLength": 1, "description": "Filter by event type"},
                "cursor": CURSOR_SCHEMA,
                "limit": limit_schema(),
            },
            required=["webhookId"],
        ),
        query_params=("eventType", "cursor", "limit"),
        shape_result=page_result,
    ),
]
