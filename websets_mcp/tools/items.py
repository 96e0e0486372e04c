"""
Webset item tools, including batch updates.

``search_webset_items_exa`` sends every filter the API understands as query
parameters and applies ``urlPattern``/``titlePattern`` locally to the page it
fetched. Matches that live on later pages are only found by paging with the
returned cursor and filtering again.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

from websets_mcp.tools.operation import Operation, ResultShaper, deleted, updated
from websets_mcp.tools.pagination import filter_by_patterns, paginate
from websets_mcp.tools.request_builder import build_query
from websets_mcp.tools.validators import (
    CURSOR_SCHEMA,
    ENRICHMENT_RESULT_STATUSES,
    VERIFICATION_STATUSES,
    compile_pattern,
    date_schema,
    enum_schema,
    id_schema,
    limit_schema,
    metadata_schema,
    object_schema,
    string_list_schema,
)
from websets_mcp.tools.websets import WEBSET_ID

logger = logging.getLogger(__name__)

ITEM_ID = id_schema("The unique identifier of the Item")
ITEM_IDS = string_list_schema("Item identifiers", min_items=1)

SERVER_FILTERS = (
    "type",
    "verificationStatus",
    "hasEnrichedData",
    "createdAfter",
    "createdBefore",
    "updatedAfter",
    "updatedBefore",
    "metadata",
    "enrichmentStatus",
)

FILTER_PROPERTIES: Dict[str, Any] = {
    "type": {"type": "string", "minLength": 1, "description": "Filter by item type (e.g. company, person)"},
    "verificationStatus": enum_schema(VERIFICATION_STATUSES, "Filter by verification status"),
    "hasEnrichedData": {"type": "boolean", "description": "Filter by enrichment status"},
    "createdAfter": date_schema("Items created after this date"),
    "createdBefore": date_schema("Items created before this date"),
    "updatedAfter": date_schema("Items updated after this date"),
    "updatedBefore": date_schema("Items updated before this date"),
}

VERIFICATION_SCHEMA = object_schema(
    {
        "status": enum_schema(VERIFICATION_STATUSES, "Verification status"),
        "reasoning": {"type": "string", "description": "Reasoning for the verification status"},
    },
    required=["status"],
)


def _summarize_item(item: Dict[str, Any]) -> Dict[str, Any]:
    verification = item.get("verification")
    enriched = item.get("enrichedData")
    return {
        "id": item.get("id"),
        "url": item.get("url"),
        "title": item.get("title"),
        "type": item.get("type"),
        "verificationStatus": verification.get("status") if isinstance(verification, dict) else None,
        "hasEnrichedData": bool(enriched),
        "createdAt": item.get("createdAt"),
        "updatedAt": item.get("updatedAt"),
    }


def _detail_item(item: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": item.get("id"),
        "url": item.get("url"),
        "title": item.get("title"),
        "type": item.get("type"),
        "verification": item.get("verification"),
        "enrichedData": item.get("enrichedData"),
        "metadata": item.get("metadata"),
        "createdAt": item.get("createdAt"),
        "updatedAt": item.get("updatedAt"),
    }


def _list_items_result(body: Any, arguments: Mapping[str, Any]) -> Dict[str, Any]:
    page = paginate(body)
    items = [_summarize_item(item) for item in page["data"] if isinstance(item, dict)]
    return {
        **page,
        "data": items,
        "items": items,
        "websetId": arguments["websetId"],
        "itemCount": len(items),
    }


def _search_query(arguments: Mapping[str, Any]) -> Dict[str, str]:
    filters = arguments.get("filters") or {}
    query = build_query(arguments, ("cursor", "limit"))
    query.update(build_query(filters, SERVER_FILTERS))
    return query


def _search_items_result(body: Any, arguments: Mapping[str, Any]) -> Dict[str, Any]:
    filters = arguments.get("filters") or {}
    page = paginate(body)
    matching = filter_by_patterns(
        page["data"],
        url_pattern=compile_pattern(filters.get("urlPattern")),
        title_pattern=compile_pattern(filters.get("titlePattern")),
    )
    logger.debug(
        "search_webset_items_exa fetched=%d matching=%d",
        len(page["data"]),
        len(matching),
        extra={"tool": "search_webset_items_exa"},
    )
    detailed = [_detail_item(item) for item in matching]
    return {
        **page,
        "data": detailed,
        "items": detailed,
        "websetId": arguments["websetId"],
        "fetchedItems": len(page["data"]),
        "matchingItems": len(matching),
        "filters": filters,
    }


def _batch_result(verb: str) -> ResultShaper:
    def _shape(body: Any, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        requested = len(arguments["itemIds"])
        return {
            "data": body,
            "requestedCount": requested,
            "message": f"Successfully {verb} {requested} items",
        }

    return _shape


def _batch_verify_body(arguments: Mapping[str, Any]) -> Dict[str, Any]:
    verification: Dict[str, Any] = {"status": arguments["status"]}
    if arguments.get("reasoning"):
        verification["reasoning"] = arguments["reasoning"]
    return {"itemIds": list(arguments["itemIds"]), "verification": verification}


OPERATIONS: List[Operation] = [
    Operation(
        name="list_webset_items_exa",
        description=(
            "List items found and verified within a Webset. Items include structured properties, "
            "verification status, and whether enriched data is present."
        ),
        group="items",
        method="GET",
        path="/websets/{websetId}/items",
        input_schema=object_schema(
            {"websetId": WEBSET_ID, "cursor": CURSOR_SCHEMA, "limit": limit_schema(), **FILTER_PROPERTIES},
            required=["websetId"],
        ),
        query_params=("cursor", "limit", *FILTER_PROPERTIES),
        shape_result=_list_items_result,
    ),
    Operation(
        name="get_webset_item_exa",
        description="Get one item including its content, verification details, enriched data and metadata.",
        group="items",
        method="GET",
        path="/websets/{websetId}/items/{itemId}",
        input_schema=object_schema({"websetId": WEBSET_ID, "itemId": ITEM_ID}, required=["websetId", "itemId"]),
    ),
    Operation(
        name="update_webset_item_exa",
        description="Update a single item's metadata, verification status, or custom fields.",
        group="items",
        method="PATCH",
        path="/websets/{websetId}/items/{itemId}",
        input_schema=object_schema(
            {
                "websetId": WEBSET_ID,
                "itemId": ITEM_ID,
                "metadata": metadata_schema("Metadata to update"),
                "verification": VERIFICATION_SCHEMA,
                "customFields": {"type": "object", "description": "Custom fields to update"},
            },
            required=["websetId", "itemId"],
        ),
        body_params=("metadata", "verification", "customFields"),
        shape_result=updated("Item"),
    ),
    Operation(
        name="delete_webset_item_exa",
        description="Delete an item from a Webset. This permanently removes the item and its data.",
        group="items",
        method="DELETE",
        path="/websets/{websetId}/items/{itemId}",
        input_schema=object_schema({"websetId": WEBSET_ID, "itemId": ITEM_ID}, required=["websetId", "itemId"]),
        shape_result=deleted("Item"),
    ),
    Operation(
        name="search_webset_items_exa",
        description=(
            "Search items within a Webset. Type, verification, enrichment, date and metadata filters "
            "run on the server; urlPattern and titlePattern are case-insensitive regular expressions "
            "applied to the fetched page only. Page with nextCursor to look further."
        ),
        group="items",
        method="GET",
        path="/websets/{websetId}/items",
        input_schema=object_schema(
            {
                "websetId": WEBSET_ID,
                "filters": object_schema(
                    {
                        **FILTER_PROPERTIES,
                        "enrichmentStatus": {
                            "type": "object",
                            "additionalProperties": enum_schema(
                                ENRICHMENT_RESULT_STATUSES, "Enrichment status"
                            ),
                            "description": "Filter by enrichment status, keyed by enrichment id",
                        },
                        "metadata": metadata_schema("Filter by metadata key-value pairs"),
                        "urlPattern": {
                            "type": "string",
                            "format": "regex",
                            "description": "Regular expression matched against item URLs",
                        },
                        "titlePattern": {
                            "type": "string",
                            "format": "regex",
                            "description": "Regular expression matched against item titles",
                        },
                    },
                    description="Filtering criteria",
                ),
                "cursor": CURSOR_SCHEMA,
                "limit": limit_schema(),
            },
            required=["websetId"],
        ),
        query_builder=_search_query,
        shape_result=_search_items_result,
    ),
    Operation(
        name="batch_update_items_exa",
        description="Apply the same metadata, tag, or custom field changes to many items in one request.",
        group="items",
        method="POST",
        path="/websets/{websetId}/items/batch-update",
        input_schema=object_schema(
            {
                "websetId": WEBSET_ID,
                "itemIds": ITEM_IDS,
                "updates": object_schema(
                    {
                        "metadata": metadata_schema("Metadata to add or update"),
                        "addTags": string_list_schema("Tags to add"),
                        "removeTags": string_list_schema("Tags to remove"),
                        "customFields": {"type": "object", "description": "Custom fields to update"},
                    },
                    description="Updates to apply to all items",
                ),
            },
            required=["websetId", "itemIds", "updates"],
        ),
        body_params=("itemIds", "updates"),
        shape_result=_batch_result("updated"),
    ),
    Operation(
        name="batch_delete_items_exa",
        description="Delete many items from a Webset in one request.",
        group="items",
        method="POST",
        path="/websets/{websetId}/items/batch-delete",
        input_schema=object_schema({"websetId": WEBSET_ID, "itemIds": ITEM_IDS}, required=["websetId", "itemIds"]),
        body_params=("itemIds",),
        shape_result=_batch_result("deleted"),
    ),
    Operation(
        name="batch_verify_items_exa",
        description="Set the verification status of many items in one request.",
        group="items",
        method="POST",
        path="/websets/{websetId}/items/batch-verify",
        input_schema=object_schema(
            {
                "websetId": WEBSET_ID,
                "itemIds": ITEM_IDS,
                "status": enum_schema(VERIFICATION_STATUSES, "Verification status to set"),
                "reasoning": {"type": "string", "description": "Reasoning for the bulk verification"},
            },
            required=["websetId", "itemIds", "status"],
        ),
        body_builder=_batch_verify_body,
        shape_result=_batch_result("verified"),
    ),
]
