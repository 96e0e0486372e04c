"""Webset search tools."""

from __future__ import annotations

from typing import List

from websets_mcp.tools.operation import Operation
from websets_mcp.tools.pagination import page_result
from websets_mcp.tools.validators import (
    CURSOR_SCHEMA,
    ENTITY_TYPES,
    SEARCH_BEHAVIORS,
    enum_schema,
    id_schema,
    limit_schema,
    metadata_schema,
    object_schema,
)
from websets_mcp.tools.websets import CRITERION_SCHEMA, WEBSET_ID

SEARCH_ID = id_schema("The unique identifier of the Search")

OPERATIONS: List[Operation] = [
    Operation(
        name="create_search_exa",
        description=(
            "Run an additional search inside an existing Webset. New results are appended to the "
            "Webset unless behavior is 'override'."
        ),
        group="searches",
        method="POST",
        path="/websets/{websetId}/searches",
        input_schema=object_schema(
            {
                "websetId": WEBSET_ID,
                "query": {"type": "string", "minLength": 1, "description": "Natural-language search query"},
                "count": {"type": "integer", "minimum": 1, "description": "Number of items to find"},
                "entity": object_schema(
                    {"type": enum_schema(ENTITY_TYPES, "Entity type to search for")},
                    required=["type"],
                ),
                "criteria": {"type": "array", "items": CRITERION_SCHEMA, "description": "Verification criteria"},
                "behavior": enum_schema(SEARCH_BEHAVIORS, "How results combine with existing items"),
                "metadata": metadata_schema(),
            },
            required=["websetId", "query"],
        ),
        body_params=("query", "count", "entity", "criteria", "behavior", "metadata"),
    ),
    Operation(
        name="get_search_exa",
        description="Get a search including its progress and status.",
        group="searches",
        method="GET",
        path="/websets/{websetId}/searches/{searchId}",
        input_schema=object_schema(
            {"websetId": WEBSET_ID, "searchId": SEARCH_ID}, required=["websetId", "searchId"]
        ),
    ),
    Operation(
        name="list_searches_exa",
        description="List the searches run for a Webset.",
        group="searches",
        method="GET",
        path="/websets/{websetId}/searches",
        input_schema=object_schema(
            {"websetId": WEBSET_ID, "cursor": CURSOR_SCHEMA, "limit": limit_schema()},
            required=["websetId"],
        ),
        query_params=("cursor", "limit"),
        shape_result=page_result,
    ),
    Operation(
        name="cancel_search_exa",
        description="Cancel a running search. Items already found are kept.",
        group="searches",
        method="POST",
        path="/websets/{websetId}/searches/{searchId}/cancel",
        input_schema=object_schema(
            {"websetId": WEBSET_ID, "searchId": SEARCH_ID}, required=["websetId", "searchId"]
        ),
    ),
]
