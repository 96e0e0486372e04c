"""Webset (collection) tools."""

from __future__ import annotations

from typing import List

from websets_mcp.tools.operation import Operation, deleted
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

ENRICHMENT_FORMATS = ["text", "date", "number", "options", "email", "phone", "url"]

WEBSET_ID = id_schema("The unique identifier of the Webset")

CRITERION_SCHEMA = object_schema(
    {"description": {"type": "string", "minLength": 1, "description": "Criterion every item must satisfy"}},
    required=["description"],
)

SEARCH_SPEC_SCHEMA = object_schema(
    {
        "query": {"type": "string", "minLength": 1, "description": "Natural-language search query"},
        "count": {"type": "integer", "minimum": 1, "description": "Number of items to find"},
        "entity": object_schema(
            {"type": enum_schema(ENTITY_TYPES, "Entity type to search for")},
            required=["type"],
        ),
        "criteria": {"type": "array", "items": CRITERION_SCHEMA, "description": "Verification criteria"},
        "behavior": enum_schema(SEARCH_BEHAVIORS, "How new results combine with existing items"),
    },
    required=["query"],
    description="Initial search that populates the Webset",
)

ENRICHMENT_OPTION_SCHEMA = object_schema(
    {"label": {"type": "string", "minLength": 1}},
    required=["label"],
)

ENRICHMENT_SPEC_SCHEMA = object_schema(
    {
        "description": {"type": "string", "minLength": 1, "description": "What to extract for each item"},
        "format": enum_schema(ENRICHMENT_FORMATS, "Format of the enrichment result"),
        "options": {
            "type": "array",
            "items": ENRICHMENT_OPTION_SCHEMA,
            "description": "Allowed answers when format is 'options'",
        },
        "metadata": metadata_schema(),
    },
    required=["description"],
)


OPERATIONS: List[Operation] = [
    Operation(
        name="create_webset_exa",
        description=(
            "Create a new Webset from a search query, optionally with enrichments to run on every "
            "item found. Returns immediately; the Webset processes asynchronously."
        ),
        group="websets",
        method="POST",
        path="/websets",
        input_schema=object_schema(
            {
                "search": SEARCH_SPEC_SCHEMA,
                "enrichments": {
                    "type": "array",
                    "items": ENRICHMENT_SPEC_SCHEMA,
                    "description": "Enrichments to create with the Webset",
                },
                "externalId": {"type": "string", "minLength": 1, "description": "Caller-side identifier"},
                "metadata": metadata_schema(),
            },
            required=["search"],
        ),
        body_params=("search", "enrichments", "externalId", "metadata"),
    ),
    Operation(
        name="get_webset_exa",
        description="Get a Webset including its status, searches and enrichments.",
        group="websets",
        method="GET",
        path="/websets/{websetId}",
        input_schema=object_schema({"websetId": WEBSET_ID}, required=["websetId"]),
    ),
    Operation(
        name="list_websets_exa",
        description="List Websets with cursor pagination.",
        group="websets",
        method="GET",
        path="/websets",
        input_schema=object_schema({"cursor": CURSOR_SCHEMA, "limit": limit_schema()}),
        query_params=("cursor", "limit"),
        shape_result=page_result,
    ),
    Operation(
        name="update_webset_exa",
        description="Replace the metadata attached to a Webset.",
        group="websets",
        method="POST",
        path="/websets/{websetId}",
        input_schema=object_schema(
            {"websetId": WEBSET_ID, "metadata": metadata_schema("Metadata to store on the Webset")},
            required=["websetId", "metadata"],
        ),
        body_params=("metadata",),
    ),
    Operation(
        name="delete_webset_exa",
        description="Delete a Webset together with its items, searches and enrichments.",
        group="websets",
        method="DELETE",
        path="/websets/{websetId}",
        input_schema=object_schema({"websetId": WEBSET_ID}, required=["websetId"]),
        shape_result=deleted("Webset"),
    ),
    Operation(
        name="cancel_webset_exa",
        description="Cancel every running search and enrichment of a Webset.",
        group="websets",
        method="POST",
        path="/websets/{websetId}/cancel",
        input_schema=object_schema({"websetId": WEBSET_ID}, required=["websetId"]),
    ),
]
