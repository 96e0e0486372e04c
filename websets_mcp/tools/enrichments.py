"""Webset enrichment tools."""

from __future__ import annotations

from typing import List

from websets_mcp.tools.operation import Operation, deleted
from websets_mcp.tools.pagination import page_result
from websets_mcp.tools.validators import (
    CURSOR_SCHEMA,
    enum_schema,
    id_schema,
    limit_schema,
    metadata_schema,
    object_schema,
)
from websets_mcp.tools.websets import ENRICHMENT_FORMATS, ENRICHMENT_OPTION_SCHEMA, WEBSET_ID

ENRICHMENT_ID = id_schema("The unique identifier of the Enrichment")

OPERATIONS: List[Operation] = [
    Operation(
        name="create_enrichment_exa",
        description=(
            "Create an enrichment that extracts extra data (e.g. an email address) for every item in "
            "a Webset."
        ),
        group="enrichments",
        method="POST",
        path="/websets/{websetId}/enrichments",
        input_schema=object_schema(
            {
                "websetId": WEBSET_ID,
                "description": {"type": "string", "minLength": 1, "description": "What to extract for each item"},
                "format": enum_schema(ENRICHMENT_FORMATS, "Format of the enrichment result"),
                "options": {
                    "type": "array",
                    "items": ENRICHMENT_OPTION_SCHEMA,
                    "description": "Allowed answers when format is 'options'",
                },
                "metadata": metadata_schema(),
            },
            required=["websetId", "description"],
        ),
        body_params=("description", "format", "options", "metadata"),
    ),
    Operation(
        name="get_enrichment_exa",
        description="Get an enrichment and its status.",
        group="enrichments",
        method="GET",
        path="/websets/{websetId}/enrichments/{enrichmentId}",
        input_schema=object_schema(
            {"websetId": WEBSET_ID, "enrichmentId": ENRICHMENT_ID}, required=["websetId", "enrichmentId"]
        ),
    ),
    Operation(
        name="list_enrichments_exa",
        description="List the enrichments defined on a Webset.",
        group="enrichments",
        method="GET",
        path="/websets/{websetId}/enrichments",
        input_schema=object_schema(
            {"websetId": WEBSET_ID, "cursor": CURSOR_SCHEMA, "limit": limit_schema()},
            required=["websetId"],
        ),
        query_params=("cursor", "limit"),
        shape_result=page_result,
    ),
    Operation(
        name="delete_enrichment_exa",
        description="Delete an enrichment and the data it produced.",
        group="enrichments",
        method="DELETE",
        path="/websets/{websetId}/enrichments/{enrichmentId}",
        input_schema=object_schema(
            {"websetId": WEBSET_ID, "enrichmentId": ENRICHMENT_ID}, required=["websetId", "enrichmentId"]
        ),
        shape_result=deleted("Enrichment"),
    ),
    Operation(
        name="cancel_enrichment_exa",
        description="Cancel a running enrichment. Values already produced are kept.",
        group="enrichments",
        method="POST",
        path="/websets/{websetId}/enrichments/{enrichmentId}/cancel",
        input_schema=object_schema(
            {"websetId": WEBSET_ID, "enrichmentId": ENRICHMENT_ID}, required=["websetId", "enrichmentId"]
        ),
    ),
]
