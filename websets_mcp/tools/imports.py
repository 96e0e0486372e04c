"""Import job tools."""

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

IMPORT_FILE_TYPES = ["csv", "json", "txt"]
IMPORT_STATUSES = ["pending", "processing", "completed", "failed", "canceled"]

IMPORT_ID = id_schema("The unique identifier of the Import")

OPERATIONS: List[Operation] = [
    Operation(
        name="create_import_exa",
        description="Create an import job that loads data from an external file (CSV, JSON, TXT) into a Webset.",
        group="imports",
        method="POST",
        path="/imports",
        input_schema=object_schema(
            {
                "sourceUrl": {"type": "string", "minLength": 1, "description": "URL of the data file to import"},
                "fileType": enum_schema(IMPORT_FILE_TYPES, "Type of file being imported"),
                "websetId": id_schema("Target Webset ID when importing into an existing Webset"),
                "metadata": metadata_schema(),
            },
            required=["sourceUrl"],
        ),
        body_params=("sourceUrl", "fileType", "websetId", "metadata"),
    ),
    Operation(
        name="get_import_exa",
        description="Get an import job including its status and progress.",
        group="imports",
        method="GET",
        path="/imports/{importId}",
        input_schema=object_schema({"importId": IMPORT_ID}, required=["importId"]),
    ),
    Operation(
        name="list_imports_exa",
        description="List import jobs, optionally filtered by status or target Webset.",
        group="imports",
        method="GET",
        path="/imports",
        input_schema=object_schema(
            {
                "status": enum_schema(IMPORT_STATUSES, "Filter by import status"),
                "websetId": id_schema("Filter by target Webset ID"),
                "cursor": CURSOR_SCHEMA,
                "limit": limit_schema(),
            }
        ),
        query_params=("status", "websetId", "cursor", "limit"),
        shape_result=page_result,
    ),
    Operation(
        name="update_import_exa",
        description="Update an import job. Only canceling is supported.",
        group="imports",
        method="PATCH",
        path="/imports/{importId}",
        input_schema=object_schema(
            {
                "importId": IMPORT_ID,
                "status": enum_schema(["canceled"], "New status (only 'canceled' is supported)"),
            },
            required=["importId", "status"],
        ),
        body_params=("status",),
    ),
    Operation(
        name="delete_import_exa",
        description="Delete an import job and its associated data.",
        group="imports",
        method="DELETE",
        path="/imports/{importId}",
        input_schema=object_schema({"importId": IMPORT_ID}, required=["importId"]),
        shape_result=deleted("Import"),
    ),
]
