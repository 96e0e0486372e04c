"""Export job tools."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from websets_mcp.config import default_config
from websets_mcp.tools.operation import Operation, deleted
from websets_mcp.tools.pagination import count_statuses, paginate
from websets_mcp.tools.validators import (
    CURSOR_SCHEMA,
    VERIFICATION_STATUSES,
    enum_schema,
    id_schema,
    limit_schema,
    object_schema,
    string_list_schema,
)
from websets_mcp.tools.websets import WEBSET_ID

EXPORT_FORMATS = ["csv", "json", "xlsx"]
EXPORT_STATUSES = ["completed", "pending", "processing", "failed"]

EXPORT_ID = id_schema("The unique identifier of the Export")


def is_download_ready(export: Any) -> bool:
    """An export can be downloaded once it completed and carries a download URL."""
    if not isinstance(export, dict):
        return False
    return export.get("status") == "completed" and bool(export.get("downloadUrl"))


def _get_export_result(body: Any, arguments: Mapping[str, Any]) -> Dict[str, Any]:
    return {"data": body, "downloadReady": is_download_ready(body)}


def _create_export_result(body: Any, arguments: Mapping[str, Any]) -> Dict[str, Any]:
    status = body.get("status") if isinstance(body, dict) else None
    return {"data": body, "message": f"Export created successfully. Status: {status}"}


def _list_exports_result(body: Any, arguments: Mapping[str, Any]) -> Dict[str, Any]:
    page = paginate(body)
    return {**page, "summary": count_statuses(page["data"], EXPORT_STATUSES)}


OPERATIONS: List[Operation] = [
    Operation(
        name="create_export_exa",
        description="Create an export job that writes a Webset's items to a downloadable CSV, JSON or XLSX file.",
        group="exports",
        method="POST",
        path="/websets/{websetId}/exports",
        input_schema=object_schema(
            {
                "websetId": WEBSET_ID,
                "format": enum_schema(EXPORT_FORMATS, "Export format"),
                "filters": object_schema(
                    {
                        "itemIds": string_list_schema("Specific item IDs to export"),
                        "verificationStatus": enum_schema(VERIFICATION_STATUSES, "Filter by verification status"),
                        "hasEnrichedData": {"type": "boolean", "description": "Filter by enrichment status"},
                        "itemType": {"type": "string", "minLength": 1, "description": "Filter by item type"},
                    },
                    description="Filters to apply to the export",
                ),
                "fields": string_list_schema("Specific fields to include in the export"),
            },
            required=["websetId", "format"],
        ),
        body_params=("format", "filters", "fields"),
        shape_result=_create_export_result,
    ),
    Operation(
        name="get_export_exa",
        description="Get an export job, including its download URL once it is ready.",
        group="exports",
        method="GET",
        path="/websets/{websetId}/exports/{exportId}",
        input_schema=object_schema(
            {"websetId": WEBSET_ID, "exportId": EXPORT_ID}, required=["websetId", "exportId"]
        ),
        shape_result=_get_export_result,
    ),
    Operation(
        name="list_exports_exa",
        description="List the export jobs of a Webset with a per-status summary.",
        group="exports",
        method="GET",
        path="/websets/{websetId}/exports",
        input_schema=object_schema(
            {"websetId": WEBSET_ID, "limit": limit_schema(), "cursor": CURSOR_SCHEMA},
            required=["websetId"],
        ),
        query_params=("limit", "cursor"),
        defaults={"limit": default_config.default_export_limit},
        shape_result=_list_exports_result,
    ),
    Operation(
        name="delete_export_exa",
        description="Delete an export job and its files.",
        group="exports",
        method="DELETE",
        path="/websets/{websetId}/exports/{exportId}",
        input_schema=object_schema(
            {"websetId": WEBSET_ID, "exportId": EXPORT_ID}, required=["websetId", "exportId"]
        ),
        shape_result=deleted("Export"),
    ),
]
