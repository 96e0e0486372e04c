import pytest

from websets_mcp import mcp

from conftest import StubApiClient


@pytest.mark.asyncio
async def test_list_exports_summarizes_statuses():
    body = {
        "data": [
            {"id": "ex_1", "status": "completed"},
            {"id": "ex_2", "status": "pending"},
            {"id": "ex_3", "status": "failed"},
        ],
        "hasMore": False,
    }
    stub = StubApiClient([body])
    outcome = await mcp.call_tool("list_exports_exa", {"websetId": "ws_1"}, client=stub)
    assert outcome["success"] is True
    assert outcome["summary"] == {"total": 3, "completed": 1, "pending": 1, "processing": 0, "failed": 1}
    assert outcome["data"] == body["data"]


@pytest.mark.asyncio
async def test_list_exports_default_and_explicit_limit():
    stub = StubApiClient([{"data": [], "hasMore": False}, {"data": [], "hasMore": False}])
    await mcp.call_tool("list_exports_exa", {"websetId": "ws_1"}, client=stub)
    await mcp.call_tool("list_exports_exa", {"websetId": "ws_1", "limit": 5}, client=stub)
    assert stub.calls[0]["params"] == {"limit": "20"}
    assert stub.calls[1]["params"] == {"limit": "5"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "export,ready",
    [
        ({"id": "ex_1", "status": "completed", "downloadUrl": "https://files.example/ex_1.csv"}, True),
        ({"id": "ex_1", "status": "completed"}, False),
        ({"id": "ex_1", "status": "completed", "downloadUrl": ""}, False),
        ({"id": "ex_1", "status": "processing", "downloadUrl": "https://files.example/ex_1.csv"}, False),
    ],
)
async def test_get_export_download_ready(export, ready):
    stub = StubApiClient([export])
    outcome = await mcp.call_tool("get_export_exa", {"websetId": "ws_1", "exportId": "ex_1"}, client=stub)
    assert outcome["downloadReady"] is ready
    assert outcome["data"] == export
    assert stub.calls[0]["path"] == "/websets/ws_1/exports/ex_1"


@pytest.mark.asyncio
async def test_create_export_body():
    stub = StubApiClient([{"id": "ex_9", "status": "pending"}])
    outcome = await mcp.call_tool(
        "create_export_exa",
        {"websetId": "ws_1", "format": "csv", "filters": {"verificationStatus": "verified"}},
        client=stub,
    )
    assert outcome["message"] == "Export created successfully. Status: pending"
    assert stub.calls[0]["json"] == {"format": "csv", "filters": {"verificationStatus": "verified"}}


@pytest.mark.asyncio
async def test_create_export_rejects_unknown_format():
    stub = StubApiClient()
    outcome = await mcp.call_tool("create_export_exa", {"websetId": "ws_1", "format": "pdf"}, client=stub)
    assert outcome["errorType"] == "validation_error"
    assert "'pdf'" in outcome["error"]
    assert stub.calls == []


@pytest.mark.asyncio
async def test_create_webhook_rejects_unsupported_event():
    stub = StubApiClient()
    outcome = await mcp.call_tool(
        "create_webhook_exa",
        {"url": "https://hooks.example/ws", "events": ["webset.created", "webset.exploded"]},
        client=stub,
    )
    assert outcome["success"] is False
    assert outcome["errorType"] == "validation_error"
    assert "'webset.exploded' is not one of" in outcome["error"]
    assert stub.calls == []


@pytest.mark.asyncio
async def test_webhook_update_accepts_extended_events():
    stub = StubApiClient([{"id": "wh_1"}])
    outcome = await mcp.call_tool(
        "update_webhook_exa",
        {"webhookId": "wh_1", "events": ["webset.export.completed"], "status": "inactive"},
        client=stub,
    )
    assert outcome["success"] is True
    assert stub.calls[0]["method"] == "PATCH"
    assert stub.calls[0]["json"] == {"events": ["webset.export.completed"], "status": "inactive"}


@pytest.mark.asyncio
async def test_create_webhook_rejects_update_only_event():
    outcome = await mcp.call_tool(
        "create_webhook_exa",
        {"url": "https://hooks.example/ws", "events": ["webset.export.completed"]},
        client=StubApiClient(),
    )
    assert outcome["errorType"] == "validation_error"


@pytest.mark.asyncio
async def test_list_webhook_attempts_query():
    stub = StubApiClient([{"data": [{"id": "att_1", "successful": False}], "hasMore": False}])
    outcome = await mcp.call_tool(
        "list_webhook_attempts_exa",
        {"webhookId": "wh_1", "eventType": "webset.created", "limit": 10},
        client=stub,
    )
    assert outcome["data"] == [{"id": "att_1", "successful": False}]
    assert stub.calls[0]["path"] == "/webhooks/wh_1/attempts"
    assert stub.calls[0]["params"] == {"eventType": "webset.created", "limit": "10"}


@pytest.mark.asyncio
async def test_create_monitor_puts_webset_in_body():
    stub = StubApiClient([{"id": "mon_1"}])
    await mcp.call_tool("create_webset_monitor_exa", {"websetId": "ws_1", "cadence": "daily"}, client=stub)
    assert stub.calls[0]["path"] == "/websets/ws_1/monitors"
    assert stub.calls[0]["json"] == {"websetId": "ws_1", "cadence": "daily"}


@pytest.mark.asyncio
async def test_cancel_import_only():
    stub = StubApiClient()
    outcome = await mcp.call_tool("update_import_exa", {"importId": "imp_1", "status": "completed"}, client=stub)
    assert outcome["errorType"] == "validation_error"
    assert stub.calls == []
