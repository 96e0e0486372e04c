import logging

import pytest

from websets_mcp.tools import ALL_OPERATIONS, run_operation
from websets_mcp.tools.operation import as_resource, new_request_id
from websets_mcp.tools.pagination import page_result
from websets_mcp.websets_api import NetworkError, RemoteClientError, RemoteServerError

from conftest import StubApiClient

OPERATIONS = {operation.name: operation for operation in ALL_OPERATIONS}


def _minimal_value(schema):
    if "enum" in schema:
        return schema["enum"][0]
    kind = schema.get("type")
    if kind == "object":
        return {name: _minimal_value(schema["properties"][name]) for name in schema.get("required", [])}
    if kind == "array":
        return [_minimal_value(schema["items"]) for _ in range(schema.get("minItems", 0))]
    if kind == "integer":
        return schema.get("minimum", 1)
    if kind == "boolean":
        return True
    return "x"


def _minimal_arguments(operation):
    return _minimal_value(operation.input_schema)


REQUIRED_FIELD_OPERATIONS = [op for op in ALL_OPERATIONS if op.input_schema["required"]]


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", REQUIRED_FIELD_OPERATIONS, ids=lambda op: op.name)
async def test_missing_required_field_fails_without_network(operation):
    stub = StubApiClient()
    outcome = await run_operation(operation, {}, client=stub)
    assert outcome["success"] is False
    assert outcome["errorType"] == "validation_error"
    assert "required property" in outcome["error"]
    assert stub.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "operation",
    [op for op in ALL_OPERATIONS if op.shape_result is as_resource],
    ids=lambda op: op.name,
)
async def test_resource_success_returns_body_as_data(operation):
    body = {"id": "res_1", "object": operation.group}
    stub = StubApiClient([body])
    outcome = await run_operation(operation, _minimal_arguments(operation), client=stub)
    assert outcome == {"success": True, "data": body}
    call = stub.calls[0]
    assert call["method"] == operation.method
    assert "{" not in call["path"]
    assert call["request_id"].startswith(operation.name + "-")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "operation",
    [op for op in ALL_OPERATIONS if op.shape_result is page_result],
    ids=lambda op: op.name,
)
async def test_list_success_returns_page(operation):
    body = {"data": [{"id": "a"}, {"id": "b"}], "hasMore": False, "nextCursor": None}
    stub = StubApiClient([body])
    outcome = await run_operation(operation, _minimal_arguments(operation), client=stub)
    assert outcome == {"success": True, "data": body["data"], "hasMore": False}


@pytest.mark.asyncio
async def test_every_operation_accepts_its_minimal_arguments():
    for operation in ALL_OPERATIONS:
        stub = StubApiClient([RemoteClientError("nope", status_code=400)])
        outcome = await run_operation(operation, _minimal_arguments(operation), client=stub)
        assert outcome["errorType"] == "remote_client_error", operation.name
        assert len(stub.calls) == 1


@pytest.mark.asyncio
async def test_cursor_round_trip_requests_next_page():
    operation = OPERATIONS["list_websets_exa"]
    stub = StubApiClient(
        [
            {"data": [{"id": "ws_1"}], "hasMore": True, "nextCursor": "cursor-2"},
            {"data": [{"id": "ws_2"}], "hasMore": False, "nextCursor": "ignored"},
        ]
    )
    first = await run_operation(operation, {"limit": 1}, client=stub)
    assert first["hasMore"] is True
    second = await run_operation(operation, {"limit": 1, "cursor": first["nextCursor"]}, client=stub)
    assert stub.calls[0]["params"] == {"limit": "1"}
    assert stub.calls[1]["params"] == {"cursor": "cursor-2", "limit": "1"}
    assert second["hasMore"] is False
    assert "nextCursor" not in second


@pytest.mark.asyncio
async def test_create_webset_sends_only_given_fields():
    stub = StubApiClient([{"id": "ws_1", "status": "running"}])
    outcome = await run_operation(
        OPERATIONS["create_webset_exa"],
        {"search": {"query": "AI startups in Berlin", "count": 10, "entity": {"type": "company"}}},
        client=stub,
    )
    assert outcome["success"] is True
    call = stub.calls[0]
    assert (call["method"], call["path"]) == ("POST", "/websets")
    assert call["json"] == {"search": {"query": "AI startups in Berlin", "count": 10, "entity": {"type": "company"}}}
    assert call["params"] is None


@pytest.mark.asyncio
async def test_delete_with_empty_body_still_reports_data():
    stub = StubApiClient([None])
    outcome = await run_operation(OPERATIONS["delete_webset_exa"], {"websetId": "ws_1"}, client=stub)
    assert outcome == {
        "success": True,
        "data": {"deleted": True},
        "message": "Webset deleted successfully",
    }
    assert stub.calls[0]["method"] == "DELETE"
    assert stub.calls[0]["json"] is None


@pytest.mark.asyncio
async def test_path_values_are_url_encoded():
    stub = StubApiClient([{"id": "it"}])
    await run_operation(OPERATIONS["get_webset_item_exa"], {"websetId": "ws/1", "itemId": "it 2"}, client=stub)
    assert stub.calls[0]["path"] == "/websets/ws%2F1/items/it%202"


@pytest.mark.asyncio
async def test_remote_client_error_envelope():
    error = RemoteClientError("Webset not found", status_code=404, body={"error": "Webset not found"})
    outcome = await run_operation(OPERATIONS["get_webset_exa"], {"websetId": "missing"}, client=StubApiClient([error]))
    assert outcome == {
        "success": False,
        "error": "Webset not found",
        "errorType": "remote_client_error",
        "statusCode": 404,
        "details": {"error": "Webset not found"},
    }


@pytest.mark.asyncio
async def test_remote_server_and_network_errors():
    server = await run_operation(
        OPERATIONS["get_webset_exa"],
        {"websetId": "ws_1"},
        client=StubApiClient([RemoteServerError("Internal Server Error", status_code=500)]),
    )
    assert server["errorType"] == "remote_server_error"
    assert server["statusCode"] == 500

    network = await run_operation(
        OPERATIONS["get_webset_exa"],
        {"websetId": "ws_1"},
        client=StubApiClient([NetworkError("Request timed out after 25.0s")]),
    )
    assert network["errorType"] == "network_error"
    assert "statusCode" not in network


@pytest.mark.asyncio
async def test_unexpected_exception_becomes_unknown_error():
    outcome = await run_operation(
        OPERATIONS["get_webset_exa"], {"websetId": "ws_1"}, client=StubApiClient([KeyError("boom")])
    )
    assert outcome["success"] is False
    assert outcome["errorType"] == "unknown_error"


@pytest.mark.asyncio
async def test_malformed_list_response_is_a_failure():
    outcome = await run_operation(OPERATIONS["list_websets_exa"], {}, client=StubApiClient([{"unexpected": True}]))
    assert outcome["success"] is False
    assert outcome["errorType"] == "unknown_error"


@pytest.mark.asyncio
async def test_injected_logger_receives_lifecycle_events(caplog):
    tool_logger = logging.getLogger("tests.websets.tools")
    stub = StubApiClient([{"id": "ws_1"}])
    with caplog.at_level(logging.INFO, logger="tests.websets.tools"):
        await run_operation(OPERATIONS["get_webset_exa"], {"websetId": "ws_1"}, client=stub, tool_logger=tool_logger)
    records = [r for r in caplog.records if r.name == "tests.websets.tools"]
    assert [("stage=start" in r.getMessage(), "stage=complete" in r.getMessage()) for r in records] == [
        (True, False),
        (False, True),
    ]
    assert all(r.tool == "get_webset_exa" for r in records)
    assert records[0].request_id == stub.calls[0]["request_id"]


def test_request_id_format():
    request_id = new_request_id("get_webset_exa")
    name, millis, suffix = request_id.rsplit("-", 2)
    assert name == "get_webset_exa"
    assert millis.isdigit()
    assert len(suffix) == 5
