import pytest

from websets_mcp.tools.request_builder import build_body, build_query, path_placeholders, resolve_path, to_query_value
from websets_mcp.tools.validators import (
    ArgumentValidationError,
    compile_pattern,
    enum_schema,
    id_schema,
    limit_schema,
    object_schema,
    validate_arguments,
)

SCHEMA = object_schema(
    {
        "websetId": id_schema("Webset"),
        "limit": limit_schema(),
        "status": enum_schema(["verified", "pending", "failed"], "Status"),
        "pattern": {"type": "string", "format": "regex"},
    },
    required=["websetId"],
)


def test_valid_arguments_returned_unchanged():
    args = {"websetId": "ws_1", "limit": 10}
    assert validate_arguments(SCHEMA, args) is args


def test_none_arguments_treated_as_empty_object():
    with pytest.raises(ArgumentValidationError, match="'websetId' is a required property"):
        validate_arguments(SCHEMA, None)


def test_non_object_arguments_rejected():
    with pytest.raises(ArgumentValidationError, match="Arguments must be a JSON object"):
        validate_arguments(SCHEMA, ["ws_1"])


def test_unknown_argument_rejected():
    with pytest.raises(ArgumentValidationError, match="Additional properties"):
        validate_arguments(SCHEMA, {"websetId": "ws_1", "bogus": True})


@pytest.mark.parametrize("limit", [0, 201, "10"])
def test_limit_bounds(limit):
    with pytest.raises(ArgumentValidationError) as excinfo:
        validate_arguments(SCHEMA, {"websetId": "ws_1", "limit": limit})
    assert excinfo.value.problems[0].startswith("limit:")


def test_enum_violation_names_the_value():
    with pytest.raises(ArgumentValidationError, match="'approved' is not one of"):
        validate_arguments(SCHEMA, {"websetId": "ws_1", "status": "approved"})


def test_regex_format_is_checked():
    with pytest.raises(ArgumentValidationError, match="pattern"):
        validate_arguments(SCHEMA, {"websetId": "ws_1", "pattern": "(["})


def test_problems_are_capped():
    schema = object_schema({f"f{i}": {"type": "integer"} for i in range(8)})
    with pytest.raises(ArgumentValidationError) as excinfo:
        validate_arguments(schema, {f"f{i}": "x" for i in range(8)})
    assert len(excinfo.value.problems) == 5


def test_compile_pattern_is_case_insensitive():
    assert compile_pattern(None) is None
    assert compile_pattern("linkedin").search("https://LinkedIn.com/in/x")


def test_compile_pattern_rejects_invalid_regex():
    with pytest.raises(ArgumentValidationError, match="Invalid regular expression"):
        compile_pattern("(unclosed")


def test_resolve_path_encodes_values():
    assert resolve_path("/websets/{websetId}/items/{itemId}", {"websetId": "ws 1", "itemId": "a/b"}) == (
        "/websets/ws%201/items/a%2Fb"
    )


def test_resolve_path_missing_value():
    with pytest.raises(ArgumentValidationError, match="'itemId'"):
        resolve_path("/websets/{websetId}/items/{itemId}", {"websetId": "ws_1", "itemId": ""})


def test_path_placeholders_in_order():
    assert path_placeholders("/websets/{websetId}/monitors/{monitorId}/runs/{runId}") == (
        "websetId",
        "monitorId",
        "runId",
    )


def test_query_values_are_strings():
    assert to_query_value(True) == "true"
    assert to_query_value(False) == "false"
    assert to_query_value(25) == "25"
    assert to_query_value(3.0) == "3"


def test_build_query_skips_unset_and_flattens_mappings():
    query = build_query(
        {"limit": 10, "cursor": "", "status": None, "hasEnrichedData": False, "metadata": {"tier": "a"}},
        ("limit", "cursor", "status", "hasEnrichedData", "metadata", "missing"),
    )
    assert query == {"limit": "10", "hasEnrichedData": "false", "metadata.tier": "a"}


def test_build_body_keeps_only_present_fields():
    body = build_body({"url": "https://example.com", "secret": None, "events": []}, ("url", "secret", "events"))
    assert body == {"url": "https://example.com", "events": []}
