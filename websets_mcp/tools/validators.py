"""Shared argument validation helpers and schema fragments for Websets MCP tools."""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Optional, Sequence

from jsonschema import Draft202012Validator, FormatChecker

from websets_mcp.config import default_config

VERIFICATION_STATUSES = ["verified", "pending", "failed"]
ENRICHMENT_RESULT_STATUSES = ["completed", "pending", "failed"]
SEARCH_BEHAVIORS = ["override", "append"]
ENTITY_TYPES = ["company", "person", "article", "research_paper", "custom"]
MAX_REPORTED_PROBLEMS = 5

_FORMAT_CHECKER = FormatChecker()


class ArgumentValidationError(ValueError):
    """Raised when invocation arguments do not match an operation's declared shape."""

    def __init__(self, message: str, *, problems: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.problems = problems or [message]


def _location(error) -> str:
    return "/".join(str(part) for part in error.absolute_path) or "<root>"


def validate_arguments(schema: Dict[str, Any], arguments: Any) -> Dict[str, Any]:
    """Validate ``arguments`` against a JSON Schema and return them unchanged.

    Raises:
        ArgumentValidationError: listing up to five problems, each prefixed with
        the offending argument path.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise ArgumentValidationError("Arguments must be a JSON object.")

    validator = Draft202012Validator(schema, format_checker=_FORMAT_CHECKER)
    errors = sorted(validator.iter_errors(arguments), key=_location)
    if errors:
        problems = [f"{_location(err)}: {err.message}" for err in errors[:MAX_REPORTED_PROBLEMS]]
        raise ArgumentValidationError("Invalid arguments: " + "; ".join(problems), problems=problems)
    return arguments


def compile_pattern(pattern: Optional[str]) -> Optional[re.Pattern[str]]:
    """Compile a caller-supplied regular expression, case-insensitively."""
    if pattern is None:
        return None
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as exc:
        raise ArgumentValidationError(f"Invalid regular expression {pattern!r}: {exc}") from exc


# Schema fragments


def id_schema(description: str) -> Dict[str, Any]:
    return {"type": "string", "minLength": 1, "description": description}


def limit_schema(max_value: int = default_config.max_page_limit) -> Dict[str, Any]:
    return {
        "type": "integer",
        "minimum": 1,
        "maximum": max_value,
        "description": f"Number of results per page (1-{max_value})",
    }


CURSOR_SCHEMA: Dict[str, Any] = {
    "type": "string",
    "minLength": 1,
    "description": "Pagination cursor from a previous response",
}


def enum_schema(values: Sequence[str], description: str) -> Dict[str, Any]:
    return {"type": "string", "enum": list(values), "description": description}


def metadata_schema(description: str = "Key-value metadata") -> Dict[str, Any]:
    return {
        "type": "object",
        "additionalProperties": {"type": "string"},
        "description": description,
    }


def string_list_schema(description: str, *, min_items: int = 0) -> Dict[str, Any]:
    schema: Dict[str, Any] = {
        "type": "array",
        "items": {"type": "string", "minLength": 1},
        "description": description,
    }
    if min_items:
        schema["minItems"] = min_items
    return schema


def object_schema(
    properties: Dict[str, Any],
    required: Iterable[str] = (),
    *,
    description: Optional[str] = None,
) -> Dict[str, Any]:
    schema: Dict[str, Any] = {
        "type": "object",
        "properties": properties,
        "required": list(required),
        "additionalProperties": False,
    }
    if description:
        schema["description"] = description
    return schema


def date_schema(description: str) -> Dict[str, Any]:
    return {"type": "string", "minLength": 1, "description": f"{description} (ISO 8601)"}
