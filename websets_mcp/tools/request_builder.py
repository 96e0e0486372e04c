"""Path template resolution and query/body assembly for Websets operations."""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, Mapping, Tuple
from urllib.parse import quote

from websets_mcp.tools.validators import ArgumentValidationError

PLACEHOLDER_REGEX = re.compile(r"\{(\w+)\}")


def path_placeholders(template: str) -> Tuple[str, ...]:
    """Return the placeholder names declared by a path template, in order."""
    return tuple(PLACEHOLDER_REGEX.findall(template))


def resolve_path(template: str, arguments: Mapping[str, Any]) -> str:
    """Substitute every ``{name}`` placeholder with its URL-encoded argument."""

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        value = arguments.get(name)
        if value is None or value == "":
            raise ArgumentValidationError(f"Missing value for path parameter '{name}'.")
        return quote(str(value), safe="")

    return PLACEHOLDER_REGEX.sub(_substitute, template)


def to_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_query(arguments: Mapping[str, Any], names: Iterable[str]) -> Dict[str, str]:
    """Build query parameters from the named arguments that are set.

    Mapping values are flattened into dotted keys, so ``{"metadata": {"tier": "a"}}``
    becomes ``metadata.tier=a``.
    """
    query: Dict[str, str] = {}
    for name in names:
        value = arguments.get(name)
        if value is None or value == "":
            continue
        if isinstance(value, Mapping):
            for key, nested in value.items():
                if nested is None:
                    continue
                query[f"{name}.{key}"] = to_query_value(nested)
        else:
            query[name] = to_query_value(value)
    return query


def build_body(arguments: Mapping[str, Any], names: Iterable[str]) -> Dict[str, Any]:
    """Build a JSON body holding only the named arguments that are present."""
    return {name: arguments[name] for name in names if arguments.get(name) is not None}
