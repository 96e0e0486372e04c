"""
Pagination and local filtering helpers.

The Websets API pages with an opaque ``nextCursor``. Filters the API cannot
apply (URL and title regular expressions) are applied here, to the single page
that was fetched; ``hasMore``/``nextCursor`` keep referring to the server page.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from websets_mcp.websets_api import WebsetsApiError

logger = logging.getLogger(__name__)


def paginate(body: Any) -> Dict[str, Any]:
    """Normalize a ``{data, hasMore, nextCursor}`` response into envelope fields.

    ``nextCursor`` is only reported while ``hasMore`` is true. A page that claims
    more results without a usable cursor keeps ``hasMore`` and omits the cursor;
    that mismatch is logged at DEBUG.
    """
    if not isinstance(body, dict) or not isinstance(body.get("data"), list):
        raise WebsetsApiError("Unexpected paginated response from Websets API.")
    has_more = bool(body.get("hasMore"))
    fields: Dict[str, Any] = {"data": body["data"], "hasMore": has_more}
    cursor = body.get("nextCursor")
    if has_more and isinstance(cursor, str) and cursor:
        fields["nextCursor"] = cursor
    elif has_more:
        logger.debug("Websets page reports hasMore without a nextCursor")
    return fields


def page_result(body: Any, arguments: Mapping[str, Any]) -> Dict[str, Any]:
    return paginate(body)


def _field_matches(value: Any, pattern: Optional[re.Pattern[str]]) -> bool:
    if pattern is None:
        return True
    if not isinstance(value, str) or not value:
        return False
    return pattern.search(value) is not None


def filter_by_patterns(
    items: Iterable[Dict[str, Any]],
    *,
    url_pattern: Optional[re.Pattern[str]] = None,
    title_pattern: Optional[re.Pattern[str]] = None,
) -> List[Dict[str, Any]]:
    """Keep items whose ``url`` and ``title`` match the given patterns.

    Items missing a field that is being tested are dropped. Applying the same
    patterns to the output again yields the same list.
    """
    return [
        item
        for item in items
        if isinstance(item, dict)
        and _field_matches(item.get("url"), url_pattern)
        and _field_matches(item.get("title"), title_pattern)
    ]


def count_statuses(records: Iterable[Any], statuses: Sequence[str]) -> Dict[str, int]:
    """Count records per status; statuses outside ``statuses`` only count toward ``total``."""
    counts: Dict[str, int] = {"total": 0}
    counts.update({status: 0 for status in statuses})
    for record in records:
        counts["total"] += 1
        status = record.get("status") if isinstance(record, dict) else None
        if status in counts and status != "total":
            counts[status] += 1
    return counts
