"""Minimal read-only sanity checks against the live Websets API (needs EXA_API_KEY)."""

from __future__ import annotations

import asyncio
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from websets_mcp import mcp  # noqa: E402

# Optional Webset to inspect; falls back to the first listed Webset if unset.
SAMPLE_WEBSET_ID = os.getenv("WEBSETS_SAMPLE_ID")


async def main() -> None:
    websets = await mcp.call_tool("list_websets_exa", {"limit": 3})
    print("Websets (limit 3):", websets)

    webset_id = SAMPLE_WEBSET_ID
    if not webset_id and websets.get("success") and websets["data"]:
        webset_id = websets["data"][0].get("id")
    if webset_id:
        print("Webset:", await mcp.call_tool("get_webset_exa", {"websetId": webset_id}))
        print("Items (limit 5):", await mcp.call_tool("list_webset_items_exa", {"websetId": webset_id, "limit": 5}))
        print("Exports:", await mcp.call_tool("list_exports_exa", {"websetId": webset_id}))

    print("Events (limit 3):", await mcp.call_tool("list_events_exa", {"limit": 3}))


if __name__ == "__main__":
    asyncio.run(main())
