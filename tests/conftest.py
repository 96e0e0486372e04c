import os
import sys

import pytest

# Ensure repository root is on sys.path before importing project modules.
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from websets_mcp.metrics import default_metrics  # noqa: E402


class StubApiClient:
    """Stands in for WebsetsApiClient; replays queued bodies or exceptions."""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []

    async def request(self, method, path, *, params=None, json_body=None, request_id=None):
        self.calls.append(
            {"method": method, "path": path, "params": params, "json": json_body, "request_id": request_id}
        )
        if not self.responses:
            raise RuntimeError("No stub responses")
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture(autouse=True)
def reset_metrics():
    default_metrics.reset()
    yield
    default_metrics.reset()


@pytest.fixture
def api_stub():
    return StubApiClient()
