"""HTTP client wrappers for the Websets API."""

from .client import (
    NetworkError,
    RemoteClientError,
    RemoteServerError,
    WebsetsApiClient,
    WebsetsApiError,
    default_client,
)

__all__ = [
    "WebsetsApiClient",
    "WebsetsApiError",
    "RemoteClientError",
    "RemoteServerError",
    "NetworkError",
    "default_client",
]
