"""
Thin HTTP client for the Websets REST API.

The client issues exactly one request per call and maps transport and status
failures to internal exceptions that the tool layer turns into outcome
envelopes. It never retries.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from websets_mcp.config import API_KEY_HEADER, WebsetsConfig, default_config, resolve_api_key

logger = logging.getLogger(__name__)


class WebsetsApiError(Exception):
    """Base exception for Websets API errors."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RemoteClientError(WebsetsApiError):
    """Raised when the API answers with a 4xx status."""


class RemoteServerError(WebsetsApiError):
    """Raised when the API answers with a 5xx status."""


class NetworkError(WebsetsApiError):
    """Raised when no response was received (connectivity failure or timeout)."""


class WebsetsApiClient:
    """Async request executor for the Websets API surface.

    When no ``async_client`` is injected, every call opens its own
    ``httpx.AsyncClient`` and closes it once the response is read.
    """

    def __init__(
        self,
        config: WebsetsConfig | None = None,
        *,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or default_config
        # Injected clients belong to the caller, which also closes them.
        self._client: Optional[httpx.AsyncClient] = async_client

    def _build_headers(self, *, has_body: bool) -> Dict[str, str]:
        headers: Dict[str, str] = {"accept": "application/json"}
        if has_body:
            headers["content-type"] = "application/json"
        api_key = resolve_api_key(self.config)
        headers[API_KEY_HEADER] = api_key or ""
        return headers

    def _map_error(self, response: httpx.Response, body: Any) -> WebsetsApiError:
        status_code = response.status_code
        message: Optional[str] = None
        if isinstance(body, dict):
            raw_error = body.get("error")
            if isinstance(raw_error, str) and raw_error:
                message = raw_error
            elif isinstance(raw_error, dict) and isinstance(raw_error.get("message"), str):
                message = raw_error["message"]
        if not message:
            message = getattr(response, "reason_phrase", None) or (
                f"Request failed with status code {status_code}"
            )
        if status_code >= 500:
            return RemoteServerError(message, status_code=status_code, body=body)
        return RemoteClientError(message, status_code=status_code, body=body)

    def _process_response(self, response: httpx.Response) -> Any:
        body: Any = None
        if response.content:
            try:
                body = response.json()
            except ValueError:
                if response.status_code < 400:
                    raise WebsetsApiError(
                        "Unexpected non-JSON response from Websets API.",
                        status_code=response.status_code,
                    )
                body = response.text

        if response.status_code >= 400:
            raise self._map_error(response, body)

        return body

    async def _send(
        self,
        client: httpx.AsyncClient,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, str]],
        json_body: Optional[Dict[str, Any]],
        headers: Dict[str, str],
    ) -> httpx.Response:
        if json_body is None:
            return await client.request(method, path, params=params, headers=headers)
        return await client.request(method, path, params=params, json=json_body, headers=headers)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, str]] = None,
        json_body: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Issue one request and return the decoded JSON body (``None`` when empty)."""
        headers = self._build_headers(has_body=json_body is not None)
        logger.debug(
            "websets request method=%s path=%s request_id=%s",
            method,
            path,
            request_id,
            extra={"request_id": request_id},
        )
        try:
            if self._client is not None:
                response = await self._send(
                    self._client, method, path, params=params or None, json_body=json_body, headers=headers
                )
            else:
                async with httpx.AsyncClient(
                    base_url=self.config.base_url, timeout=self.config.timeout
                ) as client:
                    response = await self._send(
                        client, method, path, params=params or None, json_body=json_body, headers=headers
                    )
        except httpx.TimeoutException as exc:
            logger.warning(
                "Websets API timed out for %s %s request_id=%s",
                method,
                path,
                request_id,
                extra={"request_id": request_id},
            )
            raise NetworkError(f"Request timed out after {self.config.timeout}s") from exc
        except httpx.RequestError as exc:
            logger.warning(
                "Websets API unreachable for %s %s request_id=%s",
                method,
                path,
                request_id,
                extra={"request_id": request_id},
            )
            raise NetworkError(str(exc) or "Websets API unreachable") from exc
        return self._process_response(response)


default_client = WebsetsApiClient()
