"""
Configuration helpers for the Websets MCP server.

This module centralizes base URL selection, API key loading, the request
timeout, page limits, and the allow-list of active tools. No secrets are
stored in the repository; the API key is read from configuration, the
environment, or a local file if present.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

# Default connection settings
DEFAULT_BASE_URL = os.getenv("WEBSETS_BASE_URL", "https://api.exa.ai/websets/v0")


def _load_timeout() -> float:
    raw_timeout = os.getenv("WEBSETS_HTTP_TIMEOUT")
    if raw_timeout:
        try:
            return float(raw_timeout)
        except ValueError:
            return 25.0
    return 25.0


DEFAULT_TIMEOUT = _load_timeout()

# API key handling
API_KEY_ENV_VAR = "EXA_API_KEY"
API_KEY_FILE_ENV_VAR = "EXA_API_KEY_FILE"
DEFAULT_API_KEY_FILE = "apikey.txt"
API_KEY_HEADER = "x-api-key"

# Tool activation
ENABLED_TOOLS_ENV_VAR = "WEBSETS_ENABLED_TOOLS"

# Paging limits
MAX_PAGE_LIMIT = 200
DEFAULT_EXPORT_LIMIT = 20
LOG_LEVEL = os.getenv("WEBSETS_MCP_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("WEBSETS_MCP_LOG_FORMAT", "json")  # json or plain


def load_api_key() -> Optional[str]:
    """
    Load the Exa API key from environment or a local file.

    Returns:
        The API key string if available, otherwise None. The key is never logged
        or returned to callers.
    """
    env_key = os.getenv(API_KEY_ENV_VAR)
    if env_key:
        return env_key.strip()

    key_path = os.getenv(API_KEY_FILE_ENV_VAR, DEFAULT_API_KEY_FILE)
    if key_path:
        path = Path(key_path)
        if path.is_file():
            return path.read_text(encoding="utf-8").strip() or None

    return None


def _parse_enabled_tools(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [name.strip() for name in raw.split(",") if name.strip()]


def _load_enabled_tools() -> List[str]:
    return _parse_enabled_tools(os.getenv(ENABLED_TOOLS_ENV_VAR))


@dataclass(slots=True)
class WebsetsConfig:
    """Runtime configuration for Websets API access."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    # Explicit key; when unset the environment is consulted on every call.
    api_key: Optional[str] = None
    enabled_tools: List[str] = field(default_factory=_load_enabled_tools)
    max_page_limit: int = MAX_PAGE_LIMIT
    default_export_limit: int = DEFAULT_EXPORT_LIMIT
    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT


def resolve_api_key(config: WebsetsConfig) -> Optional[str]:
    """Return the explicit API key, falling back to the environment/file lookup."""
    if config.api_key:
        return config.api_key
    return load_api_key()


default_config = WebsetsConfig()
