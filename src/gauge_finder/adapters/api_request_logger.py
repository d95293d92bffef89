"""Tracing of outgoing API requests when GAUGE_FINDER_LOG_REQUESTS is enabled."""

import logging
import os
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

LOG_REQUESTS_ENV = "GAUGE_FINDER_LOG_REQUESTS"
SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})


def should_log_requests() -> bool:
    """Check if request tracing is switched on."""
    return os.getenv(LOG_REQUESTS_ENV, "").strip().lower() in ("1", "true", "yes")


def describe_request(
    method: str,
    url: str,
    params: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
) -> str:
    """Render a request as one line, with query parameters sorted and secrets masked."""
    line = f"{method.upper()} {url}"
    if params:
        query = "&".join(f"{key}={value}" for key, value in sorted(params.items()))
        line += ("&" if "?" in url else "?") + query
    if headers:
        shown = {
            name: "***" if name.lower() in SENSITIVE_HEADERS else value
            for name, value in headers.items()
        }
        line += f" headers={shown}"
    return line


def log_api_request(
    method: str,
    url: str,
    params: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
) -> None:
    """Log an outgoing request if tracing is enabled.

    Args:
        method: HTTP method.
        url: Request URL without query string parameters.
        params: Query parameters (optional).
        headers: Request headers (optional); sensitive ones are masked.
    """
    if not should_log_requests():
        return
    logger.info(f"API request: {describe_request(method, url, params, headers)}")
