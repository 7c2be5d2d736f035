"""Logging of outgoing API requests when JOURNEY_BOARD_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = {"authorization", "cookie", "x-api-key"}


def should_log_requests() -> bool:
    """Check if request logging is enabled via the JOURNEY_BOARD_LOG_REQUESTS variable."""
    return os.getenv("JOURNEY_BOARD_LOG_REQUESTS", "").lower() == "true"


def build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    """Build the full URL with query parameters sorted by name."""
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in sorted(params.items()))
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Replace values of sensitive headers."""
    return {k: "***REDACTED***" if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log an outgoing request if request logging is enabled.

    Args:
        method: HTTP method.
        url: Request URL without query string.
        params: Query parameters.
        headers: Request headers; sensitive values are redacted.
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {build_url_with_params(url, params)}"]
    if headers:
        log_parts.append(f"Headers: {json.dumps(redact_headers(headers), indent=2)}")
    logger.info("API Request:\n" + "\n".join(log_parts))


def log_api_response(url: str, status: int, elapsed_seconds: float) -> None:
    """Log the status and latency of a response if request logging is enabled."""
    if not should_log_requests():
        return
    logger.info(f"API Response: {status} from {url} in {elapsed_seconds:.2f}s")
