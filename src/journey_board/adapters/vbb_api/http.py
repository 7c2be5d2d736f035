"""Shared GET helper for the VBB transport.rest API."""

import logging
import time
from typing import Any

import aiohttp

from journey_board.adapters.api_request_logger import log_api_request, log_api_response

logger = logging.getLogger(__name__)

USER_AGENT = "journey-board/0.1.0"


async def get_json(
    session: aiohttp.ClientSession | None,
    url: str,
    params: dict[str, Any],
    timeout_seconds: float,
) -> Any:
    """GET a JSON document, using the given session or a short-lived one.

    Raises:
        RuntimeError: If the API answers with a non-200 status.
        aiohttp.ClientError: On connection problems.
        asyncio.TimeoutError: If the request exceeds the timeout.
    """
    timeout = aiohttp.ClientTimeout(total=timeout_seconds)
    headers = {"User-Agent": USER_AGENT}
    log_api_request("GET", url, params=params, headers=headers)

    if session is None:
        async with aiohttp.ClientSession() as own_session:
            return await _get(own_session, url, params, headers, timeout)
    return await _get(session, url, params, headers, timeout)


async def _get(
    session: aiohttp.ClientSession,
    url: str,
    params: dict[str, Any],
    headers: dict[str, str],
    timeout: aiohttp.ClientTimeout,
) -> Any:
    started = time.monotonic()
    async with session.get(url, params=params, headers=headers, timeout=timeout) as response:
        log_api_response(url, response.status, time.monotonic() - started)
        if response.status != 200:
            response_text = await response.text()
            raise RuntimeError(f"VBB API returned status {response.status}: {response_text}")
        return await response.json()
