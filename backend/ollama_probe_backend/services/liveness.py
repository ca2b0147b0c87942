from __future__ import annotations

import logging

import httpx

from ..config import AppConfig, get_settings

LOGGER = logging.getLogger(__name__)


async def check_api_alive(
    base_url: str | None = None,
    *,
    settings: AppConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> bool:
    """
    Single GET against the Ollama version endpoint.
    Any 2xx response counts as alive; transport errors and every other status count as down.
    The response body is ignored and nothing is retried.
    """
    settings = settings or get_settings()
    url = settings.api_version_url
    if base_url:
        url = f"{base_url.rstrip('/')}{settings.api_version_path}"

    try:
        async with httpx.AsyncClient(transport=transport) as client:
            response = await client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL, ValueError, OverflowError) as exc:
        # InvalidURL and socket-level port errors are not httpx.HTTPError subclasses.
        LOGGER.debug("Ollama API unreachable at %s: %s", url, exc)
        return False

    LOGGER.debug("Ollama API at %s answered %s", url, response.status_code)
    return response.is_success
