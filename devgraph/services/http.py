from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

import httpx

from ..models import Platform
from .errors import NotFoundError, ProtocolError, TransportError

# Only applied to clients opened here; injected clients keep their own settings.
DEFAULT_TIMEOUT = 30.0


@asynccontextmanager
async def client_session(client: Optional[httpx.AsyncClient] = None) -> AsyncIterator[httpx.AsyncClient]:
    """Yield the caller's client, or a short-lived one closed on exit."""
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT) as owned:
        yield owned


async def request_json(
    client: httpx.AsyncClient,
    platform: Platform,
    method: str,
    url: str,
    username: str,
    **kwargs: Any,
) -> Any:
    """Send one request and decode its JSON body, mapping failures to fetch errors."""
    try:
        response = await client.request(method, url, **kwargs)
    except httpx.HTTPError as exc:
        raise TransportError(platform, f"{platform.value} request failed: {exc}") from exc

    if response.status_code == 404:
        raise NotFoundError(platform, username)
    if not response.is_success:
        raise TransportError(
            platform,
            f"{platform.value} API error: {response.status_code} {response.reason_phrase}",
            status_code=response.status_code,
            reason=response.reason_phrase,
        )

    try:
        return response.json()
    except ValueError as exc:
        raise ProtocolError(platform, [f"invalid JSON body: {exc}"]) from exc
