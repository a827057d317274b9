# =============================================================================
# core/http_client.py  -  The one door to the network
# =============================================================================
#
# Tools never talk to httpx directly.  They receive a JsonClient and call
# fetch_json() with either a path (resolved against the client's base URL)
# or an absolute URL (used as is).
#
# CONNECTION PROVIDERS:
#   A provider is a zero-argument callable returning an async context manager
#   that yields a JsonClient.  The caller opens it around one invocation:
#
#       async with provider() as client:
#           text = await get_alerts(client, "NY")
#
#   Leaving the block closes the underlying connection, including when the
#   invocation is cancelled mid-request.
# =============================================================================

import logging
from contextlib import asynccontextmanager
from decimal import Decimal
from typing import Any, AsyncContextManager, AsyncIterator, Callable, Optional, Protocol

import httpx

logger = logging.getLogger(__name__)


class JsonClient(Protocol):
    """Anything that can GET a JSON document."""

    @property
    def base_url(self) -> str: ...

    async def fetch_json(self, path_or_url: str) -> Any: ...


ConnectionProvider = Callable[[], AsyncContextManager[JsonClient]]


class HttpJsonClient:
    """JsonClient backed by an httpx.AsyncClient owned by someone else."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    async def fetch_json(self, path_or_url: str) -> Any:
        """GET a resource and decode its body as JSON.

        Raises:
            httpx.HTTPStatusError: the server answered with a non-2xx status.
            httpx.HTTPError: any other transport failure.
            ValueError: the body is not valid JSON.
        """
        logger.debug("GET %s (base %s)", path_or_url, self.base_url)
        response = await self._client.get(path_or_url)
        response.raise_for_status()
        # Decimal keeps money amounts exact (12345678901234567.125 stays as sent)
        return response.json(parse_float=Decimal)


@asynccontextmanager
async def open_json_client(
    base_url: str,
    *,
    headers: Optional[dict[str, str]] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AsyncIterator[HttpJsonClient]:
    """Open a connection scoped to one invocation.

    Args:
        base_url: Prefix for relative paths (e.g., "https://api.weather.gov").
        headers: Extra default headers (the NWS API requires a User-Agent).
        timeout: Seconds per network operation; None disables the timeout.
        transport: Replacement transport, used by tests to fake the network.
    """
    async with httpx.AsyncClient(
        base_url=base_url,
        headers=headers,
        timeout=timeout,
        follow_redirects=True,
        transport=transport,
    ) as client:
        yield HttpJsonClient(client)
