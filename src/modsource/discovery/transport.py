"""HTTP transport for fetching host metadata pages."""

from typing import Protocol

import httpx
import structlog

from modsource.config.settings import Settings, get_settings
from modsource.core.exceptions import TransportError, TransportTimeoutError

logger = structlog.get_logger(__name__)


class Transport(Protocol):
    """Performs a single GET request and returns the response body."""

    async def get(self, url: str) -> str: ...


class HTTPTransport:
    """Transport backed by an httpx.AsyncClient.

    The body is returned whatever the status code: hosts often serve meta
    tags on their error pages too.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=settings.http_timeout,
            follow_redirects=settings.follow_redirects,
            headers={"User-Agent": settings.user_agent},
        )

    async def get(self, url: str) -> str:
        logger.debug("HTTP request", url=url)
        try:
            response = await self._client.get(url)
        except httpx.TimeoutException as e:
            raise TransportTimeoutError(f"GET {url} timed out") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"GET {url} failed: {e}") from e
        logger.debug("HTTP response", url=url, status_code=response.status_code)
        return response.text

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HTTPTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
