"""
httpx transport adapter - Implements HttpTransport protocol.

This module performs the actual network round trip with an
httpx.AsyncClient bound to the configured base URL. Replies are returned
for every status code; only connectivity failures become errors.

Error mapping:
- httpx.TimeoutException -> TransportError
- httpx.DecodingError (corrupt Content-Encoding body) -> DecodeError
- any other httpx.RequestError (connect, read, write, protocol,
  redirects) -> TransportError
Status codes are left for the domain to classify.
"""

import logging

import httpx

from users_client.domain.config import ClientConfig
from users_client.domain.exceptions import DecodeError, TransportError
from users_client.domain.ports import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


async def _log_request(request: httpx.Request) -> None:
    logger.debug("--> %s %s", request.method, request.url)


async def _log_response(response: httpx.Response) -> None:
    request = response.request
    logger.debug("<-- %s %s %s", response.status_code, request.method, request.url)


class HttpxTransport:
    """
    Implements HttpTransport protocol via httpx.AsyncClient.

    Uses structural subtyping - no explicit inheritance from Protocol.
    The transport closes its client only if it created it.
    """

    def __init__(self, config: ClientConfig, client: httpx.AsyncClient | None = None) -> None:
        """
        Initialize transport.

        Args:
            config: Immutable client configuration (base URL, timeout)
            client: Optional pre-built client, e.g. with a custom transport
        """
        self._config = config
        self._owns_client = client is None
        if client is None:
            event_hooks = {}
            if config.log_http:
                event_hooks = {"request": [_log_request], "response": [_log_response]}
            client = httpx.AsyncClient(
                base_url=config.base_url,
                timeout=config.timeout_seconds,
                event_hooks=event_hooks,
            )
        self._client = client

    async def send(self, request: HttpRequest) -> HttpResponse:
        """
        Send one request and return the raw reply.

        Raises:
            TransportError: Connection failure or timeout
            DecodeError: Reply body could not be content-decoded
        """
        url = self._config.url_for(request.path)
        try:
            response = await self._client.request(
                request.method,
                url,
                content=request.body,
                headers=request.headers,
            )
        except httpx.TimeoutException as err:
            raise TransportError(f"Timed out calling {url}") from err
        except httpx.DecodingError as err:
            raise DecodeError(f"Undecodable reply body from {url}: {err}") from err
        except httpx.RequestError as err:
            raise TransportError(f"Could not reach {url}: {err}") from err

        return HttpResponse(
            status_code=response.status_code,
            body=response.content,
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
