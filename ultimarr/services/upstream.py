# The module provides the single HTTP round trip every tool is built on.
# Date: 2026-10-17
# Version: 0.1.0

import httpx
from typing import Any, Mapping, Optional

from ultimarr.core.errors import MalformedUpstreamResponse, TransportError, UpstreamHTTPError
from ultimarr.utils.logger import console

REQUEST_TIMEOUT_SECONDS = 30.0
ERROR_BODY_LIMIT = 200


class UpstreamClient:
    """
    Issues one HTTP request per call against an upstream service and classifies the outcome.

    The client is JSON-agnostic: a successful call returns the raw body bytes and
    leaves decoding to the caller. One instance (and its connection pool) can be
    shared by all service adapters.
    """

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None,
                 timeout: float = REQUEST_TIMEOUT_SECONDS):
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            follow_redirects=False,
            transport=transport,
        )

    async def perform(self, method: str, url: str,
                      headers: Mapping[str, str], body: Optional[bytes] = None,
                      params: Optional[Mapping[str, Any]] = None) -> bytes:
        """
        Performs the request and returns the response body.
        Raises:
            TransportError: The service could not be reached or timed out.
            MalformedUpstreamResponse: The body could not be decoded per its Content-Encoding.
            UpstreamHTTPError: The service answered with a status code >= 400.
        """
        console.debug(f"{method} {url}")
        try:
            response = await self._client.request(method, url, headers=headers, content=body, params=params)
        except httpx.DecodingError as e:
            console.warning(f"{method} {url} sent an undecodable body: {e!r}")
            raise MalformedUpstreamResponse(str(e) or type(e).__name__, url) from e
        except httpx.RequestError as e:
            console.warning(f"{method} {url} failed: {e!r}")
            raise TransportError(url, e) from e

        data = response.content
        if response.status_code >= 400:
            prefix = data[:ERROR_BODY_LIMIT].decode("utf-8", errors="replace")
            console.warning(f"{method} {url} returned HTTP {response.status_code}")
            raise UpstreamHTTPError(response.status_code, prefix)
        return data

    async def aclose(self):
        await self._client.aclose()

    async def __aenter__(self) -> "UpstreamClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
