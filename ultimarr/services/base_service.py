# The module defines the shared plumbing of the Jellyseerr, Sonarr and Radarr adapters.
# Date: 2026-10-17
# Version: 0.1.0

import json
from typing import Any, Dict, Optional, Type, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from ultimarr.core.errors import MalformedUpstreamResponse
from ultimarr.services.upstream import UpstreamClient

T = TypeVar("T")


class ServiceClient:
    """
    A thin specialization of the UpstreamClient for one upstream service.

    It knows the service's base URL, its versioned API prefix and its API key,
    and injects the key and the JSON content type into every request.
    Attributes:
        service_name (str): Human readable name used in log messages.
        api_prefix (str): Versioned REST base path, e.g. '/api/v3'.
    """
    service_name: str = "service"
    api_prefix: str = ""

    def __init__(self, base_url: str, api_key: str, upstream: UpstreamClient):
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._upstream = upstream

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}{self.api_prefix}{endpoint}"

    async def request(self, method: str, endpoint: str,
                      params: Optional[Dict[str, Any]] = None,
                      payload: Optional[Dict[str, Any]] = None) -> bytes:
        headers = {
            "X-Api-Key": self._api_key,
            "Content-Type": "application/json",
        }
        body = json.dumps(payload).encode("utf-8") if payload is not None else None
        return await self._upstream.perform(method, self.url_for(endpoint), headers, body, params=params)

    def decode(self, data: bytes, schema: Union[Type[T], TypeAdapter], endpoint: Optional[str] = None) -> T:
        """
        Validates a JSON body against a response record (or a TypeAdapter for lists).
        Raises:
            MalformedUpstreamResponse: The body is not JSON or does not match the schema.
        """
        adapter = schema if isinstance(schema, TypeAdapter) else TypeAdapter(schema)
        try:
            return adapter.validate_json(data)
        except ValidationError as e:
            raise MalformedUpstreamResponse(_summarize(e), endpoint) from e


def _summarize(error: ValidationError) -> str:
    details = []
    for item in error.errors()[:3]:
        location = ".".join(str(part) for part in item["loc"]) or "body"
        details.append(f"{location}: {item['msg']}")
    if error.error_count() > 3:
        details.append(f"... {error.error_count() - 3} more")
    return "; ".join(details)


def mebibytes(size: Optional[float]) -> int:
    """Whole MiB in a byte count, 0 when unknown."""
    if not size:
        return 0
    return int(size) // 1024 // 1024


def raw_text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")
