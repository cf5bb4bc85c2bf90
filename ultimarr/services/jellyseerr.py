# The module implements the Jellyseerr adapter: media search, media requests and the request list.
# Date: 2026-10-17
# Version: 0.1.0

from ultimarr.core.errors import MalformedUpstreamResponse
from ultimarr.models.enums import MediaAvailability, RequestStatus
from ultimarr.models.media import CreatedRequest, RequestPage, SearchPage
from ultimarr.services.base_service import ServiceClient, raw_text

SEARCH_DISPLAY_LIMIT = 15
DEFAULT_REQUEST_LIMIT = 20


class JellyseerrClient(ServiceClient):
    """Adapter for the Jellyseerr discovery and request service."""
    service_name = "Jellyseerr"
    api_prefix = "/api/v1"

    async def search(self, query: str) -> str:
        """Searches movies and TV shows; only the first 15 matches are listed."""
        data = await self.request("GET", "/search", params={"query": query})
        page = self.decode(data, SearchPage, "/search")

        lines = [f"Found {len(page.results)} results:"]
        for item in page.results[:SEARCH_DISPLAY_LIMIT]:
            status = ""
            if item.media_info is not None:
                label = MediaAvailability.describe(item.media_info.status)
                status = f"[{label}]" if label else ""
            lines.append(
                f"[{item.media_type.upper()}] {item.display_name} ({item.year}) "
                f"- TMDB: {item.id} {status}".rstrip()
            )
        return "\n".join(lines)

    async def request_media(self, tmdb_id: int, media_type: str) -> str:
        """Creates a request for a movie, or for every season of a TV show."""
        payload = {"mediaType": media_type, "mediaId": tmdb_id}
        if media_type == "tv":
            payload["seasons"] = "all"

        data = await self.request("POST", "/request", payload=payload)
        try:
            created = self.decode(data, CreatedRequest, "/request")
        except MalformedUpstreamResponse:
            created = CreatedRequest()
        if created.id is not None:
            return f"Request created successfully. Request ID: {created.id}"
        return f"Response: {raw_text(data)}"

    async def list_requests(self, limit: int = DEFAULT_REQUEST_LIMIT) -> str:
        data = await self.request("GET", "/request", params={"take": limit})
        page = self.decode(data, RequestPage, "/request")

        lines = [f"Requests ({len(page.results)}):"]
        for item in page.results:
            user = "Unknown"
            if item.requested_by is not None and item.requested_by.display_name:
                user = item.requested_by.display_name
            lines.append(
                f"#{item.id} [{RequestStatus.describe(item.status)}] {item.media.media_type} "
                f"(TMDB: {item.media.tmdb_id}) - by {user}"
            )
        return "\n".join(lines)
