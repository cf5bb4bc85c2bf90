# The module holds what Sonarr and Radarr have in common: release search, grabbing and the queue.
# Date: 2026-10-17
# Version: 0.1.0

from typing import Any, Dict, List, Optional

from pydantic import TypeAdapter

from ultimarr.core.errors import MalformedUpstreamResponse
from ultimarr.models.media import Command, QueuePage, Release
from ultimarr.services.base_service import ServiceClient, mebibytes, raw_text

RELEASE_DISPLAY_LIMIT = 20
RELEASE_TITLE_WIDTH = 60

_releases = TypeAdapter(List[Release])


class DownloadClient(ServiceClient):
    """
    Base adapter for the download-automation services.
    Subclasses set `media_key`, the payload field naming the series or movie ID.
    """
    api_prefix = "/api/v3"
    media_key: str = ""

    async def _fetch_releases(self, params: Dict[str, Any]) -> str:
        data = await self.request("GET", "/release", params=params)
        releases = self.decode(data, _releases, "/release")
        return format_releases(releases)

    async def download_release(self, guid: str, indexer_id: int, media_id: int) -> str:
        payload = {
            "guid": guid,
            "indexerId": indexer_id,
            self.media_key: media_id,
        }
        data = await self.request("POST", "/release", payload=payload)
        grab_id = self._returned_id(data, "/release")
        if grab_id is not None:
            return f"Download started successfully. ID: {grab_id}"
        return f"Download started successfully. Response: {raw_text(data)}"

    async def _send_command(self, payload: Dict[str, Any]) -> str:
        data = await self.request("POST", "/command", payload=payload)
        command_id = self._returned_id(data, "/command")
        if command_id is not None:
            return f"Search triggered. Command ID: {command_id}"
        return f"Search triggered. Response: {raw_text(data)}"

    def _returned_id(self, data: bytes, endpoint: str) -> Optional[int]:
        """The `id` of a mutation response, or None when the body carries none or is not JSON."""
        try:
            return self.decode(data, Command, endpoint).id
        except MalformedUpstreamResponse:
            return None

    async def queue(self) -> str:
        data = await self.request("GET", "/queue")
        page = self.decode(data, QueuePage, "/queue")

        lines = [f"Download Queue ({len(page.records)} items):"]
        for item in page.records:
            lines.append(f"{item.title} - {item.status} ({mebibytes(item.sizeleft)}MB left)")
        if not page.records:
            lines.append("(empty)")
        return "\n".join(lines)


def format_releases(releases: List[Release]) -> str:
    lines = [f"Available releases ({len(releases)}):"]
    for release in releases[:RELEASE_DISPLAY_LIMIT]:
        lines.append(
            f"[{release.seeders or 0} seeders] {release.title[:RELEASE_TITLE_WIDTH]} "
            f"({mebibytes(release.size)}MB) - {release.indexer} "
            f"| GUID: {release.guid} | Indexer: {release.indexer_id}"
        )
    if len(releases) > RELEASE_DISPLAY_LIMIT:
        lines.append(f"... and {len(releases) - RELEASE_DISPLAY_LIMIT} more")
    return "\n".join(lines)
