# The module implements the Sonarr adapter for TV series.
# Date: 2026-10-17
# Version: 0.1.0

from typing import List, Optional

from pydantic import TypeAdapter

from ultimarr.models.media import Series
from ultimarr.services.download_client import DownloadClient

_series_list = TypeAdapter(List[Series])


class SonarrClient(DownloadClient):
    """Adapter for Sonarr: library listing, series details, searches, releases and the queue."""
    service_name = "Sonarr"
    media_key = "seriesId"

    async def list_series(self) -> str:
        data = await self.request("GET", "/series")
        series = self.decode(data, _series_list, "/series")

        lines = [f"Series in Sonarr ({len(series)}):"]
        for show in series:
            flag = "" if show.monitored else " [unmonitored]"
            lines.append(f"[{show.id}] {show.title} ({show.year or 0}) - {show.status}{flag}")
        return "\n".join(lines)

    async def get_series(self, series_id: int) -> str:
        endpoint = f"/series/{series_id}"
        show = self.decode(await self.request("GET", endpoint), Series, endpoint)

        episodes, downloaded = 0, 0
        if show.statistics is not None:
            episodes = show.statistics.episode_count
            downloaded = show.statistics.episode_file_count

        return "\n".join([
            f"**{show.title}** ({show.year or 0})",
            f"ID: {series_id}",
            f"Status: {show.status}",
            f"Monitored: {str(show.monitored).lower()}",
            f"Path: {show.path or ''}",
            f"Episodes: {downloaded}/{episodes} downloaded",
        ])

    async def search_series(self, series_id: int) -> str:
        """Asks Sonarr to search its indexers for every missing episode of the series."""
        return await self._send_command({"name": "SeriesSearch", "seriesId": series_id})

    async def get_releases(self, series_id: int, season: Optional[int] = None) -> str:
        params = {"seriesId": series_id}
        if season is not None:
            params["seasonNumber"] = season
        return await self._fetch_releases(params)
