# The module defines the Sonarr tools for TV series.
# Date: 2026-10-17
# Version: 0.1.0

from pydantic import BaseModel, Field
from pydantic.json_schema import SkipJsonSchema
from typing import Optional, Type, Union

from .base_tool import BaseTool, NoInput, WholeNumber
from ultimarr.services.sonarr import SonarrClient


class SeriesInput(BaseModel):
    series_id: WholeNumber = Field(..., description="Sonarr series ID")


class SeriesReleasesInput(BaseModel):
    """
    Input model for the Sonarr interactive search tool.
    Attributes:
        series_id (int): Sonarr series ID.
        season (Optional[int]): Restrict the search to one season.
    """
    series_id: WholeNumber = Field(..., description="Sonarr series ID")
    season: Union[WholeNumber, SkipJsonSchema[None]] = Field(
        default=None, description="Season number (optional, omit for all)")


class SeriesDownloadInput(BaseModel):
    """
    Input model for grabbing a release found by sonarr_get_releases.
    Attributes:
        guid (str): The release GUID.
        indexer_id (int): The indexer the release was found on.
        series_id (int): The series the release belongs to.
    """
    guid: str = Field(..., description="Release GUID from sonarr_get_releases")
    indexer_id: WholeNumber = Field(..., description="Indexer ID from the release")
    series_id: WholeNumber = Field(..., description="Sonarr series ID")


class SonarrListSeriesTool(BaseTool):
    name: str = "sonarr_list_series"
    description: str = "List all TV series in Sonarr"
    service: str = "sonarr"
    args_schema: Type[BaseModel] = NoInput

    client: SonarrClient

    async def execute(self) -> str:
        return await self.client.list_series()


class SonarrGetSeriesTool(BaseTool):
    name: str = "sonarr_get_series"
    description: str = "Get details for a specific series in Sonarr"
    service: str = "sonarr"
    args_schema: Type[BaseModel] = SeriesInput

    client: SonarrClient

    async def execute(self, series_id: int) -> str:
        return await self.client.get_series(series_id)


class SonarrSearchSeriesTool(BaseTool):
    """Starts a background search on Sonarr's indexers; the grab itself happens upstream."""
    name: str = "sonarr_search_series"
    description: str = "Trigger a search for releases for a series in Sonarr"
    service: str = "sonarr"
    args_schema: Type[BaseModel] = SeriesInput

    client: SonarrClient

    async def execute(self, series_id: int) -> str:
        return await self.client.search_series(series_id)


class SonarrGetReleasesTool(BaseTool):
    name: str = "sonarr_get_releases"
    description: str = "Get available releases for a series (interactive search)"
    service: str = "sonarr"
    args_schema: Type[BaseModel] = SeriesReleasesInput

    client: SonarrClient

    async def execute(self, series_id: int, season: Optional[int] = None) -> str:
        return await self.client.get_releases(series_id, season)


class SonarrDownloadReleaseTool(BaseTool):
    name: str = "sonarr_download_release"
    description: str = "Download a specific release by GUID"
    service: str = "sonarr"
    args_schema: Type[BaseModel] = SeriesDownloadInput

    client: SonarrClient

    async def execute(self, guid: str, indexer_id: int, series_id: int) -> str:
        return await self.client.download_release(guid, indexer_id, series_id)


class SonarrQueueTool(BaseTool):
    name: str = "sonarr_queue"
    description: str = "Get current download queue in Sonarr"
    service: str = "sonarr"
    args_schema: Type[BaseModel] = NoInput

    client: SonarrClient

    async def execute(self) -> str:
        return await self.client.queue()
