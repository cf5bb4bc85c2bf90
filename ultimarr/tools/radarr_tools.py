# The module defines the Radarr tools for movies.
# Date: 2026-10-17
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import Type

from .base_tool import BaseTool, NoInput, WholeNumber
from ultimarr.services.radarr import RadarrClient


class MovieInput(BaseModel):
    movie_id: WholeNumber = Field(..., description="Radarr movie ID")


class MovieDownloadInput(BaseModel):
    """
    Input model for grabbing a release found by radarr_get_releases.
    Attributes:
        guid (str): The release GUID.
        indexer_id (int): The indexer the release was found on.
        movie_id (int): The movie the release belongs to.
    """
    guid: str = Field(..., description="Release GUID from radarr_get_releases")
    indexer_id: WholeNumber = Field(..., description="Indexer ID from the release")
    movie_id: WholeNumber = Field(..., description="Radarr movie ID")


class RadarrListMoviesTool(BaseTool):
    name: str = "radarr_list_movies"
    description: str = "List all movies in Radarr"
    service: str = "radarr"
    args_schema: Type[BaseModel] = NoInput

    client: RadarrClient

    async def execute(self) -> str:
        return await self.client.list_movies()


class RadarrGetMovieTool(BaseTool):
    name: str = "radarr_get_movie"
    description: str = "Get details for a specific movie in Radarr"
    service: str = "radarr"
    args_schema: Type[BaseModel] = MovieInput

    client: RadarrClient

    async def execute(self, movie_id: int) -> str:
        return await self.client.get_movie(movie_id)


class RadarrSearchMovieTool(BaseTool):
    name: str = "radarr_search_movie"
    description: str = "Trigger a search for releases for a movie in Radarr"
    service: str = "radarr"
    args_schema: Type[BaseModel] = MovieInput

    client: RadarrClient

    async def execute(self, movie_id: int) -> str:
        return await self.client.search_movie(movie_id)


class RadarrGetReleasesTool(BaseTool):
    """Runs an interactive search; the results carry the GUID and indexer needed by radarr_download_release."""
    name: str = "radarr_get_releases"
    description: str = "Get available releases for a movie (interactive search)"
    service: str = "radarr"
    args_schema: Type[BaseModel] = MovieInput

    client: RadarrClient

    async def execute(self, movie_id: int) -> str:
        return await self.client.get_releases(movie_id)


class RadarrDownloadReleaseTool(BaseTool):
    name: str = "radarr_download_release"
    description: str = "Download a specific release by GUID"
    service: str = "radarr"
    args_schema: Type[BaseModel] = MovieDownloadInput

    client: RadarrClient

    async def execute(self, guid: str, indexer_id: int, movie_id: int) -> str:
        return await self.client.download_release(guid, indexer_id, movie_id)


class RadarrQueueTool(BaseTool):
    name: str = "radarr_queue"
    description: str = "Get current download queue in Radarr"
    service: str = "radarr"
    args_schema: Type[BaseModel] = NoInput

    client: RadarrClient

    async def execute(self) -> str:
        return await self.client.queue()
