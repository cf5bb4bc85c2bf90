# The module defines the Jellyseerr tools: search, request and list requests.
# Date: 2026-10-17
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import Literal, Type

from .base_tool import BaseTool, WholeNumber
from ultimarr.services.jellyseerr import DEFAULT_REQUEST_LIMIT, JellyseerrClient


class JellyseerrSearchInput(BaseModel):
    """
    Input model for the Jellyseerr search tool.
    Attributes:
        query (str): Free text matched against movie and TV show titles.
    """
    query: str = Field(..., description="Search query")


class JellyseerrRequestInput(BaseModel):
    """
    Input model for the Jellyseerr request tool.
    Attributes:
        tmdb_id (int): TMDB ID of the movie or TV show, as shown by jellyseerr_search.
        media_type (str): 'movie' or 'tv'.
    """
    tmdb_id: WholeNumber = Field(..., description="TMDB ID of the media")
    media_type: Literal["movie", "tv"] = Field(..., description="Type: 'movie' or 'tv'")


class JellyseerrListRequestsInput(BaseModel):
    limit: WholeNumber = Field(default=DEFAULT_REQUEST_LIMIT, ge=1,
                               description="Number of requests to return (default 20)")


class JellyseerrSearchTool(BaseTool):
    """Searches Jellyseerr for movies and TV shows and reports whether they are already available."""
    name: str = "jellyseerr_search"
    description: str = "Search for movies and TV shows on Jellyseerr"
    service: str = "jellyseerr"
    args_schema: Type[BaseModel] = JellyseerrSearchInput

    client: JellyseerrClient

    async def execute(self, query: str) -> str:
        return await self.client.search(query)


class JellyseerrRequestTool(BaseTool):
    """Requests a movie, or all seasons of a TV show, through Jellyseerr."""
    name: str = "jellyseerr_request"
    description: str = "Request a movie or TV show on Jellyseerr"
    service: str = "jellyseerr"
    args_schema: Type[BaseModel] = JellyseerrRequestInput

    client: JellyseerrClient

    async def execute(self, tmdb_id: int, media_type: str) -> str:
        return await self.client.request_media(tmdb_id, media_type)


class JellyseerrListRequestsTool(BaseTool):
    name: str = "jellyseerr_list_requests"
    description: str = "List media requests on Jellyseerr"
    service: str = "jellyseerr"
    args_schema: Type[BaseModel] = JellyseerrListRequestsInput

    client: JellyseerrClient

    async def execute(self, limit: int = DEFAULT_REQUEST_LIMIT) -> str:
        return await self.client.list_requests(limit)
