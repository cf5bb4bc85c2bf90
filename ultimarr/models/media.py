# The module is to define the response records returned by Jellyseerr, Sonarr and Radarr.
# Only the fields ultimarr displays are declared; everything else in a payload is ignored.
# Date: 2026-10-17
# Version: 0.1.0

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional


class UpstreamRecord(BaseModel):
    """Base for upstream payloads: camelCase on the wire, unknown fields ignored."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


# --- Jellyseerr ---

class MediaInfo(UpstreamRecord):
    status: Optional[int] = None


class SearchResult(UpstreamRecord):
    """
    A single entry of a Jellyseerr search.
    Attributes:
        id (int): The TMDB ID of the movie, series or person.
        media_type (str): 'movie', 'tv' or 'person'.
        title (Optional[str]): Movie title.
        name (Optional[str]): Series or person name.
        release_date (Optional[str]): Movie release date (YYYY-MM-DD).
        first_air_date (Optional[str]): Series first air date (YYYY-MM-DD).
        media_info (Optional[MediaInfo]): Present once the media is known to Jellyseerr.
    """
    id: int
    media_type: str
    title: Optional[str] = None
    name: Optional[str] = None
    release_date: Optional[str] = None
    first_air_date: Optional[str] = None
    media_info: Optional[MediaInfo] = None

    @property
    def display_name(self) -> str:
        return self.name or self.title or ""

    @property
    def year(self) -> str:
        for date in (self.first_air_date, self.release_date):
            if date and len(date) >= 4:
                return date[:4]
        return ""


class SearchPage(UpstreamRecord):
    results: List[SearchResult] = Field(default_factory=list)


class RequestedMedia(UpstreamRecord):
    media_type: str
    tmdb_id: int


class RequestUser(UpstreamRecord):
    display_name: Optional[str] = None


class MediaRequest(UpstreamRecord):
    id: int
    status: int
    media: RequestedMedia
    requested_by: Optional[RequestUser] = None


class RequestPage(UpstreamRecord):
    results: List[MediaRequest] = Field(default_factory=list)


class CreatedRequest(UpstreamRecord):
    id: Optional[int] = None


# --- Sonarr / Radarr ---

class SeriesStatistics(UpstreamRecord):
    episode_count: int = 0
    episode_file_count: int = 0


class Series(UpstreamRecord):
    id: int
    title: str
    year: Optional[int] = None
    status: str
    monitored: bool
    path: Optional[str] = None
    statistics: Optional[SeriesStatistics] = None


class Movie(UpstreamRecord):
    id: int
    title: str
    year: Optional[int] = None
    has_file: bool
    monitored: bool
    path: Optional[str] = None


class Release(UpstreamRecord):
    """A candidate release found by an interactive search."""
    guid: str
    title: str
    size: int
    seeders: Optional[int] = None
    indexer_id: int
    indexer: str


class QueueItem(UpstreamRecord):
    title: str
    status: str
    sizeleft: Optional[float] = None


class QueuePage(UpstreamRecord):
    records: List[QueueItem] = Field(default_factory=list)


class Command(UpstreamRecord):
    id: Optional[int] = None
