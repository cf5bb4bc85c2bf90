# The module implements the Radarr adapter for movies.
# Date: 2026-10-17
# Version: 0.1.0

from typing import List

from pydantic import TypeAdapter

from ultimarr.models.media import Movie
from ultimarr.services.download_client import DownloadClient

_movie_list = TypeAdapter(List[Movie])


class RadarrClient(DownloadClient):
    """Adapter for Radarr: library listing, movie details, searches, releases and the queue."""
    service_name = "Radarr"
    media_key = "movieId"

    async def list_movies(self) -> str:
        data = await self.request("GET", "/movie")
        movies = self.decode(data, _movie_list, "/movie")

        lines = [f"Movies in Radarr ({len(movies)}):"]
        for movie in movies:
            status = "downloaded" if movie.has_file else "missing"
            if not movie.monitored:
                status += " [unmonitored]"
            lines.append(f"[{movie.id}] {movie.title} ({movie.year or 0}) - {status}")
        return "\n".join(lines)

    async def get_movie(self, movie_id: int) -> str:
        endpoint = f"/movie/{movie_id}"
        movie = self.decode(await self.request("GET", endpoint), Movie, endpoint)

        return "\n".join([
            f"**{movie.title}** ({movie.year or 0})",
            f"ID: {movie_id}",
            f"Status: {'Downloaded' if movie.has_file else 'Missing'}",
            f"Monitored: {str(movie.monitored).lower()}",
            f"Path: {movie.path or ''}",
        ])

    async def search_movie(self, movie_id: int) -> str:
        return await self._send_command({"name": "MoviesSearch", "movieIds": [movie_id]})

    async def get_releases(self, movie_id: int) -> str:
        return await self._fetch_releases({"movieId": movie_id})
