# The module provides the entry point of the ultimarr MCP server.
# Date: 2026-10-17
# Version: 0.1.0

import sys

import anyio

from ultimarr.core.config import Settings, get_settings
from ultimarr.core.errors import ConfigurationError
from ultimarr.core.server import SERVER_NAME, build_server, serve_stdio
from ultimarr.core.tool_registry import build_registry
from ultimarr.services.upstream import UpstreamClient
from ultimarr.utils.logger import console


async def run(settings: Settings):
    """Builds the adapters and the registry, then serves until stdin closes."""
    async with UpstreamClient() as upstream:
        registry = build_registry(settings, upstream)
        await serve_stdio(build_server(registry))


def main() -> int:
    console.rule(f"{SERVER_NAME} startup")
    try:
        settings = get_settings()
    except ConfigurationError as e:
        console.display_error_panel("Configuration error", "\n".join(e.problems))
        return 1

    console.display_data_as_table(
        {
            "Jellyseerr": settings.JELLYSEERR_URL,
            "Sonarr": settings.SONARR_URL,
            "Radarr": settings.RADARR_URL,
        },
        title="Upstream services",
    )
    anyio.run(run, settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
