# tests/test_server.py

import asyncio

from mcp.shared.memory import create_connected_server_and_client_session

from ultimarr.core.server import SERVER_NAME, SERVER_VERSION, build_server


def _session(registry, scenario):
    async def run():
        async with create_connected_server_and_client_session(build_server(registry)) as session:
            return await scenario(session)
    return asyncio.run(run())


def test_server_identity():
    assert SERVER_NAME == "ultimarr"
    assert SERVER_VERSION == "1.0.0"


def test_list_tools_over_mcp(registry):
    async def scenario(session):
        return await session.list_tools()

    result = _session(registry, scenario)

    assert len(result.tools) == 15
    assert "radarr_download_release" in {tool.name for tool in result.tools}


def test_call_tool_over_mcp(registry, stub):
    stub.add("GET", "/api/v3/movie", [
        {"id": 1, "title": "Heat", "year": 1995, "hasFile": True, "monitored": True},
    ])

    async def scenario(session):
        return await session.call_tool("radarr_list_movies", {})

    result = _session(registry, scenario)

    assert result.isError is False
    assert result.content[0].text == "Movies in Radarr (1):\n[1] Heat (1995) - downloaded"


def test_failed_call_is_flagged_over_mcp(registry, stub):
    stub.add("GET", "/api/v3/series/3", status=401, text="Unauthorized")

    async def scenario(session):
        return await session.call_tool("sonarr_get_series", {"series_id": 3})

    result = _session(registry, scenario)

    assert result.isError is True
    assert result.content[0].text == "HTTP 401: Unauthorized"


def test_invalid_argument_is_flagged_over_mcp(registry, stub):
    async def scenario(session):
        return await session.call_tool("sonarr_get_series", {"series_id": "abc"})

    result = _session(registry, scenario)

    assert result.isError is True
    assert "series_id" in result.content[0].text
    assert stub.calls == []
