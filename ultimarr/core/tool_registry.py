# Discovers and manages all available tools automatically, and routes tool calls to them.
# Version 0.1.0

import pkgutil
import inspect
from typing import Any, Dict, List, Mapping, Optional

from mcp import types

from ultimarr import tools as tools_package
from ultimarr.core.config import Settings
from ultimarr.core.errors import UltimarrError
from ultimarr.models.common import ToolResult
from ultimarr.services.base_service import ServiceClient
from ultimarr.services.jellyseerr import JellyseerrClient
from ultimarr.services.radarr import RadarrClient
from ultimarr.services.sonarr import SonarrClient
from ultimarr.services.upstream import UpstreamClient
from ultimarr.tools.base_tool import BaseTool
from ultimarr.utils.logger import console


class ToolRegistry:
    """
    A class to discover, register and dispatch tools.

    Each discovered tool is bound to the adapter of the service it declares.
    Dispatch never raises for a failed call: errors become error results.
    """
    def __init__(self, services: Optional[Mapping[str, ServiceClient]] = None):
        self.tools: Dict[str, BaseTool] = {}
        if services is not None:
            self._discover_tools(services)
            console.success(f"Tool discovery complete. Found {len(self.tools)} tools: {list(self.tools.keys())}")

    def _discover_tools(self, services: Mapping[str, ServiceClient]):
        """
        Scans the ultimarr.tools package, imports all modules, finds classes that
        inherit from BaseTool, and registers an instance of each bound to its service.
        """
        for _, modname, _ in pkgutil.iter_modules(tools_package.__path__, f"{tools_package.__name__}."):
            if modname == f"{tools_package.__name__}.base_tool":
                continue
            module = __import__(modname, fromlist="dummy")
            for _, obj in inspect.getmembers(module, inspect.isclass):
                if not issubclass(obj, BaseTool) or obj is BaseTool or inspect.isabstract(obj):
                    continue
                if obj.__module__ != module.__name__:
                    continue
                client = services.get(obj.service)
                if client is None:
                    console.warning(f"Skipping tool '{obj.name}': no '{obj.service}' service configured.")
                    continue
                self.register(obj(client))

    def register(self, tool: BaseTool):
        if tool.name in self.tools:
            raise ValueError(f"Tool '{tool.name}' is already registered.")
        self.tools[tool.name] = tool
        console.info(f"Successfully registered tool: '{tool.name}'")

    def get_definitions(self) -> List[types.Tool]:
        """Returns the list of all tool definitions for the MCP tools/list response."""
        return [tool.get_definition() for tool in self.tools.values()]

    async def dispatch(self, tool_name: str, arguments: Optional[Dict[str, Any]]) -> ToolResult:
        """
        Executes a tool by its name and wraps the outcome in a ToolResult.
        """
        tool = self.tools.get(tool_name)
        if tool is None:
            console.error(f"Attempted to execute unknown tool: {tool_name}")
            return ToolResult(text=f"Tool '{tool_name}' not found.", is_error=True, kind="UnknownTool")

        try:
            return ToolResult.ok(await tool.run(arguments))
        except UltimarrError as e:
            console.error(f"Tool '{tool_name}' failed: {e}")
            return ToolResult.fail(e)
        except Exception as e:
            console.exception(f"Unexpected error while executing tool '{tool_name}'")
            return ToolResult.fail(e)


def build_services(settings: Settings, upstream: UpstreamClient) -> Dict[str, ServiceClient]:
    """Creates one adapter per upstream service, all sharing the same HTTP client."""
    return {
        "jellyseerr": JellyseerrClient(settings.JELLYSEERR_URL, settings.JELLYSEERR_API_KEY, upstream),
        "sonarr": SonarrClient(settings.SONARR_URL, settings.SONARR_API_KEY, upstream),
        "radarr": RadarrClient(settings.RADARR_URL, settings.RADARR_API_KEY, upstream),
    }


def build_registry(settings: Settings, upstream: UpstreamClient) -> ToolRegistry:
    return ToolRegistry(build_services(settings, upstream))
