"""Mini README: Registry of cache tool implementations.

Structure:
    * CacheToolRegistry - maps tool names to ``CacheTool`` subclasses.

Built-in tools register on import. Third-party packages can add tools through
the ``offlinecache.tools`` entry-point group, picked up by ``load_plugins``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Type, Union

from pydantic import BaseModel

from ..logging_utils import get_logger
from ..utils.plugin_loader import load_entry_point_plugins
from .base import CacheTool

LOGGER = get_logger(__name__)


class CacheToolRegistry:
    """Simple registry for mapping tool names to classes."""

    def __init__(self) -> None:
        self._tools: Dict[str, Type[CacheTool]] = {}

    def register(self, tool: Type[CacheTool]) -> Type[CacheTool]:
        """Register a tool class; returns it so the method works as a decorator."""

        identifier = tool.tool_name.lower()
        LOGGER.debug("Registering cache tool '%s'", identifier)
        self._tools[identifier] = tool
        return tool

    def available_tools(self) -> Iterable[str]:
        """Return tool names in registration order."""

        return list(self._tools)

    def create(
        self,
        identifier: str,
        options: Union[BaseModel, Mapping[str, Any], None] = None,
    ) -> CacheTool:
        """Instantiate the tool registered under ``identifier``.

        Plain mappings are validated against the tool's ``options_model``.
        """

        tool_cls = self._tools.get(identifier.lower())
        if not tool_cls:
            raise KeyError(f"Unknown cache tool '{identifier}'")
        if not isinstance(options, BaseModel):
            options = tool_cls.options_model(**(options or {}))
        LOGGER.info("Creating cache tool '%s'", identifier)
        return tool_cls(options)

    def load_plugins(self, group: str = "offlinecache.tools") -> List[Type[CacheTool]]:
        """Register every ``CacheTool`` subclass exposed through entry points."""

        registered: List[Type[CacheTool]] = []
        for plugin in load_entry_point_plugins(group):
            if isinstance(plugin, type) and issubclass(plugin, CacheTool):
                registered.append(self.register(plugin))
            else:
                LOGGER.warning("Entry point object %r is not a CacheTool; skipping", plugin)
        return registered


REGISTRY = CacheToolRegistry()
