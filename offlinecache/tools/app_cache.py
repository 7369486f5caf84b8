"""Mini README: Application cache (appcache) tool.

Structure:
    * AppCacheTool - collects the entries an appcache manifest lists.

Appcache has no lazy tier, so only ``main`` and ``additional`` entries are
listed under CACHE; ``optional`` assets are left to the network.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List

from ..configuration import AppCacheOptions
from .base import CacheTool
from .registry import REGISTRY

if TYPE_CHECKING:  # pragma: no cover
    from ..plugin import OfflinePlugin

PRECACHED_BUCKETS = ("main", "additional")


class AppCacheTool(CacheTool):
    tool_name = "app_cache"
    options_model = AppCacheOptions

    def get_config(self, plugin: "OfflinePlugin") -> Dict[str, Any]:
        return {"directory": plugin.scope + self.options.directory}

    def apply(self, plugin: "OfflinePlugin") -> Dict[str, Any]:
        cache: List[str] = []
        for name in PRECACHED_BUCKETS:
            cache.extend(plugin.caches.get(name, []))
        return {
            "directory": self.options.directory,
            "version": plugin.version,
            "CACHE": cache,
            "NETWORK": self.options.network,
        }


REGISTRY.register(AppCacheTool)
