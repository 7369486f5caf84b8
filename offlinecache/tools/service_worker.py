"""Mini README: Service worker cache tool.

Structure:
    * ServiceWorkerTool - exposes the bucket mapping to a service worker
      generator.

The service worker precaches ``main``, fetches ``additional`` after install
and caches ``optional`` lazily, so it receives every bucket as classified.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

from ..configuration import ServiceWorkerOptions
from .base import CacheTool
from .registry import REGISTRY

if TYPE_CHECKING:  # pragma: no cover
    from ..plugin import OfflinePlugin


class ServiceWorkerTool(CacheTool):
    tool_name = "service_worker"
    options_model = ServiceWorkerOptions

    def get_config(self, plugin: "OfflinePlugin") -> Dict[str, Any]:
        return {
            "output": plugin.scope + self.options.output,
            "scope": plugin.scope,
            "version": plugin.version,
        }

    def apply(self, plugin: "OfflinePlugin") -> Dict[str, Any]:
        return {
            "output": self.options.output,
            "entry": self.options.entry,
            "scope": plugin.scope,
            "version": plugin.version,
            "caches": {name: list(entries) for name, entries in plugin.caches.items()},
        }


REGISTRY.register(ServiceWorkerTool)
