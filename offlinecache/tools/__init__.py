"""Mini README: Cache tool subsystem package initialiser.

``base`` defines the tool interface, ``registry`` manages discovery, and the
remaining modules hold the built-in tools, which register on import.
"""

from .base import CacheTool, ToolOptions
from .registry import REGISTRY, CacheToolRegistry
from .app_cache import AppCacheTool
from .service_worker import ServiceWorkerTool

__all__ = [
    "AppCacheTool",
    "CacheTool",
    "CacheToolRegistry",
    "REGISTRY",
    "ServiceWorkerTool",
    "ToolOptions",
]
