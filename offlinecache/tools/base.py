"""Mini README: Abstract base class for cache tools.

Structure:
    * ToolOptions - permissive option model for tools without their own.
    * CacheTool - interface implemented by every manifest collaborator.

Each tool names the pydantic model its option section is validated against.
A cache tool receives the plugin after classification and turns its buckets
into whatever its manifest writer needs. Tools never reclassify assets; they
only read ``plugin.caches``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Type

from pydantic import BaseModel

from ..logging_utils import get_logger

if TYPE_CHECKING:  # pragma: no cover
    from ..plugin import OfflinePlugin

LOGGER = get_logger(__name__)


class ToolOptions(BaseModel):
    """Free-form options for tools that do not declare their own model."""

    class Config:
        extra = "allow"


class CacheTool(ABC):
    """Base interface for cache manifest collaborators."""

    tool_name: str = "generic"
    options_model: Type[BaseModel] = ToolOptions

    def __init__(self, options: BaseModel) -> None:
        self.options = options
        LOGGER.debug("Initialising %s tool with %s", self.tool_name, options)

    @abstractmethod
    def get_config(self, plugin: "OfflinePlugin") -> Dict[str, Any]:
        """Return runtime data the host injects into its loader."""

    @abstractmethod
    def apply(self, plugin: "OfflinePlugin") -> Dict[str, Any]:
        """Describe the manifest content for the current build cycle."""

