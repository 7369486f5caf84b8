"""Mini README: Host-facing facade tying configuration, classifier and tools.

Structure:
    * ConfigurationError - fatal setup problem raised at construction.
    * OfflinePlugin - validates options once, then classifies each build's
      assets and hands the buckets to the enabled cache tools.

Typical host flow::

    plugin = OfflinePlugin({"caches": {"main": ["index.html"]}})
    runtime = plugin.runtime_data()       # before the build
    plugin.set_assets(emitted_files)      # once per build cycle
    manifests = plugin.apply_tools()      # consumed by manifest writers
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .caches import CacheClassifier
from .caches.classifier import Reporter
from .configuration import (
    ALL_CACHES,
    OfflineCacheSettings,
    PluginOptions,
    build_options,
)
from .logging_utils import get_logger
from .rewrites import RewriteResolver, make_rule
from .tools import REGISTRY, CacheTool

LOGGER = get_logger(__name__)

TOOL_OPTION_FIELDS = ("service_worker", "app_cache")


class ConfigurationError(ValueError):
    """Raised when the plugin cannot operate with the given configuration."""


class OfflinePlugin:
    """Classify build output into offline cache buckets for manifest tools."""

    def __init__(
        self,
        options: Union[PluginOptions, Mapping[str, Any], None] = None,
        *,
        settings: Optional[OfflineCacheSettings] = None,
        warn: Optional[Reporter] = None,
    ) -> None:
        if isinstance(options, PluginOptions):
            self.options = options
        else:
            self.options = build_options(
                options, settings=settings, tool_names=REGISTRY.available_tools()
            )

        self.scope = self.options.scope
        self.version = self.options.version
        self.entry_prefix = self.options.entry_prefix
        self.resolver = RewriteResolver(make_rule(self.options.rewrites), entry_prefix=self.entry_prefix)
        self.classifier = CacheClassifier(
            self.options.caches, self.resolver, scope=self.scope, warn=warn
        )

        self.assets: Optional[List[str]] = None
        self.caches: Dict[str, List[str]] = {}
        self.tools: Dict[str, CacheTool] = {}
        sections: Dict[str, Any] = {name: getattr(self.options, name) for name in TOOL_OPTION_FIELDS}
        sections.update(self.options.tools)
        for name, tool_options in sections.items():
            if tool_options is None:
                LOGGER.debug("Cache tool '%s' disabled", name)
                continue
            try:
                self.tools[name] = REGISTRY.create(name, tool_options)
            except KeyError as exc:
                raise ConfigurationError(f"Cache tool '{name}' is not registered") from exc

        if not self.tools:
            raise ConfigurationError("You should have at least one cache service to be specified")

    def rewrite(self, asset: str) -> str:
        """Public relative path for ``asset``, or ``""`` when it is excluded."""

        return self.resolver.resolve(asset)

    def validate_paths(self, assets: Sequence[str]) -> List[str]:
        """Rewrite, filter and scope-qualify ``assets``."""

        return self.classifier.normalize(assets)

    def set_assets(self, assets: Sequence[str]) -> Dict[str, List[str]]:
        """Classify one build cycle's emitted assets and keep the result."""

        self.assets = list(assets)
        self.caches = self.classifier.classify(self.assets)
        LOGGER.info(
            "Cached %s of %s assets across buckets %s",
            sum(len(entries) for entries in self.caches.values()),
            len(self.assets),
            list(self.caches),
        )
        return self.caches

    def has_additional_cache(self) -> bool:
        caches = self.options.caches
        return caches != ALL_CACHES and bool(caches.get("additional"))

    def runtime_data(self) -> Dict[str, Any]:
        """Data the host passes to the runtime loader before the build runs."""

        data: Dict[str, Any] = {"hasAdditionalCache": self.has_additional_cache()}
        for name, tool in self.tools.items():
            data[name] = tool.get_config(self)
        return data

    def apply_tools(self) -> Dict[str, Dict[str, Any]]:
        """Run every enabled tool against the classified buckets."""

        if self.assets is None:
            raise RuntimeError("set_assets must be called before apply_tools")
        return {name: tool.apply(self) for name, tool in self.tools.items()}
