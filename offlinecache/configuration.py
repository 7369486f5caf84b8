"""Mini README: Configuration models and helpers for the offline cache engine.

Structure:
    * OfflineCacheSettings - environment-aware defaults (``OFFLINE_CACHE_*``).
    * get_settings - cached accessor for the settings object.
    * ServiceWorkerOptions / AppCacheOptions - per-tool option models.
    * PluginOptions - validated option set handed to ``OfflinePlugin``.
    * deep_merge / build_options - layer user overrides onto the defaults.

Usage:
    Hosts pass a plain mapping of overrides to ``build_options`` (or straight
    to ``OfflinePlugin``). Nested mappings are merged key by key onto the
    defaults, so ``{"service_worker": {"output": "worker.js"}}`` keeps the
    default entry module. Validation happens once, at construction.
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, Callable, Dict, Iterable, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, Field, validator
from pydantic_settings import BaseSettings

from .logging_utils import get_logger

LOGGER = get_logger(__name__)

ALL_CACHES = "all"
REST_KEY = ":rest:"
BUCKET_NAMES = ("main", "additional", "optional")
DEFAULT_ENTRY_PREFIX = "__offline_"

BucketSelectors = Dict[str, Optional[List[str]]]
BucketConfig = Union[Literal["all"], BucketSelectors]
RewriteFunction = Callable[[str], Optional[str]]
RewriteMap = Dict[str, Optional[str]]


class OfflineCacheSettings(BaseSettings):
    """Process-wide defaults, overridable through environment variables."""

    scope: str = Field("/", description="Public URL prefix for every cached asset.")
    caches: str = Field(
        ALL_CACHES,
        description="Either 'all' or a JSON object mapping bucket names to selector lists.",
    )
    entry_prefix: str = Field(
        DEFAULT_ENTRY_PREFIX,
        description="Reserved prefix of injected entry modules that are never cached.",
    )
    version: Optional[str] = Field(None, description="Cache version label passed to tools.")
    service_worker_output: str = Field("sw.js", description="Emitted service worker file.")
    service_worker_entry: str = Field("sw-entry.js", description="Service worker entry module.")
    appcache_directory: str = Field("appcache/", description="Output directory for appcache.")
    appcache_network: str = Field("*", description="NETWORK section of the appcache manifest.")
    enable_service_worker: bool = True
    enable_appcache: bool = True
    log_level: str = Field("INFO", description="Root logger level used by the CLI.")

    class Config:
        env_prefix = "OFFLINE_CACHE_"
        env_file = ".env"
        case_sensitive = False

    def bucket_config(self) -> Union[str, Dict[str, Any]]:
        """Decode the ``caches`` setting into the sentinel or a selector mapping."""

        if self.caches.strip() == ALL_CACHES:
            return ALL_CACHES
        try:
            decoded = json.loads(self.caches)
        except json.JSONDecodeError as exc:
            raise ValueError(f"OFFLINE_CACHE_CACHES is neither 'all' nor JSON: {exc}") from exc
        if not isinstance(decoded, dict):
            raise ValueError("OFFLINE_CACHE_CACHES must decode to a JSON object")
        return decoded


@lru_cache()
def get_settings() -> OfflineCacheSettings:
    """Return cached settings shared across the process."""

    return OfflineCacheSettings()


class ServiceWorkerOptions(BaseModel):
    """Options for the service worker tool."""

    output: str = "sw.js"
    entry: str = "sw-entry.js"


class AppCacheOptions(BaseModel):
    """Options for the appcache tool."""

    directory: str = "appcache/"
    network: str = "*"


class PluginOptions(BaseModel):
    """Validated configuration for one ``OfflinePlugin`` instance."""

    caches: BucketConfig = ALL_CACHES
    scope: str = "/"
    version: Optional[str] = None
    entry_prefix: str = DEFAULT_ENTRY_PREFIX
    rewrites: Optional[Union[RewriteMap, RewriteFunction]] = None
    service_worker: Optional[ServiceWorkerOptions] = Field(default_factory=ServiceWorkerOptions)
    app_cache: Optional[AppCacheOptions] = Field(default_factory=AppCacheOptions)
    tools: Dict[str, Optional[Dict[str, Any]]] = Field(
        default_factory=dict,
        description="Option sections for additional registered cache tools, keyed by tool name.",
    )

    class Config:
        extra = "forbid"

    @validator("scope")
    def _normalise_scope(cls, value: str) -> str:
        """Scopes always end with exactly one slash."""

        return value.rstrip("/") + "/"

    @validator("version", pre=True)
    def _stringify_version(cls, value: Any) -> Optional[str]:
        return None if value is None else str(value)

    @validator("service_worker", "app_cache", pre=True)
    def _disable_tool(cls, value: Any) -> Any:
        """``False`` switches a tool off, mirroring ``None``."""

        return None if value is False else value

    @validator("tools", pre=True)
    def _disable_extra_tools(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return value
        return {name: None if section is False else section for name, section in value.items()}

    @validator("caches")
    def _drop_unknown_buckets(cls, value: BucketConfig) -> BucketConfig:
        if value == ALL_CACHES:
            return value
        unknown = sorted(set(value) - set(BUCKET_NAMES))
        if unknown:
            LOGGER.warning("Ignoring unknown cache buckets: %s", ", ".join(unknown))
        return {name: value[name] for name in BUCKET_NAMES if name in value}


def default_options(settings: Optional[OfflineCacheSettings] = None) -> Dict[str, Any]:
    """Build the baseline option mapping from environment settings."""

    settings = settings or get_settings()
    return {
        "caches": settings.bucket_config(),
        "scope": settings.scope,
        "version": settings.version,
        "entry_prefix": settings.entry_prefix,
        "rewrites": None,
        "service_worker": (
            {"output": settings.service_worker_output, "entry": settings.service_worker_entry}
            if settings.enable_service_worker
            else None
        ),
        "app_cache": (
            {"directory": settings.appcache_directory, "network": settings.appcache_network}
            if settings.enable_appcache
            else None
        ),
    }


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` onto ``base``; nested mappings merge, other values replace."""

    merged: Dict[str, Any] = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def build_options(
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    settings: Optional[OfflineCacheSettings] = None,
    tool_names: Iterable[str] = (),
) -> PluginOptions:
    """Return validated plugin options with ``overrides`` layered on the defaults.

    Top-level keys naming a registered tool in ``tool_names`` are moved into the
    ``tools`` section. A ``caches`` override replaces the default selector
    mapping as a whole, so buckets it leaves out fall back to the wildcard.
    """

    overrides = dict(overrides or {})
    known_tools = set(tool_names)
    extra_tools = {
        name: overrides.pop(name)
        for name in list(overrides)
        if name in known_tools and name not in PluginOptions.model_fields
    }
    if extra_tools:
        overrides["tools"] = deep_merge(overrides.get("tools") or {}, extra_tools)

    merged = deep_merge(default_options(settings), overrides)
    if "caches" in overrides:
        merged["caches"] = overrides["caches"]
    options = PluginOptions(**merged)
    LOGGER.debug(
        "Resolved plugin options scope=%s caches=%s tools=%s",
        options.scope,
        options.caches if options.caches == ALL_CACHES else sorted(options.caches),
        [name for name in ("service_worker", "app_cache") if getattr(options, name) is not None]
        + [name for name, section in options.tools.items() if section is not None],
    )
    return options
