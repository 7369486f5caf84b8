"""Mini README: Rewrite resolver mapping raw asset paths to public paths.

Structure:
    * default_rewrite - built-in rule collapsing ``index.html`` to its folder.
    * FunctionRule / MapRule - the two shapes a rule set can take.
    * RewriteResolver - applies the entry-prefix exclusion, then the rule.

A resolver returns an empty string when an asset must be left out of every
cache. The rule shape is chosen once, when the resolver is built, so
``resolve`` never inspects configuration types on the hot path.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Union

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

_INDEX_PATTERN = re.compile(r"^(.*?)index\.html?$", re.DOTALL)


def default_rewrite(asset: str) -> str:
    """Serve ``dir/index.html`` as ``dir/`` and a top-level index as ``/``."""

    match = _INDEX_PATTERN.match(asset)
    if not match:
        return asset
    return match.group(1) or "/"


@dataclass(frozen=True)
class FunctionRule:
    """Rule set backed by a callable; its result is used verbatim."""

    function: Callable[[str], Optional[str]]

    def apply(self, asset: str) -> str:
        return self.function(asset) or ""


@dataclass(frozen=True)
class MapRule:
    """Rule set backed by a literal mapping; unmapped assets pass through."""

    mapping: Mapping[str, Optional[str]]

    def apply(self, asset: str) -> str:
        if asset not in self.mapping:
            return asset
        return self.mapping[asset] or ""


RewriteRule = Union[FunctionRule, MapRule]


def make_rule(
    rewrites: Optional[Union[Mapping[str, Optional[str]], Callable[[str], Optional[str]]]],
) -> RewriteRule:
    """Select the rule variant for a configured rewrite value."""

    if rewrites is None:
        return FunctionRule(default_rewrite)
    if callable(rewrites):
        return FunctionRule(rewrites)
    return MapRule(dict(rewrites))


class RewriteResolver:
    """Resolve raw asset paths to public relative paths, or ``""`` to exclude."""

    def __init__(self, rule: RewriteRule, *, entry_prefix: str) -> None:
        self.rule = rule
        self.entry_prefix = entry_prefix
        LOGGER.debug(
            "RewriteResolver using %s with entry prefix '%s'", type(rule).__name__, entry_prefix
        )

    def resolve(self, asset: str) -> str:
        if self.entry_prefix and asset.startswith(self.entry_prefix):
            return ""
        return self.rule.apply(asset)

    __call__ = resolve
