"""Mini README: Tests for the rewrite resolver and its rule variants.

Covers the entry-prefix exclusion, function and mapping rule sets, and the
default rule that serves ``index.html`` files under their directory.
"""

from __future__ import annotations

import pytest

from offlinecache.rewrites import FunctionRule, MapRule, RewriteResolver, default_rewrite, make_rule


@pytest.mark.parametrize(
    ("asset", "expected"),
    [
        ("index.html", "/"),
        ("index.htm", "/"),
        ("docs/index.html", "docs/"),
        ("main.js", "main.js"),
        ("index.html.map", "index.html.map"),
    ],
)
def test_default_rewrite_collapses_index_files(asset: str, expected: str) -> None:
    assert default_rewrite(asset) == expected


def test_make_rule_picks_variant_once() -> None:
    assert isinstance(make_rule(None), FunctionRule)
    assert isinstance(make_rule(lambda asset: asset), FunctionRule)
    assert isinstance(make_rule({"a.js": "b.js"}), MapRule)


def test_entry_prefixed_assets_never_reach_the_rule() -> None:
    """Injected entry modules are excluded before user rules run."""

    seen = []

    def rule(asset: str) -> str:
        seen.append(asset)
        return asset

    resolver = RewriteResolver(FunctionRule(rule), entry_prefix="__offline_")
    assert resolver.resolve("__offline_entry.js") == ""
    assert resolver.resolve("app.js") == "app.js"
    assert seen == ["app.js"]


def test_function_rule_falsy_result_excludes() -> None:
    resolver = RewriteResolver(FunctionRule(lambda asset: None), entry_prefix="__offline_")
    assert resolver.resolve("app.js") == ""


def test_map_rule_passes_unmapped_assets_through() -> None:
    resolver = RewriteResolver(
        MapRule({"index.html": "/", "stats.json": ""}), entry_prefix="__offline_"
    )
    assert resolver.resolve("index.html") == "/"
    assert resolver.resolve("stats.json") == ""
    assert resolver.resolve("app.js") == "app.js"
    assert resolver.resolve("__offline_sw.js") == ""


def test_resolve_is_repeatable() -> None:
    resolver = RewriteResolver(make_rule(None), entry_prefix="__offline_")
    assert [resolver("docs/index.html") for _ in range(3)] == ["docs/"] * 3
