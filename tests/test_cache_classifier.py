"""Mini README: Tests for cache bucket classification and normalization.

Structure:
    * bucket ordering, wildcard consumption and skipped buckets.
    * missing-selector warnings through the injected reporter and the logger.
    * normalization of rewritten paths against the scope.
"""

from __future__ import annotations

import logging
from typing import List

import pytest

from offlinecache.caches import MISSING_ASSET_MESSAGE, AssetPool, CacheClassifier
from offlinecache.rewrites import MapRule, RewriteResolver, make_rule

ASSETS = ["a.js", "b.js", "c.js", "d.js"]


def _identity_resolver() -> RewriteResolver:
    return RewriteResolver(MapRule({}), entry_prefix="__offline_")


def _raw_classifier(caches, warnings: List[str]) -> CacheClassifier:
    """Classifier with an empty scope so output equals the raw asset names."""

    return CacheClassifier(caches, _identity_resolver(), scope="", warn=warnings.append)


def test_all_sentinel_yields_single_main_bucket_in_order() -> None:
    result = _raw_classifier("all", []).classify(ASSETS)
    assert result == {"main": ASSETS}


def test_literal_and_wildcard_selectors_partition_assets() -> None:
    classifier = CacheClassifier(
        {"main": ["a.js"], "additional": ["b.js", ":rest:"], "optional": []},
        RewriteResolver(make_rule(None), entry_prefix="__offline_"),
        scope="/",
    )

    result = classifier.classify(ASSETS)

    assert result == {"main": ["/a.js"], "additional": ["/b.js", "/c.js", "/d.js"]}
    assert "optional" not in result


def test_literal_lists_cover_every_asset_exactly_once() -> None:
    caches = {"main": ["c.js", "a.js"], "additional": ["d.js"], "optional": ["b.js"]}
    result = _raw_classifier(caches, []).classify(ASSETS)

    flattened = [asset for entries in result.values() for asset in entries]
    assert sorted(flattened) == sorted(ASSETS)
    assert len(flattened) == len(set(flattened))
    assert result["main"] == ["c.js", "a.js"]


def test_absent_bucket_defaults_to_wildcard() -> None:
    result = _raw_classifier({"main": ["a.js"]}, []).classify(ASSETS)

    assert result == {"main": ["a.js"], "additional": ["b.js", "c.js", "d.js"], "optional": []}


def test_bucket_with_none_selectors_defaults_to_wildcard() -> None:
    result = _raw_classifier({"main": None, "additional": [], "optional": []}, []).classify(ASSETS)
    assert result == {"main": ASSETS}


def test_second_wildcard_never_reintroduces_consumed_assets() -> None:
    caches = {"main": [":rest:", ":rest:"], "additional": [":rest:"], "optional": [":rest:"]}
    result = _raw_classifier(caches, []).classify(ASSETS)

    assert result == {"main": ASSETS, "additional": [], "optional": []}


def test_selectors_after_wildcard_see_empty_pool() -> None:
    warnings: List[str] = []
    result = _raw_classifier({"main": [":rest:", "a.js"]}, warnings).classify(ASSETS)

    assert result["main"] == ASSETS
    assert warnings == [MISSING_ASSET_MESSAGE.format(asset="a.js")]


def test_missing_selector_warns_and_classification_continues() -> None:
    warnings: List[str] = []
    caches = {"main": ["missing.js", "a.js"], "additional": ["b.js"], "optional": [":rest:"]}

    result = _raw_classifier(caches, warnings).classify(ASSETS)

    assert warnings == ["Cache asset [missing.js] is not found in output assets"]
    assert result == {"main": ["a.js"], "additional": ["b.js"], "optional": ["c.js", "d.js"]}


def test_asset_taken_by_earlier_bucket_is_reported_missing_later() -> None:
    warnings: List[str] = []
    caches = {"main": ["a.js"], "additional": ["a.js"], "optional": []}

    result = _raw_classifier(caches, warnings).classify(ASSETS)

    assert result == {"main": ["a.js"], "additional": []}
    assert warnings == [MISSING_ASSET_MESSAGE.format(asset="a.js")]


def test_missing_selector_logs_warning_by_default(caplog: pytest.LogCaptureFixture) -> None:
    classifier = CacheClassifier({"main": ["ghost.css"]}, _identity_resolver(), scope="/")

    with caplog.at_level(logging.WARNING, logger="offlinecache.caches.classifier"):
        classifier.classify(ASSETS)

    assert "Cache asset [ghost.css] is not found in output assets" in caplog.text


def test_classify_does_not_mutate_host_list() -> None:
    assets = list(ASSETS)
    _raw_classifier({"main": ["a.js"]}, []).classify(assets)
    assert assets == ASSETS


def test_normalize_collapses_root_to_scope() -> None:
    classifier = CacheClassifier(
        "all", RewriteResolver(make_rule(None), entry_prefix="__offline_"), scope="/app/"
    )
    assert classifier.normalize(["index.html"]) == ["/app/"]
    assert classifier.normalize(["docs/index.html", "main.js"]) == ["/app/docs/", "/app/main.js"]


def test_normalize_drops_excluded_assets() -> None:
    resolver = RewriteResolver(MapRule({"stats.json": ""}), entry_prefix="__offline_")
    classifier = CacheClassifier("all", resolver, scope="/")

    result = classifier.normalize(["stats.json", "__offline_entry.js", "app.js"])

    assert result == ["/app.js"]
    for asset in ("stats.json", "__offline_entry.js"):
        assert resolver.resolve(asset) == ""


def test_entry_prefixed_asset_is_excluded_from_every_bucket() -> None:
    classifier = CacheClassifier(
        {"main": ["__offline_entry.js", "a.js"], "additional": [":rest:"]},
        RewriteResolver(make_rule(lambda asset: asset), entry_prefix="__offline_"),
        scope="/",
    )

    result = classifier.classify(["a.js", "__offline_entry.js", "b.js"])

    assert result == {"main": ["/a.js"], "additional": ["/b.js"], "optional": []}


def test_asset_pool_take_and_drain() -> None:
    pool = AssetPool(["x", "y", "z"])
    assert pool.take("y") is True
    assert pool.take("y") is False
    assert pool.drain() == ["x", "z"]
    assert pool.drain() == []
    assert pool.take("x") is False
