"""Mini README: Cache bucket classification for build output assets.

Structure:
    * AssetPool - ordered, consumable pool of not-yet-assigned assets.
    * CacheClassifier - partitions assets into ``main``/``additional``/
      ``optional`` and normalizes each bucket to public paths.

Buckets are filled in a fixed order and are disjoint: an asset taken by an
earlier bucket, literally or through the ``:rest:`` wildcard, is gone for
every later bucket. Literal selectors that match nothing are reported as a
readable message through the ``warn`` callable (the module logger by
default) and are otherwise ignored.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Sequence

from ..configuration import ALL_CACHES, BUCKET_NAMES, REST_KEY, BucketConfig
from ..logging_utils import get_logger
from ..rewrites import RewriteResolver

LOGGER = get_logger(__name__)

Reporter = Callable[[str], None]


class AssetPool:
    """Remaining assets for a single classification run.

    Backed by an insertion-ordered dict so membership checks and removals
    stay constant time while the wildcard still drains in emit order.
    """

    def __init__(self, assets: Iterable[str]) -> None:
        self._assets: Dict[str, None] = dict.fromkeys(assets)

    def take(self, asset: str) -> bool:
        """Remove ``asset`` if still present; report whether it was."""

        if asset not in self._assets:
            return False
        del self._assets[asset]
        return True

    def drain(self) -> List[str]:
        """Hand over every remaining asset and leave the pool empty."""

        drained = list(self._assets)
        self._assets.clear()
        return drained


MISSING_ASSET_MESSAGE = "Cache asset [{asset}] is not found in output assets"


class CacheClassifier:
    """Sort emitted assets into cache buckets and qualify them with the scope."""

    def __init__(
        self,
        caches: BucketConfig,
        resolver: RewriteResolver,
        *,
        scope: str = "/",
        warn: Optional[Reporter] = None,
    ) -> None:
        self.caches = caches
        self.resolver = resolver
        self.scope = scope
        self.warn = warn or LOGGER.warning

    def normalize(self, assets: Sequence[str]) -> List[str]:
        """Rewrite assets, drop exclusions and prefix the scope."""

        public: List[str] = []
        for asset in assets:
            rewritten = self.resolver.resolve(asset)
            if not rewritten:
                continue
            public.append(self.scope if rewritten == "/" else self.scope + rewritten)
        return public

    def classify(self, assets: Sequence[str]) -> Dict[str, List[str]]:
        """Return bucket name -> public paths for one build's assets."""

        if self.caches == ALL_CACHES:
            return {"main": self.normalize(assets)}

        pool = AssetPool(assets)
        result: Dict[str, List[str]] = {}
        for name in BUCKET_NAMES:
            selectors = self.caches.get(name)
            if selectors is None:
                selectors = [REST_KEY]
            if not selectors:
                continue
            result[name] = self.normalize(self._fill_bucket(name, selectors, pool))

        LOGGER.debug(
            "Classified %s assets into %s",
            len(assets),
            {name: len(entries) for name, entries in result.items()},
        )
        return result

    def _fill_bucket(self, name: str, selectors: Sequence[str], pool: AssetPool) -> List[str]:
        bucket: List[str] = []
        for selector in selectors:
            if selector == REST_KEY:
                bucket.extend(pool.drain())
            elif pool.take(selector):
                bucket.append(selector)
            else:
                LOGGER.debug("Selector '%s' of bucket '%s' matched nothing", selector, name)
                self.warn(MISSING_ASSET_MESSAGE.format(asset=selector))
        return bucket
