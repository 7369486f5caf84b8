"""Mini README: Cache bucket classification package."""

from .classifier import MISSING_ASSET_MESSAGE, AssetPool, CacheClassifier

__all__ = ["AssetPool", "CacheClassifier", "MISSING_ASSET_MESSAGE"]
