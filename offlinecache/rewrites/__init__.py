"""Mini README: Asset rewrite rules package.

Re-exports the resolver and its rule variants from ``resolver``.
"""

from .resolver import FunctionRule, MapRule, RewriteResolver, default_rewrite, make_rule

__all__ = ["FunctionRule", "MapRule", "RewriteResolver", "default_rewrite", "make_rule"]
