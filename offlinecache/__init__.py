"""Mini README: Offline cache classification engine.

The package turns the flat list of files a build emitted into ordered cache
buckets (``main``, ``additional``, ``optional``) and rewrites every entry to
the public, scope-qualified URL that manifest writers expect. ``OfflinePlugin``
is the facade hosts talk to; the classifier and resolver are importable on
their own for tooling that only needs the decision logic.
"""

from .logging_utils import get_logger
from .plugin import ConfigurationError, OfflinePlugin

__all__ = ["ConfigurationError", "OfflinePlugin", "get_logger"]
