"""Mini README: Utility helpers for the offline cache engine."""

from .plugin_loader import load_entry_point_plugins

__all__ = ["load_entry_point_plugins"]
