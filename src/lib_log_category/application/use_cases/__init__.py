"""Application use cases."""

from __future__ import annotations

from .resolve_levels import FlagKind, feature_id, resolve_levels

__all__ = ["FlagKind", "feature_id", "resolve_levels"]
