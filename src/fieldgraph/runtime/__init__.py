"""
Runtime module - request context and settings aggregation.
"""

from __future__ import annotations

from .context import Principal, RequestContext
from .aggregator import SettingsAggregator

__all__ = [
    "Principal",
    "RequestContext",
    "SettingsAggregator",
]
