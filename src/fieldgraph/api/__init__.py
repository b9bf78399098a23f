"""
API module - FastAPI endpoints.
"""

from __future__ import annotations

from .router import get_aggregator, router, set_aggregator
from .app import create_app

__all__ = [
    "router",
    "set_aggregator",
    "get_aggregator",
    "create_app",
]
