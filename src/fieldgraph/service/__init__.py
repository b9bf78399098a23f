"""
Service module - settings storage, channel listing and order process.

Provides:
- Database utilities (Base, get_session, init_db)
- GlobalSettingsService, ChannelService, OrderService
"""

from __future__ import annotations

from .database import Base, close_db, configure_database, get_engine, get_session, get_session_maker, init_db
from .models import ChannelRecord, GlobalSettingsRecord
from .channel import ChannelService
from .global_settings import GlobalSettingsService
from .order import DEFAULT_ORDER_PROCESS, OrderService

__all__ = [
    # Database
    "Base",
    "get_session",
    "get_session_maker",
    "get_engine",
    "configure_database",
    "init_db",
    "close_db",
    # Models
    "GlobalSettingsRecord",
    "ChannelRecord",
    # Services
    "GlobalSettingsService",
    "ChannelService",
    "OrderService",
    "DEFAULT_ORDER_PROCESS",
]
