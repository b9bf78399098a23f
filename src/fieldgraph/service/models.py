"""
ORM models for settings storage and channel listing.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .database import Base


class GlobalSettingsRecord(Base):
    """Singleton row holding the global settings."""
    __tablename__ = "global_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    available_languages: Mapped[list[str]] = mapped_column(JSON, default=list)
    track_inventory: Mapped[bool] = mapped_column(Boolean, default=True)
    out_of_stock_threshold: Mapped[int] = mapped_column(Integer, default=0)
    custom_fields: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)


class ChannelRecord(Base):
    __tablename__ = "channel"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    code: Mapped[str] = mapped_column(String(255), unique=True)
    token: Mapped[str] = mapped_column(String(255), unique=True)
    default_language_code: Mapped[str] = mapped_column(String(16))
    available_language_codes: Mapped[list[str]] = mapped_column(JSON, default=list)
