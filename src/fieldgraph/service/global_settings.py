"""
Global settings storage.

This module must not depend on the channel service; checks spanning both live
in the settings aggregator.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import select

from ..core.query_types import UpdateGlobalSettingsInput
from .models import GlobalSettingsRecord

if TYPE_CHECKING:
    from ..runtime.context import RequestContext

logger = logging.getLogger(__name__)


class GlobalSettingsService:
    """Reads and writes the singleton global settings row."""

    def __init__(self, default_language_code: str = "en"):
        self.default_language_code = default_language_code

    async def get_settings(self, ctx: RequestContext) -> GlobalSettingsRecord:
        """
        Return the global settings, creating them on first access.

        New settings make the default language of the request config (or of
        this service, when the context carries no config) available.
        """
        result = await ctx.session.execute(select(GlobalSettingsRecord).limit(1))
        settings = result.scalar_one_or_none()
        if settings is None:
            default_language_code = (
                ctx.config.default_language_code if ctx.config is not None else self.default_language_code
            )
            settings = GlobalSettingsRecord(
                available_languages=[default_language_code],
                track_inventory=True,
                out_of_stock_threshold=0,
                custom_fields={},
            )
            ctx.session.add(settings)
            await ctx.session.flush()
            logger.info("Created default global settings")
        return settings

    async def update_settings(
        self,
        ctx: RequestContext,
        input: UpdateGlobalSettingsInput,
    ) -> GlobalSettingsRecord:
        """Apply the provided fields of the input. Unset fields are left unchanged."""
        settings = await self.get_settings(ctx)

        if input.available_languages is not None:
            settings.available_languages = list(input.available_languages)
        if input.track_inventory is not None:
            settings.track_inventory = input.track_inventory
        if input.out_of_stock_threshold is not None:
            settings.out_of_stock_threshold = input.out_of_stock_threshold
        if input.custom_fields is not None:
            settings.custom_fields = {**(settings.custom_fields or {}), **input.custom_fields}

        await ctx.session.flush()
        return settings
