"""
Settings aggregator - composes the public server config and coordinates
global settings updates.

Usage:
    aggregator = SettingsAggregator.from_config(config)

    server_config = aggregator.build_server_config(schema)
    result = await aggregator.update_global_settings(ctx, input)
"""

from __future__ import annotations

import logging
from typing import Union

from graphql import GraphQLSchema

from ..config import FieldgraphConfig
from ..core.permissions import get_all_permissions_metadata
from ..core.projector import CustomFieldProjector
from ..core.query_types import (
    ChannelDefaultLanguageError,
    GlobalSettings,
    PermissionDefinitionOut,
    ServerConfig,
    UpdateGlobalSettingsInput,
)
from ..service.channel import ChannelService
from ..service.global_settings import GlobalSettingsService
from ..service.models import GlobalSettingsRecord
from ..service.order import OrderService
from .context import RequestContext

logger = logging.getLogger(__name__)


DEFAULT_MONEY_PRECISION = 2


class SettingsAggregator:
    """
    Combines the custom field projection with other read-only facts, and
    validates settings updates that span the channel and settings services.

    The language check lives here rather than in GlobalSettingsService so that
    the channel and settings services never depend on each other.
    """

    def __init__(
        self,
        config: FieldgraphConfig,
        global_settings_service: GlobalSettingsService,
        channel_service: ChannelService,
        order_service: OrderService,
    ):
        self.config = config
        self.global_settings_service = global_settings_service
        self.channel_service = channel_service
        self.order_service = order_service
        self.projector = CustomFieldProjector(config.custom_fields)

    @classmethod
    def from_config(cls, config: FieldgraphConfig) -> SettingsAggregator:
        """Create an aggregator wired to the default services."""
        return cls(
            config=config,
            global_settings_service=GlobalSettingsService(config.default_language_code),
            channel_service=ChannelService(),
            order_service=OrderService(config.order_process),
        )

    def build_server_config(self, schema: GraphQLSchema) -> ServerConfig:
        """Expose the subset of the config which may be of use to clients."""
        permissions = [
            PermissionDefinitionOut(name=p.name, description=p.description, assignable=p.assignable)
            for p in get_all_permissions_metadata(self.config.auth.custom_permissions)
            if not p.internal
        ]
        precision = self.config.entity.money_strategy.precision
        return ServerConfig(
            custom_field_config=self.projector.project_legacy(schema),
            entity_custom_fields=self.projector.project(schema),
            permissions=permissions,
            permitted_asset_types=list(self.config.assets.permitted_file_types),
            order_process=self.order_service.get_order_process_states(),
            money_strategy_precision=DEFAULT_MONEY_PRECISION if precision is None else precision,
        )

    def to_global_settings(
        self,
        record: GlobalSettingsRecord,
        schema: GraphQLSchema,
    ) -> GlobalSettings:
        return GlobalSettings(
            id=record.id,
            available_languages=list(record.available_languages or []),
            track_inventory=record.track_inventory,
            out_of_stock_threshold=record.out_of_stock_threshold,
            custom_fields=dict(record.custom_fields or {}),
            server_config=self.build_server_config(schema),
        )

    async def get_global_settings(self, ctx: RequestContext) -> GlobalSettingsRecord:
        return await self.global_settings_service.get_settings(ctx)

    async def update_global_settings(
        self,
        ctx: RequestContext,
        input: UpdateGlobalSettingsInput,
    ) -> Union[GlobalSettingsRecord, ChannelDefaultLanguageError]:
        """
        Update global settings.

        If ``available_languages`` is set, every channel's default language
        must remain available. Otherwise nothing is written and an error result
        naming the offending languages and channels is returned.
        """
        available_languages = input.available_languages
        if available_languages is not None:
            channels = await self.channel_service.find_all(ctx)
            unavailable_defaults = [
                c for c in channels if c.default_language_code not in available_languages
            ]
            if unavailable_defaults:
                logger.info(
                    "Rejected settings update: default language of channel(s) "
                    f"{[c.code for c in unavailable_defaults]} would become unavailable"
                )
                return ChannelDefaultLanguageError.for_channels(
                    languages=[c.default_language_code for c in unavailable_defaults],
                    channel_codes=[c.code for c in unavailable_defaults],
                )
        return await self.global_settings_service.update_settings(ctx, input)
