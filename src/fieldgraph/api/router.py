"""
FastAPI router for the settings API.

Endpoints:
- GET  /settings - Global settings including the public server config
- POST /settings - Update global settings

The update endpoint returns a discriminated result: either the updated
settings (``__typename: GlobalSettings``) or an error result such as
``ChannelDefaultLanguageError``. Error results are normal 200 responses.
"""

from __future__ import annotations


from typing import Any

from fastapi import APIRouter, Depends
from graphql import GraphQLSchema
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.permissions import AUTHENTICATED, UPDATE_GLOBAL_SETTINGS, UPDATE_SETTINGS
from ..core.query_types import ChannelDefaultLanguageError, UpdateGlobalSettingsInput
from ..core.schema import get_schema
from ..iam.guard import require_permissions
from ..runtime.aggregator import SettingsAggregator
from ..runtime.context import Principal, RequestContext
from ..service.database import get_session


# Create router
router = APIRouter()

# Global instance (set by create_app)
_aggregator: SettingsAggregator | None = None


def set_aggregator(aggregator: SettingsAggregator):
    """Set the settings aggregator for the API."""
    global _aggregator
    _aggregator = aggregator


def get_aggregator() -> SettingsAggregator:
    """Get the settings aggregator."""
    if _aggregator is None:
        raise RuntimeError("Aggregator not initialized. Call set_aggregator() first.")
    return _aggregator


@router.get("/settings")
async def global_settings(
    principal: Principal = Depends(require_permissions(AUTHENTICATED)),
    session: AsyncSession = Depends(get_session),
    schema: GraphQLSchema = Depends(get_schema),
    aggregator: SettingsAggregator = Depends(get_aggregator),
) -> dict[str, Any]:
    """
    Return the global settings.

    ``serverConfig`` is derived on every request from the config and the live
    schema, so relation fields always reflect the current schema.
    """
    ctx = RequestContext(principal=principal, session=session, config=aggregator.config)
    async with session.begin():
        record = await aggregator.get_global_settings(ctx)
        settings = aggregator.to_global_settings(record, schema)
    return {"globalSettings": settings.to_wire()}


@router.post("/settings")
async def update_global_settings(
    input: UpdateGlobalSettingsInput,
    principal: Principal = Depends(require_permissions(UPDATE_SETTINGS, UPDATE_GLOBAL_SETTINGS)),
    session: AsyncSession = Depends(get_session),
    schema: GraphQLSchema = Depends(get_schema),
    aggregator: SettingsAggregator = Depends(get_aggregator),
) -> dict[str, Any]:
    """
    Update global settings.

    Example request:
        {"availableLanguages": ["en", "de"], "trackInventory": false}

    Example error result:
        {
            "updateGlobalSettings": {
                "__typename": "ChannelDefaultLanguageError",
                "errorCode": "CHANNEL_DEFAULT_LANGUAGE_ERROR",
                "message": "...",
                "language": "fr",
                "channelCode": "eu-store"
            }
        }
    """
    ctx = RequestContext(principal=principal, session=session, config=aggregator.config)
    async with session.begin():
        result = await aggregator.update_global_settings(ctx, input)
        if isinstance(result, ChannelDefaultLanguageError):
            return {"updateGlobalSettings": result.to_wire()}
        settings = aggregator.to_global_settings(result, schema)
    return {"updateGlobalSettings": settings.to_wire()}
