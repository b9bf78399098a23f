"""
Channel listing.

This module must not depend on the global settings service.
"""

from __future__ import annotations

import secrets
from typing import TYPE_CHECKING, Optional

from sqlalchemy import select

from .models import ChannelRecord

if TYPE_CHECKING:
    from ..runtime.context import RequestContext


class ChannelService:

    async def find_all(self, ctx: RequestContext) -> list[ChannelRecord]:
        """Return all channels ordered by id."""
        result = await ctx.session.execute(select(ChannelRecord).order_by(ChannelRecord.id))
        return list(result.scalars().all())

    async def create(
        self,
        ctx: RequestContext,
        code: str,
        default_language_code: str,
        available_language_codes: Optional[list[str]] = None,
        token: Optional[str] = None,
    ) -> ChannelRecord:
        channel = ChannelRecord(
            code=code,
            token=token or secrets.token_hex(10),
            default_language_code=default_language_code,
            available_language_codes=available_language_codes or [default_language_code],
        )
        ctx.session.add(channel)
        await ctx.session.flush()
        return channel
