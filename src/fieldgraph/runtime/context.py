"""
Request context for settings operations.

Carries the authenticated principal, the database session and the process
config of a request.
"""

from __future__ import annotations


from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..core.permissions import AUTHENTICATED, SUPER_ADMIN

if TYPE_CHECKING:
    from ..config import FieldgraphConfig


@dataclass
class Principal:
    """
    Represents the authenticated user making the request.

    ``id`` of None means the request is anonymous.
    """
    id: Optional[str] = None
    permissions: list[str] = field(default_factory=list)

    @property
    def is_authenticated(self) -> bool:
        return self.id is not None

    def has_permission(self, permission: str) -> bool:
        """
        Check a single permission.

        Anonymous principals hold no permission. SuperAdmin holds every
        permission.
        """
        if not self.is_authenticated:
            return False
        if permission == AUTHENTICATED or SUPER_ADMIN in self.permissions:
            return True
        return permission in self.permissions


@dataclass
class RequestContext:
    """Context passed to services during a single request."""
    principal: Principal
    session: AsyncSession
    config: Optional[FieldgraphConfig] = None
