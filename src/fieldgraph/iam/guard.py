"""
Capability guards for API endpoints.

Authentication itself is outside this package: the principal is read from
headers set by whatever sits in front of the API.

Usage:
    @router.post("/settings")
    async def update(principal: Principal = Depends(require_permissions("UpdateSettings"))):
        ...
"""

from __future__ import annotations

from typing import Callable, Optional

from fastapi import Depends, Header

from ..core.errors import IAMError
from ..runtime.context import Principal


async def get_principal(
    x_user_id: Optional[str] = Header(default=None),
    x_permissions: Optional[str] = Header(default=None),
) -> Principal:
    """
    Build the principal from request headers.

    X-User-Id: identifier of the authenticated user (absent = anonymous)
    X-Permissions: comma-separated permission names
    """
    permissions = [p.strip() for p in (x_permissions or "").split(",") if p.strip()]
    return Principal(id=x_user_id, permissions=permissions)


def check_permissions(principal: Principal, permissions: tuple[str, ...]):
    """Raise IAMError unless the principal holds at least one of the permissions."""
    if not any(principal.has_permission(p) for p in permissions):
        raise IAMError(f"Requires one of: {', '.join(permissions)}")


def require_permissions(*permissions: str) -> Callable:
    """FastAPI dependency factory: allow the request if any permission matches."""
    async def dependency(principal: Principal = Depends(get_principal)) -> Principal:
        check_permissions(principal, permissions)
        return principal

    return dependency
