"""
IAM (Identity and Access Management) module.
"""

from __future__ import annotations

from .guard import check_permissions, get_principal, require_permissions

__all__ = [
    "get_principal",
    "check_permissions",
    "require_permissions",
]
