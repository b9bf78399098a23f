"""
Permission metadata.

Built-in permissions plus any custom permissions registered through config.
The settings API exposes this metadata (minus internal permissions) so that
clients can build role editors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union


@dataclass(frozen=True)
class PermissionDefinition:
    """A single permission."""
    name: str
    description: str = ""
    assignable: bool = True
    internal: bool = False

    def metadata(self) -> list[PermissionDefinition]:
        return [self]


@dataclass(frozen=True)
class CrudPermissionDefinition:
    """
    Shorthand for the Create/Read/Update/Delete permissions of one subject.

    Example:
        CrudPermissionDefinition("Catalog").metadata()
        -> CreateCatalog, ReadCatalog, UpdateCatalog, DeleteCatalog
    """
    subject: str
    description: str = ""

    def metadata(self) -> list[PermissionDefinition]:
        description = self.description or self.subject.lower()
        return [
            PermissionDefinition(
                name=f"{op}{self.subject}",
                description=f"Grants permission to {op.lower()} {description}",
            )
            for op in ("Create", "Read", "Update", "Delete")
        ]


AnyPermissionDefinition = Union[PermissionDefinition, CrudPermissionDefinition]


AUTHENTICATED = "Authenticated"
SUPER_ADMIN = "SuperAdmin"
OWNER = "Owner"
PUBLIC = "Public"
UPDATE_GLOBAL_SETTINGS = "UpdateGlobalSettings"
UPDATE_SETTINGS = "UpdateSettings"


CRUD_SUBJECTS = (
    "Catalog",
    "Settings",
    "Administrator",
    "Asset",
    "Channel",
    "Collection",
    "Country",
    "Customer",
    "CustomerGroup",
    "Facet",
    "Order",
    "PaymentMethod",
    "Product",
    "Promotion",
    "ShippingMethod",
    "Tag",
    "TaxCategory",
    "TaxRate",
    "Seller",
    "StockLocation",
    "System",
    "Zone",
)


DEFAULT_PERMISSIONS: tuple[AnyPermissionDefinition, ...] = (
    PermissionDefinition(
        name=AUTHENTICATED,
        description="Authenticated means simply that the user is logged in",
        assignable=True,
        internal=True,
    ),
    PermissionDefinition(
        name=SUPER_ADMIN,
        description="SuperAdmin has unrestricted access to all operations",
        assignable=False,
        internal=True,
    ),
    PermissionDefinition(
        name=OWNER,
        description="Owner means the user owns this entity, e.g. a Customer's own Order",
        assignable=False,
        internal=True,
    ),
    PermissionDefinition(
        name=PUBLIC,
        description="Public means any unauthenticated user may perform the operation",
        assignable=False,
        internal=True,
    ),
    PermissionDefinition(
        name=UPDATE_GLOBAL_SETTINGS,
        description="Grants permission to update GlobalSettings",
        assignable=True,
    ),
    *(CrudPermissionDefinition(subject) for subject in CRUD_SUBJECTS),
)


def get_all_permissions_metadata(
    custom_permissions: Iterable[AnyPermissionDefinition] = (),
) -> list[PermissionDefinition]:
    """Flatten built-in and custom permissions into a list of definitions."""
    result: list[PermissionDefinition] = []
    for definition in (*DEFAULT_PERMISSIONS, *custom_permissions):
        result.extend(definition.metadata())
    return result
