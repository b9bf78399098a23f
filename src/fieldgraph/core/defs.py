"""
Core dataclass definitions for custom fields.

These describe the internal, authoritative custom field configuration that is
attached to entity types at process configuration time.
"""

from __future__ import annotations


from dataclasses import dataclass, field
from typing import Any, Optional


CUSTOM_FIELD_TYPES = frozenset({
    "string",
    "localeString",
    "text",
    "localeText",
    "int",
    "float",
    "boolean",
    "datetime",
    "relation",
})


@dataclass
class LocalizedString:
    """A label or description in a single language."""
    language_code: str
    value: str


@dataclass
class StringOption:
    """Allowed value for a string custom field rendered as a select."""
    value: str
    label: list[LocalizedString] = field(default_factory=list)


@dataclass
class CustomFieldDef:
    """
    Definition of a custom field attached to an entity type.

    For relation fields, ``entity`` is the relation target. It can be a plain
    entity name or any object carrying a name, such as an ORM model class.
    ``graphql_type`` names the schema type to introspect when it differs from
    the target's own name.
    """
    name: str
    type: str  # one of CUSTOM_FIELD_TYPES
    internal: bool = False
    entity: Any = None
    graphql_type: Optional[str] = None
    nullable: bool = True
    readonly: bool = False
    public: bool = True
    unique: bool = False
    eager: bool = False
    default_value: Any = None
    label: list[LocalizedString] = field(default_factory=list)
    description: list[LocalizedString] = field(default_factory=list)
    options: list[StringOption] = field(default_factory=list)
    requires_permission: list[str] = field(default_factory=list)
    pattern: Optional[str] = None
    length: Optional[int] = None
    min: Any = None
    max: Any = None
    step: Optional[float] = None
    ui: Optional[dict[str, Any]] = None
    # Multiplicity. Legacy configs may carry 0/1 or other truthy values here.
    list: Any = False

    @property
    def is_relation(self) -> bool:
        return self.type == "relation"


def entity_name(target: Any) -> str:
    """
    Flatten a relation target to its entity name.

    Examples:
        "Supplier" -> "Supplier"
        Supplier (class) -> "Supplier"
    """
    if isinstance(target, str):
        return target
    name = getattr(target, "__name__", None) or getattr(target, "name", None)
    if not isinstance(name, str):
        raise TypeError(f"Cannot determine entity name of relation target: {target!r}")
    return name
