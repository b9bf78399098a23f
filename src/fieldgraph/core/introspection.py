"""
Schema introspection helpers.

Unwraps type references down to their named type, classifies named types,
and enumerates the scalar-like fields of an object or interface type.

Usage:
    from fieldgraph.core.introspection import get_scalar_fields

    get_scalar_fields(schema, "Author")  # ["name", "bio"]
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from graphql import (
    GraphQLSchema,
    is_enum_type,
    is_interface_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
    is_scalar_type,
    is_union_type,
)

logger = logging.getLogger(__name__)


class TypeKind(str, Enum):
    """Kind of a named schema type."""
    SCALAR = "scalar"
    ENUM = "enum"
    OBJECT = "object"
    INTERFACE = "interface"
    UNION = "union"
    OTHER = "other"


SCALAR_LIKE_KINDS = frozenset({TypeKind.SCALAR, TypeKind.ENUM})


def unwrap_type(type_: Any) -> Any:
    """
    Strip non-null and list wrappers until the named type remains.

    Examples:
        [Book!]! -> Book
        String! -> String
    """
    if is_non_null_type(type_) or is_list_type(type_):
        return unwrap_type(type_.of_type)
    return type_


def classify_type(type_: Any) -> TypeKind:
    """Classify a named type by its declared schema kind."""
    if is_scalar_type(type_):
        return TypeKind.SCALAR
    if is_enum_type(type_):
        return TypeKind.ENUM
    if is_object_type(type_):
        return TypeKind.OBJECT
    if is_interface_type(type_):
        return TypeKind.INTERFACE
    if is_union_type(type_):
        return TypeKind.UNION
    return TypeKind.OTHER


def is_scalar_like(type_: Any) -> bool:
    """True if the type, once unwrapped, is a scalar or an enum."""
    return classify_type(unwrap_type(type_)) in SCALAR_LIKE_KINDS


def get_scalar_fields(schema: GraphQLSchema, type_name: str) -> list[str]:
    """
    Return the names of the scalar-like fields declared on a type.

    Only the immediate fields of the type are considered; object, interface
    and union fields are skipped rather than traversed. A type that is missing
    from the schema, or that is not an object or interface type, yields an
    empty list.
    """
    named_type = schema.get_type(type_name)
    if named_type is None:
        logger.debug(f"Type '{type_name}' not found in schema")
        return []

    if classify_type(named_type) not in (TypeKind.OBJECT, TypeKind.INTERFACE):
        logger.debug(f"Type '{type_name}' has no fields to expose")
        return []

    return [
        field_name
        for field_name, field_def in named_type.fields.items()
        if is_scalar_like(field_def.type)
    ]
