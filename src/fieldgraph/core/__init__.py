"""
Core module - definitions, introspection and projection.
"""

from __future__ import annotations

from .defs import (
    CUSTOM_FIELD_TYPES,
    CustomFieldDef,
    LocalizedString,
    StringOption,
    entity_name,
)
from .errors import (
    ConfigError,
    FieldgraphError,
    IAMError,
    SchemaError,
)
from .introspection import (
    TypeKind,
    classify_type,
    get_scalar_fields,
    is_scalar_like,
    unwrap_type,
)
from .query_types import (
    ChannelDefaultLanguageError,
    EntityCustomFields,
    ExposedCustomField,
    GlobalSettings,
    OrderProcessState,
    PermissionDefinitionOut,
    ServerConfig,
    UpdateGlobalSettingsInput,
    UpdateGlobalSettingsResult,
)
from .projector import (
    CustomFieldProjector,
    expose_custom_field,
    generate_custom_field_config,
    generate_entity_custom_fields,
)
from .permissions import (
    CrudPermissionDefinition,
    PermissionDefinition,
    get_all_permissions_metadata,
)
from .schema import (
    build_live_schema,
    fetch_remote_sdl,
    get_schema,
    load_live_schema,
    load_sdl_files,
    set_schema,
)

__all__ = [
    # Definitions
    "CUSTOM_FIELD_TYPES",
    "CustomFieldDef",
    "LocalizedString",
    "StringOption",
    "entity_name",
    # Errors
    "FieldgraphError",
    "ConfigError",
    "SchemaError",
    "IAMError",
    # Introspection
    "TypeKind",
    "unwrap_type",
    "classify_type",
    "is_scalar_like",
    "get_scalar_fields",
    # Wire types
    "ExposedCustomField",
    "EntityCustomFields",
    "PermissionDefinitionOut",
    "OrderProcessState",
    "ServerConfig",
    "GlobalSettings",
    "UpdateGlobalSettingsInput",
    "ChannelDefaultLanguageError",
    "UpdateGlobalSettingsResult",
    # Projector
    "CustomFieldProjector",
    "expose_custom_field",
    "generate_entity_custom_fields",
    "generate_custom_field_config",
    # Permissions
    "PermissionDefinition",
    "CrudPermissionDefinition",
    "get_all_permissions_metadata",
    # Schema
    "build_live_schema",
    "load_sdl_files",
    "fetch_remote_sdl",
    "load_live_schema",
    "set_schema",
    "get_schema",
]
