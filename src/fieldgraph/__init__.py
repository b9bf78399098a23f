"""
Fieldgraph - exposes custom field configuration through a GraphQL-typed API.

Custom fields are defined per entity type in config. The settings API projects
them for clients, resolving relation fields against the live schema to find
which fields of the related type are scalar-like, without regenerating the
schema whenever the config changes.

Usage:
    from fieldgraph import FieldgraphConfig, create_app, build_live_schema

    config = load_config("fieldgraph.yaml")
    schema = build_live_schema([Path("schema.graphql").read_text()])
    app = create_app(config, schema)
"""

from __future__ import annotations

__version__ = "0.1.0"

from .api import create_app, router
from .config import FieldgraphConfig, load_config
from .core import (
    ChannelDefaultLanguageError,
    ConfigError,
    CustomFieldDef,
    CustomFieldProjector,
    EntityCustomFields,
    ExposedCustomField,
    FieldgraphError,
    GlobalSettings,
    IAMError,
    SchemaError,
    ServerConfig,
    TypeKind,
    UpdateGlobalSettingsInput,
    build_live_schema,
    classify_type,
    generate_custom_field_config,
    generate_entity_custom_fields,
    get_scalar_fields,
    load_live_schema,
    unwrap_type,
)
from .runtime import Principal, RequestContext, SettingsAggregator
from .service import ChannelService, GlobalSettingsService, OrderService

__all__ = [
    # API
    "router",
    "create_app",
    # Config
    "FieldgraphConfig",
    "load_config",
    # Definitions
    "CustomFieldDef",
    # Errors
    "FieldgraphError",
    "ConfigError",
    "SchemaError",
    "IAMError",
    # Introspection
    "TypeKind",
    "unwrap_type",
    "classify_type",
    "get_scalar_fields",
    # Projection
    "CustomFieldProjector",
    "generate_entity_custom_fields",
    "generate_custom_field_config",
    # Wire types
    "ExposedCustomField",
    "EntityCustomFields",
    "ServerConfig",
    "GlobalSettings",
    "UpdateGlobalSettingsInput",
    "ChannelDefaultLanguageError",
    # Schema
    "build_live_schema",
    "load_live_schema",
    # Runtime
    "Principal",
    "RequestContext",
    "SettingsAggregator",
    # Services
    "GlobalSettingsService",
    "ChannelService",
    "OrderService",
]
