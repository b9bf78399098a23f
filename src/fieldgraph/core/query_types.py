"""
Pydantic models for the settings API.

These define the client-facing shapes: exposed custom field config, server
config, global settings, the settings update input and its error results.
All models serialize with camelCase aliases.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .utils import to_camel_case


class WireModel(BaseModel):
    """Base for models exchanged with clients (camelCase on the wire)."""
    model_config = ConfigDict(alias_generator=to_camel_case, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class FrozenWireModel(WireModel):
    """Immutable wire model for derived, read-only values."""
    model_config = ConfigDict(alias_generator=to_camel_case, populate_by_name=True, frozen=True)


# --- Server config ---

class LocalizedStringOut(FrozenWireModel):
    language_code: str
    value: str


class StringOptionOut(FrozenWireModel):
    value: str
    label: List[LocalizedStringOut] = Field(default_factory=list)


class ExposedCustomField(FrozenWireModel):
    """
    Client-safe projection of a custom field definition.

    ``entity`` and ``scalar_fields`` are only set for relation fields.
    """
    name: str
    type: str
    is_list: bool = Field(False, alias="list")
    nullable: Optional[bool] = None
    readonly: Optional[bool] = None
    public: Optional[bool] = None
    unique: Optional[bool] = None
    eager: Optional[bool] = None
    default_value: Any = None
    label: Optional[List[LocalizedStringOut]] = None
    description: Optional[List[LocalizedStringOut]] = None
    options: Optional[List[StringOptionOut]] = None
    requires_permission: Optional[List[str]] = None
    pattern: Optional[str] = None
    length: Optional[int] = None
    min: Any = None
    max: Any = None
    step: Optional[float] = None
    ui: Optional[Dict[str, Any]] = None
    entity: Optional[str] = None
    scalar_fields: Optional[List[str]] = None


class EntityCustomFields(FrozenWireModel):
    """Custom fields exposed for a single entity type."""
    entity_name: str
    custom_fields: List[ExposedCustomField]


class PermissionDefinitionOut(FrozenWireModel):
    name: str
    description: str
    assignable: bool


class OrderProcessState(FrozenWireModel):
    name: str
    to: List[str]


class ServerConfig(FrozenWireModel):
    """Subset of the server configuration which may be of use to clients."""
    custom_field_config: Dict[str, List[ExposedCustomField]]
    entity_custom_fields: List[EntityCustomFields]
    permissions: List[PermissionDefinitionOut]
    permitted_asset_types: List[str]
    order_process: List[OrderProcessState]
    money_strategy_precision: int


# --- Global settings ---

class GlobalSettings(WireModel):
    typename: Literal["GlobalSettings"] = Field("GlobalSettings", alias="__typename")
    id: int
    available_languages: List[str]
    track_inventory: bool
    out_of_stock_threshold: int
    custom_fields: Dict[str, Any] = Field(default_factory=dict)
    server_config: Optional[ServerConfig] = None


class UpdateGlobalSettingsInput(WireModel):
    """Subset of mutable global settings. Unset fields are left unchanged."""
    available_languages: Optional[List[str]] = None
    track_inventory: Optional[bool] = None
    out_of_stock_threshold: Optional[int] = None
    custom_fields: Optional[Dict[str, Any]] = None


class ChannelDefaultLanguageError(FrozenWireModel):
    """
    Returned when making a language unavailable would invalidate the
    default language of one or more channels.
    """
    typename: Literal["ChannelDefaultLanguageError"] = Field(
        "ChannelDefaultLanguageError", alias="__typename"
    )
    error_code: Literal["CHANNEL_DEFAULT_LANGUAGE_ERROR"] = "CHANNEL_DEFAULT_LANGUAGE_ERROR"
    message: str
    language: str
    channel_code: str

    @classmethod
    def for_channels(cls, languages: list[str], channel_codes: list[str]) -> ChannelDefaultLanguageError:
        language = ", ".join(languages)
        channel_code = ", ".join(channel_codes)
        return cls(
            message=(
                f'Cannot make language "{language}" unavailable as it is used '
                f'as the defaultLanguage by the channel "{channel_code}"'
            ),
            language=language,
            channel_code=channel_code,
        )


UpdateGlobalSettingsResult = Union[GlobalSettings, ChannelDefaultLanguageError]
