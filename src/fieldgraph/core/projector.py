"""
Custom field projector - converts the internal custom field config into its
client-facing representation.

Internal fields are dropped, ``list`` is coerced to a strict boolean, and
relation fields are resolved against the live schema to discover which fields
of the related type are scalar-like.

Usage:
    from fieldgraph.core.projector import CustomFieldProjector

    projector = CustomFieldProjector(config.custom_fields)
    entity_custom_fields = projector.project(schema)
    custom_field_config = projector.project_legacy(schema)  # deprecated shape
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from graphql import GraphQLSchema

from .defs import CustomFieldDef, LocalizedString, StringOption, entity_name
from .introspection import get_scalar_fields
from .query_types import (
    EntityCustomFields,
    ExposedCustomField,
    LocalizedStringOut,
    StringOptionOut,
)


CustomFieldsMap = Mapping[str, Optional[Sequence[CustomFieldDef]]]


def _localized(strings: list[LocalizedString]) -> list[LocalizedStringOut] | None:
    if not strings:
        return None
    return [LocalizedStringOut(language_code=s.language_code, value=s.value) for s in strings]


def _options(options: list[StringOption]) -> list[StringOptionOut] | None:
    if not options:
        return None
    return [
        StringOptionOut(value=o.value, label=_localized(o.label) or [])
        for o in options
    ]


def expose_custom_field(definition: CustomFieldDef, schema: GraphQLSchema) -> ExposedCustomField:
    """
    Build the exposed form of a single (non-internal) custom field.

    For relation fields the target is flattened to its name, and the scalar
    fields are read from the schema type named by ``graphql_type`` or, if
    unset, by the target name.
    """
    relation_entity: Optional[str] = None
    scalar_fields: Optional[list[str]] = None
    if definition.is_relation:
        relation_entity = entity_name(definition.entity)
        scalar_fields = get_scalar_fields(schema, definition.graphql_type or relation_entity)

    return ExposedCustomField(
        name=definition.name,
        type=definition.type,
        is_list=bool(definition.list),
        nullable=definition.nullable,
        readonly=definition.readonly,
        public=definition.public,
        unique=definition.unique,
        eager=definition.eager if definition.is_relation else None,
        default_value=definition.default_value,
        label=_localized(definition.label),
        description=_localized(definition.description),
        options=_options(definition.options),
        requires_permission=definition.requires_permission or None,
        pattern=definition.pattern,
        length=definition.length,
        min=definition.min,
        max=definition.max,
        step=definition.step,
        ui=definition.ui,
        entity=relation_entity,
        scalar_fields=scalar_fields,
    )


class CustomFieldProjector:
    """
    Projects a per-entity custom field config against a schema.

    The config map is only read, never modified, so a single projector can be
    shared across concurrent requests.
    """

    def __init__(self, custom_fields: CustomFieldsMap):
        self.custom_fields = custom_fields

    def _exposed_fields(
        self,
        definitions: Optional[Sequence[CustomFieldDef]],
        schema: GraphQLSchema,
    ) -> list[ExposedCustomField]:
        return [
            expose_custom_field(definition, schema)
            for definition in definitions or []
            # Do not expose custom fields marked as "internal".
            if not definition.internal
        ]

    def project(self, schema: GraphQLSchema) -> list[EntityCustomFields]:
        """
        Return exposed custom fields per entity type, in config order.

        Entity types without any exposable field are omitted.
        """
        result: list[EntityCustomFields] = []
        for entity_type, definitions in self.custom_fields.items():
            exposed = self._exposed_fields(definitions, schema)
            if not exposed:
                continue
            result.append(EntityCustomFields(entity_name=entity_type, custom_fields=exposed))
        return result

    def project_legacy(self, schema: GraphQLSchema) -> dict[str, list[ExposedCustomField]]:
        """
        Return the deprecated map-shaped config.

        Unlike ``project``, every configured entity type is kept, with an empty
        list when none of its fields are exposable.
        """
        # TODO: Remove together with the customFieldConfig field of ServerConfig.
        return {
            entity_type: self._exposed_fields(definitions, schema)
            for entity_type, definitions in self.custom_fields.items()
        }


def generate_entity_custom_fields(
    custom_fields: CustomFieldsMap,
    schema: GraphQLSchema,
) -> list[EntityCustomFields]:
    """Convenience function for ``CustomFieldProjector(custom_fields).project(schema)``."""
    return CustomFieldProjector(custom_fields).project(schema)


def generate_custom_field_config(
    custom_fields: CustomFieldsMap,
    schema: GraphQLSchema,
) -> dict[str, list[ExposedCustomField]]:
    """Convenience function for the legacy map-shaped config."""
    return CustomFieldProjector(custom_fields).project_legacy(schema)
