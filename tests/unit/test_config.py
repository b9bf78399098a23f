"""Unit tests for config loading and custom field validation."""

from __future__ import annotations

import pytest

from fieldgraph.config import DEFAULT_PERMITTED_FILE_TYPES, FieldgraphConfig, load_config
from fieldgraph.core.errors import ConfigError


CONFIG_YAML = """
version: 1
default_language_code: de
custom_fields:
  Product:
    - name: weight
      type: int
      defaultValue: 0
    - name: supplier
      type: relation
      entity: Supplier
      graphQLType: SupplierDetail
      list: 1
      label:
        - languageCode: en
          value: Supplier
  Customer:
    - name: legacyId
      type: string
      internal: true
auth:
  customPermissions:
    - name: SyncInventory
      description: Allows inventory sync
assets:
  permittedFileTypes: [".pdf"]
entity:
  moneyStrategy:
    precision: 4
order_process:
  ValidatingCustomer:
    to: [ArrangingPayment]
schema:
  paths: [schema.graphql]
  urls: ["http://catalog:8001"]
"""


class TestFromDict:

    def test_defaults(self):
        config = FieldgraphConfig.from_dict({})

        assert config.custom_fields == {}
        assert config.assets.permitted_file_types == DEFAULT_PERMITTED_FILE_TYPES
        assert config.entity.money_strategy.precision is None
        assert config.default_language_code == "en"

    def test_parses_custom_fields_with_camel_case_keys(self):
        config = FieldgraphConfig.from_dict({
            "custom_fields": {
                "Product": [
                    {
                        "name": "supplier",
                        "type": "relation",
                        "entity": "Supplier",
                        "graphQLType": "SupplierDetail",
                        "requiresPermission": ["ReadCatalog"],
                    }
                ]
            }
        })

        [definition] = config.custom_fields["Product"]
        assert definition.graphql_type == "SupplierDetail"
        assert definition.requires_permission == ["ReadCatalog"]
        assert definition.is_relation

    def test_keeps_entity_order(self):
        config = FieldgraphConfig.from_dict({
            "custom_fields": {"Zone": [], "Asset": [], "Order": []}
        })

        assert list(config.custom_fields) == ["Zone", "Asset", "Order"]

    def test_collects_all_errors(self):
        with pytest.raises(ConfigError) as exc_info:
            FieldgraphConfig.from_dict({
                "custom_fields": {
                    "Product": [
                        {"name": "1st", "type": "int"},
                        {"name": "weight", "type": "int"},
                        {"name": "weight", "type": "float"},
                        {"name": "size", "type": "bigint"},
                        {"name": "supplier", "type": "relation"},
                        {"name": "color", "type": "string", "colour": "red"},
                    ]
                }
            })

        errors = exc_info.value.errors
        assert len(errors) == 5
        assert "invalid custom field name '1st'" in errors[0]
        assert "Product.weight: duplicate" in errors[1]
        assert "Product.size: invalid type 'bigint'" in errors[2]
        assert "Product.supplier: relation custom fields require an 'entity'" in errors[3]
        assert errors[4].startswith("Product.color:")

    def test_field_entry_must_be_a_mapping(self):
        with pytest.raises(ConfigError) as exc_info:
            FieldgraphConfig.from_dict({"custom_fields": {"Product": ["weight"]}})

        assert exc_info.value.errors == ["Product: custom field must be a mapping, got 'weight'"]

    def test_entity_fields_must_be_a_list(self):
        with pytest.raises(ConfigError) as exc_info:
            FieldgraphConfig.from_dict({"custom_fields": {"Product": {"name": "weight"}}})

        assert exc_info.value.errors == ["Product: custom fields must be a list"]

    def test_localized_string_requires_value(self):
        with pytest.raises(ConfigError) as exc_info:
            FieldgraphConfig.from_dict({
                "custom_fields": {
                    "Product": [
                        {"name": "weight", "type": "int", "label": [{"languageCode": "en"}]},
                    ]
                }
            })

        assert exc_info.value.errors == ["Product.weight.label: localized string requires a 'value'"]

    def test_localized_string_requires_language_code(self):
        with pytest.raises(ConfigError) as exc_info:
            FieldgraphConfig.from_dict({
                "custom_fields": {
                    "Product": [
                        {"name": "weight", "type": "int", "description": [{"value": "Weight"}]},
                    ]
                }
            })

        assert exc_info.value.errors == [
            "Product.weight.description: localized string requires a 'languageCode'"
        ]

    def test_option_problems_are_collected_with_other_errors(self):
        with pytest.raises(ConfigError) as exc_info:
            FieldgraphConfig.from_dict({
                "custom_fields": {
                    "Product": [
                        {
                            "name": "color",
                            "type": "string",
                            "options": [{"label": []}, {"value": "red", "label": [{"value": "Red"}]}],
                        },
                        {"name": "size", "type": "bigint"},
                    ]
                }
            })

        errors = exc_info.value.errors
        assert len(errors) == 3
        assert errors[0].startswith("Product.color.options: option requires a 'value'")
        assert errors[1] == "Product.color.options.label: localized string requires a 'languageCode'"
        assert errors[2].startswith("Product.size: invalid type")

    def test_valid_labels_and_options_are_parsed(self):
        config = FieldgraphConfig.from_dict({
            "custom_fields": {
                "Product": [
                    {
                        "name": "color",
                        "type": "string",
                        "label": [{"language_code": "en", "value": "Color"}],
                        "options": [{"value": "red", "label": [{"languageCode": "en", "value": "Red"}]}],
                    },
                ]
            }
        })

        [definition] = config.custom_fields["Product"]
        assert definition.label[0].language_code == "en"
        assert definition.options[0].value == "red"
        assert definition.options[0].label[0].value == "Red"

    def test_database_url_env_override(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///env.db")

        config = FieldgraphConfig.from_dict({"database_url": "sqlite+aiosqlite:///file.db"})

        assert config.database_url == "sqlite+aiosqlite:///env.db"


class TestLoadConfig:

    def test_missing_file_returns_none(self, tmp_path):
        assert load_config(tmp_path / "missing.yaml") is None

    def test_loads_yaml(self, tmp_path, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        path = tmp_path / "fieldgraph.yaml"
        path.write_text(CONFIG_YAML)

        config = load_config(path)

        assert config.default_language_code == "de"
        assert [f.name for f in config.custom_fields["Product"]] == ["weight", "supplier"]
        weight, supplier = config.custom_fields["Product"]
        assert weight.default_value == 0
        assert supplier.list == 1
        assert supplier.label[0].language_code == "en"
        assert config.custom_fields["Customer"][0].internal is True
        assert config.auth.custom_permissions[0].name == "SyncInventory"
        assert config.assets.permitted_file_types == [".pdf"]
        assert config.entity.money_strategy.precision == 4
        assert config.order_process == {"ValidatingCustomer": ["ArrangingPayment"]}
        assert config.schema.paths == ["schema.graphql"]
        assert config.schema.urls == ["http://catalog:8001"]

    def test_path_from_env(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        path.write_text("default_language_code: fr\n")
        monkeypatch.setenv("FIELDGRAPH_CONFIG", str(path))

        assert load_config().default_language_code == "fr"
