"""
Tests for the OpenAPI document adapter.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from type_explorer import analyze
from type_explorer.adapters import OpenAPIConfig, OpenAPISchemaAdapter, Server
from type_explorer.analysis import (
    EnumResult,
    NullableResult,
    ObjectResult,
    OptionalResult,
    PrimitiveResult,
    UnionResult,
)

CONFIG = OpenAPIConfig(title="Users API", version="1.0.0")


@pytest.fixture
def adapter() -> OpenAPISchemaAdapter:
    return OpenAPISchemaAdapter(CONFIG)


def schemas_for(adapter: OpenAPISchemaAdapter, value: object, name: str = "Root") -> dict:
    return adapter.generate_document(analyze(value), name)["components"]["schemas"]


class TestDocument:
    def test_full_document(self, adapter, user_payload):
        assert adapter.generate_document(analyze(user_payload), name="User") == {
            "openapi": "3.0.0",
            "info": {"title": "Users API", "version": "1.0.0"},
            "servers": [{"url": "http://localhost:3000"}],
            "paths": {},
            "components": {
                "schemas": {
                    "User": {
                        "type": "object",
                        "properties": {
                            "name": {"type": "string"},
                            "age": {"type": "number"},
                            "active": {"type": "boolean"},
                            "tags": {"type": "array", "items": {"type": "string"}},
                        },
                        "required": ["name", "age", "active", "tags"],
                    },
                },
            },
        }

    def test_generate_schema_is_indented_json(self, adapter, user_payload):
        text = adapter.generate_schema_from_data(user_payload)

        assert text.startswith('{\n  "openapi": "3.0.0"')
        assert json.loads(text) == adapter.generate_document(analyze(user_payload))

    def test_description_and_servers(self):
        config = OpenAPIConfig(
            title="Orders",
            version="2.1.0",
            description="Order service",
            servers=[Server(url="https://api.example.com", description="production")],
        )

        document = OpenAPISchemaAdapter(config).generate_document(analyze({}))

        assert document["info"] == {
            "title": "Orders",
            "version": "2.1.0",
            "description": "Order service",
        }
        assert document["servers"] == [
            {"url": "https://api.example.com", "description": "production"},
        ]

    def test_primitive_root_has_no_components(self, adapter):
        assert schemas_for(adapter, 42) == {}


class TestComponents:
    def test_nested_objects_become_references(self, adapter):
        schemas = schemas_for(adapter, {"address": {"city": "Paris"}})

        assert schemas == {
            "Root": {
                "type": "object",
                "properties": {"address": {"$ref": "#/components/schemas/RootAddress"}},
                "required": ["address"],
            },
            "RootAddress": {
                "type": "object",
                "properties": {"city": {"type": "string"}},
                "required": ["city"],
            },
        }

    def test_array_items_named_after_property(self, adapter):
        schemas = schemas_for(adapter, {"orders": [{"id": 1}]})

        assert schemas["Root"]["properties"]["orders"] == {
            "type": "array",
            "items": {"$ref": "#/components/schemas/RootOrdersItem"},
        }
        assert schemas["RootOrdersItem"]["properties"] == {"id": {"type": "number"}}

    def test_array_root(self, adapter):
        schemas = schemas_for(adapter, [{"id": 1}], name="Users")

        assert schemas["Users"] == {
            "type": "array",
            "items": {"$ref": "#/components/schemas/UsersItem"},
        }
        assert "UsersItem" in schemas

    def test_empty_array_has_open_items(self, adapter):
        assert schemas_for(adapter, []) == {"Root": {"type": "array", "items": {}}}

    def test_empty_object_has_no_required_list(self, adapter):
        assert schemas_for(adapter, {}) == {"Root": {"type": "object", "properties": {}}}

    def test_dates(self, adapter):
        schemas = schemas_for(adapter, {"created": datetime(2024, 1, 1, tzinfo=timezone.utc)})

        assert schemas["Root"]["properties"]["created"] == {
            "type": "string",
            "format": "date-time",
        }

    def test_unknown_kinds_are_open(self, adapter):
        schemas = schemas_for(adapter, {"note": None})
        assert schemas["Root"]["properties"]["note"] == {}


class TestSyntheticResults:
    def test_optional_and_nullable_are_not_required(self, adapter):
        analysis = ObjectResult(
            constructor="dict",
            properties={
                "id": PrimitiveResult(type="number", value=1),
                "nickname": OptionalResult(value_type=PrimitiveResult(type="string", value="")),
                "manager": NullableResult(value_type=PrimitiveResult(type="number", value=2)),
            },
        )

        root = adapter.component_schemas(analysis)["Root"]

        assert root["required"] == ["id"]
        assert root["properties"]["nickname"] == {"type": "string", "nullable": True}
        assert root["properties"]["manager"] == {"type": "number", "nullable": True}

    def test_enum(self, adapter):
        schema, nested = adapter.property_schema(EnumResult(values=("a", "b")), "Status")

        assert schema == {"type": "string", "enum": ["a", "b"]}
        assert nested == {}

    def test_union_branches_get_numbered_names(self, adapter):
        union = UnionResult(
            types=(
                PrimitiveResult(type="string", value="x"),
                ObjectResult(constructor="dict", properties={}),
            ),
        )

        schema, nested = adapter.property_schema(union, "RootValue")

        assert schema == {
            "oneOf": [
                {"type": "string"},
                {"$ref": "#/components/schemas/RootValueOption2"},
            ],
        }
        assert nested == {"RootValueOption2": {"type": "object", "properties": {}}}


class TestConfigModel:
    def test_frozen(self):
        with pytest.raises(ValidationError):
            CONFIG.title = "Other"  # type: ignore[misc]

    def test_title_and_version_required(self):
        with pytest.raises(ValidationError):
            OpenAPIConfig(title="Only title")  # type: ignore[call-arg]

    def test_default_server(self):
        assert CONFIG.server_list() == [{"url": "http://localhost:3000"}]

    def test_adapter_identity(self, adapter):
        assert adapter.get_name() == "openapi"
        assert adapter.config is CONFIG
