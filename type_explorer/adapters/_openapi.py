"""
OpenAPI adapter — components/schemas document from an analysis tree.

Nested objects become named components: the parent name plus the
capitalized property name (`RootAddress`), `Item` for array elements,
`OptionN` for union branches.
"""

from __future__ import annotations

import json
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from type_explorer.adapters._base import SchemaAdapter
from type_explorer.analysis import (
    Analysis,
    ArrayResult,
    EnumResult,
    NullableResult,
    ObjectResult,
    OptionalResult,
    TypeAnalyzer,
    UnionResult,
)

type Schema = dict[str, Any]
type Schemas = dict[str, Schema]

OPENAPI_VERSION = "3.0.0"
DEFAULT_SERVER_URL = "http://localhost:3000"

# ═══════════════════════════════════════════════════════════════════════════════
# Document configuration
# ═══════════════════════════════════════════════════════════════════════════════


class Server(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    description: str | None = None


class OpenAPIConfig(BaseModel):
    """
    Document `info` and `servers`.

    Example:
        OpenAPIConfig(title="Users API", version="1.0.0")
    """

    model_config = ConfigDict(frozen=True)

    title: str
    version: str
    description: str | None = None
    servers: tuple[Server, ...] | None = None

    def info(self) -> dict[str, str]:
        return self.model_dump(include={"title", "version", "description"}, exclude_none=True)

    def server_list(self) -> list[dict[str, str]]:
        if not self.servers:
            return [{"url": DEFAULT_SERVER_URL}]
        return [s.model_dump(exclude_none=True) for s in self.servers]


# ═══════════════════════════════════════════════════════════════════════════════
# OpenAPISchemaAdapter
# ═══════════════════════════════════════════════════════════════════════════════


def _capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def is_optional(analysis: Analysis) -> bool:
    return isinstance(analysis, (OptionalResult, NullableResult))


class OpenAPISchemaAdapter(SchemaAdapter):
    """
    Example:
        adapter = OpenAPISchemaAdapter(OpenAPIConfig(title="Users", version="1.0.0"))
        document = adapter.generate_document(analyze(sample_user), name="User")
    """

    name: ClassVar[str] = "openapi"
    display_name: ClassVar[str] = "OpenAPI"

    def __init__(self, config: OpenAPIConfig, analyzer: TypeAnalyzer | None = None) -> None:
        super().__init__(analyzer)
        self.config = config

    def render(self, analysis: Analysis) -> str:
        return json.dumps(self.generate_document(analysis), indent=2)

    def generate_document(self, analysis: Analysis, name: str = "Root") -> dict[str, Any]:
        """Full OpenAPI document with `analysis` as the `name` component."""
        return {
            "openapi": OPENAPI_VERSION,
            "info": self.config.info(),
            "servers": self.config.server_list(),
            "paths": {},
            "components": {
                "schemas": self.component_schemas(analysis, name),
            },
        }

    def component_schemas(self, analysis: Analysis, name: str = "Root") -> Schemas:
        """Named schemas for an object or array root. Other roots yield none."""
        schemas: Schemas = {}

        match analysis:
            case ObjectResult(properties=properties):
                component: Schema = {"type": "object", "properties": {}, "required": []}
                schemas[name] = component
                for prop_name, prop in properties.items():
                    prop_schema, nested = self.property_schema(prop, f"{name}{_capitalize(prop_name)}")
                    component["properties"][prop_name] = prop_schema
                    schemas.update(nested)
                    if not is_optional(prop):
                        component["required"].append(prop_name)
                if not component["required"]:
                    del component["required"]

            case ArrayResult():
                items, nested = self._items_schema(analysis, f"{name}Item")
                schemas[name] = {"type": "array", "items": items}
                schemas.update(nested)

        return schemas

    def property_schema(self, analysis: Analysis, name: str) -> tuple[Schema, Schemas]:
        """Inline schema for one value plus any components it introduced."""
        match analysis:
            case ArrayResult():
                items, nested = self._items_schema(analysis, f"{name}Item")
                return {"type": "array", "items": items}, nested

            case ObjectResult():
                nested = self.component_schemas(analysis, name)
                return {"$ref": f"#/components/schemas/{name}"}, nested

            case EnumResult(values=values):
                return {"type": "string", "enum": list(values)}, {}

            case UnionResult(types=types):
                options: list[Schema] = []
                collected: Schemas = {}
                for index, option in enumerate(types, start=1):
                    schema, nested = self.property_schema(option, f"{name}Option{index}")
                    options.append(schema)
                    collected.update(nested)
                return {"oneOf": options}, collected

            case OptionalResult(value_type=inner) | NullableResult(value_type=inner):
                schema, nested = self.property_schema(inner, name)
                return {**schema, "nullable": True}, nested

        match analysis.type:
            case "string" | "number" | "boolean":
                return {"type": analysis.type}, {}
            case "Date":
                return {"type": "string", "format": "date-time"}, {}
        return {}, {}

    def _items_schema(self, analysis: ArrayResult, name: str) -> tuple[Schema, Schemas]:
        # The most frequent element shape stands for the whole array.
        if not analysis.element_types:
            return {}, {}
        return self.property_schema(analysis.element_types[0].type, name)


__all__ = (
    "Server",
    "OpenAPIConfig",
    "OpenAPISchemaAdapter",
    "is_optional",
    "OPENAPI_VERSION",
)
