"""
Adapters — schema text from an analysis tree.

    from type_explorer import adapters as SA

    print(SA.ZodSchemaAdapter().generate_schema_from_data(payload))
"""

from __future__ import annotations

from type_explorer.adapters._base import (
    AdapterError,
    MissingDependencyError,
    SchemaAdapter,
    TextSchemaAdapter,
)
from type_explorer.adapters._zod import ZodSchemaAdapter
from type_explorer.adapters._joi import JoiSchemaAdapter
from type_explorer.adapters._yup import YupSchemaAdapter
from type_explorer.adapters._openapi import (
    OpenAPIConfig,
    OpenAPISchemaAdapter,
    Server,
)

ADAPTERS: dict[str, type[SchemaAdapter]] = {
    "zod": ZodSchemaAdapter,
    "joi": JoiSchemaAdapter,
    "yup": YupSchemaAdapter,
}

__all__ = (
    # Base
    "SchemaAdapter",
    "TextSchemaAdapter",
    "AdapterError",
    "MissingDependencyError",
    # Targets
    "ZodSchemaAdapter",
    "JoiSchemaAdapter",
    "YupSchemaAdapter",
    "OpenAPISchemaAdapter",
    "OpenAPIConfig",
    "Server",
    "ADAPTERS",
)
