"""
Joi adapter — `Joi.object({...})` source text.
"""

from __future__ import annotations

from typing import ClassVar

from type_explorer.adapters._base import TextSchemaAdapter, quote
from type_explorer.analysis import Analysis


class JoiSchemaAdapter(TextSchemaAdapter):
    """Mixed arrays list every element schema in items()."""

    name: ClassVar[str] = "joi"
    display_name: ClassVar[str] = "Joi"

    primitives: ClassVar[dict[str, str]] = {
        "string": "Joi.string()",
        "number": "Joi.number()",
        "boolean": "Joi.boolean()",
        "Date": "Joi.date()",
        "null": "Joi.any().allow(null)",
        "undefined": "Joi.any().allow(null)",
    }
    fallback: ClassVar[str] = "Joi.any()"

    def object_schema(self, fields: str) -> str:
        return f"Joi.object({{\n  {fields}\n}})"

    def array_schema(self, items: list[str]) -> str:
        if not items:
            return "Joi.array()"
        return f"Joi.array().items({', '.join(items)})"

    def enum_schema(self, values: tuple[str, ...]) -> str:
        return f"Joi.string().valid({', '.join(quote(v) for v in values)})"

    def union_schema(self, types: tuple[Analysis, ...]) -> str:
        return f"Joi.alternatives().try({', '.join(self.render(t) for t in types)})"

    def nullable_schema(self, inner: str) -> str:
        return f"{inner}.allow(null)"


__all__ = ("JoiSchemaAdapter",)
