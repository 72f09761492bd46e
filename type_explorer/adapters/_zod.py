"""
Zod adapter — `z.object({...})` source text.
"""

from __future__ import annotations

from typing import ClassVar

from type_explorer.adapters._base import TextSchemaAdapter, quote
from type_explorer.analysis import Analysis


class ZodSchemaAdapter(TextSchemaAdapter):
    """
    Example:
        ZodSchemaAdapter().generate_schema_from_data({"id": 1})
        # z.object({
        #   id: z.number()
        # })
    """

    name: ClassVar[str] = "zod"
    display_name: ClassVar[str] = "Zod"

    primitives: ClassVar[dict[str, str]] = {
        "string": "z.string()",
        "number": "z.number()",
        "boolean": "z.boolean()",
        "Date": "z.date()",
        "null": "z.null()",
        "undefined": "z.undefined()",
    }
    fallback: ClassVar[str] = "z.any()"

    def object_schema(self, fields: str) -> str:
        return f"z.object({{\n  {fields}\n}})"

    def array_schema(self, items: list[str]) -> str:
        if not items:
            return "z.array(z.any())"
        if len(items) == 1:
            return f"z.array({items[0]})"
        return f"z.array(z.union([{', '.join(items)}]))"

    def enum_schema(self, values: tuple[str, ...]) -> str:
        return f"z.enum([{', '.join(quote(v) for v in values)}])"

    def union_schema(self, types: tuple[Analysis, ...]) -> str:
        return f"z.union([{', '.join(self.render(t) for t in types)}])"

    def nullable_schema(self, inner: str) -> str:
        return f"{inner}.nullable()"


__all__ = ("ZodSchemaAdapter",)
