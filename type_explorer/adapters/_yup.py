"""
Yup adapter — `yup.object({...})` source text.
"""

from __future__ import annotations

from typing import ClassVar

from type_explorer.adapters._base import TextSchemaAdapter, quote
from type_explorer.analysis import Analysis


class YupSchemaAdapter(TextSchemaAdapter):
    """
    Yup has no array-of-union, so mixed arrays become a bare yup.array()
    and unions become yup.mixed().
    """

    name: ClassVar[str] = "yup"
    display_name: ClassVar[str] = "Yup"

    primitives: ClassVar[dict[str, str]] = {
        "string": "yup.string()",
        "number": "yup.number()",
        "boolean": "yup.boolean()",
        "Date": "yup.date()",
        "null": "yup.mixed().nullable()",
        "undefined": "yup.mixed().nullable()",
    }
    fallback: ClassVar[str] = "yup.mixed()"

    def object_schema(self, fields: str) -> str:
        return f"yup.object({{\n  {fields}\n}})"

    def array_schema(self, items: list[str]) -> str:
        if len(items) == 1:
            return f"yup.array().of({items[0]})"
        return "yup.array()"

    def enum_schema(self, values: tuple[str, ...]) -> str:
        return f"yup.string().oneOf([{', '.join(quote(v) for v in values)}])"

    def union_schema(self, types: tuple[Analysis, ...]) -> str:
        return "yup.mixed()"

    def nullable_schema(self, inner: str) -> str:
        return f"{inner}.nullable()"


__all__ = ("YupSchemaAdapter",)
