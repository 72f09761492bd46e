"""
Schema adapter base — shared contract and error handling.
"""

from __future__ import annotations

import importlib.util
import json
from abc import ABC, abstractmethod
from typing import Any, ClassVar

import structlog

from type_explorer.analysis import (
    Analysis,
    ArrayResult,
    ElementTypeGroup,
    EnumResult,
    NullableResult,
    ObjectResult,
    OptionalResult,
    TypeAnalyzer,
    UnionResult,
)

logger = structlog.get_logger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════


class AdapterError(Exception):
    """Schema generation failed."""


class MissingDependencyError(AdapterError):
    """A module the adapter needs is not importable. Raised before any output."""

    def __init__(self, adapter: str, missing: tuple[str, ...]) -> None:
        self.adapter = adapter
        self.missing = missing
        names = ", ".join(missing)
        super().__init__(
            f"{adapter} requires {names}, which is not installed. "
            f"Please install it using: pip install {' '.join(missing)}"
        )


# ═══════════════════════════════════════════════════════════════════════════════
# SchemaAdapter — subclass this for new targets
# ═══════════════════════════════════════════════════════════════════════════════


def _importable(module: str) -> bool:
    try:
        return importlib.util.find_spec(module) is not None
    except (ImportError, ValueError):
        return False


class SchemaAdapter(ABC):
    """
    Turns an analysis tree into schema text for one target library.

    Subclasses set `name`, `display_name`, optionally
    `required_dependencies` (importable module names), and implement
    render().

    Example:
        adapter = ZodSchemaAdapter()
        print(adapter.generate_schema_from_data({"id": 1, "tags": ["a"]}))
    """

    name: ClassVar[str]
    display_name: ClassVar[str]
    required_dependencies: ClassVar[tuple[str, ...]] = ()

    def __init__(self, analyzer: TypeAnalyzer | None = None) -> None:
        self.analyzer = analyzer if analyzer is not None else TypeAnalyzer()

    def get_name(self) -> str:
        return self.name

    def get_required_dependencies(self) -> tuple[str, ...]:
        return self.required_dependencies

    def missing_dependencies(self) -> tuple[str, ...]:
        return tuple(dep for dep in self.required_dependencies if not _importable(dep))

    def validate_dependencies(self) -> bool:
        return not self.missing_dependencies()

    def ensure_dependencies(self) -> None:
        missing = self.missing_dependencies()
        if missing:
            raise MissingDependencyError(self.display_name, missing)

    def generate_schema(self, analysis: Analysis) -> str:
        """Render `analysis`. Unknown tags fall back to the target's "any"."""
        self.ensure_dependencies()
        try:
            return self.render(analysis)
        except Exception as exc:
            logger.warning(
                "schema_generation_failed",
                adapter=self.name,
                error=str(exc),
                exc_type=type(exc).__name__,
            )
            raise AdapterError(
                f"Failed to generate {self.display_name} schema: {exc}"
            ) from exc

    def generate_schema_from_data(self, data: Any) -> str:
        """Analyze `data` with this adapter's analyzer, then render it."""
        self.ensure_dependencies()
        return self.generate_schema(self.analyzer.analyze(data))

    @abstractmethod
    def render(self, analysis: Analysis) -> str:
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# TextSchemaAdapter — source-text targets sharing one switch
# ═══════════════════════════════════════════════════════════════════════════════


def quote(value: object) -> str:
    """Single-quoted JS string literal."""
    text = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{text}'"


def object_key(key: str) -> str:
    """Bare key when it is a plain identifier, JSON-quoted otherwise."""
    if key.isidentifier() and key.isascii():
        return key
    return json.dumps(key)


class TextSchemaAdapter(SchemaAdapter):
    """
    Emits builder-style source text (`lib.object({...})`).

    Subclasses provide the per-kind strings; the traversal is shared.
    """

    primitives: ClassVar[dict[str, str]]
    fallback: ClassVar[str]

    def render(self, analysis: Analysis) -> str:
        match analysis:
            case ObjectResult(properties=properties):
                fields = ",\n  ".join(
                    f"{object_key(key)}: {self.render(value)}"
                    for key, value in properties.items()
                )
                return self.object_schema(fields)
            case ArrayResult(element_types=groups):
                return self.array_schema(self.element_schemas(groups))
            case EnumResult(values=values):
                return self.enum_schema(values)
            case UnionResult(types=types):
                return self.union_schema(types)
            case OptionalResult(value_type=inner):
                return self.optional_schema(self.render(inner))
            case NullableResult(value_type=inner):
                return self.nullable_schema(self.render(inner))
        return self.primitives.get(analysis.type, self.fallback)

    @abstractmethod
    def object_schema(self, fields: str) -> str:
        ...

    def element_schemas(self, groups: tuple[ElementTypeGroup, ...]) -> list[str]:
        """Distinct element schemas, most frequent first."""
        # Groups differing only in primitive values render the same.
        return list(dict.fromkeys(self.render(g.type) for g in groups))

    @abstractmethod
    def array_schema(self, items: list[str]) -> str:
        ...

    @abstractmethod
    def enum_schema(self, values: tuple[str, ...]) -> str:
        ...

    @abstractmethod
    def union_schema(self, types: tuple[Analysis, ...]) -> str:
        ...

    def optional_schema(self, inner: str) -> str:
        return f"{inner}.optional()"

    @abstractmethod
    def nullable_schema(self, inner: str) -> str:
        ...


__all__ = (
    "AdapterError",
    "MissingDependencyError",
    "SchemaAdapter",
    "TextSchemaAdapter",
    "quote",
    "object_key",
)
