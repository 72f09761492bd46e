"""
Analysis results — the tagged union describing one value's shape.

Every variant is a frozen dataclass carrying `type` (the tag) and `path`
(keys from the analysis root). Trees are built fresh per analyze() call and
never mutated afterwards.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Literal

from type_explorer._types import Path

# ═══════════════════════════════════════════════════════════════════════════════
# Base
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True, kw_only=True)
class Analysis:
    """
    Base of every result variant.

    Custom handlers may subclass it for their own tags; adapters fall back to
    their "any" schema for tags they do not know.
    """

    type: str
    path: Path = ()

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible form. Absent optional fields are omitted."""
        return _serialize(self, with_paths=True)


# ═══════════════════════════════════════════════════════════════════════════════
# Markers
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True, kw_only=True)
class ErrorResult(Analysis):
    """A node whose analysis raised. Siblings are unaffected."""

    type: str = "error"
    error: str


@dataclass(frozen=True, slots=True, kw_only=True)
class MaxDepthResult(Analysis):
    type: str = "max-depth-reached"


@dataclass(frozen=True, slots=True, kw_only=True)
class CircularResult(Analysis):
    type: str = "circular-reference"


# ═══════════════════════════════════════════════════════════════════════════════
# Primitives
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True, kw_only=True)
class NullResult(Analysis):
    type: str = "null"


@dataclass(frozen=True, slots=True, kw_only=True)
class UndefinedResult(Analysis):
    type: str = "undefined"


@dataclass(frozen=True, slots=True, kw_only=True)
class PrimitiveResult(Analysis):
    """string / number / boolean / bigint, with the observed value."""

    type: Literal["string", "number", "boolean", "bigint"]
    value: str | int | float | bool


@dataclass(frozen=True, slots=True, kw_only=True)
class SymbolResult(Analysis):
    """An enum member; `description` is its qualified name."""

    type: str = "symbol"
    description: str | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Functions
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ParameterInfo:
    """Declared parameters. `error` is set when introspection failed."""

    count: int
    names: tuple[str, ...]
    error: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class FunctionResult(Analysis):
    """
    Callable value.

    Example:
        FunctionResult(
            name="calculate_total",
            is_async=True,
            is_generator=False,
            parameters=ParameterInfo(count=2, names=("price", "quantity")),
        )
    """

    type: str = "function"
    name: str
    is_async: bool
    is_generator: bool
    parameters: ParameterInfo | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Arrays
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ElementTypeGroup:
    """
    One distinct element shape within an array.

    `type` is the description of the first element with that shape.
    """

    type: Analysis
    frequency: float
    count: int
    indices: tuple[int, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class ArrayResult(Analysis):
    """
    list / tuple value, with element shapes ranked by count.

    Example:
        ArrayResult(
            length=3,
            element_types=(
                ElementTypeGroup(type=..., frequency=2 / 3, count=2, indices=(0, 2)),
                ElementTypeGroup(type=..., frequency=1 / 3, count=1, indices=(1,)),
            ),
        )
    """

    type: str = "array"
    length: int
    element_types: tuple[ElementTypeGroup, ...] = ()


# ═══════════════════════════════════════════════════════════════════════════════
# Objects
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class PrototypeInfo:
    """Class-level information for instances of non-default classes."""

    constructor: str | None
    methods: tuple[str, ...] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectResult(Analysis):
    """
    Mapping or class instance.

    `symbol_properties` holds non-string mapping keys (by repr) and is None
    when there are none.
    """

    type: str = "object"
    constructor: str
    properties: dict[str, Analysis] = field(default_factory=dict)
    symbol_properties: dict[str, Analysis] | None = None
    prototype: PrototypeInfo | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AccessorResult(Analysis):
    """Property backed by a getter and/or setter. The getter is not invoked."""

    type: str = "accessor"
    has_getter: bool
    has_setter: bool


# ═══════════════════════════════════════════════════════════════════════════════
# Named composites
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True, kw_only=True)
class DateResult(Analysis):
    type: str = "Date"
    value: str
    timestamp: float


@dataclass(frozen=True, slots=True, kw_only=True)
class RegExpResult(Analysis):
    type: str = "RegExp"
    pattern: str
    flags: str


@dataclass(frozen=True, slots=True)
class MapEntry:
    key: Analysis
    value: Analysis


@dataclass(frozen=True, slots=True, kw_only=True)
class MapResult(Analysis):
    """Mapping with arbitrary keys. `entries` is None past the depth bound."""

    type: str = "Map"
    size: int
    entries: tuple[MapEntry, ...] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SetResult(Analysis):
    """set / frozenset. `values` is None past the depth bound."""

    type: str = "Set"
    size: int
    values: tuple[Analysis, ...] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PromiseResult(Analysis):
    """Future-like value. Never awaited, so the state is always pending."""

    type: str = "Promise"
    state: Literal["pending"] = "pending"


@dataclass(frozen=True, slots=True, kw_only=True)
class ErrorObjectResult(Analysis):
    type: str = "Error"
    name: str
    message: str
    stack: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class TypedArrayResult(Analysis):
    """
    Fixed-width numeric buffer.

    `type` is the element-kind tag (Int8Array, Float64Array, ...),
    `element_kind` the short name (int8, float64, ...).

    `byte_offset` is always 0: Python does not expose where a sliced
    memoryview starts inside its base buffer, so `byte_length` and `length`
    describe the view itself.
    """

    type: str
    element_kind: str
    length: int
    byte_length: int
    byte_offset: int
    is_shared: bool


# ═══════════════════════════════════════════════════════════════════════════════
# Synthetic — produced by custom handlers only
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True, kw_only=True)
class EnumResult(Analysis):
    type: str = "enum"
    values: tuple[str, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class UnionResult(Analysis):
    type: str = "union"
    types: tuple[Analysis, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class OptionalResult(Analysis):
    type: str = "optional"
    value_type: Analysis


@dataclass(frozen=True, slots=True, kw_only=True)
class NullableResult(Analysis):
    type: str = "nullable"
    value_type: Analysis


# ═══════════════════════════════════════════════════════════════════════════════
# Serialization
# ═══════════════════════════════════════════════════════════════════════════════


def _serialize(obj: Any, *, with_paths: bool) -> Any:
    if is_dataclass(obj) and not isinstance(obj, type):
        out: dict[str, Any] = {}
        for f in fields(obj):
            if f.name == "path" and not with_paths:
                continue
            val = getattr(obj, f.name)
            if val is None:
                continue
            out[f.name] = _serialize(val, with_paths=with_paths)
        return out
    if isinstance(obj, dict):
        return {str(k): _serialize(v, with_paths=with_paths) for k, v in obj.items()}
    if isinstance(obj, (tuple, list)):
        return [_serialize(v, with_paths=with_paths) for v in obj]
    return obj


def canonical_key(result: Analysis) -> str:
    """
    Structural identity of a description.

    Two results share a key iff their serialized forms match once paths are
    removed. Keys are sorted so field order never matters.
    """
    return json.dumps(
        _serialize(result, with_paths=False),
        sort_keys=True,
        separators=(",", ":"),
        default=repr,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "Analysis",
    "ErrorResult",
    "MaxDepthResult",
    "CircularResult",
    "NullResult",
    "UndefinedResult",
    "PrimitiveResult",
    "SymbolResult",
    "ParameterInfo",
    "FunctionResult",
    "ElementTypeGroup",
    "ArrayResult",
    "PrototypeInfo",
    "ObjectResult",
    "AccessorResult",
    "DateResult",
    "RegExpResult",
    "MapEntry",
    "MapResult",
    "SetResult",
    "PromiseResult",
    "ErrorObjectResult",
    "TypedArrayResult",
    "EnumResult",
    "UnionResult",
    "OptionalResult",
    "NullableResult",
    "canonical_key",
)
