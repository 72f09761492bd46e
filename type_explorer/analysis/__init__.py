"""
Analysis — structural description of runtime values.

    from type_explorer import analysis as A

    analyzer = A.TypeAnalyzer(A.STANDARD)
    result = analyzer.analyze(payload)
"""

from __future__ import annotations

from type_explorer.analysis._config import (
    AnalyzerConfig,
    MINIMAL,
    STANDARD,
    DETAILED,
    CONFIG_PRESETS,
)
from type_explorer.analysis._context import VisitContext
from type_explorer.analysis._reflect import (
    Kind,
    kind_of,
    Reflector,
    PythonReflector,
)
from type_explorer.analysis._registry import Handler, HandlerRegistry, type_name
from type_explorer.analysis._aggregate import aggregate_elements
from type_explorer.analysis._analyzer import TypeAnalyzer, analyze
from type_explorer.analysis._results import (
    Analysis,
    ErrorResult,
    MaxDepthResult,
    CircularResult,
    NullResult,
    UndefinedResult,
    PrimitiveResult,
    SymbolResult,
    ParameterInfo,
    FunctionResult,
    ElementTypeGroup,
    ArrayResult,
    PrototypeInfo,
    ObjectResult,
    AccessorResult,
    DateResult,
    RegExpResult,
    MapEntry,
    MapResult,
    SetResult,
    PromiseResult,
    ErrorObjectResult,
    TypedArrayResult,
    EnumResult,
    UnionResult,
    OptionalResult,
    NullableResult,
    canonical_key,
)

__all__ = (
    # Entry points
    "TypeAnalyzer",
    "analyze",
    # Configuration
    "AnalyzerConfig",
    "MINIMAL",
    "STANDARD",
    "DETAILED",
    "CONFIG_PRESETS",
    # Traversal
    "VisitContext",
    "Kind",
    "kind_of",
    "Reflector",
    "PythonReflector",
    "Handler",
    "HandlerRegistry",
    "type_name",
    "aggregate_elements",
    # Results
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
