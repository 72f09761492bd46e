"""
type_explorer — structural analysis of runtime values.

    from type_explorer import analysis  # Shape analysis engine
    from type_explorer import adapters  # Zod / Joi / Yup / OpenAPI output

    from type_explorer import analyze, STANDARD

    result = analyze({"id": 1, "tags": ["a", "b"]}, STANDARD)
"""

from type_explorer import analysis
from type_explorer import adapters
from type_explorer._types import UNDEFINED, Path, PathKey
from type_explorer.analysis import (
    TypeAnalyzer,
    analyze,
    AnalyzerConfig,
    MINIMAL,
    STANDARD,
    DETAILED,
    CONFIG_PRESETS,
    Analysis,
    VisitContext,
    HandlerRegistry,
)

__version__ = "0.1.0"

__all__ = (
    "analysis",
    "adapters",
    "TypeAnalyzer",
    "analyze",
    "AnalyzerConfig",
    "MINIMAL",
    "STANDARD",
    "DETAILED",
    "CONFIG_PRESETS",
    "Analysis",
    "VisitContext",
    "HandlerRegistry",
    "UNDEFINED",
    "Path",
    "PathKey",
)
