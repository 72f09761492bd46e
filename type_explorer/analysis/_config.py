"""
Analyzer configuration — immutable options and named presets.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

# ═══════════════════════════════════════════════════════════════════════════════
# AnalyzerConfig
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class AnalyzerConfig:
    """
    Analysis options.

    Fluent builder pattern — chain methods to configure.

    Example:
        config = (
            AnalyzerConfig()
            .with_max_depth(5)
            .with_accessors(False)
        )

    Fields:
        max_depth: Deepest level analyzed. Nodes at exactly max_depth are
            still analyzed; one level deeper yields a max-depth marker.
        include_callables: Introspect function parameters and list class
            methods. Functions are reported either way.
        include_accessors: Report property-backed members as accessors
            instead of running their getters.
        include_prototype_info: Attach class info for non-default classes.
        include_non_enumerable: Scan private (underscore) members too.
    """

    max_depth: int = 10
    include_callables: bool = True
    include_accessors: bool = True
    include_prototype_info: bool = True
    include_non_enumerable: bool = False

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> AnalyzerConfig:
        """
        Build from a partial mapping; missing options take their defaults.

        Example:
            AnalyzerConfig.from_mapping({"max_depth": 2})
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ValueError(f"Unknown analyzer options: {', '.join(unknown)}")
        return cls(**options)

    def with_max_depth(self, depth: int) -> AnalyzerConfig:
        return replace(self, max_depth=depth)

    def with_callables(self, include: bool = True) -> AnalyzerConfig:
        return replace(self, include_callables=include)

    def with_accessors(self, include: bool = True) -> AnalyzerConfig:
        return replace(self, include_accessors=include)

    def with_prototype_info(self, include: bool = True) -> AnalyzerConfig:
        return replace(self, include_prototype_info=include)

    def with_non_enumerable(self, include: bool = True) -> AnalyzerConfig:
        return replace(self, include_non_enumerable=include)


# ═══════════════════════════════════════════════════════════════════════════════
# Presets
# ═══════════════════════════════════════════════════════════════════════════════

MINIMAL = AnalyzerConfig(
    max_depth=3,
    include_callables=False,
    include_accessors=False,
    include_prototype_info=False,
    include_non_enumerable=False,
)
"""Quick surface-level analysis."""

STANDARD = AnalyzerConfig(
    max_depth=10,
    include_callables=True,
    include_accessors=True,
    include_prototype_info=True,
    include_non_enumerable=False,
)
"""Balanced depth and detail."""

DETAILED = AnalyzerConfig(
    max_depth=20,
    include_callables=True,
    include_accessors=True,
    include_prototype_info=True,
    include_non_enumerable=True,
)
"""Deep inspection including private members."""

CONFIG_PRESETS: Mapping[str, AnalyzerConfig] = {
    "MINIMAL": MINIMAL,
    "STANDARD": STANDARD,
    "DETAILED": DETAILED,
}


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "AnalyzerConfig",
    "MINIMAL",
    "STANDARD",
    "DETAILED",
    "CONFIG_PRESETS",
)
