"""
Core types for type_explorer.

Path aliases and the UNDEFINED sentinel shared by the analyzer and adapters.
"""

from __future__ import annotations

from typing import Final

# ═══════════════════════════════════════════════════════════════════════════════
# Paths
# ═══════════════════════════════════════════════════════════════════════════════

type PathKey = str | int
"""One step from a parent value to a child: a member name or an index."""

type Path = tuple[PathKey, ...]
"""Keys from the analysis root to a value. Empty at the root."""


# ═══════════════════════════════════════════════════════════════════════════════
# UNDEFINED — "no value", distinct from None
# ═══════════════════════════════════════════════════════════════════════════════


class _Undefined:
    """
    Sentinel for a value that is absent rather than null.

    Python has no `undefined`; use UNDEFINED where a slot exists but was
    never filled (an unset field, a missing default) and None for null.
    """

    __slots__ = ()
    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "PathKey",
    "Path",
    "UNDEFINED",
)
