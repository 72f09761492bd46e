"""
Visit context — per-traversal state threaded through recursive calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from type_explorer._types import Path, PathKey


@dataclass(frozen=True, slots=True)
class VisitContext:
    """
    Where the analyzer is in the value graph.

    depth and path are per-node; each descent gets a new context and the
    caller's path is never touched. `visited` is shared by every context of
    one top-level analyze() call. It maps id() to the object itself so that
    ids cannot be recycled while the traversal runs.
    """

    depth: int = 0
    path: Path = ()
    visited: dict[int, object] = field(default_factory=dict)

    @classmethod
    def root(cls) -> VisitContext:
        return cls()

    def child(self, key: PathKey) -> VisitContext:
        """Context for a member or element one level down."""
        return VisitContext(
            depth=self.depth + 1,
            path=(*self.path, key),
            visited=self.visited,
        )

    def mark(self, value: object) -> None:
        self.visited[id(value)] = value

    def has_seen(self, value: object) -> bool:
        return id(value) in self.visited


__all__ = ("VisitContext",)
