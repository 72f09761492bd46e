"""
Handler registry — baseline handlers by kind, named-composite handlers by
qualified class name.

Each analyzer owns its registry; there are no module-level tables, so
differently configured analyzers coexist.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from typing import Any

from type_explorer.analysis._context import VisitContext
from type_explorer.analysis._reflect import Kind, qualified_name
from type_explorer.analysis._results import Analysis

type Handler = Callable[[Any, VisitContext], Analysis]
"""handler(value, context) -> result with path=context.path."""


def type_name(target: str | type) -> str:
    """
    Registry key for a class or an explicit name.

    Classes are keyed by their qualified name (`collections.Counter`), so
    an unrelated class that happens to share the short name never matches.
    Strings are used as given.
    """
    if isinstance(target, str):
        return target
    return qualified_name(target)


class HandlerRegistry:
    """
    Two handler tables.

    Lookups read the current table without locking. Registrations build a
    new table under a lock and swap it in, so a concurrent analysis sees
    either the old table or the new one.

    Example:
        registry = (
            HandlerRegistry()
            .on_type("Point", handle_point)
            .on_type(Money, handle_money)
        )
    """

    __slots__ = ("_kinds", "_names", "_lock")

    def __init__(self) -> None:
        self._kinds: dict[Kind, Handler] = {}
        self._names: dict[str, Handler] = {}
        self._lock = threading.Lock()

    def on_kind(self, kind: Kind, handler: Handler) -> HandlerRegistry:
        """Set the baseline handler for an intrinsic kind."""
        with self._lock:
            self._kinds = {**self._kinds, kind: handler}
        return self

    def on_type(self, target: str | type, handler: Handler) -> HandlerRegistry:
        """Set the handler for a class or a name. Last registration wins."""
        name = type_name(target)
        with self._lock:
            self._names = {**self._names, name: handler}
        return self

    def update(self, other: HandlerRegistry) -> HandlerRegistry:
        """Copy every entry of `other` over this registry's entries."""
        kinds, names = other._kinds, other._names
        with self._lock:
            self._kinds = {**self._kinds, **kinds}
            self._names = {**self._names, **names}
        return self

    def for_kind(self, kind: Kind) -> Handler:
        handler = self._kinds.get(kind)
        if handler is None:
            raise LookupError(f"No handler registered for kind {kind.value!r}")
        return handler

    def for_name(self, name: str | None) -> Handler | None:
        if name is None:
            return None
        return self._names.get(name)

    def resolve(self, names: Iterable[str | None]) -> Handler | None:
        """Handler for the first of `names` that is registered."""
        table = self._names
        for name in names:
            if name is not None and name in table:
                return table[name]
        return None

    def names(self) -> tuple[str, ...]:
        return tuple(self._names)

    def __contains__(self, target: object) -> bool:
        if isinstance(target, Kind):
            return target in self._kinds
        if isinstance(target, (str, type)):
            return type_name(target) in self._names
        return False


__all__ = ("Handler", "HandlerRegistry", "type_name")
