"""
TypeAnalyzer — recursive shape analysis of arbitrary values.

    from type_explorer import TypeAnalyzer, STANDARD

    analyzer = TypeAnalyzer(STANDARD)
    result = analyzer.analyze({"name": "Ada", "tags": ["math", "code"]})

Dispatch order per node:
    1. depth > max_depth        → max-depth-reached
    2. None                     → null
    3. primitive / function     → baseline handler for that kind
    4. list / tuple             → array handler
    5. already visited          → circular-reference
    6. class registered         → named-composite handler (qualified, then short name)
    7. otherwise                → generic object handler

Any exception in 3-7 becomes an error result at that node's path.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Mapping, Sequence
from typing import Any, cast

import structlog

from type_explorer.analysis._aggregate import aggregate_elements
from type_explorer.analysis._builtins import install_builtins
from type_explorer.analysis._config import AnalyzerConfig
from type_explorer.analysis._context import VisitContext
from type_explorer.analysis._reflect import (
    PRIMITIVE_KINDS,
    Kind,
    PythonReflector,
    Reflector,
    kind_of,
)
from type_explorer.analysis._registry import Handler, HandlerRegistry, type_name
from type_explorer.analysis._results import (
    AccessorResult,
    Analysis,
    ArrayResult,
    CircularResult,
    ErrorResult,
    FunctionResult,
    MaxDepthResult,
    NullResult,
    ObjectResult,
    ParameterInfo,
    PrimitiveResult,
    PrototypeInfo,
    SymbolResult,
    UndefinedResult,
)

logger = structlog.get_logger(__name__)

ANONYMOUS = "(anonymous)"


def _error_message(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


def _failure(exc: Exception, context: VisitContext) -> ErrorResult:
    message = _error_message(exc)
    logger.debug(
        "node_analysis_failed",
        path=context.path,
        error=message,
        exc_type=type(exc).__name__,
    )
    return ErrorResult(error=message, path=context.path)


# ═══════════════════════════════════════════════════════════════════════════════
# TypeAnalyzer
# ═══════════════════════════════════════════════════════════════════════════════


class TypeAnalyzer:
    """
    Walks a value graph and describes every node.

    Each instance owns its registry, preloaded with the baseline and
    built-in named-composite handlers. Separate analyze() calls share no
    state, so one analyzer may serve several threads once registration is
    done.

    Example:
        analyzer = TypeAnalyzer(AnalyzerConfig(max_depth=3))
        analyzer.register_custom_type(Point, lambda p, ctx: ...)
        result = analyzer.analyze(shape)
    """

    def __init__(
        self,
        config: AnalyzerConfig | Mapping[str, Any] | None = None,
        *,
        registry: HandlerRegistry | None = None,
        reflector: Reflector | None = None,
    ) -> None:
        if config is None:
            config = AnalyzerConfig()
        elif not isinstance(config, AnalyzerConfig):
            config = AnalyzerConfig.from_mapping(config)
        self.config: AnalyzerConfig = config
        self.reflector: Reflector = reflector if reflector is not None else PythonReflector()
        self.registry = self._default_registry(registry)

    def _default_registry(self, registry: HandlerRegistry | None) -> HandlerRegistry:
        # Caller-supplied named handlers take precedence over built-ins.
        custom = registry if registry is not None else HandlerRegistry()
        fresh = (
            HandlerRegistry()
            .on_kind(Kind.NULL, self.handle_null)
            .on_kind(Kind.UNDEFINED, self.handle_undefined)
            .on_kind(Kind.STRING, self.handle_primitive)
            .on_kind(Kind.NUMBER, self.handle_primitive)
            .on_kind(Kind.BOOLEAN, self.handle_primitive)
            .on_kind(Kind.BIGINT, self.handle_primitive)
            .on_kind(Kind.SYMBOL, self.handle_symbol)
            .on_kind(Kind.FUNCTION, self.handle_function)
            .on_kind(Kind.ARRAY, self.handle_array)
            .on_kind(Kind.OBJECT, self.handle_object)
        )
        install_builtins(fresh, self.analyze, self.config)
        return fresh.update(custom)

    # ───────────────────────────────────────────────────────────────────────────
    # Registration
    # ───────────────────────────────────────────────────────────────────────────

    def register_custom_type(self, target: str | type, handler: Handler) -> TypeAnalyzer:
        """
        Handle instances of a class with `handler`.

        A class is keyed by `module.qualname`; a string matches any class
        with that short name. Overrides the generic object handler (or a
        built-in registered for the same class), never the primitive or
        array handling. Later registrations replace earlier ones.
        """
        self.registry.on_type(target, handler)
        logger.debug("custom_type_registered", type_name=type_name(target))
        return self

    # ───────────────────────────────────────────────────────────────────────────
    # Entry point & dispatch
    # ───────────────────────────────────────────────────────────────────────────

    def analyze(self, value: Any, context: VisitContext | None = None) -> Analysis:
        """Describe `value`. Never raises; failures become error results."""
        return self._dispatch(value, context if context is not None else VisitContext.root())

    def _dispatch(self, value: Any, context: VisitContext) -> Analysis:
        if context.depth > self.config.max_depth:
            return MaxDepthResult(path=context.path)
        if value is None:
            return self.registry.for_kind(Kind.NULL)(value, context)

        try:
            kind = kind_of(value)
            if kind in PRIMITIVE_KINDS or kind is Kind.ARRAY:
                return self.registry.for_kind(kind)(value, context)

            if context.has_seen(value):
                return CircularResult(path=context.path)

            reflector = self.reflector
            handler = self.registry.resolve(
                (reflector.qualified_name_of(value), reflector.class_name_of(value))
            )
            if handler is not None:
                return handler(value, context)

            return self.registry.for_kind(Kind.OBJECT)(value, context)
        except Exception as exc:
            return _failure(exc, context)

    # ───────────────────────────────────────────────────────────────────────────
    # Baseline handlers
    # ───────────────────────────────────────────────────────────────────────────

    def handle_null(self, value: None, context: VisitContext) -> NullResult:
        return NullResult(path=context.path)

    def handle_undefined(self, value: object, context: VisitContext) -> UndefinedResult:
        return UndefinedResult(path=context.path)

    def handle_primitive(self, value: str | int | float | bool, context: VisitContext) -> PrimitiveResult:
        tag = cast(Any, kind_of(value).value)
        return PrimitiveResult(type=tag, value=value, path=context.path)

    def handle_symbol(self, value: Any, context: VisitContext) -> SymbolResult:
        return SymbolResult(description=f"{type(value).__name__}.{value.name}", path=context.path)

    def handle_function(self, value: Any, context: VisitContext) -> FunctionResult:
        target = value.func if isinstance(value, functools.partial) else value
        name = getattr(value, "__name__", None)
        if not name or name == "<lambda>":
            name = ANONYMOUS
        is_async_gen = inspect.isasyncgenfunction(target)
        return FunctionResult(
            name=name,
            is_async=inspect.iscoroutinefunction(target) or is_async_gen,
            is_generator=inspect.isgeneratorfunction(target) or is_async_gen,
            parameters=self.parameters_of(value) if self.config.include_callables else None,
            path=context.path,
        )

    def parameters_of(self, func: Any) -> ParameterInfo:
        """Declared parameter names; introspection failures are reported, not raised."""
        try:
            names = tuple(inspect.signature(func).parameters)
        except (TypeError, ValueError) as exc:
            return ParameterInfo(count=0, names=(), error=_error_message(exc))
        return ParameterInfo(count=len(names), names=names)

    def handle_array(self, value: Sequence[Any], context: VisitContext) -> ArrayResult:
        context.mark(value)
        return ArrayResult(
            length=len(value),
            element_types=aggregate_elements(value, context, self.analyze),
            path=context.path,
        )

    def handle_object(self, value: Any, context: VisitContext) -> ObjectResult:
        context.mark(value)
        config = self.config
        reflector = self.reflector

        properties: dict[str, Analysis] = {}
        for name in reflector.list_members(value, config):
            properties[name] = self._describe_member(value, name, context.child(name))

        symbol_properties: dict[str, Analysis] = {}
        for label, key in reflector.symbol_members(value):
            symbol_properties[label] = self._analyze_member(
                functools.partial(reflector.read_symbol_member, value, key),
                context.child(label),
            )

        prototype = None
        cls = reflector.prototype_of(value)
        if config.include_prototype_info and cls is not None:
            prototype = PrototypeInfo(
                constructor=getattr(cls, "__name__", None),
                methods=(
                    tuple(reflector.prototype_methods(cls, config))
                    if config.include_callables
                    else None
                ),
            )

        return ObjectResult(
            constructor=reflector.class_name_of(value) or "object",
            properties=properties,
            symbol_properties=symbol_properties or None,
            prototype=prototype,
            path=context.path,
        )

    def _describe_member(self, value: Any, name: str, context: VisitContext) -> Analysis:
        """Accessor or value of one named member; any reflection failure is confined to it."""
        reflector = self.reflector
        try:
            if self.config.include_accessors and reflector.is_accessor(value, name):
                has_getter, has_setter = reflector.accessor_flags(value, name)
                return AccessorResult(
                    has_getter=has_getter,
                    has_setter=has_setter,
                    path=context.path,
                )
            member = reflector.read_member(value, name)
        except Exception as exc:
            return _failure(exc, context)
        return self.analyze(member, context)

    def _analyze_member(self, read: Callable[[], Any], context: VisitContext) -> Analysis:
        """Read then analyze one member; a failing read is confined to it."""
        try:
            member = read()
        except Exception as exc:
            return _failure(exc, context)
        return self.analyze(member, context)


# ═══════════════════════════════════════════════════════════════════════════════
# analyze() — One-Shot Entry Point
# ═══════════════════════════════════════════════════════════════════════════════


def analyze(value: Any, config: AnalyzerConfig | Mapping[str, Any] | None = None) -> Analysis:
    """
    Describe `value` with a fresh analyzer.

    Example:
        from type_explorer import analyze, MINIMAL

        result = analyze({"id": 1}, MINIMAL)
    """
    return TypeAnalyzer(config).analyze(value)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("TypeAnalyzer", "analyze", "ANONYMOUS")
