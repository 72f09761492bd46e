"""
Built-in named-composite handlers.

Registered by class on every new analyzer. Most return a fixed-shape
description; map and set handlers recurse while the depth bound allows.
"""

from __future__ import annotations

import array
import asyncio
import builtins
import concurrent.futures
import mmap
import re
import traceback
from collections import ChainMap, Counter, OrderedDict, defaultdict
from collections.abc import Callable, Iterable
from datetime import date, datetime, time
from types import CoroutineType, MappingProxyType
from typing import Any

from type_explorer._types import PathKey
from type_explorer.analysis._config import AnalyzerConfig
from type_explorer.analysis._context import VisitContext
from type_explorer.analysis._registry import Handler, HandlerRegistry
from type_explorer.analysis._results import (
    Analysis,
    DateResult,
    ErrorObjectResult,
    MapEntry,
    MapResult,
    PromiseResult,
    RegExpResult,
    SetResult,
    TypedArrayResult,
)

type Recurse = Callable[[Any, VisitContext], Analysis]

# ═══════════════════════════════════════════════════════════════════════════════
# Dates & patterns
# ═══════════════════════════════════════════════════════════════════════════════


def handle_date(value: date, context: VisitContext) -> DateResult:
    """datetime or date. Naive values are read as local time; dates at midnight."""
    moment = value if isinstance(value, datetime) else datetime.combine(value, time())
    return DateResult(
        value=value.isoformat(),
        timestamp=moment.timestamp(),
        path=context.path,
    )


_FLAG_LETTERS = (
    (re.ASCII, "a"),
    (re.IGNORECASE, "i"),
    (re.LOCALE, "L"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.UNICODE, "u"),
    (re.VERBOSE, "x"),
)


def pattern_flags(pattern: re.Pattern[Any]) -> str:
    """Inline-flag letters, without the implicit `u` of str patterns."""
    flags = pattern.flags
    if isinstance(pattern.pattern, str):
        flags &= ~re.UNICODE
    return "".join(letter for flag, letter in _FLAG_LETTERS if flags & flag)


def handle_pattern(value: re.Pattern[Any], context: VisitContext) -> RegExpResult:
    source = value.pattern
    if isinstance(source, bytes):
        source = source.decode("latin-1")
    return RegExpResult(pattern=source, flags=pattern_flags(value), path=context.path)


# ═══════════════════════════════════════════════════════════════════════════════
# Futures & exceptions
# ═══════════════════════════════════════════════════════════════════════════════


def handle_future(value: object, context: VisitContext) -> PromiseResult:
    return PromiseResult(path=context.path)


def handle_exception(value: BaseException, context: VisitContext) -> ErrorObjectResult:
    stack = None
    if value.__traceback__ is not None:
        stack = "".join(traceback.format_exception(value))
    return ErrorObjectResult(
        name=type(value).__name__,
        message=str(value),
        stack=stack,
        path=context.path,
    )


def builtin_exception_types() -> list[type[BaseException]]:
    return [
        obj
        for obj in vars(builtins).values()
        if isinstance(obj, type) and issubclass(obj, BaseException)
    ]


# ═══════════════════════════════════════════════════════════════════════════════
# Fixed-width buffers
# ═══════════════════════════════════════════════════════════════════════════════

_ARRAY_TAGS = {
    "int8": "Int8Array",
    "uint8": "Uint8Array",
    "int16": "Int16Array",
    "uint16": "Uint16Array",
    "int32": "Int32Array",
    "uint32": "Uint32Array",
    "int64": "BigInt64Array",
    "uint64": "BigUint64Array",
    "float32": "Float32Array",
    "float64": "Float64Array",
}

_SIGNED_CODES = frozenset("bhilqn")
_UNSIGNED_CODES = frozenset("BHILQNuwc?")
_FLOAT_CODES = frozenset("efd")


def element_kind(code: str, itemsize: int) -> str | None:
    """Short element kind for an array/struct typecode, or None if not numeric."""
    code = code.lstrip("@=<>!")
    bits = itemsize * 8
    if code in _FLOAT_CODES:
        kind = f"float{bits}"
    elif code in _SIGNED_CODES:
        kind = f"int{bits}"
    elif code in _UNSIGNED_CODES:
        kind = f"uint{bits}"
    else:
        return None
    return kind if kind in _ARRAY_TAGS else None


def _typed_array(
    kind: str | None,
    *,
    length: int,
    byte_length: int,
    is_shared: bool,
    context: VisitContext,
) -> TypedArrayResult:
    if kind is None:
        kind, length = "uint8", byte_length
    return TypedArrayResult(
        type=_ARRAY_TAGS[kind],
        element_kind=kind,
        length=length,
        byte_length=byte_length,
        # slice offsets into the base buffer are not exposed
        byte_offset=0,
        is_shared=is_shared,
        path=context.path,
    )


def handle_array(value: array.array[Any], context: VisitContext) -> TypedArrayResult:
    return _typed_array(
        element_kind(value.typecode, value.itemsize),
        length=len(value),
        byte_length=len(value) * value.itemsize,
        is_shared=False,
        context=context,
    )


def handle_bytes(value: bytes | bytearray, context: VisitContext) -> TypedArrayResult:
    return _typed_array(
        "uint8",
        length=len(value),
        byte_length=len(value),
        is_shared=False,
        context=context,
    )


def handle_memoryview(value: memoryview, context: VisitContext) -> TypedArrayResult:
    return _typed_array(
        element_kind(value.format, value.itemsize),
        length=value.nbytes // value.itemsize,
        byte_length=value.nbytes,
        is_shared=isinstance(value.obj, mmap.mmap),
        context=context,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Maps & sets — recurse while depth allows
# ═══════════════════════════════════════════════════════════════════════════════


def entry_path_key(key: object) -> PathKey:
    if isinstance(key, (str, int)) and not isinstance(key, bool):
        return key
    return repr(key)


def map_handler(recurse: Recurse, config: AnalyzerConfig) -> Handler:
    """
    Mapping with arbitrary keys.

    Entry i: key analyzed at path + [i], value at path + [key].
    """

    def handle_map(value: Any, context: VisitContext) -> MapResult:
        entries = None
        if context.depth < config.max_depth:
            entries = tuple(
                MapEntry(
                    key=recurse(k, context.child(i)),
                    value=recurse(v, context.child(entry_path_key(k))),
                )
                for i, (k, v) in enumerate(value.items())
            )
        return MapResult(size=len(value), entries=entries, path=context.path)

    return handle_map


def set_handler(recurse: Recurse, config: AnalyzerConfig) -> Handler:
    def handle_set(value: Iterable[Any], context: VisitContext) -> SetResult:
        members = list(value)
        values = None
        if context.depth < config.max_depth:
            values = tuple(recurse(v, context.child(i)) for i, v in enumerate(members))
        return SetResult(size=len(members), values=values, path=context.path)

    return handle_set


# ═══════════════════════════════════════════════════════════════════════════════
# install_builtins() — wire everything into a registry
# ═══════════════════════════════════════════════════════════════════════════════

MAP_TYPES: tuple[type, ...] = (OrderedDict, defaultdict, Counter, ChainMap, MappingProxyType)
SET_TYPES: tuple[type, ...] = (set, frozenset)
FUTURE_TYPES: tuple[type, ...] = (
    concurrent.futures.Future,
    asyncio.Future,
    asyncio.Task,
    CoroutineType,
)


def install_builtins(
    registry: HandlerRegistry,
    recurse: Recurse,
    config: AnalyzerConfig,
) -> HandlerRegistry:
    """
    Register every built-in named-composite handler on `registry`.

    Handlers are keyed by class, so user classes that share a short name
    with one of these (a dataclass called `Task`, say) stay plain objects.
    """
    registry.on_type(datetime, handle_date).on_type(date, handle_date)
    registry.on_type(re.Pattern, handle_pattern)

    handle_map = map_handler(recurse, config)
    for cls in MAP_TYPES:
        registry.on_type(cls, handle_map)

    handle_set = set_handler(recurse, config)
    for cls in SET_TYPES:
        registry.on_type(cls, handle_set)

    for cls in FUTURE_TYPES:
        registry.on_type(cls, handle_future)

    for cls in builtin_exception_types():
        registry.on_type(cls, handle_exception)

    registry.on_type(array.array, handle_array)
    registry.on_type(bytes, handle_bytes).on_type(bytearray, handle_bytes)
    registry.on_type(memoryview, handle_memoryview)
    return registry


__all__ = (
    "install_builtins",
    "handle_date",
    "handle_pattern",
    "pattern_flags",
    "handle_future",
    "handle_exception",
    "handle_array",
    "handle_bytes",
    "handle_memoryview",
    "element_kind",
    "map_handler",
    "set_handler",
)
