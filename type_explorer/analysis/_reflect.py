"""
Reflection — classifying values and enumerating their members.

The analyzer never pokes at objects directly; it goes through a Reflector so
the member model (what counts as a member, an accessor, a private name) can
be swapped without touching dispatch.
"""

from __future__ import annotations

import enum
import functools
import inspect
import types
from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any, Protocol

from type_explorer._types import UNDEFINED
from type_explorer.analysis._config import AnalyzerConfig

# ═══════════════════════════════════════════════════════════════════════════════
# Kind — intrinsic classification
# ═══════════════════════════════════════════════════════════════════════════════


class Kind(Enum):
    """Intrinsic kind of a value. The value is the result tag it maps to."""

    NULL = "null"
    UNDEFINED = "undefined"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    BIGINT = "bigint"
    SYMBOL = "symbol"
    FUNCTION = "function"
    ARRAY = "array"
    OBJECT = "object"


PRIMITIVE_KINDS = frozenset({
    Kind.UNDEFINED,
    Kind.STRING,
    Kind.NUMBER,
    Kind.BOOLEAN,
    Kind.BIGINT,
    Kind.SYMBOL,
    Kind.FUNCTION,
})
"""Kinds dispatched straight to their baseline handler."""

MAX_SAFE_INTEGER = 2**53 - 1


def kind_of(value: object) -> Kind:
    """
    Classify a value.

    Order matters: bool before int (bool is an int), enum members before
    int/str (IntEnum, StrEnum), classes count as functions.
    """
    if value is None:
        return Kind.NULL
    if value is UNDEFINED:
        return Kind.UNDEFINED
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, enum.Enum):
        return Kind.SYMBOL
    if isinstance(value, int):
        return Kind.NUMBER if -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER else Kind.BIGINT
    if isinstance(value, float):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    if inspect.isroutine(value) or inspect.isclass(value) or isinstance(value, functools.partial):
        return Kind.FUNCTION
    if isinstance(value, (list, tuple)):
        return Kind.ARRAY
    return Kind.OBJECT


# ═══════════════════════════════════════════════════════════════════════════════
# Reflector Protocol — swap for a different member model
# ═══════════════════════════════════════════════════════════════════════════════


class Reflector(Protocol):
    """Member-level view of composite values."""

    def list_members(self, value: object, config: AnalyzerConfig) -> list[str]:
        """Ordered member names to analyze."""
        ...

    def symbol_members(self, value: object) -> list[tuple[str, object]]:
        """(label, key) pairs for members not addressable by name."""
        ...

    def is_accessor(self, value: object, name: str) -> bool:
        ...

    def accessor_flags(self, value: object, name: str) -> tuple[bool, bool]:
        """(has_getter, has_setter)."""
        ...

    def read_member(self, value: object, name: str) -> Any:
        """Read a member; may run user code and raise."""
        ...

    def read_symbol_member(self, value: object, key: object) -> Any:
        ...

    def class_name_of(self, value: object) -> str | None:
        """Short class name, reported as the constructor."""
        ...

    def qualified_name_of(self, value: object) -> str | None:
        """`module.qualname` of the class, tried before the short name."""
        ...

    def prototype_of(self, value: object) -> type | None:
        """Class to describe, or None for default classes (object, dict)."""
        ...

    def prototype_methods(self, cls: type, config: AnalyzerConfig) -> list[str]:
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# PythonReflector — default member model
# ═══════════════════════════════════════════════════════════════════════════════

DEFAULT_PROTOTYPES: frozenset[type] = frozenset({object, dict, types.SimpleNamespace})

_RUNTIME_DESCRIPTORS = (types.MemberDescriptorType, types.GetSetDescriptorType)


def is_private(name: str) -> bool:
    return name.startswith("_")


def qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class PythonReflector:
    """
    Members of plain Python values.

    Mappings: string keys are members, other keys are symbol members.
    Objects: instance __dict__, then filled __slots__, then data descriptors
    (properties) declared on the class hierarchy.
    """

    def list_members(self, value: object, config: AnalyzerConfig) -> list[str]:
        if isinstance(value, Mapping):
            names = [k for k in value.keys() if isinstance(k, str)]
        else:
            names = list(dict.fromkeys(self._instance_names(value)))
        if config.include_non_enumerable:
            return names
        return [n for n in names if not is_private(n)]

    def _instance_names(self, value: object) -> Iterator[str]:
        instance_dict = getattr(value, "__dict__", None)
        if isinstance(instance_dict, dict):
            yield from (k for k in instance_dict if isinstance(k, str))

        cls = type(value)
        for klass in cls.__mro__:
            for slot in _slots_of(klass):
                if slot in ("__dict__", "__weakref__"):
                    continue
                attr = klass.__dict__.get(slot)
                if isinstance(attr, types.MemberDescriptorType):
                    try:
                        attr.__get__(value, cls)
                    except AttributeError:
                        continue  # unset slot
                    yield slot

        for klass in reversed(cls.__mro__):
            if klass is object:
                continue
            for name, attr in klass.__dict__.items():
                if _is_user_descriptor(attr):
                    yield name

    def symbol_members(self, value: object) -> list[tuple[str, object]]:
        if not isinstance(value, Mapping):
            return []
        return [(repr(k), k) for k in value.keys() if not isinstance(k, str)]

    def is_accessor(self, value: object, name: str) -> bool:
        if isinstance(value, Mapping):
            return False
        return _is_user_descriptor(_static_class_attr(type(value), name))

    def accessor_flags(self, value: object, name: str) -> tuple[bool, bool]:
        attr = _static_class_attr(type(value), name)
        if isinstance(attr, property):
            return attr.fget is not None, attr.fset is not None
        return hasattr(attr, "__get__"), hasattr(attr, "__set__")

    def read_member(self, value: object, name: str) -> Any:
        if isinstance(value, Mapping):
            return value[name]
        return getattr(value, name)

    def read_symbol_member(self, value: object, key: object) -> Any:
        return value[key]  # type: ignore[index]

    def class_name_of(self, value: object) -> str | None:
        return getattr(type(value), "__name__", None) or None

    def qualified_name_of(self, value: object) -> str | None:
        return qualified_name(type(value))

    def prototype_of(self, value: object) -> type | None:
        cls = type(value)
        if cls in DEFAULT_PROTOTYPES:
            return None
        return cls

    def prototype_methods(self, cls: type, config: AnalyzerConfig) -> list[str]:
        methods: list[str] = []
        for name, attr in cls.__dict__.items():
            if not config.include_non_enumerable and is_private(name):
                continue
            if isinstance(attr, (staticmethod, classmethod)) or callable(attr):
                methods.append(name)
        return methods


def _slots_of(klass: type) -> tuple[str, ...]:
    slots = klass.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        return (slots,)
    return tuple(slots)


def _static_class_attr(cls: type, name: str) -> object:
    try:
        return inspect.getattr_static(cls, name)
    except AttributeError:
        return None


def _is_user_descriptor(attr: object) -> bool:
    """property and other data descriptors, but not slot/getset internals."""
    if isinstance(attr, property):
        return True
    if isinstance(attr, _RUNTIME_DESCRIPTORS):
        return False
    return inspect.isdatadescriptor(attr)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "Kind",
    "PRIMITIVE_KINDS",
    "MAX_SAFE_INTEGER",
    "kind_of",
    "Reflector",
    "PythonReflector",
    "DEFAULT_PROTOTYPES",
    "is_private",
    "qualified_name",
)
