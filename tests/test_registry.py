"""
Tests for HandlerRegistry.
"""

from __future__ import annotations

import asyncio
import re
from collections import OrderedDict
from concurrent.futures import Future
from datetime import datetime

import pytest

from samples import Point
from type_explorer import HandlerRegistry, TypeAnalyzer
from type_explorer.analysis import EnumResult, Kind, NullResult, type_name


def describe_point(value, context):
    return EnumResult(values=("point",), path=context.path)


def describe_other(value, context):
    return EnumResult(values=("other",), path=context.path)


class TestNamedHandlers:
    def test_class_is_keyed_by_qualified_name(self):
        registry = HandlerRegistry().on_type(Point, describe_point)

        assert type_name(Point) == "samples.Point"
        assert registry.for_name("samples.Point") is describe_point
        assert Point in registry
        assert "Point" not in registry

    def test_name_registration_kept_as_given(self):
        registry = HandlerRegistry().on_type("Point", describe_point)

        assert registry.names() == ("Point",)
        assert Point not in registry

    def test_last_registration_wins(self):
        registry = HandlerRegistry().on_type(Point, describe_point).on_type(Point, describe_other)

        assert registry.for_name("samples.Point") is describe_other
        assert registry.names() == ("samples.Point",)

    def test_unknown_and_missing_names(self):
        registry = HandlerRegistry()

        assert registry.for_name("Point") is None
        assert registry.for_name(None) is None

    def test_resolve_takes_first_registered_name(self):
        registry = HandlerRegistry().on_type(Point, describe_point).on_type("Point", describe_other)

        assert registry.resolve(("samples.Point", "Point")) is describe_point
        assert registry.resolve((None, "Point")) is describe_other
        assert registry.resolve(("other.Point", None)) is None

    def test_other_keys_are_not_members(self):
        assert 42 not in HandlerRegistry()


class TestKindHandlers:
    def test_lookup(self):
        handler = lambda value, context: NullResult(path=context.path)  # noqa: E731
        registry = HandlerRegistry().on_kind(Kind.NULL, handler)

        assert registry.for_kind(Kind.NULL) is handler
        assert Kind.NULL in registry

    def test_missing_kind_raises(self):
        with pytest.raises(LookupError, match="'symbol'"):
            HandlerRegistry().for_kind(Kind.SYMBOL)


class TestUpdate:
    def test_update_overrides_entries(self):
        base = HandlerRegistry().on_type("Point", describe_point).on_type("Line", describe_point)
        extra = HandlerRegistry().on_type("Point", describe_other)

        base.update(extra)

        assert base.for_name("Point") is describe_other
        assert base.for_name("Line") is describe_point

    def test_update_leaves_source_untouched(self):
        source = HandlerRegistry().on_type("Point", describe_point)
        HandlerRegistry().update(source).on_type("Line", describe_other)

        assert source.names() == ("Point",)


class TestAnalyzerRegistry:
    def test_builtins_installed(self):
        registry = TypeAnalyzer().registry

        for cls in (datetime, re.Pattern, OrderedDict, set, Future, asyncio.Task, ValueError, bytes):
            assert cls in registry
        assert "Task" not in registry
        for kind in Kind:
            assert kind in registry

    def test_supplied_registry_takes_precedence(self):
        analyzer = TypeAnalyzer(registry=HandlerRegistry().on_type(set, describe_other))

        assert analyzer.analyze({1}) == EnumResult(values=("other",))

    def test_supplied_registry_not_mutated_by_analyzer(self):
        supplied = HandlerRegistry().on_type(Point, describe_point)
        TypeAnalyzer(registry=supplied).register_custom_type("Line", describe_other)

        assert supplied.names() == ("samples.Point",)
