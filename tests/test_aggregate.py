"""
Tests for array element aggregation.
"""

from __future__ import annotations

import pytest

from type_explorer import analyze
from type_explorer.analysis import (
    ArrayResult,
    CircularResult,
    ElementTypeGroup,
    ObjectResult,
    PrimitiveResult,
    VisitContext,
    aggregate_elements,
)


class TestGrouping:
    def test_empty_array(self):
        assert analyze([]) == ArrayResult(length=0, element_types=())

    def test_identical_elements_share_a_group(self):
        result = analyze(["a", "a", "a"])

        assert result.length == 3
        assert result.element_types == (
            ElementTypeGroup(
                type=PrimitiveResult(type="string", value="a", path=(0,)),
                frequency=1.0,
                count=3,
                indices=(0, 1, 2),
            ),
        )

    def test_primitive_values_distinguish_groups(self):
        result = analyze([1, 2])

        assert [g.count for g in result.element_types] == [1, 1]
        assert [g.type.value for g in result.element_types] == [1, 2]

    def test_group_keeps_first_element_description(self):
        result = analyze([{"id": 1}, {"id": 1}])

        (group,) = result.element_types
        assert group.type.path == (0,)
        assert group.indices == (0, 1)

    def test_objects_with_different_members_are_different_groups(self):
        result = analyze([{"name": "a"}, {"name": "a", "age": 3}])

        assert len(result.element_types) == 2
        assert all(isinstance(g.type, ObjectResult) for g in result.element_types)


class TestOrdering:
    def test_most_frequent_first(self):
        result = analyze(["x", {"k": 1}, {"k": 1}, {"k": 1}])

        counts = [g.count for g in result.element_types]
        assert counts == [3, 1]
        assert result.element_types[0].indices == (1, 2, 3)
        assert result.element_types[1].type.type == "string"

    def test_ties_keep_first_seen_order(self):
        result = analyze([True, "x", 7])

        assert [g.type.type for g in result.element_types] == ["boolean", "string", "number"]

    @pytest.mark.parametrize(
        ("items", "expected"),
        [
            (["a", "a", "b", "a"], [0.75, 0.25]),
            ([None, None], [1.0]),
            ([1, "1", 1, "1", 1], [0.6, 0.4]),
        ],
    )
    def test_frequencies(self, items, expected):
        result = analyze(items)
        assert [g.frequency for g in result.element_types] == pytest.approx(expected)


class TestElementContext:
    def test_elements_analyzed_one_level_down(self):
        seen: list[VisitContext] = []

        def recurse(value, context):
            seen.append(context)
            return PrimitiveResult(type="number", value=value, path=context.path)

        parent = VisitContext(depth=2, path=("rows",))
        aggregate_elements([10, 20], parent, recurse)

        assert [(c.depth, c.path) for c in seen] == [(3, ("rows", 0)), (3, ("rows", 1))]
        assert all(c.visited is parent.visited for c in seen)

    def test_tuple_is_an_array(self):
        assert analyze(("a", 1)).type == "array"

    def test_repeated_object_in_one_array_is_circular(self):
        shared = {"id": 1}

        result = analyze([shared, shared])

        assert [g.type.type for g in result.element_types] == ["object", "circular-reference"]
        assert result.element_types[1].type == CircularResult(path=(1,))
