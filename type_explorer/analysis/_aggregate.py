"""
Array element aggregation — distinct element shapes with frequency stats.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from type_explorer.analysis._context import VisitContext
from type_explorer.analysis._results import Analysis, ElementTypeGroup, canonical_key


@dataclass(slots=True)
class _Bucket:
    type: Analysis
    indices: list[int] = field(default_factory=list)


def aggregate_elements(
    items: Sequence[Any],
    context: VisitContext,
    recurse: Callable[[Any, VisitContext], Analysis],
) -> tuple[ElementTypeGroup, ...]:
    """
    Analyze each element and group by structural identity.

    Element i is analyzed one level down with i appended to the path.
    Groups are keyed by canonical_key(), so two objects with different
    member sets are different groups even though both are "object".
    Result is ordered by descending count; ties keep first-seen order.
    """
    length = len(items)
    buckets: dict[str, _Bucket] = {}

    for index, element in enumerate(items):
        described = recurse(element, context.child(index))
        key = canonical_key(described)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = buckets[key] = _Bucket(type=described)
        bucket.indices.append(index)

    groups = [
        ElementTypeGroup(
            type=b.type,
            frequency=len(b.indices) / length,
            count=len(b.indices),
            indices=tuple(b.indices),
        )
        for b in buckets.values()
    ]
    # sorted() is stable: equal counts stay in first-seen order
    return tuple(sorted(groups, key=lambda g: g.count, reverse=True))


__all__ = ("aggregate_elements",)
