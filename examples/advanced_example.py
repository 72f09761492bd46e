"""
Advanced analysis — presets, cycles, built-ins and custom handlers.

Key concepts:
- Presets = MINIMAL / STANDARD / DETAILED analyzer configs
- Shared references are reported once, then as circular-reference
- register_custom_type() replaces the object handler for one class

    python -m examples.advanced_example
"""

from __future__ import annotations

import array
import re
from collections import OrderedDict
from concurrent.futures import Future

from type_explorer import CONFIG_PRESETS, TypeAnalyzer, VisitContext
from type_explorer.analysis import Analysis, ObjectResult, PrimitiveResult
from examples._infra import banner, dump, NOW


# ═══════════════════════════════════════════════════════════════════════════════
# Domain with a cycle
# ═══════════════════════════════════════════════════════════════════════════════


class DataNode:
    def __init__(self, value: int) -> None:
        self._value = value
        self.children: list[DataNode] = []

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, v: int) -> None:
        self._value = v

    def add_child(self, node: DataNode) -> None:
        self.children.append(node)


class ValidationError(Exception):
    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.code = code


root = DataNode(1)
child1 = DataNode(2)
child2 = DataNode(3)
root.add_child(child1)
root.add_child(child2)
child1.add_child(root)


complex_object = {
    # Primitives
    "string": "test",
    "number": 42,
    "boolean": True,
    "null_value": None,
    "bigint": 2**64,
    # Built-ins
    "date": NOW,
    "regex": re.compile("test", re.IGNORECASE),
    "error": ValueError("Invalid input"),
    "custom_error": ValidationError("Invalid input", "E001"),
    "map": OrderedDict([("key1", "value1"), ("key2", "value2")]),
    "set": {1, 2, "three"},
    "int8_array": array.array("b", [1, 2, 3]),
    "float64_array": array.array("d", [1.1, 2.2, 3.3]),
    "future": Future(),
    # Functions
    "regular_function": lambda a, b: f"{a}{b}",
    "builtin": len,
    # Mixed array
    "mixed_array": [1, "string", {"nested": True}, [1, 2, 3], None],
    # Custom type with a cycle
    "node": root,
}


# ═══════════════════════════════════════════════════════════════════════════════
# Custom handler — summarize nodes instead of walking them
# ═══════════════════════════════════════════════════════════════════════════════


def describe_node(node: DataNode, context: VisitContext) -> Analysis:
    return ObjectResult(
        constructor="DataNode",
        properties={
            "value": PrimitiveResult(type="number", value=node.value, path=(*context.path, "value")),
            "child_count": PrimitiveResult(
                type="number",
                value=len(node.children),
                path=(*context.path, "child_count"),
            ),
        },
        path=context.path,
    )


def main() -> None:
    banner("1. DETAILED preset, default handlers (cycle is detected)")
    detailed = TypeAnalyzer(CONFIG_PRESETS["DETAILED"])
    print(dump(detailed.analyze(root)))

    banner("2. MINIMAL preset (shallow, no callables/accessors)")
    print(dump(TypeAnalyzer(CONFIG_PRESETS["MINIMAL"]).analyze(complex_object)))

    banner("3. Custom handler for DataNode")
    analyzer = TypeAnalyzer(CONFIG_PRESETS["STANDARD"]).register_custom_type(DataNode, describe_node)
    print(dump(analyzer.analyze(complex_object)))

    print("\nDone!")


if __name__ == "__main__":
    main()
