"""
Schema adapters — one analysis, three validation libraries.

Key concepts:
- Adapter = analysis tree -> schema source text
- generate_schema_from_data() analyzes with the adapter's own analyzer
- generate_schema() reuses an analysis you already have

    python -m examples.schema_example
"""

from type_explorer import analyze
from type_explorer.adapters import (
    AdapterError,
    JoiSchemaAdapter,
    YupSchemaAdapter,
    ZodSchemaAdapter,
)
from examples._infra import banner, POSTS, SAMPLE, USER


# ═══════════════════════════════════════════════════════════════════════════════
# 1. FROM DATA — each adapter analyzes the sample itself
# ═══════════════════════════════════════════════════════════════════════════════

zod = ZodSchemaAdapter()


def from_data() -> None:
    for name, data in (("User", USER), ("Posts", POSTS)):
        banner(f"Zod: {name}")
        try:
            print(zod.generate_schema_from_data(data))
        except AdapterError as e:
            print(f"   error: {e}")


# ═══════════════════════════════════════════════════════════════════════════════
# 2. FROM ANALYSIS — analyze once, render for every target
# ═══════════════════════════════════════════════════════════════════════════════


def from_analysis() -> None:
    analysis = analyze(SAMPLE)

    for adapter in (zod, JoiSchemaAdapter(), YupSchemaAdapter()):
        banner(f"{adapter.display_name}: full sample")
        print(adapter.generate_schema(analysis))


def main() -> None:
    from_data()
    from_analysis()
    print("\nDone!")


if __name__ == "__main__":
    main()
