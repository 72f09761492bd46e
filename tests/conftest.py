from __future__ import annotations

import pytest

from type_explorer import AnalyzerConfig, TypeAnalyzer


@pytest.fixture
def analyzer() -> TypeAnalyzer:
    return TypeAnalyzer()


@pytest.fixture
def shallow() -> TypeAnalyzer:
    return TypeAnalyzer(AnalyzerConfig(max_depth=1))


@pytest.fixture
def user_payload() -> dict[str, object]:
    return {
        "name": "Ada",
        "age": 36,
        "active": True,
        "tags": ["math", "engines"],
    }
