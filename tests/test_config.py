"""
Tests for AnalyzerConfig and the presets.
"""

from __future__ import annotations

import dataclasses

import pytest

from type_explorer import CONFIG_PRESETS, DETAILED, MINIMAL, STANDARD, AnalyzerConfig


class TestDefaults:
    def test_default_values(self):
        config = AnalyzerConfig()

        assert config.max_depth == 10
        assert config.include_callables is True
        assert config.include_accessors is True
        assert config.include_prototype_info is True
        assert config.include_non_enumerable is False

    def test_standard_matches_defaults(self):
        assert STANDARD == AnalyzerConfig()

    def test_minimal(self):
        assert MINIMAL == AnalyzerConfig(
            max_depth=3,
            include_callables=False,
            include_accessors=False,
            include_prototype_info=False,
            include_non_enumerable=False,
        )

    def test_detailed(self):
        assert DETAILED.max_depth == 20
        assert DETAILED.include_non_enumerable is True

    def test_presets_by_name(self):
        assert CONFIG_PRESETS == {"MINIMAL": MINIMAL, "STANDARD": STANDARD, "DETAILED": DETAILED}


class TestValidation:
    def test_negative_depth_rejected(self):
        with pytest.raises(ValueError, match="max_depth"):
            AnalyzerConfig(max_depth=-1)

    def test_zero_depth_allowed(self):
        assert AnalyzerConfig(max_depth=0).max_depth == 0

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            STANDARD.max_depth = 1  # type: ignore[misc]


class TestFluentBuilders:
    def test_chained_builders_return_new_configs(self):
        base = AnalyzerConfig()

        config = (
            base
            .with_max_depth(4)
            .with_callables(False)
            .with_accessors(False)
            .with_prototype_info(False)
            .with_non_enumerable()
        )

        assert config == AnalyzerConfig(
            max_depth=4,
            include_callables=False,
            include_accessors=False,
            include_prototype_info=False,
            include_non_enumerable=True,
        )
        assert base == AnalyzerConfig()

    def test_builder_validates_depth(self):
        with pytest.raises(ValueError):
            MINIMAL.with_max_depth(-5)


class TestFromMapping:
    def test_partial_mapping_fills_defaults(self):
        assert AnalyzerConfig.from_mapping({"max_depth": 2}) == AnalyzerConfig(max_depth=2)

    def test_empty_mapping(self):
        assert AnalyzerConfig.from_mapping({}) == AnalyzerConfig()

    def test_unknown_keys_listed(self):
        with pytest.raises(ValueError, match="depth, verbose"):
            AnalyzerConfig.from_mapping({"verbose": True, "depth": 1})
