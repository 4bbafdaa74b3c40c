"""Tests for counting options and resolve_configuration()."""

import dataclasses
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from freqcountable.counting.options import (
    DEFAULT_OPTIONS,
    CountOptions,
    resolve_configuration,
)


class TestResolveConfiguration:
    def test_defaults(self):
        options = resolve_configuration()
        assert options.hard_returns is False
        assert options.strip_tags is False
        assert options.ignore_returns is False
        assert options.ignore_zero_width is True
        assert options.freq_item_count == 10

    def test_empty_mapping_gives_defaults(self):
        assert resolve_configuration({}) == DEFAULT_OPTIONS

    def test_snake_case_override(self):
        options = resolve_configuration({"hard_returns": True, "freq_item_count": 3})
        assert options.hard_returns is True
        assert options.freq_item_count == 3
        assert options.strip_tags is False

    def test_camel_case_override(self):
        options = resolve_configuration({"stripTags": True, "freqItemCount": 4})
        assert options.strip_tags is True
        assert options.freq_item_count == 4

    def test_unknown_keys_ignored(self):
        options = resolve_configuration({"colour": "red", "hardReturns": True})
        assert options.hard_returns is True
        assert not hasattr(options, "colour")

    def test_max_is_not_an_option(self):
        options = resolve_configuration({"max": 99})
        assert options == DEFAULT_OPTIONS
        assert "max" not in {f.name for f in dataclasses.fields(CountOptions)}

    def test_values_not_validated(self):
        options = resolve_configuration({"freq_item_count": "5"})
        assert options.freq_item_count == "5"

    def test_count_options_passed_through(self):
        options = CountOptions(hard_returns=True)
        assert resolve_configuration(options) is options

    def test_overrides_not_mutated(self):
        overrides = {"hardReturns": True}
        resolve_configuration(overrides)
        assert overrides == {"hardReturns": True}

    def test_options_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_OPTIONS.freq_item_count = 3
