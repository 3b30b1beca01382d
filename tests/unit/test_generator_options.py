#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for GeneratorOptions."""

import dataclasses

import pytest

from html_simple.options import GeneratorOptions


@pytest.mark.unit
class TestGeneratorOptions:
    """Test suite for GeneratorOptions."""

    def test_defaults(self):
        options = GeneratorOptions()
        assert options.strict is False
        assert options.url_fallback == "#"
        assert options.blocked_url_schemes == frozenset({"javascript"})
        assert options.passthrough_prefixes == ("js-", "data-")
        assert options.fallback_prefix == "data-"

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            GeneratorOptions().strict = True  # type: ignore[misc]

    def test_collections_normalized(self):
        """Test that lists and sets are normalized and schemes lowercased."""
        options = GeneratorOptions(blocked_url_schemes=["JavaScript", "VBScript"], passthrough_prefixes=["x-"])
        assert options.blocked_url_schemes == frozenset({"javascript", "vbscript"})
        assert options.passthrough_prefixes == ("x-",)

    def test_create_updated(self):
        options = GeneratorOptions()
        updated = options.create_updated(strict=True)
        assert updated.strict is True
        assert options.strict is False

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"fallback_prefix": ""},
            {"fallback_prefix": "data x-"},
            {"fallback_prefix": "data-\"><"},
            {"passthrough_prefixes": ("data-", "")},
            {"url_fallback": '"onmouseover="x'},
        ],
    )
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            GeneratorOptions(**kwargs)
