#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for tag identities and the tag table."""

import pytest

from html_simple.constants import HTML_TAGS, VOID_ELEMENTS
from html_simple.exceptions import InvalidTagError
from html_simple.tags import ROOT_TAG, TAG_TABLE, Tag, TagKind, get_tag, lookup_tag, method_name_for


@pytest.mark.unit
class TestTag:
    """Test suite for Tag."""

    def test_normal_tag(self):
        tag = Tag("div")
        assert tag.kind is TagKind.NORMAL
        assert not tag.is_void
        assert not tag.is_root

    def test_void_tag(self):
        assert Tag("br", TagKind.VOID).is_void

    def test_root_tag(self):
        assert ROOT_TAG.is_root
        assert not ROOT_TAG.is_void

    @pytest.mark.parametrize("name", ["my-widget", "h1", "X"])
    def test_valid_names(self, name):
        assert Tag(name).name == name

    @pytest.mark.parametrize("name", ["1div", "div class", "<script>", "a\"b", "-x", "d/iv", "div\n", "div\n\n"])
    def test_malformed_names_rejected(self, name):
        """Test that malformed tag names raise at construction."""
        with pytest.raises(InvalidTagError) as exc_info:
            Tag(name)
        assert exc_info.value.tag_name == name


@pytest.mark.unit
class TestTagTable:
    """Test suite for the static tag table."""

    def test_table_covers_all_tags(self):
        assert set(TAG_TABLE) == set(HTML_TAGS)

    def test_void_kinds_match_void_elements(self):
        """Test that exactly the void elements are marked void."""
        assert {name for name, tag in TAG_TABLE.items() if tag.is_void} == VOID_ELEMENTS

    def test_lookup_by_method_name(self):
        """Test that keyword tag names resolve through their method name."""
        assert lookup_tag("del_") == Tag("del")
        assert method_name_for("del") == "del_"
        assert method_name_for("div") == "div"

    def test_lookup_unknown(self):
        assert lookup_tag("blink") is None

    def test_get_tag_unknown_raises(self):
        with pytest.raises(InvalidTagError):
            get_tag("blink")

    def test_get_tag(self):
        assert get_tag("img") == Tag("img", TagKind.VOID)
