"""
Tests for ifwcheck.manifest module.

Tests manifest parsing including:
- IFW component grammar
- GitHub release tag grammar
- Overwrite and no-match behavior
- Custom grammars
"""

from __future__ import annotations

import re

import pytest

from ifwcheck.manifest import (
    COMPONENT_PATTERN,
    RELEASE_TAG_PATTERN,
    ManifestPattern,
    parse_components,
    parse_manifest,
    parse_release_tag,
)


class TestComponentGrammar:
    """Tests for the <Name>/<Version> grammar."""

    def test_parse_local_manifest(self, local_manifest_text):
        """Test parsing an installed components.xml."""
        components = parse_components(local_manifest_text)

        assert dict(components) == {
            "com.vendor.myapp": "0.5.0",
            "com.vendor.myapp.plugins": "1.2.0",
        }

    def test_parse_remote_manifest(self, remote_manifest_text):
        """Test parsing a remote Updates.xml."""
        components = parse_components(remote_manifest_text)

        assert components["com.vendor.myapp"] == "0.5.0"
        assert len(components) == 2

    def test_tags_split_across_lines(self):
        """Test that newlines inside and between tags are ignored."""
        text = "<Name>\nA\n</Name>\n<Title>x</Title>\n<Version>1.\n0</Version>"

        assert dict(parse_components(text)) == {"A": "1.0"}

    def test_non_greedy_pairing(self):
        """Test that each name pairs with its nearest following version."""
        text = (
            "<Name>A</Name><Version>1</Version>"
            "<Name>B</Name><Other/><Version>2</Version>"
        )

        assert dict(parse_components(text)) == {"A": "1", "B": "2"}

    def test_repeated_key_keeps_later_value(self):
        """Test that a repeated component keeps its last version."""
        text = (
            "<Name>A</Name><Version>1</Version>"
            "<Name>A</Name><Version>2</Version>"
        )

        assert dict(parse_components(text)) == {"A": "2"}

    def test_no_match_returns_empty(self):
        """Test that text without tag pairs yields an empty mapping."""
        assert dict(parse_components("<Packages></Packages>")) == {}
        assert dict(parse_components("")) == {}

    def test_empty_version_skipped(self):
        """Test that components with an empty version are skipped."""
        text = (
            "<Name>A</Name><Version></Version>"
            "<Name>B</Name><Version>2</Version>"
        )

        assert dict(parse_components(text)) == {"B": "2"}

    def test_result_is_read_only(self):
        """Test that the returned mapping cannot be mutated."""
        components = parse_components("<Name>A</Name><Version>1</Version>")

        with pytest.raises(TypeError):
            components["B"] = "2"  # type: ignore[index]


class TestReleaseTagGrammar:
    """Tests for the GitHub release tag grammar."""

    def test_parse_release_tag(self, release_json):
        """Test extracting the tag from a release document."""
        assert parse_release_tag(release_json) == "0.6.0"

    def test_key_is_literal_tag_name(self, release_json):
        """Test that the mapping key is the literal field name."""
        tags = parse_manifest(release_json, RELEASE_TAG_PATTERN)

        assert dict(tags) == {"tag_name": "0.6.0"}

    def test_missing_tag_returns_none(self):
        """Test that a document without tag_name yields None."""
        assert parse_release_tag('{"message": "Not Found"}') is None

    def test_compact_json_does_not_match(self):
        """Test that the grammar needs a space after the colon."""
        assert parse_release_tag('{"tag_name":"1.0"}') is None


class TestCustomPattern:
    """Tests for caller-defined grammars."""

    def test_swapped_groups(self):
        """Test a grammar whose version group comes first."""
        pattern = ManifestPattern(
            re.compile(r"(\d+\.\d+)=(\w+);"), key_group=2, value_group=1
        )

        assert dict(parse_manifest("1.0=core;2.1=ui;", pattern)) == {
            "core": "1.0",
            "ui": "2.1",
        }

    def test_default_pattern_is_component_grammar(self):
        """Test that parse_manifest defaults to the IFW grammar."""
        text = "<Name>A</Name><Version>1</Version>"

        expected = parse_manifest(text, COMPONENT_PATTERN)

        assert dict(parse_manifest(text)) == dict(expected)
