"""Comprehensive tests for TreeBuilder.

Covers all node kinds, mapping key/value layout, anchors and aliases, explicit
versus implicit tags, scalar and collection styles, source positions, empty
input, multi-document streams and malformed input.
"""

from __future__ import annotations

import pytest
import yaml

from yaml_node_merge.exceptions import TooManyDocumentsError
from yaml_node_merge.tree.builder import TreeBuilder
from yaml_node_merge.tree.nodes import Node, NodeKind

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def builder() -> TreeBuilder:
    """A fresh TreeBuilder instance for each test."""
    return TreeBuilder()


def _root(builder: TreeBuilder, text: str) -> Node:
    doc = builder.build(text)
    assert doc.kind == NodeKind.DOCUMENT
    assert len(doc.content) == 1
    return doc.content[0]


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


class TestStructure:
    def test_mapping_content_alternates_keys_and_values(
        self, builder: TreeBuilder
    ) -> None:
        root = _root(builder, "a: 1\nb: 2\n")
        assert root.kind == NodeKind.MAPPING
        assert [n.value for n in root.content] == ["a", "1", "b", "2"]
        assert all(n.kind == NodeKind.SCALAR for n in root.content)

    def test_nested_mapping(self, builder: TreeBuilder) -> None:
        root = _root(builder, "outer:\n  inner: x\n")
        inner = root.content[1]
        assert inner.kind == NodeKind.MAPPING
        assert [n.value for n in inner.content] == ["inner", "x"]

    def test_sequence(self, builder: TreeBuilder) -> None:
        root = _root(builder, "- x\n- y\n")
        assert root.kind == NodeKind.SEQUENCE
        assert [n.value for n in root.content] == ["x", "y"]

    def test_sequence_of_mappings(self, builder: TreeBuilder) -> None:
        root = _root(builder, "- a: 1\n- b: 2\n")
        assert [n.kind for n in root.content] == [NodeKind.MAPPING, NodeKind.MAPPING]

    def test_root_scalar(self, builder: TreeBuilder) -> None:
        root = _root(builder, '"original"')
        assert root.kind == NodeKind.SCALAR
        assert root.value == "original"
        assert root.style == '"'

    def test_empty_flow_mapping(self, builder: TreeBuilder) -> None:
        root = _root(builder, "{}")
        assert root.kind == NodeKind.MAPPING
        assert root.content == []
        assert root.flow_style is True


# ---------------------------------------------------------------------------
# Nulls
# ---------------------------------------------------------------------------


class TestNulls:
    def test_implicit_null_value(self, builder: TreeBuilder) -> None:
        value = _root(builder, "foo:\n").content[1]
        assert value.kind == NodeKind.SCALAR
        assert value.value == ""
        assert value.is_null()

    def test_explicit_null_value(self, builder: TreeBuilder) -> None:
        value = _root(builder, "foo: null\n").content[1]
        assert value.value == "null"
        assert value.is_null()

    def test_tilde_null(self, builder: TreeBuilder) -> None:
        assert _root(builder, "foo: ~\n").content[1].is_null()

    def test_quoted_null_is_a_string(self, builder: TreeBuilder) -> None:
        assert not _root(builder, "foo: 'null'\n").content[1].is_null()

    def test_explicit_empty_document(self, builder: TreeBuilder) -> None:
        root = _root(builder, "---\n")
        assert root.is_null()


# ---------------------------------------------------------------------------
# Anchors, aliases and tags
# ---------------------------------------------------------------------------


class TestAnchorsAndAliases:
    def test_anchor_on_scalar(self, builder: TreeBuilder) -> None:
        root = _root(builder, "a: &x 1\nb: *x\n")
        assert root.content[1].anchor == "x"

    def test_alias_is_a_distinct_node(self, builder: TreeBuilder) -> None:
        root = _root(builder, "a: &x 1\nb: *x\n")
        alias = root.content[3]
        assert alias.kind == NodeKind.ALIAS
        assert alias.anchor == "x"
        assert alias.content == []
        assert alias is not root.content[1]

    def test_anchor_on_mapping(self, builder: TreeBuilder) -> None:
        root = _root(builder, "inner: &I1\n  a: 1\n")
        assert root.content[1].kind == NodeKind.MAPPING
        assert root.content[1].anchor == "I1"

    def test_merge_key_is_an_ordinary_key(self, builder: TreeBuilder) -> None:
        root = _root(builder, "base: &b {x: 1}\nchild:\n  <<: *b\n  y: 2\n")
        child = root.content[3]
        assert [n.kind for n in child.content] == [
            NodeKind.SCALAR,
            NodeKind.ALIAS,
            NodeKind.SCALAR,
            NodeKind.SCALAR,
        ]
        assert child.content[0].short_tag() == "!!merge"


class TestTags:
    def test_untagged_nodes_have_empty_tag(self, builder: TreeBuilder) -> None:
        root = _root(builder, "a: [1]\n")
        assert root.tag == ""
        assert root.content[1].tag == ""

    def test_explicit_core_tag_is_kept_in_long_form(self, builder: TreeBuilder) -> None:
        value = _root(builder, "a: !!str 1\n").content[1]
        assert value.tag == "tag:yaml.org,2002:str"
        assert value.short_tag() == "!!str"

    def test_local_tag_on_mapping(self, builder: TreeBuilder) -> None:
        root = _root(builder, "!config {a: 1}\n")
        assert root.tag == "!config"

    def test_non_specific_tag_is_dropped(self, builder: TreeBuilder) -> None:
        value = _root(builder, "a: ! 1\n").content[1]
        assert value.tag == ""


# ---------------------------------------------------------------------------
# Styles and positions
# ---------------------------------------------------------------------------


class TestStyles:
    def test_plain_scalar_style_is_none(self, builder: TreeBuilder) -> None:
        assert _root(builder, "a: b\n").content[1].style is None

    @pytest.mark.parametrize(
        ("text", "style"),
        [("a: 'b'\n", "'"), ('a: "b"\n', '"'), ("a: |\n  b\n", "|"), ("a: >\n  b\n", ">")],
    )
    def test_scalar_styles(self, builder: TreeBuilder, text: str, style: str) -> None:
        assert _root(builder, text).content[1].style == style

    def test_block_and_flow_collections(self, builder: TreeBuilder) -> None:
        root = _root(builder, "a: [1, 2]\nb:\n- 1\n")
        assert root.flow_style is False
        assert root.content[1].flow_style is True
        assert root.content[3].flow_style is False


class TestPositions:
    def test_positions_are_one_based(self, builder: TreeBuilder) -> None:
        root = _root(builder, "a: 1\nb: 2\n")
        assert (root.line, root.column) == (1, 1)
        assert (root.content[2].line, root.content[2].column) == (2, 1)
        assert (root.content[3].line, root.content[3].column) == (2, 4)


# ---------------------------------------------------------------------------
# Streams
# ---------------------------------------------------------------------------


class TestStreams:
    @pytest.mark.parametrize("text", ["", "# only a comment\n", "\n\n"])
    def test_no_document_yields_absent(self, builder: TreeBuilder, text: str) -> None:
        assert builder.build(text).is_absent

    def test_explicit_single_document(self, builder: TreeBuilder) -> None:
        root = _root(builder, "---\nkey1: value1\n")
        assert root.kind == NodeKind.MAPPING

    def test_multiple_documents_are_rejected(self, builder: TreeBuilder) -> None:
        with pytest.raises(TooManyDocumentsError) as exc_info:
            builder.build("a: 1\n---\nb: 2\n")
        assert exc_info.value.count == 2

    def test_build_all_returns_each_document(self, builder: TreeBuilder) -> None:
        docs = builder.build_all("a: 1\n---\nb: 2\n")
        assert len(docs) == 2
        assert all(d.kind == NodeKind.DOCUMENT and len(d.content) == 1 for d in docs)
        assert docs[1].content[0].content[0].value == "b"

    def test_build_all_on_empty_input(self, builder: TreeBuilder) -> None:
        assert builder.build_all("") == []

    def test_malformed_yaml_raises_yaml_error(self, builder: TreeBuilder) -> None:
        with pytest.raises(yaml.YAMLError):
            builder.build("a: [1, 2\n")
