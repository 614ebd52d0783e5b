"""Tests for the dump_tree diagnostic rendering."""

from __future__ import annotations

from yaml_node_merge.tree.builder import TreeBuilder
from yaml_node_merge.tree.debug import dump_tree
from yaml_node_merge.tree.nodes import Node


class TestDumpTree:
    def test_one_line_per_node(self) -> None:
        doc = TreeBuilder().build("a: 1\nb: [x]\n")
        # document, mapping, a, 1, b, sequence, x
        assert len(dump_tree(doc).splitlines()) == 7

    def test_lines_start_with_node_identity(self) -> None:
        doc = TreeBuilder().build("a: 1\n")
        first, second = dump_tree(doc).splitlines()[:2]
        assert first.startswith(f"{id(doc):#x} document")
        assert second.strip().startswith(f"{id(doc.content[0]):#x} mapping")

    def test_children_are_indented(self) -> None:
        doc = TreeBuilder().build("a: 1\n")
        lines = dump_tree(doc).splitlines()
        assert lines[2].startswith("    ")

    def test_attributes_are_shown(self) -> None:
        doc = TreeBuilder().build("a: &x 'v'\n")
        text = dump_tree(doc)
        assert "anchor='x'" in text
        assert "value='v'" in text
        assert 'style="\'"' in text

    def test_absent_and_none(self) -> None:
        assert "absent" in dump_tree(Node.absent())
        assert dump_tree(None) == ""
