"""TreeEmitter: converts a Node tree back into YAML text.

The tree is flattened into PyYAML events and handed to ``yaml.emit``, which
keeps tags, anchors, aliases and presentation styles exactly as the tree
describes them.  Untagged nodes are emitted without a tag; explicitly tagged
nodes always carry theirs.

Comment fields are not written: PyYAML's emitter has no comment events.

PyYAML cannot write an empty plain scalar inside a flow collection or as a
mapping key and would quote it, turning an implicit null into an empty string.
Such scalars are emitted with an explicit ``!!null`` tag instead.
"""

from __future__ import annotations

from collections.abc import Iterator

import yaml

from yaml_node_merge.config import EmitConfig
from yaml_node_merge.exceptions import UnknownNodeKindError
from yaml_node_merge.tree.nodes import Node, NodeKind
from yaml_node_merge.tree.tags import NULL_TAG, expand_tag


class TreeEmitter:
    """Serializes Node trees to YAML text.

    Example::
        emitter = TreeEmitter(EmitConfig(indent=2))
        text = emitter.emit(TreeBuilder().build("a: [1, 2]"))
        # "a: [1, 2]\\n"
    """

    def __init__(self, config: EmitConfig | None = None) -> None:
        self._config: EmitConfig = config if config is not None else EmitConfig()

    def emit(self, node: Node) -> str:
        """Return the YAML text for *node*.

        Args:
            node: A DOCUMENT node, any other node (wrapped in an implicit
                  document), or the absent sentinel.

        Returns:
            The YAML text; "" for the absent sentinel and for documents
            without content.
        """
        if node.is_absent:
            return ""
        if node.kind == NodeKind.DOCUMENT and not node.content:
            return ""
        return yaml.emit(
            self._stream_events(node),
            Dumper=yaml.SafeDumper,
            indent=self._config.indent,
            width=self._config.width,
            allow_unicode=self._config.allow_unicode,
        )

    def _stream_events(self, node: Node) -> Iterator[yaml.Event]:
        yield yaml.StreamStartEvent()
        docs = node.content if node.kind == NodeKind.DOCUMENT else [node]
        for child in docs:
            yield yaml.DocumentStartEvent(explicit=self._config.explicit_start)
            yield from self._node_events(child)
            yield yaml.DocumentEndEvent(explicit=False)
        yield yaml.StreamEndEvent()

    def _node_events(
        self, node: Node, flow: bool = False, key: bool = False
    ) -> Iterator[yaml.Event]:
        anchor = node.anchor or None
        tag = node.tag or None
        flow = flow or bool(node.flow_style)

        if node.kind == NodeKind.ALIAS:
            yield yaml.AliasEvent(anchor)
            return

        if node.kind == NodeKind.SCALAR:
            if (flow or key) and tag is None and node.is_null() and not node.value:
                tag = expand_tag(NULL_TAG)
            # untagged: leave the tag implicit whatever style is chosen
            implicit = (tag is None and node.style is None, tag is None)
            yield yaml.ScalarEvent(anchor, tag, implicit, node.value, style=node.style)
            return

        if node.kind == NodeKind.SEQUENCE:
            yield yaml.SequenceStartEvent(
                anchor, tag, tag is None, flow_style=node.flow_style
            )
            for child in node.content:
                yield from self._node_events(child, flow)
            yield yaml.SequenceEndEvent()
            return

        if node.kind == NodeKind.MAPPING:
            yield yaml.MappingStartEvent(
                anchor, tag, tag is None, flow_style=node.flow_style
            )
            for i, child in enumerate(node.content):
                yield from self._node_events(child, flow, key=i % 2 == 0)
            yield yaml.MappingEndEvent()
            return

        raise UnknownNodeKindError(node.kind)
