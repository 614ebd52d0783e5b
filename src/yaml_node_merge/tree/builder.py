"""TreeBuilder: converts YAML text into a typed Node tree.

Works on PyYAML's event stream (``yaml.parse``) rather than on composed
``yaml.Node`` graphs, because the event stream still carries what a round trip
needs and the composer drops: anchor names on anchored nodes, aliases as
distinct nodes (not resolved to their targets), and explicit-vs-implicit tags.

PyYAML's parser discards comments, so trees built here carry empty comment
fields.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import yaml

from yaml_node_merge.exceptions import TooManyDocumentsError
from yaml_node_merge.tree.nodes import Node, NodeKind


def _explicit_tag(tag: str | None) -> str:
    # "!" is the non-specific tag: the node is untagged for our purposes
    if tag is None or tag == "!":
        return ""
    return tag


def _node(kind: NodeKind, event: yaml.Event, **attrs: object) -> Node:
    node = Node(kind=kind, **attrs)  # type: ignore[arg-type]
    if event.start_mark is not None:
        node.line = event.start_mark.line + 1
        node.column = event.start_mark.column + 1
    return node


@dataclass
class TreeBuilder:
    """Converts YAML text into Node trees.

    One DOCUMENT node is produced per document in the stream; its single child
    is the document's top-level node.

    Example::
        builder = TreeBuilder()
        doc = builder.build("user: &u {name: John}\\nowner: *u\\n")
        # doc: DOCUMENT -> MAPPING -> [SCALAR("user"), MAPPING(&u), ...,
        #                              SCALAR("owner"), ALIAS(*u)]
    """

    def build(self, text: str) -> Node:
        """Build the tree for a single-document YAML text.

        Args:
            text: YAML source.

        Returns:
            A DOCUMENT node, or the absent sentinel when *text* holds no
            document at all (empty or comment-only input).

        Raises:
            TooManyDocumentsError: If *text* is a multi-document stream.
            yaml.YAMLError: If *text* is not well-formed YAML.
        """
        docs = self.build_all(text)
        if not docs:
            return Node.absent()
        if len(docs) > 1:
            raise TooManyDocumentsError(len(docs))
        return docs[0]

    def build_all(self, text: str) -> list[Node]:
        """Build one DOCUMENT node per document in a YAML stream."""
        events = iter(yaml.parse(text, Loader=yaml.SafeLoader))
        docs: list[Node] = []
        for event in events:
            if isinstance(event, yaml.DocumentStartEvent):
                doc = _node(NodeKind.DOCUMENT, event)
                doc.content.append(self._build_node(next(events), events))
                next(events)  # DocumentEndEvent
                docs.append(doc)
        return docs

    def _build_node(self, event: yaml.Event, events: Iterator[yaml.Event]) -> Node:
        """Build the node starting at *event*, consuming its children from *events*."""
        if isinstance(event, yaml.AliasEvent):
            return _node(NodeKind.ALIAS, event, anchor=event.anchor)

        if isinstance(event, yaml.ScalarEvent):
            return _node(
                NodeKind.SCALAR,
                event,
                tag=_explicit_tag(event.tag),
                anchor=event.anchor or "",
                value=event.value,
                style=event.style or None,
            )

        if isinstance(event, yaml.SequenceStartEvent):
            return self._build_collection(
                NodeKind.SEQUENCE, event, yaml.SequenceEndEvent, events
            )

        if isinstance(event, yaml.MappingStartEvent):
            return self._build_collection(
                NodeKind.MAPPING, event, yaml.MappingEndEvent, events
            )

        raise TypeError(f"Unexpected YAML event: {event!r}")

    def _build_collection(
        self,
        kind: NodeKind,
        start: yaml.CollectionStartEvent,
        end_type: type[yaml.CollectionEndEvent],
        events: Iterator[yaml.Event],
    ) -> Node:
        node = _node(
            kind,
            start,
            tag=_explicit_tag(start.tag),
            anchor=start.anchor or "",
            flow_style=start.flow_style,
        )
        for event in events:
            if isinstance(event, end_type):
                break
            node.content.append(self._build_node(event, events))
        return node
