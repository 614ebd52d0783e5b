"""Node dataclass and NodeKind StrEnum for the YAML node tree.

A parsed YAML document is represented as a tree of ``Node`` objects, one per
document, mapping, sequence, scalar or alias.  The tree keeps the metadata a
round trip needs (tags, anchors, presentation styles, comments) so that merging
and pruning can operate on it without losing formatting information.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, fields
from enum import StrEnum, auto

from yaml_node_merge.tree.tags import (
    MAP_TAG,
    NULL_TAG,
    SEQ_TAG,
    resolve_scalar_tag,
    shorten_tag,
)


class NodeKind(StrEnum):
    """Enumeration of the five node kinds in a YAML tree.

    - DOCUMENT -> "document" : root wrapper holding the top-level node
    - MAPPING  -> "mapping"  : ordered key/value pairs
    - SEQUENCE -> "sequence" : ordered list of items
    - SCALAR   -> "scalar"   : a leaf value (string, number, bool, null)
    - ALIAS    -> "alias"    : reference to an anchored node elsewhere in the tree
    """

    DOCUMENT = auto()
    MAPPING = auto()
    SEQUENCE = auto()
    SCALAR = auto()
    ALIAS = auto()


@dataclass(slots=True)
class Node:
    """A node in the YAML tree representation.

    Attributes:
        kind:         Which kind of node this is.  ``None`` marks the absent
                      sentinel ("no node at all"), which is distinct from a
                      null scalar.
        tag:          Explicitly declared tag in long form, or "" when the tag
                      is implicit.  Use ``short_tag()`` for the effective tag.
        anchor:       Anchor name of the node.  For ALIAS nodes this is the
                      name of the referenced anchor.
        value:        Scalar text as written; "" for every other kind.
        style:        Scalar style: None (plain), "'", '"', "|" or ">".
        flow_style:   True for flow collections ({} / []), False for block.
        content:      Child nodes.  Mapping content alternates key, value.
        head_comment: Comment on the lines preceding the node.
        line_comment: Comment at the end of the node's line.
        foot_comment: Comment on the lines following the node.
        line, column: 1-based source position, 0 when unknown.
    """

    kind: NodeKind | None = None
    tag: str = ""
    anchor: str = ""
    value: str = ""
    style: str | None = None
    flow_style: bool | None = None
    content: list[Node] = field(default_factory=list)
    head_comment: str = ""
    line_comment: str = ""
    foot_comment: str = ""
    line: int = 0
    column: int = 0

    @classmethod
    def absent(cls) -> Node:
        """Return a fresh absent sentinel."""
        return cls()

    @property
    def is_absent(self) -> bool:
        return self.kind is None

    def short_tag(self) -> str:
        """Return the effective tag in short form.

        Explicit tags are shortened (``tag:yaml.org,2002:null`` -> ``!!null``).
        Untagged scalars resolve implicitly from their text; untagged mappings
        and sequences are ``!!map`` and ``!!seq``.  Documents, aliases and the
        absent sentinel have no tag and return "".
        """
        if self.tag:
            return shorten_tag(self.tag)
        if self.kind == NodeKind.SCALAR:
            return resolve_scalar_tag(self.value, plain=self.style is None)
        if self.kind == NodeKind.MAPPING:
            return MAP_TAG
        if self.kind == NodeKind.SEQUENCE:
            return SEQ_TAG
        return ""

    def is_null(self) -> bool:
        """True for a scalar tagged (explicitly or implicitly) as null."""
        return self.kind == NodeKind.SCALAR and self.short_tag() == NULL_TAG

    def pairs(self) -> Iterator[tuple[Node, Node]]:
        """Yield (key, value) pairs of a mapping's content.

        A trailing key without a value is ignored.
        """
        return zip(self.content[0::2], self.content[1::2], strict=False)

    def replace_with(self, other: Node) -> None:
        """Overwrite every field of this node with *other*'s, in place.

        The content list is adopted by reference, not copied: *other* must not
        be used again afterwards.
        """
        for f in fields(self):
            setattr(self, f.name, getattr(other, f.name))
