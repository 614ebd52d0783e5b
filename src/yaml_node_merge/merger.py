"""NodeMerger: recursive in-place merge of one YAML node tree into another.

The source tree is layered on top of the destination tree:

- mappings are merged key by key (existing keys keep their position, new keys
  are appended in source order);
- sequences, scalars and aliases are replaced wholesale;
- a null scalar on either side is replaced by the other side's node, so an
  empty ``key:`` in the destination is a placeholder any value can fill and a
  null in the source erases whatever the destination held.

The source is consumed: its sub-nodes are moved into the destination by
reference and must not be used afterwards.  Merging is not transactional; on
error the destination keeps whatever was merged before the failure.

Aliases are never dereferenced.  When an alias is replaced by one pointing to
a different anchor, other aliases to the destination's original anchor are
not remapped and may be left shadowed.
"""

from __future__ import annotations

import logging

from yaml_node_merge.exceptions import (
    InvalidNodeKindsError,
    MergeError,
    TooManyDocumentsError,
    UnknownNodeKindError,
    UnmergeableError,
)
from yaml_node_merge.tree.nodes import Node, NodeKind

__all__ = ["NodeMerger"]

logger = logging.getLogger(__name__)



def _key_text(key: Node) -> str:
    """Literal text identifying a mapping key.

    Aliases are written ``*name``; mapping and sequence keys have no text of
    their own and use a ``<kind>`` placeholder.
    """
    if key.kind == NodeKind.ALIAS:
        return f"*{key.anchor}"
    if key.kind == NodeKind.SCALAR:
        return key.value
    return f"<{key.kind}>"


class NodeMerger:
    """Merges a source node tree into a destination node tree.

    Stateless: a single instance may be reused for any number of merges.

    Example::

        from yaml_node_merge import load, dump
        from yaml_node_merge.merger import NodeMerger

        dst = load("a: 1\\nb: 2\\n")
        NodeMerger().merge(dst, load("b: 3\\nc: 4\\n"))
        dump(dst)   # "a: 1\\nb: 3\\nc: 4\\n"
    """

    def merge(self, dst: Node, src: Node) -> None:
        """Merge *src* into *dst* in place.

        Args:
            dst: Destination tree, mutated in place.
            src: Source tree, consumed.

        Raises:
            InvalidNodeKindsError: Non-null nodes of different kinds.
            UnmergeableError:      Conflicting tags or anchors on mappings.
            TooManyDocumentsError: A document node with more than one child.
            UnknownNodeKindError:  A node kind outside ``NodeKind``.
        """
        if dst.is_absent:
            dst.replace_with(src)
            return
        if src.is_absent:
            return

        # implicit (foo:) or explicit (foo: null) null scalars
        if dst.is_null() or src.is_null():
            dst.replace_with(src)
            return

        if dst.kind != src.kind:
            logger.debug("Rejecting merge of %s onto %s", src.kind, dst.kind)
            raise InvalidNodeKindsError(dst.kind, src.kind)

        self._merge_comments(dst, src)

        if dst.kind == NodeKind.DOCUMENT:
            self._merge_documents(dst, src)
        elif dst.kind == NodeKind.MAPPING:
            # Node style is never changed, only content.
            self._reconcile_tag(dst, src)
            self._reconcile_anchor(dst, src)
            self._merge_mappings(dst, src)
        elif dst.kind in (NodeKind.ALIAS, NodeKind.SEQUENCE, NodeKind.SCALAR):
            # Sequences are not concatenated.
            dst.replace_with(src)
        else:
            raise UnknownNodeKindError(dst.kind)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _merge_comments(dst: Node, src: Node) -> None:
        if src.head_comment:
            dst.head_comment = src.head_comment
        if src.line_comment:
            dst.line_comment = src.line_comment
        if src.foot_comment:
            dst.foot_comment = src.foot_comment

    def _merge_documents(self, dst: Node, src: Node) -> None:
        if not dst.content:
            dst.replace_with(src)
            return
        if not src.content:
            return
        if len(dst.content) != 1 or len(src.content) != 1:
            raise TooManyDocumentsError(max(len(dst.content), len(src.content)))
        self.merge(dst.content[0], src.content[0])

    @staticmethod
    def _reconcile_tag(dst: Node, src: Node) -> None:
        if dst.short_tag() == src.short_tag() or not src.tag:
            return
        if dst.tag:
            raise UnmergeableError(f"tag {src.tag!r} conflicts with {dst.tag!r}")
        dst.tag = src.tag

    @staticmethod
    def _reconcile_anchor(dst: Node, src: Node) -> None:
        if dst.anchor == src.anchor or not src.anchor:
            return
        if dst.anchor:
            raise UnmergeableError(
                f"anchor &{src.anchor} conflicts with &{dst.anchor}"
            )
        dst.anchor = src.anchor

    def _merge_mappings(self, dst: Node, src: Node) -> None:
        existing = {_key_text(key): (key, val) for key, val in dst.pairs()}

        for key, val in list(src.pairs()):
            text = _key_text(key)
            pair = existing.get(text)
            if pair is None:
                logger.debug("Appending new key %r", text)
                dst.content.extend((key, val))
                continue
            dst_key, dst_val = pair
            try:
                # key-level comments
                self.merge(dst_key, key)
                self.merge(dst_val, val)
            except MergeError as exc:
                exc.at(text)
                raise
