"""NullPruner: removes null nodes from a YAML node tree.

Two kinds of null are distinguished:

- explicit null: a null-tagged node with text, e.g. ``key: null`` or ``key: ~``
- implicit null: a null-tagged node without text, e.g. ``key:``

Pruning is post-order and cascades: a mapping or sequence left empty by the
removal of its null children is itself removed from its parent.  A document
left empty is reset to the absent sentinel rather than kept as an empty
container.  The traversal root is never removed; an emptied root mapping or
sequence stays in place as an empty node.
"""

from __future__ import annotations

import logging

from yaml_node_merge.config import PruneConfig
from yaml_node_merge.tree.nodes import Node, NodeKind
from yaml_node_merge.tree.tags import NULL_TAG

__all__ = ["NullPruner"]

logger = logging.getLogger(__name__)


class NullPruner:
    """Deletes null nodes from a tree according to a ``PruneConfig``.

    Example::

        from yaml_node_merge import load, dump
        from yaml_node_merge.config import PruneConfig
        from yaml_node_merge.pruner import NullPruner

        tree = load("a:\\nb: null\\nc: 1\\n")
        NullPruner(PruneConfig(explicit=False, implicit=True)).prune(tree)
        dump(tree)   # "b: null\\nc: 1\\n"
    """

    def __init__(self, config: PruneConfig | None = None) -> None:
        self._config: PruneConfig = config if config is not None else PruneConfig()

    def prune(self, node: Node) -> None:
        """Remove null nodes from *node* in place."""
        self._prune(node)

    def is_prunable_null(self, node: Node) -> bool:
        """True if *node* is a null the configuration asks to remove."""
        if node.short_tag() != NULL_TAG:
            return False
        if node.value:
            return self._config.explicit
        return self._config.implicit

    def _prune(self, node: Node) -> bool:
        """Prune below *node* and report whether *node* itself should go."""
        if node.short_tag() == NULL_TAG:
            return self.is_prunable_null(node)

        if node.kind in (NodeKind.DOCUMENT, NodeKind.SEQUENCE):
            for i in range(len(node.content) - 1, -1, -1):
                if self._prune(node.content[i]):
                    del node.content[i]
            if not node.content:
                # a document can't be empty
                if node.kind == NodeKind.DOCUMENT:
                    node.replace_with(Node.absent())
                return True
        elif node.kind == NodeKind.MAPPING:
            for i in range(len(node.content) - 2, -1, -2):
                if self._prune(node.content[i + 1]):
                    logger.debug("Pruning key %r", node.content[i].value)
                    del node.content[i : i + 2]
            if not node.content:
                return True

        return False
