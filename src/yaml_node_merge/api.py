"""Public API functions for yaml-node-merge.

This module provides the user-facing functions: merge and prune operate on
Node trees in place; load and dump convert between YAML text and trees; and
merge_yaml runs the whole text-to-text pipeline.  Each call creates fresh
NodeMerger / NullPruner / TreeEmitter instances so no state is shared between
calls.
"""

from __future__ import annotations

import logging

from yaml_node_merge.config import EmitConfig, PruneConfig
from yaml_node_merge.merger import NodeMerger
from yaml_node_merge.pruner import NullPruner
from yaml_node_merge.tree.builder import TreeBuilder
from yaml_node_merge.tree.emitter import TreeEmitter
from yaml_node_merge.tree.nodes import Node

__all__ = ["dump", "load", "merge", "merge_yaml", "prune"]

logger = logging.getLogger(__name__)


def merge(dst: Node, src: Node) -> None:
    """Merge the *src* tree into the *dst* tree in place.

    Mappings are merged key by key, everything else is replaced, and a null on
    either side gives way to the other side.  *src* is consumed.

    Args:
        dst: Destination tree, mutated in place.
        src: Source tree.  Its sub-nodes are moved into *dst*; do not reuse it.

    Raises:
        MergeError: One of its subclasses when the trees cannot be merged.
            *dst* may be partially merged at that point.
    """
    NodeMerger().merge(dst, src)


def prune(node: Node, prune_explicit: bool = True, prune_implicit: bool = True) -> None:
    """Remove null nodes from *node* in place.

    Args:
        node:           Tree to prune.
        prune_explicit: Remove explicit nulls (``key: null``).
        prune_implicit: Remove implicit nulls (``key:``).
    """
    NullPruner(PruneConfig(explicit=prune_explicit, implicit=prune_implicit)).prune(
        node
    )


def load(text: str) -> Node:
    """Parse single-document YAML text into a tree.

    Returns the absent sentinel for empty input.

    Raises:
        TooManyDocumentsError: For multi-document streams.
        yaml.YAMLError: For malformed YAML.
    """
    return TreeBuilder().build(text)


def dump(node: Node, config: EmitConfig | None = None) -> str:
    """Serialize a tree to YAML text ("" for the absent sentinel)."""
    return TreeEmitter(config).emit(node)


def merge_yaml(
    base: str,
    *overlays: str,
    prune_config: PruneConfig | None = None,
    emit_config: EmitConfig | None = None,
) -> str:
    """Layer YAML overlays on top of a base document and return the result.

    Overlays are applied left to right, so later overlays win.  When
    *prune_config* is given, nulls are pruned from the merged tree before it is
    emitted.

    Args:
        base:         Base YAML text.
        overlays:     Overlay YAML texts, applied in order.
        prune_config: Optional null-pruning policy for the merged result.
        emit_config:  Presentation options.  Defaults to ``EmitConfig()``.

    Returns:
        The merged YAML text.

    Raises:
        MergeError: If an overlay cannot be merged.
        yaml.YAMLError: If any input is malformed.
    """
    merger = NodeMerger()
    tree = load(base)
    for i, overlay in enumerate(overlays, start=1):
        logger.debug("Merging overlay %d of %d", i, len(overlays))
        merger.merge(tree, load(overlay))

    if prune_config is not None and prune_config.enabled:
        NullPruner(prune_config).prune(tree)

    return dump(tree, emit_config)
