"""yaml-node-merge - layered merging of YAML node trees."""

from __future__ import annotations

from yaml_node_merge.api import dump, load, merge, merge_yaml, prune
from yaml_node_merge.config import EmitConfig, PruneConfig
from yaml_node_merge.exceptions import (
    InvalidNodeKindsError,
    MergeError,
    TooManyDocumentsError,
    UnknownNodeKindError,
    UnmergeableError,
)
from yaml_node_merge.merger import NodeMerger
from yaml_node_merge.pruner import NullPruner
from yaml_node_merge.tree import Node, NodeKind, dump_tree

__version__: str = "0.1.0"
__all__: list[str] = [
    "EmitConfig",
    "InvalidNodeKindsError",
    "MergeError",
    "Node",
    "NodeKind",
    "NodeMerger",
    "NullPruner",
    "PruneConfig",
    "TooManyDocumentsError",
    "UnknownNodeKindError",
    "UnmergeableError",
    "dump",
    "dump_tree",
    "load",
    "merge",
    "merge_yaml",
    "prune",
]
