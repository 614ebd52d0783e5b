"""Tree subpackage for YAML-to-tree conversion primitives.

Re-exports the public API for the tree module:
- Node: dataclass representing a node in the YAML tree
- NodeKind: StrEnum of the five node kinds (DOCUMENT, MAPPING, SEQUENCE, SCALAR, ALIAS)
- TreeBuilder: converts YAML text into a typed Node tree
- TreeEmitter: converts a Node tree back into YAML text
- dump_tree: diagnostic rendering of a tree with node identities
"""

from yaml_node_merge.tree.builder import TreeBuilder
from yaml_node_merge.tree.debug import dump_tree
from yaml_node_merge.tree.emitter import TreeEmitter
from yaml_node_merge.tree.nodes import Node, NodeKind

__all__ = ["Node", "NodeKind", "TreeBuilder", "TreeEmitter", "dump_tree"]
