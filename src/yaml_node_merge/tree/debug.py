"""Diagnostic rendering of Node trees.

Intended for tests and debugging only; the output format is not stable.
"""

from __future__ import annotations

from yaml_node_merge.tree.nodes import Node

_ATTRS = (
    "tag",
    "anchor",
    "value",
    "style",
    "flow_style",
    "head_comment",
    "line_comment",
    "foot_comment",
)


def dump_tree(node: Node | None) -> str:
    """Render *node* and its descendants, one line per node.

    Each line starts with the node's identity (``id()`` in hex) so that
    shared or adopted sub-nodes can be told apart from copies.
    """
    if node is None:
        return ""
    lines: list[str] = []
    _dump(node, 0, lines)
    return "\n".join(lines) + "\n"


def _dump(node: Node, depth: int, lines: list[str]) -> None:
    kind = node.kind if node.kind is not None else "absent"
    attrs = " ".join(
        f"{name}={getattr(node, name)!r}"
        for name in _ATTRS
        if getattr(node, name) not in ("", None)
    )
    pos = f"@{node.line}:{node.column}" if node.line else ""
    lines.append(f"{'  ' * depth}{id(node):#x} {kind}{pos} {attrs}".rstrip())
    for child in node.content:
        _dump(child, depth + 1, lines)
