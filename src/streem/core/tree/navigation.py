"""Tree navigation: lookups, paths, ancestors, siblings and children."""

from collections.abc import Sequence

from streem.core.tree.index import NodeIndex
from streem.models.node import MissingNodeError, Node


def find_node(node_id: str, nodes: Sequence[Node]) -> Node | None:
    """Return the first node with this id, or None."""
    return next((node for node in nodes if node.id == node_id), None)


def find_path(node_id: str | None, nodes: Sequence[Node]) -> list[Node]:
    """Get the path from the root down to a node, inclusive.

    Returns an empty list for a falsy id. Every parent on the way must exist
    in `nodes`; a dangling parent raises MissingNodeError.
    """
    if not node_id:
        return []
    return NodeIndex.build(nodes).path(node_id)


def find_ancestors(node_id: str | None, nodes: Sequence[Node]) -> list[Node]:
    """Get strict ancestors of a node, root first (excludes the node itself)."""
    return find_path(node_id, nodes)[:-1]


def find_parent(node_id: str, nodes: Sequence[Node]) -> Node | None:
    """Get the immediate parent of a node, or None for a root-level node."""
    node = find_node(node_id, nodes)
    if node is None:
        msg = f"Node {node_id!r} not found"
        raise MissingNodeError(msg)
    if not node.parent:
        return None
    return find_node(node.parent, nodes)


def find_prev(node_id: str, nodes: Sequence[Node]) -> Node | None:
    """Get the previous sibling of a node by store order.

    Scans backwards from the node's position for the nearest node with the
    same parent. Returns None when there is none or the id is unknown.
    """
    index = next((i for i, node in enumerate(nodes) if node.id == node_id), None)
    if index is None:
        return None
    parent = nodes[index].parent
    for i in range(index - 1, -1, -1):
        if nodes[i].parent == parent:
            return nodes[i]
    return None


def get_children(nodes: Sequence[Node], node_id: str | None) -> list[Node]:
    """Get direct children of a node, in store order."""
    return [node for node in nodes if node.parent == node_id]
