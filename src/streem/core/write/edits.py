"""Structural edits on the flat node list.

Every function returns a new list and leaves its input untouched. Nodes are
never removed: deleting sets the `deleted` tombstone so history stays intact.
"""

from collections.abc import Collection, Sequence
from dataclasses import replace

from loguru import logger

from streem.core.tree.index import NodeIndex
from streem.core.tree.navigation import find_parent, find_prev
from streem.models.node import Node


def _creates_cycle(nodes: Sequence[Node], ids: Collection[str], parent: str | None) -> bool:
    """Whether parent is one of the selected nodes or lies below one of them."""
    if not parent:
        return False
    return any(node.id in ids for node in NodeIndex.build(nodes).path(parent))


def _reparent(nodes: Sequence[Node], ids: Collection[str], parent: str | None) -> list[Node]:
    if _creates_cycle(nodes, ids, parent):
        logger.debug("Not moving {} under {}: it is inside the selection", ",".join(ids), parent)
        return list(nodes)
    return [replace(node, parent=parent) if node.id in ids else node for node in nodes]


def indent_nodes(nodes: Sequence[Node], ids: Sequence[str]) -> list[Node]:
    """Move the selected nodes under the previous sibling of the first one.

    Nothing changes if the first node has no previous sibling, or if that
    sibling is itself selected or below a selected node.
    """
    if not ids:
        return list(nodes)
    prev = find_prev(ids[0], nodes)
    if prev is None:
        return list(nodes)
    logger.debug("Indent {} under {}", ",".join(ids), prev.id)
    return _reparent(nodes, set(ids), prev.id)


def outdent_nodes(nodes: Sequence[Node], ids: Sequence[str]) -> list[Node]:
    """Move the selected nodes up one level, next to their current parent.

    Nothing changes if the first node is already at root level, or if the
    new parent is itself selected or below a selected node.
    """
    if not ids:
        return list(nodes)
    parent = find_parent(ids[0], nodes)
    if parent is None:
        return list(nodes)
    logger.debug("Outdent {} to {}", ",".join(ids), parent.parent)
    return _reparent(nodes, set(ids), parent.parent)


def delete_nodes(nodes: Sequence[Node], ids: Collection[str]) -> list[Node]:
    """Tombstone the selected nodes."""
    selected = set(ids)
    return [replace(node, deleted=True) if node.id in selected else node for node in nodes]


def append_node(nodes: Sequence[Node], node: Node) -> list[Node]:
    """Append a new node at the end of the store.

    Raises:
        ValueError: The id is already taken or the parent does not exist.
    """
    index = NodeIndex.build(nodes)
    if node.id in index.by_id:
        msg = f"Duplicate node id: {node.id!r}"
        raise ValueError(msg)
    if node.parent and node.parent not in index.by_id:
        msg = f"Parent {node.parent!r} of node {node.id!r} does not exist"
        raise ValueError(msg)
    return [*nodes, node]
