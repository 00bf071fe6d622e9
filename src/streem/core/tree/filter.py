"""Restrict the flat node list to one sub-tree."""

from collections.abc import Sequence

from streem.core.tree.index import NodeIndex
from streem.models.node import Node


def filter_descendants(nodes: Sequence[Node], node_id: str | None = None) -> list[Node]:
    """Return node_id and all of its descendants, in store order.

    Without node_id this is a shallow copy of the whole list. An id that is
    not in the store gives an empty list.
    """
    if not node_id:
        return list(nodes)

    index = NodeIndex.build(nodes)
    if node_id not in index.by_id:
        return []

    keep: set[str] = set()
    todo = [node_id]
    while todo:
        current = todo.pop()
        if current in keep:
            continue
        keep.add(current)
        todo.extend(child.id for child in index.children_of(current))

    return [node for node in nodes if node.id in keep]
