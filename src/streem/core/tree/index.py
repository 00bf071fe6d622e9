"""Id and adjacency indexes over a flat node list."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from streem.models.node import MissingNodeError, Node


@dataclass(frozen=True)
class NodeIndex:
    """Lookup tables built once per call.

    `children` maps a parent id (None for root level) to its children in
    store order, so walking it reproduces the order of the flat list.
    """

    by_id: dict[str, Node] = field(default_factory=dict)
    children: dict[str | None, list[Node]] = field(default_factory=dict)

    @classmethod
    def build(cls, nodes: Sequence[Node]) -> "NodeIndex":
        by_id: dict[str, Node] = {}
        children: dict[str | None, list[Node]] = {}
        for node in nodes:
            # First occurrence wins, matching a linear find.
            by_id.setdefault(node.id, node)
            children.setdefault(node.parent, []).append(node)
        return cls(by_id=by_id, children=children)

    def get(self, node_id: str) -> Node:
        """Return the node with this id, raising if it is not in the store."""
        try:
            return self.by_id[node_id]
        except KeyError:
            msg = f"Node {node_id!r} not found; parent links must resolve"
            raise MissingNodeError(msg) from None

    def path(self, node_id: str | None) -> list[Node]:
        """Root-first path ending at node_id. Empty for a falsy id."""
        path: list[Node] = []
        while node_id:
            node = self.get(node_id)
            path.append(node)
            node_id = node.parent
        path.reverse()
        return path

    def children_of(self, parent_id: str | None) -> list[Node]:
        return self.children.get(parent_id, [])
