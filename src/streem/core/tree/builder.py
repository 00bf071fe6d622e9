"""Build nested trees out of the flat node list."""

from collections.abc import Sequence

from streem.core.tree.index import NodeIndex
from streem.models.node import Node, Tree, TreeNode


def _build_children(
    index: NodeIndex, parent_id: str | None
) -> tuple[tuple[TreeNode, ...], int]:
    children: list[TreeNode] = []
    height = 0
    for node in index.children_of(parent_id):
        sub_children, sub_height = _build_children(index, node.id)
        height = max(height, sub_height + 1)
        children.append(TreeNode(node=node, children=sub_children, height=sub_height))
    return tuple(children), height


def get_tree(nodes: Sequence[Node], parent_id: str | None = None) -> Tree:
    """Build the tree below parent_id (the whole forest when omitted).

    Siblings keep their store order. A node's height is 0 for a leaf,
    otherwise one more than its tallest child.
    """
    children, height = _build_children(NodeIndex.build(nodes), parent_id)
    return Tree(children=children, height=height)
