"""Windowed stream view: the tail of a node list, folded into a tree.

Each leaf in the window contributes its root-first path. Paths are merged
level by level: if the last branch at a level is the same node, the path
continues inside it, otherwise a new branch is opened. A node that opens a
second, non-adjacent branch gets a higher `iteration`, so a renderer can tell
repeated headers from continuous ones.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from loguru import logger

from streem.config import WINDOW
from streem.core.tree.index import NodeIndex
from streem.models.node import Node, Stream, StreamNode


@dataclass
class _Branch:
    """Scratch branch used while merging paths, frozen afterwards."""

    node: Node
    iteration: int
    children: list["_Branch"] = field(default_factory=list)


def window_bounds(length: int, limit: int) -> tuple[int, int]:
    """Return the (start, end) slice of the leaves shown for a given limit."""
    if limit <= 0:
        return length, length
    start = max(0, length - limit)
    return start, min(length, start + WINDOW + 1)


def has_more(filtered_nodes: Sequence[Node], limit: int) -> bool:
    """Whether older entries exist before the current window."""
    return limit < len(filtered_nodes)


def _freeze(branches: list[_Branch]) -> tuple[tuple[StreamNode, ...], int]:
    frozen: list[StreamNode] = []
    height = 0
    for branch in branches:
        children, child_height = _freeze(branch.children)
        frozen.append(
            StreamNode(
                node=branch.node,
                iteration=branch.iteration,
                children=children,
                height=child_height,
            )
        )
        height = max(height, child_height + 1)
    return tuple(frozen), height


def get_stream(nodes: Sequence[Node], filtered_nodes: Sequence[Node], limit: int) -> Stream:
    """Build the stream view for the last `limit` entries of filtered_nodes.

    Args:
        nodes: The full store, used to resolve ancestor paths.
        filtered_nodes: The entries to show, usually from filter_descendants.
        limit: How many of the most recent entries to include. Never more
            than WINDOW + 1 are processed.

    Returns:
        A Stream whose leaves are the windowed entries in order.

    Raises:
        MissingNodeError: A parent on some entry's path is not in `nodes`.
    """
    start, end = window_bounds(len(filtered_nodes), limit)
    index = NodeIndex.build(nodes)

    roots: list[_Branch] = []
    used: dict[str, int] = {}
    for leaf in filtered_nodes[start:end]:
        level = roots
        for part in index.path(leaf.id):
            if not level or level[-1].node.id != part.id:
                used[part.id] = used.get(part.id, -1) + 1
                level.append(_Branch(node=part, iteration=used[part.id]))
            level = level[-1].children

    children, height = _freeze(roots)
    logger.debug(
        "Stream window {}:{} of {} entries, {} top-level branches",
        start, end, len(filtered_nodes), len(children),
    )
    return Stream(children=children, height=height)
