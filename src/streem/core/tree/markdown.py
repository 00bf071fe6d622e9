"""Render trees and streams as indented markdown outlines."""

import io

from streem.models.node import Node, Stream, StreamNode, Tree, TreeNode


def _write_node(out: io.StringIO, node: Node, depth: int, *, suffix: str = "") -> None:
    indent = "    " * depth
    lines = (node.content or "").split("\n")
    first = lines[0]
    if node.deleted:
        first = f"~~{first}~~"
    out.write(f"{indent}- {first}{suffix}\n")
    for line in lines[1:]:
        out.write(f"{indent}  {line}\n")


def _write_tree_nodes(
    out: io.StringIO,
    children: tuple[TreeNode, ...],
    depth: int,
    max_depth: int | None,
    max_children: int | None,
) -> None:
    shown = children if max_children is None else children[:max_children]
    for child in shown:
        _write_node(out, child.node, depth)
        if not child.children:
            continue
        if max_depth is not None and depth >= max_depth:
            # Truncation indicator when children are cut off by max_depth
            count = len(child.children)
            noun = "child" if count == 1 else "children"
            out.write(f"{'    ' * (depth + 1)}- ... ({count} more {noun})\n")
            continue
        _write_tree_nodes(out, child.children, depth + 1, max_depth, max_children)
    if len(shown) < len(children):
        out.write(f"{'    ' * depth}- ...\n")


def render_tree_as_markdown(
    tree: Tree | TreeNode,
    *,
    max_depth: int | None = None,
    max_children: int | None = None,
) -> str:
    """Render a tree as an indented bullet list.

    Args:
        tree: A Tree (its root-level nodes are rendered) or a TreeNode
            (the node itself is rendered with its descendants).
        max_depth: Max levels below the top to include (None = unlimited).
        max_children: Max children per level; the rest are shown as "...".

    Returns:
        Markdown string with bullet-list hierarchy.
    """
    out = io.StringIO()
    if isinstance(tree, TreeNode):
        _write_tree_nodes(out, (tree,), 0, max_depth, max_children)
    else:
        _write_tree_nodes(out, tree.children, 0, max_depth, max_children)
    return out.getvalue()


def _write_stream_nodes(out: io.StringIO, children: tuple[StreamNode, ...], depth: int) -> None:
    for child in children:
        _write_node(out, child.node, depth, suffix=" (cont.)" if child.iteration > 0 else "")
        _write_stream_nodes(out, child.children, depth + 1)


def render_stream_as_markdown(stream: Stream) -> str:
    """Render a stream view; repeated ancestor headers are marked "(cont.)"."""
    out = io.StringIO()
    _write_stream_nodes(out, stream.children, 0)
    return out.getvalue()
