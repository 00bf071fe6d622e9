"""Domain models for the note graph."""

from dataclasses import dataclass


class MissingNodeError(KeyError):
    """A node id (usually a parent reference) does not resolve in the store."""


@dataclass(frozen=True)
class Node:
    """A single note in the flat, parent-linked store."""

    id: str
    created: int
    content: str | None = None
    parent: str | None = None
    deleted: bool = False


@dataclass(frozen=True)
class TreeNode:
    """A node with its nested children, as built by the tree builder."""

    node: Node
    children: tuple["TreeNode", ...] = ()
    height: int = 0


@dataclass(frozen=True)
class Tree:
    """The root of a built tree. Has children but no node of its own."""

    children: tuple[TreeNode, ...] = ()
    height: int = 0


@dataclass(frozen=True)
class StreamNode:
    """A node in the windowed stream view.

    `iteration` counts how many times the same node id has already started
    a separate branch earlier in the same stream.
    """

    node: Node
    iteration: int = 0
    children: tuple["StreamNode", ...] = ()
    height: int = 0


@dataclass(frozen=True)
class Stream:
    """The root of a windowed stream view."""

    children: tuple[StreamNode, ...] = ()
    height: int = 0


@dataclass(frozen=True)
class SearchGroup:
    """Nodes that jointly matched one subset of the query words."""

    words: int
    matches: int
    nodes: tuple[Node, ...]


@dataclass(frozen=True)
class SearchTree:
    """A search group rebuilt as a tree, ready for display."""

    words: int
    matches: int
    tree: Tree
