"""In-memory note-graph engine for a flat, parent-linked outliner."""

from loguru import logger

from streem.core.search.searcher import get_searched_nodes
from streem.core.search.stemmer import PorterStemmerAdapter
from streem.core.search.trees import get_search_trees
from streem.core.tree.builder import get_tree
from streem.core.tree.filter import filter_descendants
from streem.core.tree.navigation import (
    find_ancestors,
    find_node,
    find_parent,
    find_path,
    find_prev,
    get_children,
)
from streem.core.tree.stream import get_stream, has_more
from streem.core.write.edits import append_node, delete_nodes, indent_nodes, outdent_nodes
from streem.models.node import MissingNodeError, Node
from streem.protocols import StemmerProtocol

logger.disable("streem")

__all__ = [
    "MissingNodeError",
    "Node",
    "PorterStemmerAdapter",
    "StemmerProtocol",
    "append_node",
    "delete_nodes",
    "filter_descendants",
    "find_ancestors",
    "find_node",
    "find_parent",
    "find_path",
    "find_prev",
    "get_children",
    "get_search_trees",
    "get_searched_nodes",
    "get_stream",
    "get_tree",
    "has_more",
    "indent_nodes",
    "outdent_nodes",
]
