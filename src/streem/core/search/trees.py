"""Turn search groups into display-ordered trees."""

from collections.abc import Sequence

from streem.core.search.searcher import get_searched_nodes
from streem.core.tree.builder import get_tree
from streem.models.node import Node, SearchTree
from streem.protocols import StemmerProtocol


def get_search_trees(
    nodes: Sequence[Node],
    search: str,
    *,
    stemmer: StemmerProtocol | None = None,
) -> dict[str, SearchTree]:
    """Search and rebuild each group as a tree.

    Groups are ordered by fewest matches first, then by most query words.
    Ties keep the order in which the groups were found.
    """
    groups = get_searched_nodes(nodes, search, stemmer=stemmer)
    ordered = sorted(groups.items(), key=lambda item: (item[1].matches, -item[1].words))
    return {
        key: SearchTree(words=group.words, matches=group.matches, tree=get_tree(group.nodes))
        for key, group in ordered
    }
