"""Tests for structural edits on the node list."""

import pytest

from streem.core.write.edits import append_node, delete_nodes, indent_nodes, outdent_nodes
from streem.models.node import Node


def _parents(nodes: list[Node]) -> dict[str, str | None]:
    return {n.id: n.parent for n in nodes}


def test_indent_moves_under_previous_sibling(garden_nodes: list[Node]) -> None:
    result = indent_nodes(garden_nodes, ["c"])
    assert _parents(result)["c"] == "b"
    # input untouched
    assert _parents(garden_nodes)["c"] == "a"


def test_indent_moves_whole_selection(garden_nodes: list[Node]) -> None:
    result = indent_nodes(garden_nodes, ["d", "f"])
    assert _parents(result)["d"] == "a"
    assert _parents(result)["f"] == "a"


def test_indent_without_previous_sibling_is_noop(garden_nodes: list[Node]) -> None:
    result = indent_nodes(garden_nodes, ["a"])
    assert result == garden_nodes
    assert result is not garden_nodes


def test_outdent_moves_next_to_parent(garden_nodes: list[Node]) -> None:
    result = outdent_nodes(garden_nodes, ["e"])
    assert _parents(result)["e"] == "a"
    result = outdent_nodes(garden_nodes, ["b", "c"])
    assert _parents(result)["b"] is None
    assert _parents(result)["c"] is None


def test_outdent_root_level_is_noop(garden_nodes: list[Node]) -> None:
    assert outdent_nodes(garden_nodes, ["d"]) == garden_nodes


def test_empty_selection_is_noop(garden_nodes: list[Node]) -> None:
    assert indent_nodes(garden_nodes, []) == garden_nodes
    assert outdent_nodes(garden_nodes, []) == garden_nodes


def test_delete_tombstones_without_removing(garden_nodes: list[Node]) -> None:
    result = delete_nodes(garden_nodes, ["b", "e"])
    assert len(result) == len(garden_nodes)
    assert [n.id for n in result if n.deleted] == ["b", "e"]


def test_append_node(garden_nodes: list[Node]) -> None:
    new = Node(id="g", created=2000, content="Seeds arrived", parent="d")
    result = append_node(garden_nodes, new)
    assert result[-1] == new
    assert len(garden_nodes) == 6


def test_append_rejects_duplicate_and_dangling(garden_nodes: list[Node]) -> None:
    with pytest.raises(ValueError, match="Duplicate"):
        append_node(garden_nodes, Node(id="a", created=2000))
    with pytest.raises(ValueError, match="does not exist"):
        append_node(garden_nodes, Node(id="g", created=2000, parent="missing"))


def test_indent_never_parents_a_node_to_itself(garden_nodes: list[Node]) -> None:
    """f's previous sibling d is part of the selection, so nothing moves."""
    result = indent_nodes(garden_nodes, ["f", "d"])
    assert result == garden_nodes
    assert all(n.parent != n.id for n in result)


def test_outdent_never_moves_under_selected_ancestor(garden_nodes: list[Node]) -> None:
    """e would move to a, but a is selected too."""
    result = outdent_nodes(garden_nodes, ["e", "a"])
    assert result == garden_nodes
    assert all(n.parent != n.id for n in result)


def test_indent_never_moves_under_selected_subtree() -> None:
    """p's previous sibling k sits below the selected x."""
    nodes = [
        Node(id="x", created=1),
        Node(id="k", created=2, parent="x"),
        Node(id="p", created=3, parent="x"),
    ]
    assert indent_nodes(nodes, ["p", "x"]) == nodes
    assert indent_nodes(nodes, ["p"])[2].parent == "k"


def test_edits_are_exported_from_package() -> None:
    import streem

    assert streem.indent_nodes is indent_nodes
    assert streem.outdent_nodes is outdent_nodes
    assert streem.delete_nodes is delete_nodes
    assert streem.append_node is append_node
