"""CLI for streem (tree, stream and search over a nodes file)."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from streem.config import DEFAULT_LIMIT, LIMIT_STEP, TREE_CHILD_LIMIT, resolve_nodes_file
from streem.core.importer.records import parse_node_records
from streem.core.search.trees import get_search_trees
from streem.core.tree.builder import get_tree
from streem.core.tree.filter import filter_descendants
from streem.core.tree.markdown import render_stream_as_markdown, render_tree_as_markdown
from streem.core.tree.navigation import find_node
from streem.core.tree.stream import get_stream, has_more, window_bounds
from streem.logging_config import configure_logging
from streem.models.node import Node, Tree, TreeNode

app = typer.Typer(help="streem: browse and search a flat, parent-linked notes file.")

FileOption = Annotated[
    Path | None,
    typer.Option("--file", "-f", help="JSON file with an array of node records"),
]
FocusOption = Annotated[
    str | None,
    typer.Option("--focus", "-F", help="Only show this node and its descendants"),
]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _load_nodes(path: Path | None) -> list[Node]:
    """Load node records, exiting with an error if the file is unusable."""
    src = path or resolve_nodes_file()
    if not src.exists():
        logger.error("Nodes file not found: {}", src)
        raise typer.Exit(1)
    try:
        records = json.loads(src.read_text(encoding="utf-8"))
        if not isinstance(records, list):
            msg = f"Expected a JSON array of node records in {src}"
            raise ValueError(msg)
        return parse_node_records(records)
    except ValueError as e:
        # json.JSONDecodeError is a ValueError too
        logger.error("Cannot read {}: {}", src, e)
        raise typer.Exit(1) from e


def _check_focus(nodes: list[Node], focus: str | None) -> Node | None:
    """Return the focus node, exiting with an error if it does not exist."""
    if not focus:
        return None
    node = find_node(focus, nodes)
    if node is None:
        logger.error("Node '{}' not found.", focus)
        raise typer.Exit(1)
    return node


@app.command()
def tree(
    file: FileOption = None,
    focus: FocusOption = None,
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", "-m", help="Max depth levels to render"),
    ] = None,
) -> None:
    """Print the note tree as a markdown outline."""
    nodes = _load_nodes(file)
    focus_node = _check_focus(nodes, focus)

    built: Tree | TreeNode
    if focus_node is not None:
        below = get_tree(nodes, focus_node.id)
        built = TreeNode(node=focus_node, children=below.children, height=below.height)
    else:
        built = get_tree(nodes)
    md = render_tree_as_markdown(built, max_depth=max_depth)
    typer.echo(md if md else "No nodes.")


@app.command()
def stream(
    file: FileOption = None,
    focus: FocusOption = None,
    limit: int = typer.Option(DEFAULT_LIMIT, "--limit", "-n", help="Most recent entries to show"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Show the most recent entries, folded under their ancestors."""
    nodes = _load_nodes(file)
    _check_focus(nodes, focus)

    filtered = filter_descendants(nodes, focus)
    view = get_stream(nodes, filtered, limit)
    start, end = window_bounds(len(filtered), limit)

    if output_json:
        data = {
            "stream": asdict(view),
            "start": start,
            "end": end,
            "total": len(filtered),
        }
        typer.echo(json.dumps(data, indent=2))
        return

    if has_more(filtered, limit):
        older = len(filtered) - limit
        typer.echo(f"({older} older entries, rerun with --limit {limit + LIMIT_STEP})\n")
    md = render_stream_as_markdown(view)
    typer.echo(md if md else "No entries.")


@app.command()
def search(
    query: str = typer.Argument(..., help="Search query"),
    file: FileOption = None,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Search notes, grouped by which query words they match."""
    nodes = _load_nodes(file)
    trees = get_search_trees(nodes, query)

    if output_json:
        data = {
            "groups": [
                {
                    "key": key,
                    "words": result.words,
                    "matches": result.matches,
                    "tree": asdict(result.tree),
                }
                for key, result in trees.items()
            ],
        }
        typer.echo(json.dumps(data, indent=2))
        return

    if not trees:
        typer.echo("No result groups.")
        return
    for key, result in trees.items():
        typer.echo(f"{key} ({result.matches} matches)")
        typer.echo(render_tree_as_markdown(result.tree, max_children=TREE_CHILD_LIMIT))
