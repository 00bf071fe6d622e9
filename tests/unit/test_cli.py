"""Tests for the streem CLI."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from streem.cli import app

runner = CliRunner()

RECORDS = [
    {"id": "a", "created": "1000", "content": "Gardening plans for spring"},
    {"id": "b", "created": "1001", "content": "Water the garden daily", "parent": "a"},
    {"id": "c", "created": "1002", "content": "Bought a watering can", "parent": "a"},
    {"id": "d", "created": "1003", "content": "Garden party photos"},
]


@pytest.fixture
def nodes_file(tmp_path: Path) -> Path:
    path = tmp_path / "nodes.json"
    path.write_text(json.dumps(RECORDS))
    return path


def test_tree_command(nodes_file: Path) -> None:
    result = runner.invoke(app, ["tree", "--file", str(nodes_file)])
    assert result.exit_code == 0, result.output
    assert "- Gardening plans for spring" in result.output
    assert "    - Bought a watering can" in result.output


def test_tree_command_with_focus(nodes_file: Path) -> None:
    result = runner.invoke(app, ["tree", "--file", str(nodes_file), "--focus", "a"])
    assert result.exit_code == 0, result.output
    assert "Water the garden daily" in result.output
    assert "Garden party photos" not in result.output


def test_stream_command_json(nodes_file: Path) -> None:
    result = runner.invoke(app, ["stream", "--file", str(nodes_file), "--limit", "2", "--json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["start"] == 2
    assert data["total"] == 4
    roots = data["stream"]["children"]
    assert [r["node"]["id"] for r in roots] == ["a", "d"]
    assert [c["node"]["id"] for c in roots[0]["children"]] == ["c"]


def test_stream_command_mentions_older_entries(nodes_file: Path) -> None:
    result = runner.invoke(app, ["stream", "--file", str(nodes_file), "--limit", "1"])
    assert result.exit_code == 0, result.output
    assert "3 older entries" in result.output
    assert "--limit 101" in result.output
    assert "Garden party photos" in result.output


def test_search_command(nodes_file: Path) -> None:
    result = runner.invoke(app, ["search", "garden", "--file", str(nodes_file)])
    assert result.exit_code == 0, result.output
    assert "garden (3 matches)" in result.output
    assert "**Gardening** plans for spring" in result.output


def test_search_command_json(nodes_file: Path) -> None:
    result = runner.invoke(app, ["search", "garden water", "--file", str(nodes_file), "--json"])
    assert result.exit_code == 0, result.output
    groups = json.loads(result.output)["groups"]
    assert [g["key"] for g in groups] == ["water", "garden"]


def test_missing_file_exits_with_error(tmp_path: Path) -> None:
    result = runner.invoke(app, ["tree", "--file", str(tmp_path / "nope.json")])
    assert result.exit_code == 1


def test_invalid_json_exits_with_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json")
    result = runner.invoke(app, ["stream", "--file", str(path)])
    assert result.exit_code == 1


def test_unknown_focus_exits_with_error(nodes_file: Path) -> None:
    result = runner.invoke(app, ["stream", "--file", str(nodes_file), "--focus", "zzz"])
    assert result.exit_code == 1


def test_stream_command_without_older_entries(nodes_file: Path) -> None:
    result = runner.invoke(app, ["stream", "--file", str(nodes_file), "--limit", "4"])
    assert result.exit_code == 0, result.output
    assert "older entries" not in result.output
