"""Tests for configuration helpers."""

from pathlib import Path

import pytest

from streem.config import DEFAULT_NODES_FILE, NODES_FILE_ENV, resolve_nodes_file


def test_nodes_file_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv(NODES_FILE_ENV, str(tmp_path / "mine.json"))
    assert resolve_nodes_file() == tmp_path / "mine.json"


def test_nodes_file_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(NODES_FILE_ENV, raising=False)
    assert resolve_nodes_file() == DEFAULT_NODES_FILE
