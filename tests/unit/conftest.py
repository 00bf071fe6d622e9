"""Shared test fixtures."""

import pytest

from streem.models.node import Node


@pytest.fixture
def garden_nodes() -> list[Node]:
    """A small journal about gardening, with one nested thread."""
    return [
        Node(id="a", created=1000, content="Gardening plans for spring"),
        Node(id="b", created=1001, content="Water the garden daily", parent="a"),
        Node(id="c", created=1002, content="Bought a watering can", parent="a"),
        Node(id="d", created=1003, content="Garden party photos"),
        Node(id="e", created=1004, content="Connected the hose", parent="b"),
        Node(id="f", created=1005, content="Garden watering schedule"),
    ]


@pytest.fixture
def stream_nodes() -> list[Node]:
    """Two threads where r1 gets a new entry after r2's thread."""
    return [
        Node(id="r1", created=1000, content="First thread"),
        Node(id="c1", created=1001, content="one", parent="r1"),
        Node(id="c2", created=1002, content="two", parent="r1"),
        Node(id="r2", created=1003, content="Second thread"),
        Node(id="c3", created=1004, content="three", parent="r2"),
        Node(id="c4", created=1005, content="four", parent="r1"),
    ]
