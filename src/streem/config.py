"""Configuration constants for streem."""

import os
from pathlib import Path

# Maximum number of leaf entries processed by one stream window (plus one).
WINDOW: int = 200

# Stems of this length or shorter are treated as noise by search.
MIN_STEM_LENGTH: int = 3

# A search group needs at least this many matching nodes.
MIN_GROUP_SIZE: int = 2

# Stream paging: initial limit and "load more" step.
DEFAULT_LIMIT: int = 100
LIMIT_STEP: int = 100

# Children shown per level when rendering search result trees.
TREE_CHILD_LIMIT: int = 10

# Nodes file used by the CLI when none is given.
NODES_FILE_ENV: str = "STREEM_NODES_FILE"
DEFAULT_NODES_FILE: Path = Path("~/.local/share/streem/nodes.json").expanduser()


def resolve_nodes_file() -> Path:
    """Return the nodes file from the environment, or the default location."""
    env = os.environ.get(NODES_FILE_ENV)
    if env:
        return Path(env).expanduser()
    return DEFAULT_NODES_FILE
