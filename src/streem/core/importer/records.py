"""Coerce already-parsed node records into domain models."""

from collections.abc import Iterable, Mapping
from typing import Any

from loguru import logger

from streem.models.node import Node

_TRUE = {"true", "1", "yes"}
_FALSE = {"false", "0", "no", ""}


def _parse_bool(value: Any, *, node_id: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    msg = f"Node {node_id!r}: cannot read deleted={value!r} as a boolean"
    raise ValueError(msg)


def _optional_str(value: Any, *, strip: bool = False) -> str | None:
    if value is None:
        return None
    text = str(value)
    if strip:
        text = text.strip()
    return text or None


def parse_node_record(raw: Mapping[str, Any]) -> Node:
    """Turn one record into a Node.

    Records may come from a text format where every value is a string, so
    `created` is coerced to int and `deleted` accepts "true"/"false". An
    empty `content` or a blank `parent` becomes None; other content is kept
    verbatim.
    """
    node_id = _optional_str(raw.get("id"), strip=True)
    if node_id is None:
        msg = f"Node record without an id: {dict(raw)!r}"
        raise ValueError(msg)
    try:
        created = int(raw.get("created") or 0)
    except (TypeError, ValueError):
        msg = f"Node {node_id!r}: created={raw.get('created')!r} is not a timestamp"
        raise ValueError(msg) from None

    return Node(
        id=node_id,
        created=created,
        content=_optional_str(raw.get("content")),
        parent=_optional_str(raw.get("parent"), strip=True),
        deleted=_parse_bool(raw.get("deleted"), node_id=node_id),
    )


def parse_node_records(records: Iterable[Mapping[str, Any]]) -> list[Node]:
    """Turn a sequence of records into Nodes, keeping their order.

    Raises:
        ValueError: A record is malformed or an id appears twice.
    """
    result: list[Node] = []
    seen: set[str] = set()
    for raw in records:
        node = parse_node_record(raw)
        if node.id in seen:
            msg = f"Duplicate node id: {node.id!r}"
            raise ValueError(msg)
        seen.add(node.id)
        result.append(node)

    dangling = sorted({n.parent for n in result if n.parent and n.parent not in seen})
    if dangling:
        logger.warning("Records reference missing parents: {}", ", ".join(dangling))
    logger.debug("Parsed {} node records", len(result))
    return result
