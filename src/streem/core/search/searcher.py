"""Stem-based search that groups nodes by the query words they match.

Every node is matched word by word against the query using Porter stems.
The node then joins one group per non-empty subset of the query words it
matched, so a node matching "alpha" and "beta" lands in the "alpha", "beta"
and "alpha beta" groups, each copy highlighting only that group's words.
Groups are completed with their ancestors so each one can be rebuilt as a
tree.
"""

import re
from collections.abc import Iterator, Sequence
from dataclasses import replace

from loguru import logger

from streem.config import MIN_GROUP_SIZE, MIN_STEM_LENGTH
from streem.core.search.stemmer import WORD_CHARS, PorterStemmerAdapter
from streem.core.tree.index import NodeIndex
from streem.models.node import Node, SearchGroup
from streem.protocols import StemmerProtocol


def get_stems(text: object, stemmer: StemmerProtocol) -> dict[str, str]:
    """Map each distinct token of text to its stem, dropping short stems.

    Tokens keep their first-occurrence order. Anything but a string is
    treated as empty text.
    """
    if not isinstance(text, str):
        return {}
    stems: dict[str, str] = {}
    for token in stemmer.tokenize(text):
        stem = stemmer.stem(token)
        if len(stem) > MIN_STEM_LENGTH:
            stems[token] = stem
    return stems


def word_subsets(words: Sequence[str]) -> Iterator[tuple[str, ...]]:
    """Yield every non-empty subset of words, keeping their order.

    Subsets come out in the order they are built by adding one word at a
    time: (a,), (b,), (a, b), (c,), (a, c), (b, c), (a, b, c). There are
    2**len(words) - 1 of them; query lengths keep this small.
    """
    subsets: list[tuple[str, ...]] = [()]
    for word in words:
        subsets += [(*subset, word) for subset in subsets]
    yield from subsets[1:]


def highlight(content: str, words: Sequence[str]) -> str:
    """Wrap whole-word occurrences of each word in `**` markers.

    Word boundaries use the same characters as the tokenizer, so every word
    the tokenizer found can be wrapped.
    """
    for word in words:
        pattern = rf"(?<![{WORD_CHARS}]){re.escape(word)}(?![{WORD_CHARS}])"
        content = re.sub(pattern, r"**\g<0>**", content)
    return content


def _matching_words(
    query_stems: dict[str, str], content_stems: dict[str, str]
) -> dict[str, list[str]]:
    """For each query word, the content words sharing its stem."""
    matches: dict[str, list[str]] = {}
    for word, stem in query_stems.items():
        matching = [token for token, token_stem in content_stems.items() if token_stem == stem]
        if matching:
            matches[word] = matching
    return matches


def complete_nodes(subset: Sequence[Node], index: NodeIndex) -> list[Node]:
    """Add the missing ancestors of subset so it forms connected paths.

    The walk up from each node stops at the first ancestor already present.
    Raises MissingNodeError if a parent does not resolve.
    """
    result = list(subset)
    present = {node.id for node in result}
    for node in subset:
        parent_id = node.parent
        while parent_id and parent_id not in present:
            parent = index.get(parent_id)
            result.append(parent)
            present.add(parent.id)
            parent_id = parent.parent
    return result


def get_searched_nodes(
    nodes: Sequence[Node],
    search: str,
    *,
    stemmer: StemmerProtocol | None = None,
) -> dict[str, SearchGroup]:
    """Group nodes by the subsets of search words they match.

    Args:
        nodes: The full store.
        search: Free-text query.
        stemmer: Tokenizer/stemmer to use. Defaults to the Porter stemmer.

    Returns:
        Mapping of subset key (the subset's words joined by a space, in
        query order) to its SearchGroup. Groups with fewer than
        MIN_GROUP_SIZE matching nodes are left out.
    """
    stemmer = stemmer or PorterStemmerAdapter()
    query_stems = get_stems(search, stemmer)
    if not query_stems:
        return {}

    grouped: dict[str, tuple[int, list[Node]]] = {}
    for node in nodes:
        matches = _matching_words(query_stems, get_stems(node.content, stemmer))
        for subset in word_subsets(list(matches)):
            key = " ".join(subset)
            if key not in grouped:
                grouped[key] = (len(subset), [])
            matched = list(dict.fromkeys(w for word in subset for w in matches[word]))
            grouped[key][1].append(replace(node, content=highlight(node.content or "", matched)))

    index = NodeIndex.build(nodes)
    result: dict[str, SearchGroup] = {}
    for key, (words, matched_nodes) in grouped.items():
        if len(matched_nodes) < MIN_GROUP_SIZE:
            continue
        result[key] = SearchGroup(
            words=words,
            matches=len(matched_nodes),
            nodes=tuple(complete_nodes(matched_nodes, index)),
        )

    logger.debug(
        "Search {!r}: {} stems, {} candidate groups, {} kept",
        search, len(query_stems), len(grouped), len(result),
    )
    return result
