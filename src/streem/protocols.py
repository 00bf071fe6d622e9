"""Protocols for dependency injection in the note-graph engine."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class StemmerProtocol(Protocol):
    """Protocol for word tokenizers/stemmers used by the search engine."""

    def tokenize(self, text: str) -> list[str]:
        """Split free text into words."""
        ...

    def stem(self, word: str) -> str:
        """Reduce a word to its stem."""
        ...
