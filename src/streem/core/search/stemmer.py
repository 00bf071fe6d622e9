"""Word tokenizer and Porter stemmer backed by NLTK."""

from nltk.stem import PorterStemmer
from nltk.tokenize import RegexpTokenizer

# Latin and Cyrillic letters, digits and underscore; everything else separates.
WORD_CHARS = "A-Za-zА-Яа-я0-9_"
WORD_PATTERN = f"[{WORD_CHARS}]+"


class PorterStemmerAdapter:
    """StemmerProtocol implementation using NLTK's Porter stemmer.

    Holds no per-call state; one instance can be shared or created per call.
    Needs no NLTK data downloads.
    """

    def __init__(self) -> None:
        self._tokenizer = RegexpTokenizer(WORD_PATTERN)
        self._stemmer = PorterStemmer()

    def tokenize(self, text: str) -> list[str]:
        return self._tokenizer.tokenize(text)

    def stem(self, word: str) -> str:
        return self._stemmer.stem(word)
