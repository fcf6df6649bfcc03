"""Stop-word set used by the text normalizer."""

from pathlib import Path
from typing import FrozenSet, Iterable, Iterator

from .log import base_logger

logger = base_logger.getChild('stopwords')

BUILTIN_STOP_WORDS: FrozenSet[str] = frozenset(
    ["the", "a", "an", "in", "on", "of", "for"]
)


class StopWordSet:
    """Immutable set of lowercase tokens dropped during normalization."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()):
        self._words: FrozenSet[str] = BUILTIN_STOP_WORDS | frozenset(
            w.lower() for w in words if w
        )

    @classmethod
    def builtin(cls) -> "StopWordSet":
        return cls()

    @classmethod
    def from_text(cls, text: str) -> "StopWordSet":
        """Built-in words plus every whitespace-separated token of ``text``."""
        return cls(text.split())

    @classmethod
    def from_file(cls, path: str) -> "StopWordSet":
        """
        Built-in words plus the words listed in ``path``.

        A missing or unreadable file is not an error: the built-in set is
        returned instead.
        """
        try:
            text = Path(path).read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Ignoring stop word file {path}: {e}")
            return cls.builtin()

        stop_words = cls.from_text(text)
        logger.debug(f"Loaded {len(stop_words)} stop words from {path}")
        return stop_words

    def union(self, words: Iterable[str]) -> "StopWordSet":
        """Return a new set extended with ``words``."""
        return StopWordSet(self._words | frozenset(words))

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StopWordSet):
            return NotImplemented
        return self._words == other._words

    def __hash__(self) -> int:
        return hash(self._words)

    def __repr__(self) -> str:
        return f"StopWordSet({len(self._words)} words)"
