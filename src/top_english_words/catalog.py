"""Read-only queries over a rank-ordered word list."""

from functools import lru_cache
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, TypeVar, Union

from .bounds import RangeLike, resolve
from .wordlist import WORD_LIST

T = TypeVar('T')


class WordCatalog:
    """An immutable sequence of unique words, most frequent first.

    Every query is a pure read. Invalid ranks, ranges and unknown words
    give None rather than raising. Word-producing queries take a
    ``factory`` that materializes each selected word (``str`` by default);
    selection and ordering always use the catalog's own strings.
    """

    __slots__ = ('_words',)

    def __init__(self, words: Iterable[str]):
        words = tuple(words)
        if not words:
            raise ValueError("Word catalog is empty")

        seen: dict[str, int] = {}
        for rank, word in enumerate(words):
            if not isinstance(word, str):
                raise ValueError(f"Rank {rank}: expected str, got {type(word).__name__}")
            if not word.strip():
                raise ValueError(f"Rank {rank}: blank word")
            if word in seen:
                raise ValueError(f"Duplicate word {word!r} at ranks {seen[word]} and {rank}")
            seen[word] = rank

        self._words = words

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "WordCatalog":
        """Load a catalog from a text file, one word per line in rank order.

        Blank lines and ``#`` comment lines are skipped.
        """
        words = []
        with open(path, encoding='utf-8') as f:
            for line in f:
                word = line.strip()
                if not word or word.startswith('#'):
                    continue
                words.append(word)
        return cls(words)

    def __len__(self):
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word):
        return word in self._words

    def __repr__(self):
        return f"WordCatalog({len(self._words)} words)"

    def words(self, factory: Callable[[str], T] = str) -> list[T]:
        """All words in rank order."""
        return [factory(w) for w in self._words]

    def words_alphabetical(self, factory: Callable[[str], T] = str) -> list[T]:
        """All words in code point order."""
        return [factory(w) for w in sorted(self._words)]

    def words_range(self, word_range: RangeLike,
                    factory: Callable[[str], T] = str) -> Optional[list[T]]:
        """Words whose rank falls in ``word_range``, in rank order.

        Returns None if the range is empty or reaches past the last rank.
        """
        bounds = resolve(word_range, len(self._words))
        if bounds is None:
            return None
        start, end = bounds
        return [factory(w) for w in self._words[start:end + 1]]

    def words_range_alphabetical(self, word_range: RangeLike,
                                 factory: Callable[[str], T] = str) -> Optional[list[T]]:
        """Like words_range(), sorted alphabetically."""
        bounds = resolve(word_range, len(self._words))
        if bounds is None:
            return None
        start, end = bounds
        return [factory(w) for w in sorted(self._words[start:end + 1])]

    def word(self, rank: int, factory: Callable[[str], T] = str) -> Optional[T]:
        """The word at ``rank``, or None if there is no such rank."""
        if rank < 0 or rank >= len(self._words):
            return None
        return factory(self._words[rank])

    def rank(self, word: str) -> Optional[int]:
        """Rank of ``word`` (exact, case-sensitive match), or None."""
        for i, w in enumerate(self._words):
            if w == word:
                return i
        return None


@lru_cache(maxsize=1)
def default_catalog() -> WordCatalog:
    """The catalog over the embedded WORD_LIST, built on first use."""
    return WordCatalog(WORD_LIST)


def get_words(factory: Callable[[str], T] = str) -> list[T]:
    """Get all top English words, ordered by rank. Always NUM_WORDS long."""
    return default_catalog().words(factory)


def get_words_a(factory: Callable[[str], T] = str) -> list[T]:
    """Get all top English words in alphabetical order."""
    return default_catalog().words_alphabetical(factory)


def get_words_range(word_range: RangeLike,
                    factory: Callable[[str], T] = str) -> Optional[list[T]]:
    """Get the top English words in ``word_range``, ordered by rank.

    >>> get_words_range(slice(None, 5))
    ['the', 'of', 'to', 'and', 'a']
    """
    return default_catalog().words_range(word_range, factory)


def get_words_range_a(word_range: RangeLike,
                      factory: Callable[[str], T] = str) -> Optional[list[T]]:
    """Get the top English words in ``word_range`` in alphabetical order."""
    return default_catalog().words_range_alphabetical(word_range, factory)


def get_word(rank: int, factory: Callable[[str], T] = str) -> Optional[T]:
    """Get the top English word at ``rank``."""
    return default_catalog().word(rank, factory)


def is_top_word(word: str) -> Optional[int]:
    """Return the rank of ``word`` if it is a top English word.

    Lower ranks are more frequent.
    """
    return default_catalog().rank(word)
