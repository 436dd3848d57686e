"""Top English Words - the most common English words, ranked by frequency."""

__version__ = "0.1.0"

from .wordlist import WORD_LIST, NUM_WORDS
from .bounds import Bound, BoundKind, WordRange
from .catalog import (
    WordCatalog, default_catalog,
    get_words, get_words_a, get_words_range, get_words_range_a, get_word, is_top_word,
)
