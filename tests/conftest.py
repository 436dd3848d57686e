"""Pytest fixtures for Top English Words tests."""

import pytest
from pathlib import Path

from top_english_words.catalog import WordCatalog


@pytest.fixture
def small_words() -> list[str]:
    """A short rank-ordered word list."""
    return ['the', 'of', 'and', 'to', 'a', 'in', 'is', 'you', 'that', 'it']


@pytest.fixture
def small_catalog(small_words) -> WordCatalog:
    """Catalog over small_words (N = 10)."""
    return WordCatalog(small_words)


@pytest.fixture
def words_file(tmp_path, small_words) -> Path:
    """Word list file with a comment and blank lines."""
    path = tmp_path / "words.txt"
    path.write_text("# test list\n" + "\n".join(small_words) + "\n\n", encoding='utf-8')
    return path
