"""
Corpus loading for wordsplit.

A corpus is a UTF-8 text file with one word per line. Line order is rank:
the first word is the most frequent one. The bundled default lives in
``wordsplit/data/corpus.txt``.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from wordsplit.settings import CORPUS_ENCODING, DEFAULT_CORPUS_PATH

logger = logging.getLogger(__name__)


class CorpusError(ValueError):
    """Raised when a corpus is missing, unreadable or empty."""


def read_words(lines: Iterable[str]) -> List[str]:
    """Return the non-blank lines of a corpus, stripped, in file order."""
    words = []
    for line in lines:
        word = line.strip()
        if word:
            words.append(word)
    return words


def load_words(path: Optional[Union[str, Path]] = None) -> List[str]:
    """
    Load a ranked word list.

    Args:
        path: Corpus file to read. None loads the bundled default corpus.

    Returns:
        The words in rank order.

    Raises:
        CorpusError: If the file cannot be read or holds no words.
    """
    path = Path(path) if path is not None else DEFAULT_CORPUS_PATH

    try:
        with open(path, "r", encoding=CORPUS_ENCODING) as f:
            words = read_words(f)
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusError(f"Cannot read corpus at {path}: {e}") from e

    if not words:
        raise CorpusError(f"Corpus at {path} contains no words")

    logger.info(f"Loaded {len(words):,} words from {path}")
    return words
