"""
Language models: a cost model bound to the corpus it was built from.

Two ways to get one:

* ``load_cost_model(path)`` returns a process-wide memoized model per
  corpus source, built on first use.
* ``LanguageModel(path)`` builds a fresh model owned by the instance.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Sequence, Union

from wordsplit import settings
from wordsplit.corpus import load_words
from wordsplit.cost import CostModel, build_cost_model
from wordsplit.models import SplitResult
from wordsplit.segment import segment, segment_spans, segment_words

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _resolve_corpus_path(corpus_path: Optional[PathLike]) -> Optional[str]:
    """Normalize a corpus source to an absolute path string, or None for the default."""
    if corpus_path is None:
        corpus_path = settings.CORPUS_PATH
    if corpus_path is None:
        return None
    return str(Path(corpus_path).expanduser().resolve())


@lru_cache(maxsize=None)
def _cached_cost_model(resolved_path: Optional[str]) -> CostModel:
    logger.info(f"Building cost model for {resolved_path or 'bundled corpus'}")
    return build_cost_model(load_words(resolved_path))


def load_cost_model(corpus_path: Optional[PathLike] = None) -> CostModel:
    """
    Get the shared cost model for a corpus source.

    Args:
        corpus_path: Corpus file. None uses WORDSPLIT_CORPUS_PATH if set,
            otherwise the bundled corpus.

    Raises:
        CorpusError: If the corpus cannot be loaded.
    """
    return _cached_cost_model(_resolve_corpus_path(corpus_path))


def clear_cache() -> None:
    """Drop all memoized cost models."""
    _cached_cost_model.cache_clear()


class LanguageModel:
    """
    A cost model with the segmentation operations bound to it.

    The model is built when the instance is created, so a bad corpus path
    fails here rather than on the first call to split().

    Example:
        >>> lm = LanguageModel.from_words(["jordan", "bank", "of"])
        >>> lm.split("bankofjordan")
        'bank of jordan'
    """

    def __init__(
        self,
        corpus_path: Optional[PathLike] = None,
        cost_model: Optional[CostModel] = None,
    ) -> None:
        self.corpus_path = corpus_path
        if cost_model is None:
            cost_model = build_cost_model(load_words(_resolve_corpus_path(corpus_path)))
        self.cost_model = cost_model

    @classmethod
    def from_words(cls, words: Sequence[str]) -> "LanguageModel":
        """Create a model from an in-memory ranked word list."""
        return cls(cost_model=build_cost_model(words))

    @property
    def max_word_length(self) -> int:
        return self.cost_model.max_word_length

    def split(self, text: str) -> str:
        """Segment ``text`` into a space-separated sentence."""
        return segment(text, self.cost_model)

    def words(self, text: str) -> List[str]:
        """Segment ``text`` into a list of words."""
        return segment_words(text, self.cost_model)

    def analyze(self, text: str) -> SplitResult:
        """Segment ``text`` and return per-word details."""
        return SplitResult.from_spans(text, segment_spans(text, self.cost_model))

    def __repr__(self) -> str:
        return f"LanguageModel(corpus_path={self.corpus_path!r}, words={len(self.cost_model)})"
