"""
wordsplit: split concatenated words using a ranked word frequency list.

    >>> import wordsplit
    >>> wordsplit.split("thequickbrownfox")
    'the quick brown fox'
"""

import time
from typing import Optional, Tuple

from wordsplit.corpus import CorpusError
from wordsplit.cost import CostModel, build_cost_model
from wordsplit.language_model import LanguageModel, clear_cache, load_cost_model
from wordsplit.models import SplitResult, WordResult
from wordsplit.segment import segment, segment_spans, segment_words

__version__ = "0.1.0"

__all__ = [
    "CorpusError",
    "CostModel",
    "LanguageModel",
    "SplitResult",
    "WordResult",
    "analyze",
    "build_cost_model",
    "clear_cache",
    "load_cost_model",
    "segment",
    "segment_spans",
    "segment_words",
    "split",
    "warm_up",
]


def warm_up(corpus_path: Optional[str] = None, verbose: bool = False) -> Tuple[float, dict]:
    """
    Build the cost model ahead of the first split() call.

    Args:
        corpus_path: Corpus to warm up. None uses the default corpus.
        verbose: If True, print timing information.

    Returns:
        Tuple of (total_time_seconds, timing_details_dict)

    Example:
        >>> import wordsplit
        >>> elapsed, details = wordsplit.warm_up(verbose=True)
        Warming up wordsplit...
          Cost model:      18.2ms
          First split:      0.1ms
        Total warm-up:     18.3ms
    """
    timings = {}
    total_start = time.perf_counter()

    if verbose:
        print("Warming up wordsplit...")

    t0 = time.perf_counter()
    model = load_cost_model(corpus_path)
    timings['model'] = (time.perf_counter() - t0) * 1000
    if verbose:
        print(f"  Cost model:    {timings['model']:>7.1f}ms")

    t0 = time.perf_counter()
    segment("warmup", model)
    timings['split'] = (time.perf_counter() - t0) * 1000
    if verbose:
        print(f"  First split:   {timings['split']:>7.1f}ms")

    total_time = time.perf_counter() - total_start
    timings['total'] = total_time * 1000

    if verbose:
        print(f"Total warm-up:   {timings['total']:>7.1f}ms")

    return total_time, timings


def split(text: str, corpus_path: Optional[str] = None) -> str:
    """
    Split unspaced text into words.

    Args:
        text: Text without spaces, e.g. "bankofjordan".
        corpus_path: Optional ranked corpus file. None uses the bundled
            corpus. Models are built once per corpus and reused.

    Returns:
        The words joined by single spaces, in the case of the input.

    Example:
        >>> wordsplit.split("Thequickbrownfoxjumpsoverthelazydog")
        'The quick brown fox jumps over the lazy dog'
    """
    return segment(text, load_cost_model(corpus_path))


def analyze(text: str, corpus_path: Optional[str] = None) -> SplitResult:
    """Split ``text`` and return per-word offsets and costs."""
    return SplitResult.from_spans(text, segment_spans(text, load_cost_model(corpus_path)))
