"""
Word segmentation of unspaced text.

A Viterbi-style dynamic program over character positions:

1. Forward pass: for every prefix length i, find the cheapest way to end
   a word at i, looking back at most ``max_word_length`` characters.
2. Backtrack from the end of the text along the winning split lengths.

Path costs are ``(unknown, total)`` pairs compared lexicographically:
``unknown`` counts characters that matched no word and were emitted on
their own, ``total`` sums the costs of the known words. Any path with
fewer unknown characters wins; among those the cheaper path wins.
"""

from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Tuple

from wordsplit.cost import CostModel


class PathCost(NamedTuple):
    """Cost of the best path reaching a position."""
    unknown: int
    total: float


ZERO_COST = PathCost(0, 0.0)


class Span(NamedTuple):
    """A recovered word and its character offsets in the input."""
    start: int
    end: int
    word: str
    cost: Optional[float]  # None for an unknown single character


@dataclass
class Trace:
    """
    Per-call state of the forward pass.

    ``costs[i]`` is the best path cost over the first ``i`` characters and
    ``splits[i]`` the length of the last word on that path.
    """
    costs: List[PathCost] = field(default_factory=lambda: [ZERO_COST])
    splits: List[int] = field(default_factory=lambda: [0])


def best_match(i: int, text: str, model: CostModel, trace: Trace) -> Tuple[PathCost, int]:
    """
    Find the cheapest last word ending at position ``i``.

    Candidates are scanned from the shortest to the longest and only a
    strictly cheaper one replaces the current best, so ties go to the
    shortest word.

    Returns:
        Tuple of (path cost at i, length of the last word).
    """
    window = min(i, max(model.max_word_length, 1))
    best: Optional[PathCost] = None
    best_k = 1

    for k in range(1, window + 1):
        prev = trace.costs[i - k]
        cost = model.cost_of(text[i - k:i])
        if cost is not None:
            candidate = PathCost(prev.unknown, prev.total + cost)
        elif k == 1:
            candidate = PathCost(prev.unknown + 1, prev.total)
        else:
            continue

        if best is None or candidate < best:
            best = candidate
            best_k = k

    return best, best_k


def build_trace(text: str, model: CostModel) -> Trace:
    """Run the forward pass over ``text``."""
    trace = Trace()
    for i in range(1, len(text) + 1):
        cost, k = best_match(i, text, model, trace)
        trace.costs.append(cost)
        trace.splits.append(k)
    return trace


def segment_spans(text: str, model: CostModel) -> List[Span]:
    """
    Segment ``text`` and return the recovered words with their offsets.

    Words keep the case of the input; lookup is case-insensitive.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, not {type(text).__name__}")
    if not text:
        return []

    trace = build_trace(text, model)

    spans = []
    i = len(text)
    while i > 0:
        k = trace.splits[i]
        word = text[i - k:i]
        spans.append(Span(i - k, i, word, model.cost_of(word)))
        i -= k

    spans.reverse()
    return spans


def segment_words(text: str, model: CostModel) -> List[str]:
    """Segment ``text`` into a list of words."""
    return [span.word for span in segment_spans(text, model)]


def segment(text: str, model: CostModel) -> str:
    """
    Segment ``text`` into a space-separated sentence.

    Example:
        >>> from wordsplit.cost import build_cost_model
        >>> model = build_cost_model(["jordan", "bank", "of"])
        >>> segment("bankofjordan", model)
        'bank of jordan'
    """
    return ' '.join(segment_words(text, model))
