"""
Word cost model.

Each word of a ranked corpus gets a cost that grows with its rank
(a Zipf-style negative log likelihood):

    cost = ln((rank + 1) * ln(N))

where ``rank`` is the 0-based line number and ``N`` the corpus size.
Lower cost means more probable.
"""

import logging
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from wordsplit.corpus import CorpusError

logger = logging.getLogger(__name__)


def word_cost(rank: int, total: int) -> float:
    """Cost of the word at 0-based ``rank`` in a corpus of ``total`` words."""
    # ln(1) == 0 would make the product zero for a one-word corpus
    scale = math.log(total) if total > 1 else 1.0
    return math.log((rank + 1) * scale)


@dataclass(frozen=True)
class CostModel:
    """
    Immutable word -> cost lookup plus the longest word length.

    Keys of ``costs`` are lowercase. The model is never mutated after
    construction and can be shared between threads.
    """
    costs: Mapping[str, float] = field(repr=False, hash=False)
    max_word_length: int

    def __post_init__(self):
        object.__setattr__(self, 'costs', MappingProxyType(dict(self.costs)))

    def cost_of(self, word: str) -> Optional[float]:
        """Return the cost of ``word`` (case-insensitive), or None if unknown."""
        return self.costs.get(word.lower())

    def __contains__(self, word: str) -> bool:
        return word.lower() in self.costs

    def __len__(self) -> int:
        return len(self.costs)


def build_cost_model(words: Sequence[str]) -> CostModel:
    """
    Build a cost model from a ranked word list.

    Args:
        words: Words in rank order, most frequent first.

    Returns:
        CostModel for the list.

    Raises:
        CorpusError: If ``words`` is empty.
    """
    total = len(words)
    if total == 0:
        raise CorpusError("Cannot build a cost model from an empty word list")

    costs = {}
    max_word_length = 0
    for rank, word in enumerate(words):
        key = word.lower()
        # The first (more frequent) occurrence keeps its rank
        if key not in costs:
            costs[key] = word_cost(rank, total)
        max_word_length = max(max_word_length, len(word))

    logger.debug(f"Built cost model: {len(costs):,} words, max length {max_word_length}")
    return CostModel(costs=costs, max_word_length=max_word_length)
