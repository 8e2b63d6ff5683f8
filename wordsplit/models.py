"""
Pydantic models for wordsplit results.

Usage:
    from wordsplit.models import SplitResult

    result = wordsplit.analyze("bankofjordan")
    print(result.sentence)
    print(result.model_dump_json())
"""

from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from wordsplit.segment import Span


class WordResult(BaseModel):
    """A single recovered word."""
    text: str = Field(..., description="Word as it appears in the input")
    start: int = Field(..., description="Start index in the input (characters)")
    end: int = Field(..., description="End index in the input (characters)")
    cost: Optional[float] = Field(None, description="Word cost, None if not in the corpus")
    known: bool = Field(True, description="True if the word was found in the corpus")

    @classmethod
    def from_span(cls, span: Span) -> "WordResult":
        return cls(
            text=span.word,
            start=span.start,
            end=span.end,
            cost=span.cost,
            known=span.cost is not None,
        )


class SplitResult(BaseModel):
    """
    Segmentation of one input string.

    Example response:
        {
            "text": "bankofjordan",
            "sentence": "bank of jordan",
            "words": [
                {"text": "bank", "start": 0, "end": 4, "cost": 0.79, "known": true},
                {"text": "of", "start": 4, "end": 6, "cost": 1.19, "known": true},
                {"text": "jordan", "start": 6, "end": 12, "cost": 0.09, "known": true}
            ],
            "cost": 2.07,
            "unknown": 0
        }
    """
    text: str = Field(..., description="Input text")
    sentence: str = Field(..., description="Space-separated output")
    words: List[WordResult] = Field(default_factory=list, description="Recovered words")
    cost: float = Field(0.0, description="Sum of known word costs")
    unknown: int = Field(0, description="Number of characters that matched no word")

    @classmethod
    def from_spans(cls, text: str, spans: Sequence[Span]) -> "SplitResult":
        """Create a SplitResult from the output of segment_spans()."""
        words = [WordResult.from_span(span) for span in spans]
        return cls(
            text=text,
            sentence=' '.join(w.text for w in words),
            words=words,
            cost=sum(w.cost for w in words if w.known),
            unknown=sum(1 for w in words if not w.known),
        )
