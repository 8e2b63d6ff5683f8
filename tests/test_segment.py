"""
Tests for segment.py - the dynamic program and backtracking.
"""

import pytest

from wordsplit.cost import CostModel, build_cost_model
from wordsplit.segment import (
    PathCost,
    Trace,
    best_match,
    build_trace,
    segment,
    segment_spans,
    segment_words,
)


class TestScenarios:
    """End-to-end segmentations with small corpora."""

    def test_bank_of_jordan(self, jordan_model):
        assert segment("bankofjordan", jordan_model) == "bank of jordan"

    def test_case_preserved(self, fox_model):
        result = segment("Thequickbrownfoxjumpsoverthelazydog", fox_model)
        assert result == "The quick brown fox jumps over the lazy dog"

    def test_no_known_words(self, jordan_model):
        """Unknown text falls back to one word per character."""
        assert segment("xyzxyz", jordan_model) == "x y z x y z"

    def test_unknown_between_known(self, jordan_model):
        assert segment("bankxof", jordan_model) == "bank x of"

    def test_multibyte_text(self):
        model = build_cost_model(["日本", "語", "です"])
        assert segment("日本語です", model) == "日本 語 です"

    def test_accented_words(self):
        model = build_cost_model(["café", "au", "lait"])
        assert segment("caféaulait", model) == "café au lait"


class TestBoundaries:
    """Empty input, tiny input, input type."""

    def test_empty(self, jordan_model):
        assert segment("", jordan_model) == ""
        assert segment_words("", jordan_model) == []

    def test_single_character(self, jordan_model):
        assert segment("q", jordan_model) == "q"

    def test_text_shorter_than_window(self, jordan_model):
        assert segment("of", jordan_model) == "of"

    def test_non_string(self, jordan_model):
        with pytest.raises(TypeError):
            segment(b"bankofjordan", jordan_model)


class TestProperties:
    """Invariants that hold for any input."""

    INPUTS = [
        "bankofjordan",
        "BankOfJordan",
        "ofofofbank",
        "jordanxxbank",
        "zzz",
        "ba",
    ]

    @pytest.mark.parametrize("text", INPUTS)
    def test_coverage(self, jordan_model, text):
        """Removing the spaces gives back the input exactly."""
        assert segment(text, jordan_model).replace(" ", "") == text

    @pytest.mark.parametrize("text", INPUTS)
    def test_deterministic(self, jordan_model, text):
        assert segment(text, jordan_model) == segment(text, jordan_model)

    @pytest.mark.parametrize("text", INPUTS)
    def test_window_bound(self, jordan_model, text):
        for word in segment_words(text, jordan_model):
            assert len(word) <= jordan_model.max_word_length

    def test_resegment_known_sentence(self, fox_model):
        sentence = "the lazy dog jumps over the quick brown fox"
        assert segment(sentence.replace(" ", ""), fox_model) == sentence


class TestTieBreak:
    """Equal-cost candidates resolve to the shortest last word."""

    def test_shortest_word_wins(self):
        model = CostModel(costs={"ab": 2.0, "a": 1.0, "b": 1.0}, max_word_length=2)
        assert segment("ab", model) == "a b"

    def test_cheaper_longer_word_still_wins(self):
        model = CostModel(costs={"ab": 1.5, "a": 1.0, "b": 1.0}, max_word_length=2)
        assert segment("ab", model) == "ab"

    def test_known_word_beats_unknown_characters(self):
        """Coverage by known words outranks a lower total cost."""
        model = CostModel(costs={"abc": 100.0}, max_word_length=3)
        assert segment("abc", model) == "abc"


class TestTrace:
    """Tests for the forward pass state."""

    def test_initial_state(self):
        trace = Trace()
        assert trace.costs == [PathCost(0, 0.0)]
        assert trace.splits == [0]

    def test_trace_length(self, jordan_model):
        trace = build_trace("bankofjordan", jordan_model)
        assert len(trace.costs) == 13
        assert len(trace.splits) == 13

    def test_splits_point_at_words(self, jordan_model):
        trace = build_trace("bankofjordan", jordan_model)
        assert trace.splits[12] == 6
        assert trace.splits[6] == 2
        assert trace.splits[4] == 4

    def test_total_cost(self, jordan_model):
        trace = build_trace("bankofjordan", jordan_model)
        expected = sum(jordan_model.cost_of(w) for w in ("bank", "of", "jordan"))
        assert trace.costs[-1].unknown == 0
        assert trace.costs[-1].total == pytest.approx(expected)

    def test_best_match_progress(self, jordan_model):
        """Even with nothing known, the match length is at least one."""
        trace = build_trace("xyz", jordan_model)
        cost, k = best_match(3, "xyz", jordan_model, trace)
        assert k == 1
        assert cost.unknown == 3

    def test_zero_length_model_still_progresses(self):
        model = CostModel(costs={}, max_word_length=0)
        assert segment("abc", model) == "a b c"


class TestSpans:
    """Tests for segment_spans()."""

    def test_offsets(self, jordan_model):
        spans = segment_spans("bankofjordan", jordan_model)
        assert [(s.start, s.end, s.word) for s in spans] == [
            (0, 4, "bank"),
            (4, 6, "of"),
            (6, 12, "jordan"),
        ]

    def test_unknown_cost_is_none(self, jordan_model):
        spans = segment_spans("bankz", jordan_model)
        assert spans[-1].word == "z"
        assert spans[-1].cost is None
        assert spans[0].cost == jordan_model.cost_of("bank")
