"""Shared fixtures for wordsplit tests."""

import pytest

from wordsplit.cost import build_cost_model
from wordsplit.language_model import clear_cache


FOX_WORDS = ["the", "quick", "brown", "fox", "jumps", "over", "lazy", "dog"]


@pytest.fixture
def jordan_model():
    """Cost model from the three-word scenario corpus."""
    return build_cost_model(["jordan", "bank", "of"])


@pytest.fixture
def fox_model():
    """Cost model holding the words of the pangram."""
    return build_cost_model(FOX_WORDS)


@pytest.fixture
def corpus_file(tmp_path):
    """Write a small ranked corpus file and return its path."""
    path = tmp_path / "corpus.txt"
    path.write_text("jordan\nbank\nof\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def fresh_cache():
    """Each test starts and ends with an empty model cache."""
    clear_cache()
    yield
    clear_cache()
