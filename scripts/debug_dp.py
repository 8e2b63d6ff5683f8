"""Print the forward-pass trace of a segmentation, position by position."""
import sys

from wordsplit.language_model import load_cost_model
from wordsplit.segment import build_trace, segment

text = sys.argv[1] if len(sys.argv) > 1 else 'Thequickbrownfoxjumpsoverthelazydog'
model = load_cost_model(sys.argv[2] if len(sys.argv) > 2 else None)
trace = build_trace(text, model)

print(f'=== Trace for {text!r} (max word length {model.max_word_length}) ===')
for i in range(1, len(text) + 1):
    k = trace.splits[i]
    cost = trace.costs[i]
    word = text[i - k:i]
    known = 'known' if word in model else 'unknown'
    print(f'  [{i - k:>3}:{i:<3}] {word!r:<16} unknown={cost.unknown} total={cost.total:.3f} ({known})')

print(f'\nResult: {segment(text, model)}')
