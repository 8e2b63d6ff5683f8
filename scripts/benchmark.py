#!/usr/bin/env python
"""
Benchmark script for the wordsplit CLI and Python API.

Tests:
1. Cold boot (fresh Python process)
2. Warm performance (model built)
3. Long input
"""

import subprocess
import sys
import time
from pathlib import Path

# Ensure we use local package
sys.path.insert(0, str(Path(__file__).parent.parent))

# Test sentences
SINGLE_SENTENCE = "Thequickbrownfoxjumpsoverthelazydog"
BATCH_SENTENCES = [
    "bankofjordan",
    "rustisgreat",
    "thisisatest",
    "thebestthingaboutsciencethisyear",
    "whatdoyouwanttoeatformorningfood",
    "shewenthometoreadabookaboutbirds",
    "myfatherwalkedthedogbytheriver",
    "themoonwasbrightlastnight",
    "comeandplaythisgamewithus",
    "wateristhemostcommonliquid",
]


def run_cli_cold_boot():
    """Measure CLI cold boot time (fresh subprocess)."""
    times = []
    for _ in range(3):
        start = time.perf_counter()
        result = subprocess.run(
            [sys.executable, "-m", "wordsplit", SINGLE_SENTENCE],
            capture_output=True,
            text=True,
        )
        elapsed = time.perf_counter() - start
        times.append(elapsed)
        if result.returncode != 0:
            print(f"CLI error: {result.stderr}")
            return None
    return times


def run_python_api_cold():
    """Measure the first split() call, which builds the model."""
    import wordsplit

    wordsplit.clear_cache()
    start = time.perf_counter()
    wordsplit.split(SINGLE_SENTENCE)
    elapsed = time.perf_counter() - start

    return [elapsed]


def run_python_api_warm():
    """Measure split() with the model already built."""
    import wordsplit

    wordsplit.warm_up()

    times = []
    for sentence in BATCH_SENTENCES:
        start = time.perf_counter()
        wordsplit.split(sentence)
        elapsed = time.perf_counter() - start
        times.append(elapsed)

    return times


def run_python_api_long():
    """Measure split() on a long input (cost grows with length * max word length)."""
    import wordsplit

    wordsplit.warm_up()
    text = "".join(BATCH_SENTENCES) * 10

    start = time.perf_counter()
    wordsplit.split(text)
    elapsed = time.perf_counter() - start

    return [elapsed], len(text)


def format_times(times, label):
    """Format timing results."""
    if not times:
        return f"{label}: N/A"

    avg = sum(times) / len(times)
    min_t = min(times)
    max_t = max(times)

    return f"{label}:\n  avg: {avg*1000:.1f}ms, min: {min_t*1000:.1f}ms, max: {max_t*1000:.1f}ms (n={len(times)})"


def main():
    print("=" * 60)
    print("wordsplit Performance Benchmark")
    print("=" * 60)
    print()

    print("1. Python API Cold Boot (first call builds the model)...")
    api_cold = run_python_api_cold()
    print(format_times(api_cold, "   API cold boot"))
    print()

    print("2. Python API Warm (10 sentences)...")
    api_warm = run_python_api_warm()
    print(format_times(api_warm, "   API warm"))
    print()

    print("3. Python API Long Input...")
    api_long, length = run_python_api_long()
    print(format_times(api_long, f"   API long ({length:,} chars)"))
    print()

    print("4. CLI Cold Boot (fresh subprocess)...")
    cli_cold = run_cli_cold_boot()
    print(format_times(cli_cold, "   CLI cold boot"))
    print()

    print("=" * 60)
    print("SUMMARY")
    print("=" * 60)

    if cli_cold:
        print(f"CLI cold boot:         {sum(cli_cold)/len(cli_cold)*1000:.0f}ms avg")
    if api_cold:
        print(f"Python API cold boot:  {sum(api_cold)/len(api_cold)*1000:.0f}ms avg")
    if api_warm:
        print(f"Python API warm:       {sum(api_warm)/len(api_warm)*1000:.0f}ms avg")
    if api_long:
        print(f"Python API long input: {api_long[0]*1000:.0f}ms")


if __name__ == "__main__":
    main()
