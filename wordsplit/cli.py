"""
Command line interface for wordsplit.

Usage:
    python -m wordsplit "thequickbrownfox"
    python -m wordsplit -f "bankofjordan"         # full JSON
    python -m wordsplit -c words.txt "foobar"     # custom corpus
    cat lines.txt | python -m wordsplit
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from wordsplit import __version__, settings
from wordsplit.corpus import CorpusError
from wordsplit.language_model import load_cost_model
from wordsplit.models import SplitResult
from wordsplit.segment import segment, segment_spans


def split_line(line: str, model, full: bool = False):
    """Split every whitespace-separated chunk of a line."""
    chunks = line.split()
    if full:
        return [SplitResult.from_spans(c, segment_spans(c, model)) for c in chunks]
    return ' '.join(segment(c, model) for c in chunks)


def main(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description='Split concatenated words into a space-separated sentence',
        prog='wordsplit',
    )

    parser.add_argument(
        'text',
        nargs='*',
        help='Text to split (read from stdin if omitted)',
    )

    parser.add_argument(
        '-c', '--corpus',
        type=str,
        default=None,
        metavar='PATH',
        help='Ranked corpus file, one word per line (default: bundled corpus)',
    )

    parser.add_argument(
        '-f', '--full',
        action='store_true',
        help='Print word offsets and costs as JSON',
    )

    parser.add_argument(
        '-V', '--version',
        action='store_true',
        help='Show version information',
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging',
    )

    parsed = parser.parse_args(args)

    if parsed.version:
        print(f'wordsplit {__version__}')
        return 0

    if parsed.verbose or settings.DEBUG:
        logging.basicConfig(level=logging.DEBUG)

    if parsed.text:
        lines = [' '.join(parsed.text)]
    elif not sys.stdin.isatty():
        lines = [line.rstrip('\n') for line in sys.stdin]
    else:
        parser.print_help()
        return 1

    try:
        model = load_cost_model(parsed.corpus)
    except CorpusError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    if parsed.full:
        output = []
        for line in lines:
            output.extend(r.model_dump() for r in split_line(line, model, full=True))
        print(json.dumps(output, ensure_ascii=False))
    else:
        for line in lines:
            print(split_line(line, model))

    return 0


if __name__ == '__main__':
    sys.exit(main())
