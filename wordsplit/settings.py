"""
Settings and configuration for wordsplit.

Values are read from the environment once, at import time.
"""

import os
from pathlib import Path

# Data directory paths
PACKAGE_DIR = Path(__file__).parent
DATA_DIR = PACKAGE_DIR / "data"

# Bundled ranked corpus, one word per line, most frequent first
DEFAULT_CORPUS_PATH = DATA_DIR / "corpus.txt"

# Environment variable for a custom corpus path
CORPUS_PATH = os.environ.get("WORDSPLIT_CORPUS_PATH") or None

# Encoding of corpus files
CORPUS_ENCODING = "utf-8"

# Debug mode
DEBUG = os.environ.get("WORDSPLIT_DEBUG", "").lower() in ("1", "true", "yes")
