"""Allow ``python -m wordsplit``."""

import sys

from wordsplit.cli import main

sys.exit(main())
