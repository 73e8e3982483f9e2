"""Allow ``python -m spotipi``."""

import sys

from spotipi.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
