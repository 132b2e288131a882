"""Allow ``python -m shellfmt``."""

import sys

from shellfmt.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
