"""Entry point for ``python -m amountlex``."""

import sys

from amountlex.cli import main

if __name__ == "__main__":
    sys.exit(main())
