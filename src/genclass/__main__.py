"""Entry point for ``python -m genclass``."""

import sys

from genclass.cli import main

if __name__ == "__main__":
    sys.exit(main())
