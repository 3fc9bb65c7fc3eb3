"""Allow running the CLI with ``python -m dewdrop``."""

import sys

from dewdrop.cli.run import main

if __name__ == "__main__":
    sys.exit(main())
