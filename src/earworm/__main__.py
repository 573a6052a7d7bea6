"""Allow ``python -m earworm``."""

import sys

from earworm.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
