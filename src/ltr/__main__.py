"""Allow ``python -m ltr`` to run the command line interface."""

import sys

from ltr.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
