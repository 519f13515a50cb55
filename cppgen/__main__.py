"""Allow ``python -m cppgen``."""

import sys

from cppgen.cli import main

if __name__ == "__main__":
    sys.exit(main())
