"""Allow ``python -m mdx2excel``."""

import sys

from mdx2excel.cli import main

if __name__ == "__main__":
    sys.exit(main())
