"""Allow ``python -m mdnote``."""

import sys

from mdnote.cli import main

raise SystemExit(main(sys.argv[1:]))
