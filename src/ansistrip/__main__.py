"""Allow running as ``python -m ansistrip``."""

import sys

from ansistrip.cli import main

sys.exit(main())
