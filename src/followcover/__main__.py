"""Allow running as ``python -m followcover``."""

import sys

from followcover.cli import main

sys.exit(main())
