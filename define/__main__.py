"""Allow running as ``python -m define``."""

import sys

from define.cli.main import main

sys.exit(main())
