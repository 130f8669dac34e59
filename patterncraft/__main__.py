"""Allow ``python -m patterncraft``."""

import sys

from patterncraft.cli.main import main

sys.exit(main())
