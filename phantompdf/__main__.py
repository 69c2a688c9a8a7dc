"""Allow ``python -m phantompdf``."""

import sys

from phantompdf.cli import main

sys.exit(main())
