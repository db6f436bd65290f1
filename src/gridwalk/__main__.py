"""Allow ``python -m gridwalk``."""

import sys

from gridwalk.main import main


sys.exit(main())
