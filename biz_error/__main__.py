"""Allow ``python -m biz_error``."""

import sys

from .cli import main

sys.exit(main())
