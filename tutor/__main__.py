"""Allow ``python -m tutor``."""

import sys

from .cli import main

sys.exit(main())
