"""Entry point for ``python -m lifeconsole``."""

import sys

from .frontends.cli import main

sys.exit(main())
