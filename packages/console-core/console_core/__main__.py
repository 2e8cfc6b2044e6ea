"""Entry point: ``python -m console_core``."""

import sys

from .cli import main

sys.exit(main())
