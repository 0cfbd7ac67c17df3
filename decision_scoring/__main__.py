"""Run the CLI: python -m decision_scoring."""

import sys

from .cli import main

sys.exit(main())
