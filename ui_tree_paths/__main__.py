"""Run the command line interface with ``python -m ui_tree_paths``."""

import sys

from .cli import main

sys.exit(main())
