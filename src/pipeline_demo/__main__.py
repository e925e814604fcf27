"""``python -m pipeline_demo`` runs the same entry as the console script."""

from __future__ import annotations

import sys

from .entry import main

if __name__ == "__main__":
    sys.exit(main())
