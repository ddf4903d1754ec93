#!/usr/bin/env python3
"""Picture Puzzle.

Usage::

    python main.py                # interactive menu
    python main.py -f rich -s 3   # Rich terminal, 3×3
    python main.py -f pygame      # Pygame GUI (has its own menu)
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from picture_puzzle.cli import app  # noqa: E402

if __name__ == "__main__":
    app()
