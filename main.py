"""SwipeSaver - main entry point.

Run this file to start the app from a checkout:
    python main.py

Or as a module once installed:
    python -m swipe_saver
"""

import sys
from pathlib import Path

# Make src importable without installing
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

from swipe_saver.app import main

if __name__ == "__main__":
    main()
