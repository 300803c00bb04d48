#!/usr/bin/env python3
"""
Term Invaders - Play Script

Usage:
    python scripts/play.py                    # Play Space Invaders
    python scripts/play.py --tick-ms 60       # Faster ticks
"""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from term_invaders.play.cli import main


if __name__ == "__main__":
    sys.exit(main())
