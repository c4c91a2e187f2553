#!/usr/bin/env python3
"""
League Generator Demo

Usage:
    PYTHONPATH=src python demo/league_generator_demo/league_generator_demo.py --country ES --seed 7 --complete
"""

import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent.parent / "src"
sys.path.insert(0, str(src_path))

from league_generation.demo import main


if __name__ == "__main__":
    sys.exit(main())
